import pytest

from rangeprimes.check import is_prime
from rangeprimes.cli import main
from rangeprimes.division import primes_by_division


def _run(capsys, argv):
    code = main(argv)
    return code, capsys.readouterr().out.splitlines()


def test_prints_primes_of_range(capsys):
    code, lines = _run(capsys, ["100", "10"])
    assert code == 0
    assert [int(line) for line in lines] == primes_by_division(100, 10)
    assert all(is_prime(int(line)) for line in lines)


def test_output_is_ascending_within_bounds(capsys):
    _, lines = _run(capsys, ["500", "200"])
    values = [int(line) for line in lines]
    assert values == sorted(values)
    assert all(200 <= v <= 500 for v in values)


@pytest.mark.parametrize("argv", [[], ["10"]])
def test_too_few_arguments(capsys, argv):
    code, lines = _run(capsys, argv)
    assert code == 1
    assert lines[0].startswith("Usage:")


@pytest.mark.parametrize("argv", [["10", "20"], ["1", "0"], ["abc", "1"]])
def test_invalid_range(capsys, argv):
    code, lines = _run(capsys, argv)
    assert code == 1
    assert lines == ["Invalid range."]


def test_numeric_prefix_is_used(capsys):
    _, plain = _run(capsys, ["50", "20"])
    _, suffixed = _run(capsys, ["50abc", " 20xyz"])
    assert suffixed == plain


def test_lower_bound_below_two_keeps_small_numbers(capsys):
    code, lines = _run(capsys, ["10", "0"])
    assert code == 0
    assert [int(line) for line in lines] == primes_by_division(10, 0)
    assert lines[:2] == ["0", "1"]
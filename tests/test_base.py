from itertools import combinations
from math import isqrt

import pytest
from hypothesis import given, strategies as st

from rangeprimes.base import base_primes_by_division, base_primes_by_sieve


@given(st.integers(0, 200_000))
def test_both_methods_agree(n):
    assert base_primes_by_division(n) == base_primes_by_sieve(n)


@given(st.integers(0, 100_000))
def test_results_are_bounded_and_sorted(n):
    primes = base_primes_by_sieve(n)
    assert primes == sorted(set(primes))
    assert all(2 <= p <= isqrt(n) for p in primes)


@given(st.integers(0, 100_000))
def test_no_result_divides_a_later_one(n):
    primes = base_primes_by_division(n)
    for p, q in combinations(primes, 2):
        assert q % p != 0, (p, q)
    for p in primes:
        divisors = [d for d in range(2, isqrt(p) + 1) if p % d == 0]
        assert divisors == [], (p, divisors)


@pytest.mark.parametrize(
    "n, expected",
    [
        (4, [2]),
        (9, [2, 3]),
        (120, [2, 3, 5, 7]),
        (121, [2, 3, 5, 7, 11]),
        (1000, [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31]),
    ],
)
def test_known_bounds(n, expected):
    assert base_primes_by_division(n) == expected
    assert base_primes_by_sieve(n) == expected


def test_known_value():
    assert base_primes_by_division(100) == [2, 3, 5, 7]
    assert base_primes_by_sieve(100) == [2, 3, 5, 7]


@pytest.mark.parametrize("n", [0, 1, 2, 3])
def test_small_bounds_give_nothing(n):
    assert base_primes_by_sieve(n) == []
    assert base_primes_by_division(n) == []


def test_bound_is_inclusive_at_square():
    assert base_primes_by_sieve(49)[-1] == 7
    assert base_primes_by_sieve(48)[-1] == 5


@pytest.mark.parametrize("func", [base_primes_by_division, base_primes_by_sieve])
def test_negative_bound_rejected(func):
    with pytest.raises(ValueError):
        func(-1)
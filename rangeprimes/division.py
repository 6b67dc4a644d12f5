"""Finding the primes in a range by trial division against small primes."""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Sequence

from .base import base_primes_by_division
from .schedule import Schedule, chunks

__all__ = ["primes_by_division", "primes_by_division_parallel"]


def _check_range(n: int, m: int) -> None:
    if m > n:
        raise ValueError(f"lower bound {m} is above upper bound {n}")


def _has_no_small_factor(value: int, primes: Sequence[int]) -> bool:
    for p in primes:
        if p * p > value:
            return True
        if value % p == 0:
            return False
    return True


def _scan(values: Iterable[int], primes: Sequence[int]) -> list[int]:
    return [v for v in values if _has_no_small_factor(v, primes)]


def primes_by_division(n: int, m: int) -> list[int]:
    """Return the numbers in ``[m, n]`` with no prime divisor up to their square root.

    Numbers below 2 have no such divisor and are therefore included.
    """
    _check_range(n, m)
    return _scan(range(m, n + 1), base_primes_by_division(n))


def primes_by_division_parallel(
    n: int,
    m: int,
    schedule: Schedule | str = Schedule.STATIC,
    workers: int | None = None,
    chunk_size: int | None = None,
) -> list[int]:
    """Like :func:`primes_by_division`, with the range split among worker threads."""
    _check_range(n, m)
    workers = workers if workers is not None else (os.cpu_count() or 1)
    primes = base_primes_by_division(n)
    parts = list(chunks(m, n + 1, schedule, workers, chunk_size))
    with ThreadPoolExecutor(max_workers=workers) as pool:
        found = pool.map(lambda part: _scan(part, primes), parts)
        return [value for block in found for value in block]
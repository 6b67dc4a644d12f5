"""Finding the primes in a range with a segmented sieve of Eratosthenes."""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from itertools import compress, takewhile
from typing import Sequence

from .base import base_primes_by_sieve
from .schedule import Schedule, chunks

__all__ = [
    "DEFAULT_BLOCK_SIZE",
    "sieve_range",
    "sieve_range_blocked",
    "sieve_range_parallel",
    "sieve_range_blocked_parallel",
]

DEFAULT_BLOCK_SIZE = 32 * 1024


def _check_range(n: int, m: int) -> None:
    if m > n:
        raise ValueError(f"lower bound {m} is above upper bound {n}")


def _first_multiple(low: int, p: int) -> int:
    """Smallest multiple of ``p`` that is at least ``low`` and not ``p`` itself."""
    return max(2 * p, -(-low // p) * p)


def _strike(flags: bytearray, offset: int, stop: int, p: int) -> None:
    """Clear the flags of the proper multiples of ``p`` in ``[offset, stop)``."""
    first = _first_multiple(offset, p)
    if first < stop:
        flags[first - offset : stop - offset : p] = bytes(len(range(first, stop, p)))


def _survivors(flags: bytearray, offset: int) -> list[int]:
    return list(compress(range(offset, offset + len(flags)), flags))


def _sieve_block(block: range, primes: Sequence[int]) -> list[int]:
    flags = bytearray(b"\x01") * len(block)
    high = block.stop - 1
    for p in takewhile(lambda q: q * q <= high, primes):
        _strike(flags, block.start, block.stop, p)
    return _survivors(flags, block.start)


def _worker_count(workers: int | None) -> int:
    return workers if workers is not None else (os.cpu_count() or 1)


def sieve_range(n: int, m: int) -> list[int]:
    """Return the numbers in ``[m, n]`` that are no proper multiple of a prime up to ``isqrt(n)``.

    Numbers below 2 are never struck out and are therefore included.
    """
    _check_range(n, m)
    primes = base_primes_by_sieve(n)
    flags = bytearray(b"\x01") * (n - m + 1)
    for p in primes:
        _strike(flags, m, n + 1, p)
    return _survivors(flags, m)


def sieve_range_blocked(
    n: int, m: int, block_size: int = DEFAULT_BLOCK_SIZE
) -> list[int]:
    """Like :func:`sieve_range`, sieving the range one block of ``block_size`` numbers at a time."""
    _check_range(n, m)
    primes = base_primes_by_sieve(n)
    found: list[int] = []
    for block in chunks(m, n + 1, Schedule.STATIC, 1, block_size):
        found.extend(_sieve_block(block, primes))
    return found


def sieve_range_parallel(
    n: int,
    m: int,
    schedule: Schedule | str = Schedule.STATIC,
    workers: int | None = None,
) -> list[int]:
    """Like :func:`sieve_range`, with the sieving primes shared out among worker threads."""
    _check_range(n, m)
    workers = _worker_count(workers)
    primes = base_primes_by_sieve(n)
    groups = list(chunks(0, len(primes), schedule, workers))
    flags = bytearray(b"\x01") * (n - m + 1)

    def strike_group(group: range) -> None:
        for index in group:
            _strike(flags, m, n + 1, primes[index])

    with ThreadPoolExecutor(max_workers=workers) as pool:
        for _ in pool.map(strike_group, groups):
            pass
    return _survivors(flags, m)


def sieve_range_blocked_parallel(
    n: int,
    m: int,
    block_size: int = DEFAULT_BLOCK_SIZE,
    schedule: Schedule | str = Schedule.STATIC,
    workers: int | None = None,
) -> list[int]:
    """Like :func:`sieve_range_blocked`, with the blocks shared out among worker threads."""
    _check_range(n, m)
    workers = _worker_count(workers)
    primes = base_primes_by_sieve(n)
    blocks = list(chunks(m, n + 1, Schedule.STATIC, 1, block_size))
    groups = list(chunks(0, len(blocks), schedule, workers))

    def sieve_group(group: range) -> list[int]:
        return [v for index in group for v in _sieve_block(blocks[index], primes)]

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return [v for part in pool.map(sieve_group, groups) for v in part]
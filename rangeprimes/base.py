"""Primes up to the square root of a bound, used to sieve a range."""

from __future__ import annotations

from itertools import takewhile
from math import isqrt

__all__ = ["base_primes_by_division", "base_primes_by_sieve"]


def _limit(n: int) -> int:
    if n < 0:
        raise ValueError(f"upper bound must not be negative, got {n}")
    return isqrt(n)


def base_primes_by_division(n: int) -> list[int]:
    """Return the primes not above ``isqrt(n)``, found by trial division."""
    primes: list[int] = []
    for candidate in range(2, _limit(n) + 1):
        small = takewhile(lambda p: p * p <= candidate, primes)
        if all(candidate % p for p in small):
            primes.append(candidate)
    return primes


def base_primes_by_sieve(n: int) -> list[int]:
    """Return the primes not above ``isqrt(n)``, found by a sieve of Eratosthenes."""
    limit = _limit(n)
    flags = [True] * (limit + 1)
    for i in range(2, isqrt(limit) + 1):
        if flags[i]:
            flags[i * i :: i] = [False] * len(range(i * i, limit + 1, i))
    return [i for i in range(2, limit + 1) if flags[i]]
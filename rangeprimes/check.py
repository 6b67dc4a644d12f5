"""Checking that a stream of numbers holds only primes."""

from __future__ import annotations

import argparse
import re
import sys
from math import isqrt
from typing import Iterable, Iterator, TextIO

__all__ = ["is_prime", "verify", "main"]

_INTEGER = re.compile(r"[+-]?\d+")


def is_prime(n: int) -> bool:
    """Return whether ``n`` is a prime number."""
    if n <= 1:
        return False
    return all(n % d for d in range(2, isqrt(n) + 1))


def verify(numbers: Iterable[int]) -> Iterator[tuple[int, bool]]:
    """Yield each number with its primality, stopping after the first non-prime."""
    for number in numbers:
        prime = is_prime(number)
        yield number, prime
        if not prime:
            return


def _read_integers(stream: TextIO) -> Iterator[int]:
    """Yield whitespace-separated integers until input ends or stops being numeric."""
    for line in stream:
        for token in line.split():
            match = _INTEGER.match(token)
            if match is None:
                return
            yield int(match.group())
            if match.end() != len(token):
                return


def main(argv: list[str] | None = None) -> int:
    """Read integers from standard input and report whether each is prime."""
    parser = argparse.ArgumentParser(
        prog="rangeprimes-check",
        description="Read integers from standard input and stop at the first non-prime.",
    )
    parser.parse_args(argv)
    for number, prime in verify(_read_integers(sys.stdin)):
        verdict = "is" if prime else "is not"
        print(f"{number} {verdict} a prime number.")
    print("All good")
    return 0
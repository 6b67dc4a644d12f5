"""Command that prints the primes found in a range by trial division."""

from __future__ import annotations

import re
import sys

from .division import primes_by_division

__all__ = ["main"]

_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


def _to_int(text: str) -> int:
    """Read a leading integer as a C-style conversion would, giving 0 when there is none."""
    match = _LEADING_INTEGER.match(text)
    return int(match.group(1)) if match else 0


def main(argv: list[str] | None = None) -> int:
    """Print, one per line, the numbers in ``[m, n]`` found prime by trial division."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        print("Usage: rangeprimes <n> <m>")
        return 1

    n = _to_int(args[0])
    m = _to_int(args[1])
    if m > n or n < 2:
        print("Invalid range.")
        return 1

    for value in primes_by_division(n, m):
        print(value)
    return 0
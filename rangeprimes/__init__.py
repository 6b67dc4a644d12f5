"""Primes in a range by trial division or a sieve of Eratosthenes, sequential or threaded."""

__version__ = "0.1.0"
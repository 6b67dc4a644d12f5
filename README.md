# rangeprimes

Find the numbers in a closed range `[m, n]` that have no prime factor up to
their square root, that is, the primes of the range.

The same problem is solved several ways, so the approaches can be compared:

- **trial division**: every number in the range is tested against the primes
  up to its square root;
- **sieve of Eratosthenes over the range**: the proper multiples of every
  base prime up to `isqrt(n)` are crossed out of the range;
- **blocked sieve**: the same sieve, run one block of the range at a time;
- **threaded variants** of each, with the work split into chunks under a
  static, dynamic or guided schedule and handed to a thread pool.

Numbers below 2 are never crossed out by any of these methods, so a range
that reaches below 2 returns them as well (for example `0` and `1`).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Print the primes in a range by trial division, one per line, in ascending
order. The upper bound comes first, then the lower bound:

```
rangeprimes 100 10
```

Each argument is read by its leading integer; an argument with none counts
as `0`. With fewer than two arguments the command prints a usage line; with
a lower bound above the upper bound, or an upper bound below 2, it prints
`Invalid range.`. In both cases it exits with status 1.

Check numbers read from standard input:

```
rangeprimes 1000 2 | rangeprimes-check
```

`rangeprimes-check` reads whitespace-separated integers and prints, for
each, `<n> is a prime number.` or `<n> is not a prime number.`. It stops
after the first number that is not prime, or at the first token that is not
an integer, and then prints `All good`. It always exits with status 0.

Note that `rangeprimes 1000 0 | rangeprimes-check` stops at once, since the
range output includes `0`.

## Library

All range functions take the upper bound `n` first and the lower bound `m`
second, return a sorted `list[int]`, and raise `ValueError` when `m > n`.

Base primes, the primes up to `isqrt(n)` that the range methods work from
(`ValueError` for a negative `n`):

- `rangeprimes.base.base_primes_by_division(n)`
- `rangeprimes.base.base_primes_by_sieve(n)`

Trial division:

- `rangeprimes.division.primes_by_division(n, m)`
- `rangeprimes.division.primes_by_division_parallel(n, m, schedule=Schedule.STATIC, workers=None, chunk_size=None)`

Sieve of Eratosthenes:

- `rangeprimes.eratosthenes.sieve_range(n, m)`
- `rangeprimes.eratosthenes.sieve_range_blocked(n, m, block_size=DEFAULT_BLOCK_SIZE)`
- `rangeprimes.eratosthenes.sieve_range_parallel(n, m, schedule=Schedule.STATIC, workers=None)`:
  the base primes are shared out among the threads;
- `rangeprimes.eratosthenes.sieve_range_blocked_parallel(n, m, block_size=DEFAULT_BLOCK_SIZE, schedule=Schedule.STATIC, workers=None)`:
  the blocks are shared out among the threads.

`DEFAULT_BLOCK_SIZE` is `32 * 1024`. When `workers` is `None`, the number
of CPUs is used.

Scheduling:

- `rangeprimes.schedule.Schedule`: `STATIC`, `DYNAMIC` and `GUIDED`; the
  strings `"static"`, `"dynamic"` and `"guided"` are accepted too;
- `rangeprimes.schedule.chunks(start, stop, schedule=Schedule.STATIC, workers=1, chunk_size=None)`:
  yields consecutive `range` objects covering `range(start, stop)`. `static`
  without a chunk size gives each worker one nearly equal piece, with one it
  cuts fixed pieces; `dynamic` cuts fixed pieces (default size 1); `guided`
  cuts pieces that shrink with the remaining work but never below the chunk
  size (default 1). A `workers` or `chunk_size` below 1 raises `ValueError`.

Checking single numbers:

- `rangeprimes.check.is_prime(n)`: a plain primality test;
- `rangeprimes.check.verify(numbers)`: yields `(number, is_prime)` pairs,
  stopping after the first number that is not prime.

Example:

```python
from rangeprimes.division import primes_by_division
from rangeprimes.eratosthenes import sieve_range_blocked, sieve_range_parallel
from rangeprimes.schedule import Schedule

by_division = primes_by_division(100, 10)
by_sieve = sieve_range_blocked(100, 10, 32 * 1024)
in_threads = sieve_range_parallel(100, 10, Schedule.DYNAMIC, 4)
```

## What it does not do

The threaded variants run in a Python thread pool; they give the same
results as the sequential functions but are not expected to be faster.
There is no timing or benchmarking command: comparing the methods' speed is
left to the caller.
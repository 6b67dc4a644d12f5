"""Splitting an index range into work chunks the way loop schedulers do."""

from __future__ import annotations

from enum import Enum
from typing import Iterator

__all__ = ["Schedule", "chunks"]


class Schedule(str, Enum):
    """How a range of loop iterations is cut into chunks for workers."""

    STATIC = "static"
    DYNAMIC = "dynamic"
    GUIDED = "guided"


def _fixed(start: int, stop: int, size: int) -> Iterator[range]:
    for lo in range(start, stop, size):
        yield range(lo, min(lo + size, stop))


def _static_even(start: int, stop: int, workers: int) -> Iterator[range]:
    base, extra = divmod(stop - start, workers)
    lo = start
    for worker in range(workers):
        size = base + (1 if worker < extra else 0)
        if size:
            yield range(lo, lo + size)
            lo += size


def _guided(start: int, stop: int, workers: int, minimum: int) -> Iterator[range]:
    lo = start
    while lo < stop:
        remaining = stop - lo
        size = min(max(minimum, -(-remaining // workers)), remaining)
        yield range(lo, lo + size)
        lo += size


def chunks(
    start: int,
    stop: int,
    schedule: Schedule | str = Schedule.STATIC,
    workers: int = 1,
    chunk_size: int | None = None,
) -> Iterator[range]:
    """Yield consecutive ranges that together cover ``range(start, stop)``.

    ``static`` without a chunk size gives each worker one nearly equal
    piece; with a chunk size it cuts fixed pieces.  ``dynamic`` cuts fixed
    pieces of ``chunk_size`` (default 1).  ``guided`` cuts pieces that shrink
    with the remaining work but never below ``chunk_size`` (default 1).
    """
    schedule = Schedule(schedule)
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")
    if chunk_size is not None and chunk_size < 1:
        raise ValueError(f"chunk_size must be at least 1, got {chunk_size}")
    if stop <= start:
        return iter(())

    if schedule is Schedule.STATIC:
        if chunk_size is None:
            return _static_even(start, stop, workers)
        return _fixed(start, stop, chunk_size)
    if schedule is Schedule.DYNAMIC:
        return _fixed(start, stop, chunk_size or 1)
    return _guided(start, stop, workers, chunk_size or 1)
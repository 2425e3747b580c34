"""A small stopwatch over the monotonic clock."""

from __future__ import annotations

import time
from enum import Enum


class Unit(Enum):
    """Resolution of a timer reading, in nanoseconds per unit."""

    SECONDS = 1_000_000_000
    MILLISECONDS = 1_000_000
    MICROSECONDS = 1_000


class Timer:
    """Records a start and an end instant and reports the time between them."""

    def __init__(self) -> None:
        self._start_ns = 0
        self._end_ns = 0

    def start(self) -> None:
        self._start_ns = time.monotonic_ns()

    def end(self) -> None:
        self._end_ns = time.monotonic_ns()

    def read(self, unit: Unit) -> int:
        """Return the elapsed time in whole units, truncated towards zero."""
        elapsed = self._end_ns - self._start_ns
        whole = abs(elapsed) // unit.value
        return whole if elapsed >= 0 else -whole

    def __enter__(self) -> "Timer":
        self.start()
        return self

    def __exit__(self, *args) -> None:
        self.end()
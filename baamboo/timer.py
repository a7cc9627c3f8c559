"""Frame timer measuring elapsed and total time."""

from __future__ import annotations

import time
from typing import Callable


class Timer:
    """Measures time between ticks and since the last reset, in nanoseconds."""

    def __init__(self, clock: Callable[[], int] = time.perf_counter_ns) -> None:
        self._clock = clock
        self._last = clock()
        self._elapsed = 0.0
        self._total = 0.0

    def tick(self) -> None:
        """Record the time since the previous tick."""
        now = self._clock()
        self._elapsed = float(now - self._last)
        self._last = now
        self._total += self._elapsed

    def reset(self) -> None:
        """Restart timing from now."""
        self._last = self._clock()
        self._elapsed = 0.0
        self._total = 0.0

    def delta_seconds(self) -> float:
        return self._elapsed * 1e-9

    def delta_milliseconds(self) -> float:
        return self._elapsed * 1e-6

    def delta_microseconds(self) -> float:
        return self._elapsed * 1e-3

    def delta_nanoseconds(self) -> float:
        return self._elapsed

    def total_seconds(self) -> float:
        return self._total * 1e-9

    def total_milliseconds(self) -> float:
        return self._total * 1e-6

    def total_microseconds(self) -> float:
        return self._total * 1e-3

    def total_nanoseconds(self) -> float:
        return self._total
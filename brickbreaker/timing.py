"""Millisecond timing helpers: pausing, a clock and interval checks."""

from __future__ import annotations

import functools
import time
from typing import Callable


def current_time() -> int:
    """Return a monotonic time in whole milliseconds."""
    return time.monotonic_ns() // 1_000_000


def pause(milliseconds: float) -> None:
    """Sleep for the given number of milliseconds."""
    if milliseconds < 0:
        raise ValueError(f"cannot pause for a negative time: {milliseconds!r}")
    time.sleep(milliseconds / 1000.0)


class IntervalTimer:
    """Reports whether an interval has passed since the last time it did."""

    def __init__(self, clock: Callable[[], int] = current_time) -> None:
        self._clock = clock
        self._last = clock()

    def elapsed(self, interval: int) -> bool:
        """Return True and restart if at least ``interval`` ms have passed."""
        now = self._clock()
        if now - self._last >= interval:
            self._last = now
            return True
        return False


@functools.lru_cache(maxsize=None)
def _shared_timer() -> IntervalTimer:
    return IntervalTimer()


def elapsed_time(interval: int) -> bool:
    """Check ``interval`` against a process-wide timer started on first use."""
    return _shared_timer().elapsed(interval)
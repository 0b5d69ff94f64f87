"""A repeating interval timer driven by a millisecond clock."""

from __future__ import annotations

import time
from typing import Callable

_START = time.monotonic()


def _ticks() -> float:
    """Milliseconds elapsed since the module was loaded."""
    return float(int((time.monotonic() - _START) * 1000))


class Timer:
    """Signals each time ``duration_ms`` milliseconds have passed since the last signal."""

    def __init__(self, duration_ms: int, clock: Callable[[], float] | None = None) -> None:
        self.clock = clock or _ticks
        self.duration = float(duration_ms)
        self.time_log = float(self.clock())
        self.current_time = self.time_log

    def update(self) -> bool:
        """Return True and restart the interval if the duration has elapsed."""
        self.current_time = float(self.clock())
        if self.current_time >= self.time_log + self.duration:
            self.time_log = self.current_time
            return True
        return False
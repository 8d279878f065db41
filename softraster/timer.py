"""Frame timing."""

from __future__ import annotations

import time
from typing import Callable, Optional


class Timer:
    """Measures seconds elapsed between successive calls to :meth:`dt`."""

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        self._clock = clock if clock is not None else time.perf_counter
        self._start = 0.0
        self.reset()

    def reset(self) -> None:
        """Start timing from now."""
        self._start = self._clock()

    def dt(self) -> float:
        """Seconds since the last reset; restarts the timer."""
        value = self._clock() - self._start
        self.reset()
        return value
"""Frame timing."""

from __future__ import annotations

import time
from typing import Callable, Optional


class GameTime:
    """Measures the time between frames and since start, in seconds."""

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        self._clock = clock if clock is not None else time.perf_counter
        self._start: Optional[float] = None
        self._previous: Optional[float] = None
        self._delta = 0.0

    def init_time(self) -> None:
        """Start timing from now."""
        now = self._clock()
        self._start = now
        self._previous = now
        self._delta = 0.0

    def update_time(self) -> None:
        """Record the time since the previous update as the frame delta."""
        if self._previous is None:
            raise RuntimeError("init_time() must be called first")
        now = self._clock()
        self._delta = now - self._previous
        self._previous = now

    @property
    def delta_time(self) -> float:
        """Seconds between the last two updates."""
        return self._delta

    def elapsed_time(self) -> float:
        """Seconds since init_time()."""
        if self._start is None:
            raise RuntimeError("init_time() must be called first")
        return self._clock() - self._start
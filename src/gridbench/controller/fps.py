"""Updates-per-second counter for the driver loop."""
from __future__ import annotations

import time
from collections import deque
from typing import Callable

from gridbench.config import FPS_WINDOW_S


class FpsCounter:
    """
    Counts ticks since the last reset against elapsed wall-clock time.

    `average` is the mean rate since `reset()`, `rolling` the number of ticks
    inside the last `window` seconds.
    """

    def __init__(self, clock: Callable[[], float] = time.perf_counter, window: float = FPS_WINDOW_S) -> None:
        self._clock = clock
        self._window = window
        self._count = 0
        self._start = clock()
        self._recent: deque[float] = deque()

    def reset(self) -> None:
        self._count = 0
        self._start = self._clock()
        self._recent.clear()

    def tick(self) -> None:
        now = self._clock()
        self._count += 1
        self._recent.append(now)
        self._trim(now)

    @property
    def count(self) -> int:
        return self._count

    @property
    def elapsed(self) -> float:
        return self._clock() - self._start

    @property
    def average(self) -> float:
        elapsed = self.elapsed
        if elapsed <= 0.0:
            return 0.0
        return self._count / elapsed

    @property
    def rolling(self) -> int:
        self._trim(self._clock())
        return len(self._recent)

    def _trim(self, now: float) -> None:
        horizon = now - self._window
        while self._recent and self._recent[0] <= horizon:
            self._recent.popleft()

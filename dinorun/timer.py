"""Millisecond and high-resolution timers."""

from __future__ import annotations

import time
from typing import Callable


class Timer:
    """Millisecond timer; ``clock`` returns seconds."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self.start_time = 0.0
        self.start()

    def start(self) -> None:
        """Restart from zero."""
        self.start_time = self._clock()

    def read(self) -> int:
        """Whole milliseconds elapsed since start."""
        return int((self._clock() - self.start_time) * 1000)

    def read_sec(self) -> float:
        """Seconds elapsed since start, at millisecond resolution."""
        return self.read() / 1000.0

    def check(self, interval: int) -> bool:
        """True once more than ``interval`` milliseconds have passed."""
        return self.read() > interval


class PerfTimer:
    """High-resolution timer; ``clock`` returns ticks at ``frequency`` per second."""

    def __init__(
        self,
        clock: Callable[[], int] = time.perf_counter_ns,
        frequency: int = 1_000_000_000,
    ) -> None:
        self._clock = clock
        self.frequency = frequency
        self.start_time = 0
        self.start()

    def start(self) -> None:
        """Restart from zero."""
        self.start_time = self._clock()

    def read_ms(self) -> float:
        """Milliseconds elapsed since start."""
        return 1000.0 * (self.read_ticks() / self.frequency)

    def read_ticks(self) -> int:
        """Raw ticks elapsed since start."""
        return self._clock() - self.start_time
from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    def now_ms(self) -> int: ...


class MonotonicClock:
    """Real time source. Monotonic, so wall-clock adjustments do not jump playback."""

    def now_ms(self) -> int:
        return time.monotonic_ns() // 1_000_000


class ManualClock:
    """
    Deterministic time source for tests and simulated playback.

    Time only moves when advance()/set() is called.
    """

    def __init__(self, start_ms: int = 0) -> None:
        self._now = int(start_ms)

    def now_ms(self) -> int:
        return self._now

    def advance(self, delta_ms: int) -> int:
        if delta_ms < 0:
            raise ValueError("ManualClock cannot move backwards")
        self._now += int(delta_ms)
        return self._now

    def set(self, now_ms: int) -> int:
        if now_ms < self._now:
            raise ValueError("ManualClock cannot move backwards")
        self._now = int(now_ms)
        return self._now

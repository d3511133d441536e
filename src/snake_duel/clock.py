"""Millisecond time sources for the simulation."""

from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    def now_ms(self) -> int: ...


class MonotonicClock:
    """Wall-clock source backed by :func:`time.monotonic`."""

    def now_ms(self) -> int:
        return int(time.monotonic() * 1000)


class ManualClock:
    """Clock that only moves when told to.

    Used by tests and the headless runner to step simulated time.
    """

    def __init__(self, start_ms: int = 0) -> None:
        self._now = start_ms

    def now_ms(self) -> int:
        return self._now

    def advance(self, ms: int) -> int:
        if ms < 0:
            raise ValueError("Cannot move a clock backwards.")
        self._now += ms
        return self._now

    def set(self, now_ms: int) -> None:
        self._now = now_ms

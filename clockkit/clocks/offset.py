"""
Clockkit Clocks - Offset Clock
================================
Decorator that shifts every reading of an inner clock by a fixed
interval. The inner clock is shared, not owned.

Usage:
    tomorrow = OffsetClock(SystemClock(), "+1 day")
    skewed = OffsetClock(clock, timedelta(seconds=-5))
"""

from __future__ import annotations

from datetime import datetime, timedelta

from clockkit.clocks.base import Clock
from clockkit.clocks.frozen import FrozenClock
from clockkit.support.comparison import ClockComparison
from clockkit.support.intervals import Interval, to_timedelta


class OffsetClock(ClockComparison):
    """Inner clock plus a fixed offset. No caching."""

    def __init__(self, clock: Clock, offset: Interval) -> None:
        self._clock = clock
        # Parsed once so a bad string fails here rather than on first read.
        self._offset: timedelta = to_timedelta(offset)

    @property
    def inner(self) -> Clock:
        return self._clock

    @property
    def offset(self) -> timedelta:
        return self._offset

    def now(self) -> datetime:
        return self._clock.now() + self._offset

    def freeze(self) -> FrozenClock:
        """Snapshot of the already-offset reading."""
        return FrozenClock(self.now())

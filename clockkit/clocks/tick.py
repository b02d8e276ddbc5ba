"""
Clockkit Clocks - Tick Clock
==============================
Test clock that only moves when told to.

Usage:
    clock = TickClock(datetime(2025, 1, 15, 12, tzinfo=timezone.utc))
    clock.tick("+1 hour")
    clock.tick(timedelta(minutes=30))
"""

from __future__ import annotations

from datetime import datetime

from clockkit.support.comparison import ClockComparison
from clockkit.support.instants import require_aware
from clockkit.support.intervals import Interval, apply_interval


class TickClock(ClockComparison):
    """Mutable current instant, advanced by explicit commands."""

    def __init__(self, current_time: datetime) -> None:
        self._current_time = require_aware(current_time, "TickClock")

    def now(self) -> datetime:
        return self._current_time

    def tick(self, interval: Interval) -> None:
        """Move the current instant by a timedelta or relative-time string."""
        self._current_time = apply_interval(self._current_time, interval)

    def set_to(self, time: datetime) -> None:
        self._current_time = require_aware(time, "TickClock")

    def reset(self, time: datetime) -> None:
        """Same as set_to(); reads better at the end of a test step."""
        self.set_to(time)

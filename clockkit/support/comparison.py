"""
Clockkit Support - Clock Comparison
=====================================
Derived questions about "now" that only need a now() method.

ClockComparison is a mixin: every concrete clock in clockkit
inherits it. ComparableClock wraps any foreign object with a
now() method to give it the same methods.

Every method performs exactly one now() read. On clocks that
consume state per read (SequenceClock, MockClock in sequence
mode) each comparison consumes one instant.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from clockkit.support.instants import epoch_seconds, require_aware

if TYPE_CHECKING:
    from clockkit.clocks.base import Clock

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3_600
SECONDS_PER_DAY = 86_400


class ClockComparison:
    """
    Comparison methods built on self.now().

    Arguments must be timezone-aware; naive datetimes raise ValueError.
    """

    def now(self) -> datetime:  # pragma: no cover - provided by the clock
        raise NotImplementedError

    def is_after(self, other: datetime) -> bool:
        require_aware(other, "ClockComparison")
        return self.now() > other

    def is_before(self, other: datetime) -> bool:
        require_aware(other, "ClockComparison")
        return self.now() < other

    def is_between(self, start: datetime, end: datetime) -> bool:
        """Inclusive on both ends."""
        require_aware(start, "ClockComparison")
        require_aware(end, "ClockComparison")
        return start <= self.now() <= end

    def is_same_as(self, other: datetime) -> bool:
        """
        Equal at whole-second granularity.

        Sub-second precision and timezone representation are ignored:
        12:00:00.900+00:00 is the same as 13:00:00+01:00.
        """
        require_aware(other, "ClockComparison")
        return epoch_seconds(self.now()) == epoch_seconds(other)

    def diff_in_seconds(self, other: datetime) -> int:
        """Absolute whole-second distance between now and other."""
        require_aware(other, "ClockComparison")
        return abs(epoch_seconds(self.now()) - epoch_seconds(other))

    def diff_in_minutes(self, other: datetime) -> int:
        return self.diff_in_seconds(other) // SECONDS_PER_MINUTE

    def diff_in_hours(self, other: datetime) -> int:
        return self.diff_in_seconds(other) // SECONDS_PER_HOUR

    def diff_in_days(self, other: datetime) -> int:
        return self.diff_in_seconds(other) // SECONDS_PER_DAY


class ComparableClock(ClockComparison):
    """
    Adds comparison methods to any clock.

    Usage:
        clock = ComparableClock(some_third_party_clock)
        clock.is_after(deadline)
    """

    def __init__(self, clock: Clock) -> None:
        self._clock = clock

    @property
    def inner(self) -> Clock:
        return self._clock

    def now(self) -> datetime:
        return self._clock.now()

"""
Clockkit Clocks - Mock Clock
==============================
Convenience test double combining a frozen instant with an
optional sequence of instants.

Modes:
    FROZEN      now() returns the current instant, no mutation
    SEQUENCING  now() returns the next sequence instant; once the
                sequence is used up, now() falls back to the
                current instant (no error, unlike SequenceClock)

    freeze_at() / advance() / reset()  → FROZEN
    use_sequence()                     → SEQUENCING

Construction without a start time reads the system clock once.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Iterable, Optional, Union

from clockkit.clocks.system import system_now
from clockkit.support.comparison import ClockComparison
from clockkit.support.instants import coerce_instant, require_aware
from clockkit.support.intervals import Interval, apply_interval


class MockClockMode(Enum):
    """Which cell now() reads from."""
    FROZEN = "FROZEN"
    SEQUENCING = "SEQUENCING"


class MockClock(ClockComparison):
    """Mutable test clock. Not safe for concurrent mutation."""

    def __init__(self, start_time: Optional[datetime] = None) -> None:
        self._current_time: datetime = (
            require_aware(start_time, "MockClock")
            if start_time is not None
            else system_now()
        )
        self._sequence: tuple[datetime, ...] = ()
        self._sequence_index = 0
        self._use_sequence = False

    @property
    def mode(self) -> MockClockMode:
        if self._use_sequence:
            return MockClockMode.SEQUENCING
        return MockClockMode.FROZEN

    def now(self) -> datetime:
        if self._use_sequence and self._sequence_index < len(self._sequence):
            time = self._sequence[self._sequence_index]
            self._sequence_index += 1
            return time
        return self._current_time

    def freeze_at(self, time: Union[datetime, str]) -> None:
        """Stop at `time` (aware datetime or ISO-8601 string)."""
        self._use_sequence = False
        self._current_time = coerce_instant(time, "MockClock")

    def advance(self, interval: Interval) -> None:
        """Move the frozen instant forward (or back) and leave sequence mode."""
        self._use_sequence = False
        self._current_time = apply_interval(self._current_time, interval)

    def use_sequence(self, times: Iterable[datetime]) -> None:
        """
        Serve `times` one per read, then fall back to the frozen instant.

        The frozen instant is not changed by reading the sequence.
        """
        self._sequence = tuple(require_aware(t, "MockClock") for t in times)
        self._sequence_index = 0
        self._use_sequence = True

    def reset(self, time: Optional[datetime] = None) -> None:
        """Drop any sequence and freeze at `time`, or at a fresh system read."""
        self._current_time = (
            require_aware(time, "MockClock") if time is not None else system_now()
        )
        self._sequence = ()
        self._sequence_index = 0
        self._use_sequence = False

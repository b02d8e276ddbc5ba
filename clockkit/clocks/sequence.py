"""
Clockkit Clocks - Sequence Clock
==================================
Test clock that hands out a fixed list of instants, one per read.

Exhaustion is strict: reading past the end raises
SequenceExhaustedError. There is no wraparound and no fallback.
Use MockClock.use_sequence() for a sequence that degrades to a
frozen instant instead.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

from clockkit.errors import InvalidConfigurationError, SequenceExhaustedError
from clockkit.support.comparison import ClockComparison
from clockkit.support.instants import require_aware


class SequenceClock(ClockComparison):
    """
    Ordered, non-empty list of instants with a read cursor.

    Invariant: 0 <= cursor <= len(times).
    """

    def __init__(self, times: Iterable[datetime]) -> None:
        times = tuple(times)
        if not times:
            raise InvalidConfigurationError(
                "SequenceClock requires at least one time"
            )
        self._times: tuple[datetime, ...] = tuple(
            require_aware(t, "SequenceClock") for t in times
        )
        self._index = 0

    def now(self) -> datetime:
        """
        Return the instant under the cursor and advance the cursor.

        Raises:
            SequenceExhaustedError: If every instant has been read.
        """
        if self._index >= len(self._times):
            raise SequenceExhaustedError(len(self._times))
        time = self._times[self._index]
        self._index += 1
        return time

    def has_next(self) -> bool:
        return self._index < len(self._times)

    @property
    def remaining(self) -> int:
        """Number of instants not yet read."""
        return len(self._times) - self._index

    def reset(self) -> None:
        """Rewind to the first instant."""
        self._index = 0

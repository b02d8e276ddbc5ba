"""
Clockkit Clocks - Frozen Clock
================================
Test clock that returns one fixed instant forever.

Usage:
    clock = FrozenClock(datetime(2025, 1, 1, tzinfo=timezone.utc))
    assert clock.now().year == 2025
"""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Union

from clockkit.support.comparison import ClockComparison
from clockkit.support.instants import parse_instant, require_aware


class FrozenClock(ClockComparison):
    """Immutable clock. now() has no side effects."""

    def __init__(self, frozen_time: datetime) -> None:
        self._frozen_time = require_aware(frozen_time, "FrozenClock")

    @classmethod
    def from_string(
        cls, value: str, timezone: Union[str, tzinfo, None] = None
    ) -> FrozenClock:
        """Build from an ISO-8601 string ("2025-01-15T12:00:00+00:00")."""
        return cls(parse_instant(value, timezone))

    def now(self) -> datetime:
        return self._frozen_time

    def freeze(self) -> FrozenClock:
        """Already frozen. Returns self."""
        return self

    def __repr__(self) -> str:
        return f"FrozenClock({self._frozen_time.isoformat()})"

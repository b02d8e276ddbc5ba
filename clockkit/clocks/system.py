"""
Clockkit Clocks - System Clocks
=================================
Production clocks backed by the host's real time.

system_now() is the single place the package reads real time;
SystemClock, UtcClock and MockClock's default start all go through it.
"""

from __future__ import annotations

from datetime import datetime, timezone as dt_timezone, tzinfo
from typing import Optional, Union

from clockkit.clocks.frozen import FrozenClock
from clockkit.config import resolve_timezone
from clockkit.support.comparison import ClockComparison


def system_now(timezone: Union[str, tzinfo, None] = None) -> datetime:
    """Current real time in `timezone` (default: the configured default timezone)."""
    return datetime.now(resolve_timezone(timezone))


class SystemClock(ClockComparison):
    """
    Real time, optionally in a fixed timezone.

    Without a timezone the configured default timezone is looked up
    on every read, so changing settings affects existing clocks.
    """

    def __init__(self, timezone: Union[str, tzinfo, None] = None) -> None:
        self._timezone: Optional[tzinfo] = (
            resolve_timezone(timezone) if timezone is not None else None
        )

    @property
    def timezone(self) -> Optional[tzinfo]:
        return self._timezone

    def now(self) -> datetime:
        return system_now(self._timezone)

    def freeze(self) -> FrozenClock:
        return FrozenClock(self.now())


class UtcClock(ClockComparison):
    """Real time, always in UTC."""

    def now(self) -> datetime:
        return system_now(dt_timezone.utc)

    def freeze(self) -> FrozenClock:
        return FrozenClock(self.now())

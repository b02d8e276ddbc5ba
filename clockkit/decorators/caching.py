"""
Clockkit Decorators - Caching Clock
=====================================
Memoizes an inner clock's reading for a TTL measured in wall-clock
seconds.

Expiry is tracked at whole-epoch-second granularity: a value cached
at 12:00:00.900 with ttl_seconds=1 expires at 12:00:01.000. The cached
instant itself keeps full precision.

The wall clock used for expiry is injected (default: UtcClock) so
tests can drive expiry without sleeping.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from clockkit.clocks.base import Clock, clock_class_name
from clockkit.clocks.system import UtcClock
from clockkit.config import get_settings
from clockkit.errors import InvalidConfigurationError
from clockkit.support.comparison import ClockComparison
from clockkit.support.instants import epoch_seconds

logger = logging.getLogger("clockkit.decorators")


class CachingClock(ClockComparison):
    """
    Caches at most one (instant, cached_at_epoch_seconds) pair.

    Not safe for concurrent use.
    """

    def __init__(
        self,
        clock: Clock,
        ttl_seconds: Optional[int] = None,
        wall_clock: Optional[Clock] = None,
    ) -> None:
        if ttl_seconds is None:
            ttl_seconds = get_settings().cache_ttl_seconds
        if ttl_seconds < 0:
            raise InvalidConfigurationError(
                f"CachingClock ttl_seconds must be >= 0, got {ttl_seconds}."
            )
        self._clock = clock
        self._ttl_seconds = ttl_seconds
        self._wall_clock = wall_clock if wall_clock is not None else UtcClock()
        self._cached: Optional[datetime] = None
        self._cached_at: Optional[int] = None

    @property
    def inner(self) -> Clock:
        return self._clock

    @property
    def ttl_seconds(self) -> int:
        return self._ttl_seconds

    @property
    def is_cached(self) -> bool:
        """True if a value is held and has not expired."""
        return self._cached is not None and not self._is_expired()

    def now(self) -> datetime:
        if self._cached is None or self._is_expired():
            self._cached = self._clock.now()
            self._cached_at = epoch_seconds(self._wall_clock.now())
            logger.debug(
                f"Cache refreshed from {clock_class_name(self._clock)} "
                f"(ttl={self._ttl_seconds}s)"
            )
        return self._cached

    def clear(self) -> None:
        """Drop the cached value; the next now() reads the inner clock."""
        self._cached = None
        self._cached_at = None

    def _is_expired(self) -> bool:
        if self._cached_at is None:
            # Value without timestamp: refresh rather than trust it.
            return True
        elapsed = epoch_seconds(self._wall_clock.now()) - self._cached_at
        return elapsed >= self._ttl_seconds

"""
Clockkit Decorators - Logging Clock
=====================================
Emits one log record per read of an inner clock, then returns the
reading unchanged.

Record:
    message   "Clock returned time"
    extra     timestamp    "2025-01-15 12:00:00.000000"
              timezone     "UTC" / "Europe/Paris"
              clock_class  qualified class name of the inner clock

Logging is a side effect only. Errors raised by the logger or its
handlers propagate per the logging module's own rules (which by
default report handler errors and carry on).
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Union

from clockkit.clocks.base import Clock, clock_class_name
from clockkit.config import get_settings, resolve_log_level
from clockkit.support.comparison import ClockComparison
from clockkit.support.instants import format_timestamp, timezone_name

LOG_MESSAGE = "Clock returned time"


class LoggingClock(ClockComparison):
    """Logs every reading of the wrapped clock."""

    def __init__(
        self,
        clock: Clock,
        logger: Optional[logging.Logger] = None,
        level: Union[str, int, None] = None,
    ) -> None:
        settings = get_settings()
        self._clock = clock
        self._logger = logger if logger is not None else logging.getLogger(
            settings.logger_name
        )
        self._level = resolve_log_level(
            level if level is not None else settings.log_level
        )

    @property
    def inner(self) -> Clock:
        return self._clock

    @property
    def level(self) -> int:
        return self._level

    def now(self) -> datetime:
        now = self._clock.now()
        self._logger.log(
            self._level,
            LOG_MESSAGE,
            extra={
                "timestamp": format_timestamp(now),
                "timezone": timezone_name(now),
                "clock_class": clock_class_name(self._clock),
            },
        )
        return now

"""
Clockkit - Public API
=======================
Interchangeable clocks behind one now() interface, test doubles
for deterministic time, and decorators for offset, caching and
logging.

Doctrine: code that needs "now" takes a Clock, never calls
datetime.now() itself.
"""

from clockkit.clocks import (
    Clock,
    FreezableClock,
    FrozenClock,
    MockClock,
    MockClockMode,
    OffsetClock,
    SequenceClock,
    SystemClock,
    TickClock,
    UtcClock,
    system_now,
)
from clockkit.config import ClockSettings, get_settings, set_settings
from clockkit.decorators import CachingClock, LoggingClock
from clockkit.errors import (
    ClockError,
    ClockNotFoundError,
    IntervalParseError,
    InvalidConfigurationError,
    NoDefaultClockError,
    SequenceExhaustedError,
)
from clockkit.factory import resolve_clock
from clockkit.support import (
    ClockComparison,
    ClockRegistry,
    ComparableClock,
    get_registry,
    parse_interval,
    set_registry,
)

__version__ = "1.0.0"

__all__ = [
    "Clock",
    "FreezableClock",
    "FrozenClock",
    "MockClock",
    "MockClockMode",
    "OffsetClock",
    "SequenceClock",
    "SystemClock",
    "TickClock",
    "UtcClock",
    "system_now",
    "ClockSettings",
    "get_settings",
    "set_settings",
    "CachingClock",
    "LoggingClock",
    "ClockError",
    "ClockNotFoundError",
    "IntervalParseError",
    "InvalidConfigurationError",
    "NoDefaultClockError",
    "SequenceExhaustedError",
    "resolve_clock",
    "ClockComparison",
    "ClockRegistry",
    "ComparableClock",
    "get_registry",
    "parse_interval",
    "set_registry",
]

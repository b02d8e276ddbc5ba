"""
Clockkit Clocks - Public API
==============================
Time sources: real clocks, test doubles and the offset decorator.

DjangoClock lives in clockkit.clocks.django_clock and is imported
from there, since it needs configured Django settings.
"""

from clockkit.clocks.base import Clock, FreezableClock
from clockkit.clocks.frozen import FrozenClock
from clockkit.clocks.mock import MockClock, MockClockMode
from clockkit.clocks.offset import OffsetClock
from clockkit.clocks.sequence import SequenceClock
from clockkit.clocks.system import SystemClock, UtcClock, system_now
from clockkit.clocks.tick import TickClock

__all__ = [
    "Clock",
    "FreezableClock",
    "FrozenClock",
    "MockClock",
    "MockClockMode",
    "OffsetClock",
    "SequenceClock",
    "SystemClock",
    "UtcClock",
    "system_now",
    "TickClock",
]

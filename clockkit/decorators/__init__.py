"""
Clockkit Decorators - Public API
==================================
Clocks that wrap another clock.
"""

from clockkit.decorators.caching import CachingClock
from clockkit.decorators.logging_clock import LoggingClock

__all__ = [
    "CachingClock",
    "LoggingClock",
]

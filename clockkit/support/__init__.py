"""
Clockkit Support - Public API
===============================
Interval parsing, instant helpers, comparison mixin and the clock registry.
"""

from clockkit.support.comparison import ClockComparison, ComparableClock
from clockkit.support.instants import epoch_seconds, parse_instant
from clockkit.support.intervals import Interval, apply_interval, parse_interval
from clockkit.support.registry import ClockRegistry, get_registry, set_registry

__all__ = [
    "ClockComparison",
    "ComparableClock",
    "epoch_seconds",
    "parse_instant",
    "Interval",
    "apply_interval",
    "parse_interval",
    "ClockRegistry",
    "get_registry",
    "set_registry",
]

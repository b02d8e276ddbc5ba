"""
Clockkit Clocks - Clock Protocols
===================================
Every time source in clockkit satisfies Clock. Clocks that can
take a snapshot of themselves also satisfy FreezableClock.

Decorators hold a Clock and are themselves Clocks, so they nest
freely: CachingClock(LoggingClock(OffsetClock(SystemClock(), "+1 hour"))).
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from clockkit.clocks.frozen import FrozenClock


# ══════════════════════════════════════════════════════════════
# CLOCK PROTOCOL
# ══════════════════════════════════════════════════════════════

@runtime_checkable
class Clock(Protocol):
    """Injectable time source."""

    def now(self) -> datetime:
        """Return the current instant as a timezone-aware datetime."""
        ...  # pragma: no cover


@runtime_checkable
class FreezableClock(Clock, Protocol):
    """Clock that can produce a FrozenClock snapshot of its current reading."""

    def freeze(self) -> FrozenClock:
        ...  # pragma: no cover


def clock_class_name(clock: object) -> str:
    """Qualified class name used to identify a clock in logs."""
    cls = type(clock)
    return f"{cls.__module__}.{cls.__qualname__}"

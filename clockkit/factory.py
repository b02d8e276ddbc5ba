"""
Clockkit - Clock Factory
==========================
resolve_clock() turns "whatever the caller passed" into a Clock.

    resolve_clock()                          → SystemClock (default timezone)
    resolve_clock(timezone="Europe/Paris")   → SystemClock in Paris
    resolve_clock(existing_clock)            → existing_clock
    resolve_clock(UtcClock)                  → UtcClock()
    resolve_clock(FrozenClock, frozen_time=t)→ FrozenClock(t)
    resolve_clock("billing")                 → registry.get("billing")
"""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Optional, Union

from clockkit.clocks.base import Clock
from clockkit.clocks.frozen import FrozenClock
from clockkit.clocks.system import SystemClock, UtcClock
from clockkit.support.registry import ClockRegistry, get_registry

ClockSource = Union[Clock, type, str, None]


def resolve_clock(
    clock: ClockSource = None,
    *,
    timezone: Union[str, tzinfo, None] = None,
    frozen_time: Optional[datetime] = None,
    registry: Optional[ClockRegistry] = None,
) -> Clock:
    """
    Resolve a clock instance, clock class, registry name or None.

    Raises:
        ClockNotFoundError: If a name is given and not registered.
        TypeError: If a FrozenClock class is given without frozen_time,
            or the argument is none of the accepted kinds.
    """
    if clock is None:
        return SystemClock(timezone)

    if isinstance(clock, str):
        return (registry if registry is not None else get_registry()).get(clock)

    if isinstance(clock, type):
        if not callable(getattr(clock, "now", None)):
            raise TypeError(
                f"Cannot resolve a clock from class {clock.__name__}: "
                f"it has no now() method."
            )
        if issubclass(clock, FrozenClock):
            if frozen_time is None:
                raise TypeError("FrozenClock requires frozen_time.")
            return clock(frozen_time)
        if issubclass(clock, UtcClock):
            return clock()
        return clock(timezone)

    if isinstance(clock, Clock):
        return clock

    raise TypeError(
        f"Cannot resolve a clock from {type(clock).__name__}."
    )

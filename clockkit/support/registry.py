"""
Clockkit Support - Clock Registry
===================================
Named directory of clocks with an optional default.

Rules:
- Names map to clock instances; set() inserts or overwrites
- The registry shares clocks, it does not own them
- The default must name a registered clock
- Removing the default clock unsets the default
- Thread-safe: one lock guards the mapping and the default pointer

Lifecycle:
    registry = ClockRegistry()          # or get_registry() for the process-wide one
    registry.set("utc", UtcClock())
    registry.set_default("utc")
    registry.get_default().now()

Tests should build their own ClockRegistry, or swap the process-wide
one with set_registry(), instead of relying on clear().
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import TYPE_CHECKING, Optional

from clockkit.errors import ClockNotFoundError, NoDefaultClockError

if TYPE_CHECKING:
    from clockkit.clocks.base import Clock

logger = logging.getLogger("clockkit.registry")


# ══════════════════════════════════════════════════════════════
# CLOCK REGISTRY
# ══════════════════════════════════════════════════════════════

class ClockRegistry:
    """
    Name → clock mapping, insertion-ordered.

    Usage:
        registry = ClockRegistry()
        registry.set("frozen", FrozenClock(t0))
        registry.has("frozen")          # True
        registry.registered()           # ["frozen"]
    """

    def __init__(self) -> None:
        self._clocks: dict[str, Clock] = {}
        self._default: Optional[str] = None
        self._lock = Lock()

    # ══════════════════════════════════════════════════════════
    # REGISTRATION
    # ══════════════════════════════════════════════════════════

    def set(self, name: str, clock: Clock) -> None:
        """
        Register `clock` under `name`, replacing any existing entry.

        Raises:
            TypeError: If clock has no callable now().
        """
        if not callable(getattr(clock, "now", None)):
            raise TypeError(
                f"Expected a clock with now(), got {type(clock).__name__}."
            )

        with self._lock:
            replaced = name in self._clocks
            self._clocks[name] = clock

        logger.info(
            f"Clock {'replaced' if replaced else 'registered'}: "
            f"'{name}' → {type(clock).__name__}"
        )

    def remove(self, name: str) -> None:
        """Remove `name` if present. Unsets the default if it pointed here."""
        with self._lock:
            removed = self._clocks.pop(name, None) is not None
            if self._default == name:
                self._default = None
                logger.info(f"Default clock '{name}' removed, default unset")

        if removed:
            logger.info(f"Clock removed: '{name}'")

    def clear(self) -> None:
        """Remove every clock and unset the default."""
        with self._lock:
            self._clocks.clear()
            self._default = None

    # ══════════════════════════════════════════════════════════
    # LOOKUP
    # ══════════════════════════════════════════════════════════

    def get(self, name: str) -> Clock:
        """
        Raises:
            ClockNotFoundError: If name is not registered.
        """
        with self._lock:
            try:
                return self._clocks[name]
            except KeyError:
                raise ClockNotFoundError(name) from None

    def has(self, name: str) -> bool:
        with self._lock:
            return name in self._clocks

    def registered(self) -> list[str]:
        """Registered names in insertion order."""
        with self._lock:
            return list(self._clocks)

    def __len__(self) -> int:
        with self._lock:
            return len(self._clocks)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._clocks

    # ══════════════════════════════════════════════════════════
    # DEFAULT
    # ══════════════════════════════════════════════════════════

    def set_default(self, name: str) -> None:
        """
        Designate a registered clock as the default.

        Raises:
            ClockNotFoundError: If name is not registered.
        """
        with self._lock:
            if name not in self._clocks:
                raise ClockNotFoundError(
                    name,
                    f"Cannot set default to unregistered clock '{name}'",
                )
            self._default = name

        logger.info(f"Default clock set: '{name}'")

    def get_default(self) -> Clock:
        """
        Raises:
            NoDefaultClockError: If no default is designated.
        """
        with self._lock:
            if self._default is None:
                raise NoDefaultClockError()
            return self._clocks[self._default]

    def has_default(self) -> bool:
        with self._lock:
            return self._default is not None

    @property
    def default_name(self) -> Optional[str]:
        with self._lock:
            return self._default


# ══════════════════════════════════════════════════════════════
# PROCESS-WIDE REGISTRY
# ══════════════════════════════════════════════════════════════

_registry = ClockRegistry()


def get_registry() -> ClockRegistry:
    """Get the process-wide registry."""
    return _registry


def set_registry(registry: ClockRegistry) -> ClockRegistry:
    """
    Replace the process-wide registry (testing only).

    Returns the previous registry so callers can restore it.
    """
    global _registry
    previous = _registry
    _registry = registry
    return previous

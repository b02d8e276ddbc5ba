"""
Clockkit - Errors
===================
Error types shared by clocks, decorators and the registry.

All errors derive from ClockError. Each also derives from the
closest builtin so callers that only know the standard hierarchy
(ValueError, LookupError) still catch them.
"""

from typing import Optional


class ClockError(Exception):
    """Base error for all clockkit operations."""
    pass


class InvalidConfigurationError(ClockError, ValueError):
    """A clock or decorator was constructed with unusable arguments."""

    def __init__(self, message: str):
        super().__init__(message)


class SequenceExhaustedError(ClockError, LookupError):
    """A SequenceClock was read past the end of its instants."""

    def __init__(self, length: int):
        self.length = length
        super().__init__("SequenceClock has exhausted all times")


class ClockNotFoundError(ClockError, LookupError):
    """Named clock is not present in the registry."""

    def __init__(self, name: str, message: Optional[str] = None):
        self.name = name
        super().__init__(message or f"Clock '{name}' not registered")


class NoDefaultClockError(ClockError, LookupError):
    """Registry has no default clock designated."""

    def __init__(self):
        super().__init__("No default clock set")


class IntervalParseError(ClockError, ValueError):
    """Relative-time string does not follow the interval grammar."""

    def __init__(self, text: str, detail: str):
        self.text = text
        self.detail = detail
        super().__init__(f"Invalid interval '{text}': {detail}")

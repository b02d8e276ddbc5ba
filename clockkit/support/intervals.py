"""
Clockkit Support - Intervals
==============================
Relative-time strings ("+1 day +3 hours -30 minutes") and timedeltas.

Grammar:
    interval := term (whitespace term)*
    term     := sign? integer whitespace? unit
    sign     := "+" | "-" | "−"
    unit     := see UNITS below (singular, plural, short forms)

Terms are applied left to right. Months and years are not supported:
their length depends on the calendar, and only fixed offsets apply.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta
from typing import Union

from clockkit.errors import IntervalParseError

Interval = Union[timedelta, str]

UNITS: dict[str, timedelta] = {}

for _names, _delta in (
    (("microsecond", "microseconds", "usec", "usecs", "us"), timedelta(microseconds=1)),
    (("millisecond", "milliseconds", "msec", "msecs", "ms"), timedelta(milliseconds=1)),
    (("second", "seconds", "sec", "secs", "s"), timedelta(seconds=1)),
    (("minute", "minutes", "min", "mins"), timedelta(minutes=1)),
    (("hour", "hours", "hr", "hrs", "h"), timedelta(hours=1)),
    (("day", "days", "d"), timedelta(days=1)),
    (("week", "weeks", "w"), timedelta(weeks=1)),
):
    for _name in _names:
        UNITS[_name] = _delta
del _names, _delta, _name

_TERM = re.compile(
    r"(?P<sign>[+\-−]?)\s*(?P<amount>\d+)\s*(?P<unit>[A-Za-z]+)"
)
_SEPARATOR = re.compile(r"\s+")


def parse_interval(text: str) -> timedelta:
    """
    Parse a relative-time string into a timedelta.

    Raises:
        IntervalParseError: On empty input, unknown units, stray text,
            terms not separated by whitespace, or a result outside
            the range of timedelta.
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}.")
    body = text.strip()
    if not body:
        raise IntervalParseError(text, "empty interval")

    total = timedelta(0)
    position = 0
    while True:
        match = _TERM.match(body, position)
        if match is None:
            raise IntervalParseError(
                text, f"unexpected input at position {position}"
            )
        unit = match.group("unit").lower()
        if unit not in UNITS:
            raise IntervalParseError(text, f"unknown unit '{match.group('unit')}'")

        try:
            step = UNITS[unit] * int(match.group("amount"))
            if match.group("sign") in ("-", "−"):
                step = -step
            total += step
        except (OverflowError, ValueError):
            raise IntervalParseError(text, "out of range") from None

        position = match.end()
        if position == len(body):
            return total

        separator = _SEPARATOR.match(body, position)
        if separator is None:
            raise IntervalParseError(
                text, f"terms must be separated by whitespace at position {position}"
            )
        position = separator.end()


def to_timedelta(interval: Interval) -> timedelta:
    """Accept a timedelta or a relative-time string."""
    if isinstance(interval, timedelta):
        return interval
    return parse_interval(interval)


def apply_interval(value: datetime, interval: Interval) -> datetime:
    """Return value shifted by interval. The input is never modified."""
    return value + to_timedelta(interval)

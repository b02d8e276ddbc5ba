"""
Clockkit Support - Instants
=============================
Helpers for the timezone-aware datetimes every clock returns.
"""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Optional, Union

from clockkit.config import resolve_timezone


def require_aware(value: datetime, owner: str) -> datetime:
    """
    Reject naive datetimes.

    Raises:
        TypeError: If value is not a datetime.
        ValueError: If value has no timezone.
    """
    if not isinstance(value, datetime):
        raise TypeError(
            f"{owner} expected datetime, got {type(value).__name__}."
        )
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError(f"{owner} requires timezone-aware datetime.")
    return value


def parse_instant(
    value: str, timezone: Union[str, tzinfo, None] = None
) -> datetime:
    """
    Parse an ISO-8601 string into an aware datetime.

    Values without an offset are placed in `timezone`
    (default: the configured default timezone).

    Raises:
        ValueError: If the string is not ISO-8601.
    """
    parsed = datetime.fromisoformat(value.strip())
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=resolve_timezone(timezone))
    return parsed


def coerce_instant(
    value: Union[datetime, str], owner: str
) -> datetime:
    """Accept an aware datetime or an ISO-8601 string."""
    if isinstance(value, str):
        return parse_instant(value)
    return require_aware(value, owner)


def epoch_seconds(value: datetime) -> int:
    """Whole seconds since the Unix epoch, truncating sub-second precision."""
    return int(value.timestamp() // 1)


def timezone_name(value: datetime) -> Optional[str]:
    """IANA key when available ("Europe/Paris"), otherwise the tz abbreviation."""
    key = getattr(value.tzinfo, "key", None)
    if key:
        return key
    return value.tzname()


def format_timestamp(value: datetime) -> str:
    """Wall-clock time with microseconds: 2025-01-15 12:00:00.000000."""
    return value.strftime("%Y-%m-%d %H:%M:%S.%f")

"""
Clockkit Clocks - Django Clock
================================
Reads time through django.utils.timezone, so anything that patches
Django's notion of "now" (and the project's USE_TZ / TIME_ZONE
settings) is honoured.

Requires configured Django settings.
"""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Optional, Union

from django.utils import timezone as django_timezone

from clockkit.clocks.frozen import FrozenClock
from clockkit.config import resolve_timezone
from clockkit.support.comparison import ClockComparison


class DjangoClock(ClockComparison):
    """Time from the Django framework."""

    def __init__(self, timezone: Union[str, tzinfo, None] = None) -> None:
        self._timezone: Optional[tzinfo] = (
            resolve_timezone(timezone) if timezone is not None else None
        )

    def now(self) -> datetime:
        current = django_timezone.now()
        if django_timezone.is_naive(current):
            # USE_TZ=False: Django hands out local naive time.
            current = django_timezone.make_aware(
                current, django_timezone.get_default_timezone()
            )
        if self._timezone is not None:
            return current.astimezone(self._timezone)
        return current

    def freeze(self) -> FrozenClock:
        return FrozenClock(self.now())

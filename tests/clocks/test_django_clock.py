"""
Tests for clockkit.clocks.django_clock - DjangoClock.
"""

from datetime import datetime, timedelta, timezone
from unittest import mock

import pytest
from django.conf import settings

if not settings.configured:
    settings.configure(USE_TZ=True, TIME_ZONE="UTC")

from clockkit.clocks import FrozenClock  # noqa: E402
from clockkit.clocks.django_clock import DjangoClock  # noqa: E402


T0 = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


class TestDjangoClock:
    def test_returns_aware_utc(self):
        before = datetime.now(timezone.utc)
        dt = DjangoClock().now()
        after = datetime.now(timezone.utc)
        assert dt.tzinfo is not None
        assert before <= dt <= after

    def test_reads_django_time_source(self):
        with mock.patch("django.utils.timezone.now", return_value=T0):
            assert DjangoClock().now() == T0

    def test_converts_to_timezone(self):
        with mock.patch("django.utils.timezone.now", return_value=T0):
            dt = DjangoClock("Asia/Tokyo").now()
        assert dt == T0
        assert dt.utcoffset() == timedelta(hours=9)

    def test_naive_django_time_made_aware(self):
        naive = datetime(2025, 1, 15, 12, 0, 0)
        with mock.patch("django.utils.timezone.now", return_value=naive):
            dt = DjangoClock().now()
        assert dt.tzinfo is not None
        assert dt == T0

    def test_freeze(self):
        with mock.patch("django.utils.timezone.now", return_value=T0):
            frozen = DjangoClock().freeze()
        assert isinstance(frozen, FrozenClock)
        assert frozen.now() == T0

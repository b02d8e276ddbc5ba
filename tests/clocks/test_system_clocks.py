"""
Tests for clockkit.clocks.system - SystemClock, UtcClock, system_now.
"""

from datetime import datetime, timedelta, timezone

import pytest

from clockkit.clocks import FrozenClock, SystemClock, UtcClock, system_now
from clockkit.config import ClockSettings, set_settings
from clockkit.errors import InvalidConfigurationError


@pytest.fixture
def restore_settings():
    yield
    set_settings(None)


class TestSystemNow:
    def test_defaults_to_utc(self, restore_settings):
        set_settings(ClockSettings())
        assert system_now().utcoffset() == timedelta(0)

    def test_explicit_timezone(self):
        dt = system_now("Asia/Tokyo")
        assert dt.utcoffset() == timedelta(hours=9)


class TestSystemClock:
    def test_returns_aware_current_time(self):
        before = datetime.now(timezone.utc)
        dt = SystemClock().now()
        after = datetime.now(timezone.utc)
        assert dt.tzinfo is not None
        assert before <= dt <= after

    def test_time_advances(self):
        clock = SystemClock()
        t1 = clock.now()
        t2 = clock.now()
        assert t2 >= t1

    def test_fixed_timezone(self):
        clock = SystemClock("Asia/Tokyo")
        assert clock.now().utcoffset() == timedelta(hours=9)
        assert str(clock.timezone) == "Asia/Tokyo"

    def test_follows_configured_default(self, restore_settings):
        clock = SystemClock()
        set_settings(ClockSettings(default_timezone="Asia/Tokyo"))
        assert clock.now().utcoffset() == timedelta(hours=9)

    def test_unknown_timezone(self):
        with pytest.raises(InvalidConfigurationError, match="Unknown timezone"):
            SystemClock("Mars/Olympus_Mons")

    def test_freeze(self):
        frozen = SystemClock().freeze()
        assert isinstance(frozen, FrozenClock)
        assert frozen.now() == frozen.now()


class TestUtcClock:
    def test_returns_utc(self):
        dt = UtcClock().now()
        assert dt.tzinfo == timezone.utc

    def test_ignores_configured_default(self, restore_settings):
        set_settings(ClockSettings(default_timezone="Asia/Tokyo"))
        assert UtcClock().now().tzinfo == timezone.utc

    def test_freeze(self):
        frozen = UtcClock().freeze()
        assert frozen.now().tzinfo == timezone.utc

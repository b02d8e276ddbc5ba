"""
Tests for clockkit.clocks.offset - OffsetClock.
"""

from datetime import datetime, timedelta, timezone

import pytest

from clockkit.clocks import FrozenClock, OffsetClock, TickClock
from clockkit.errors import IntervalParseError


T0 = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


class TestOffsetClock:
    def test_positive_string_offset(self):
        clock = OffsetClock(FrozenClock(T0), "+1 day")
        assert clock.now() == datetime(2025, 1, 16, 12, tzinfo=timezone.utc)

    def test_negative_string_offset(self):
        clock = OffsetClock(FrozenClock(T0), "-1 day")
        assert clock.now() == datetime(2025, 1, 14, 12, tzinfo=timezone.utc)

    def test_opposite_offsets_share_base(self):
        base = FrozenClock(T0)
        ahead = OffsetClock(base, "+1 day")
        behind = OffsetClock(base, "-1 day")
        assert ahead.now() - behind.now() == timedelta(days=2)
        assert base.now() == T0

    def test_timedelta_offset(self):
        clock = OffsetClock(FrozenClock(T0), timedelta(minutes=-5))
        assert clock.now() == T0 - timedelta(minutes=5)
        assert clock.offset == timedelta(minutes=-5)

    def test_follows_inner_clock(self):
        inner = TickClock(T0)
        clock = OffsetClock(inner, "+1 hour")
        inner.tick("+10 minutes")
        assert clock.now() == T0 + timedelta(hours=1, minutes=10)

    def test_nested_offsets(self):
        clock = OffsetClock(OffsetClock(FrozenClock(T0), "+1 hour"), "+30 minutes")
        assert clock.now() == T0 + timedelta(hours=1, minutes=30)

    def test_invalid_offset_fails_at_construction(self):
        with pytest.raises(IntervalParseError):
            OffsetClock(FrozenClock(T0), "next tuesday")


class TestOffsetClockFreeze:
    def test_freeze_captures_offset_value(self):
        inner = TickClock(T0)
        frozen = OffsetClock(inner, "+2 hours").freeze()
        inner.tick("+1 day")
        assert isinstance(frozen, FrozenClock)
        assert frozen.now() == T0 + timedelta(hours=2)

"""
Tests for clockkit.support.intervals - relative-time strings.
"""

from datetime import datetime, timedelta, timezone

import pytest

from clockkit.errors import IntervalParseError
from clockkit.support.intervals import apply_interval, parse_interval, to_timedelta


T0 = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


class TestParseInterval:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("+1 day", timedelta(days=1)),
            ("-1 day", timedelta(days=-1)),
            ("1 day", timedelta(days=1)),
            ("2 weeks", timedelta(weeks=2)),
            ("+3 hours", timedelta(hours=3)),
            ("45 min", timedelta(minutes=45)),
            ("10s", timedelta(seconds=10)),
            ("250 ms", timedelta(milliseconds=250)),
            ("7 usec", timedelta(microseconds=7)),
            ("+1 DAY", timedelta(days=1)),
        ],
    )
    def test_single_term(self, text, expected):
        assert parse_interval(text) == expected

    def test_terms_are_summed_left_to_right(self):
        assert parse_interval("+1 day +3 hours -30 minutes") == timedelta(
            days=1, hours=2, minutes=30
        )

    def test_unicode_minus(self):
        assert parse_interval("+1 day −30 minutes") == timedelta(hours=23, minutes=30)

    def test_sign_separated_by_space(self):
        assert parse_interval("- 5 seconds") == timedelta(seconds=-5)

    def test_surrounding_whitespace(self):
        assert parse_interval("  +1 hour  ") == timedelta(hours=1)

    def test_terms_cancel(self):
        assert parse_interval("+1 hour -60 minutes") == timedelta(0)


class TestParseIntervalErrors:
    @pytest.mark.parametrize(
        "text",
        ["", "   ", "tomorrow", "+1 month", "+1 year", "1.5 hours", "+1 day,", "day"],
    )
    def test_rejected(self, text):
        with pytest.raises(IntervalParseError):
            parse_interval(text)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_interval("soon")

    def test_error_names_unit(self):
        with pytest.raises(IntervalParseError, match="unknown unit 'month'"):
            parse_interval("+1 month")

    @pytest.mark.parametrize("text", ["1day2hours", "+1 day+3 hours", "1h30min"])
    def test_terms_require_whitespace(self, text):
        with pytest.raises(IntervalParseError, match="separated by whitespace"):
            parse_interval(text)

    @pytest.mark.parametrize(
        "text",
        [
            "+1000000000 days",
            "+999999999 days +999999999 days",
            "1" + "0" * 40 + " seconds",
            "1" + "0" * 5000 + " seconds",
        ],
    )
    def test_out_of_range(self, text):
        with pytest.raises(IntervalParseError, match="out of range"):
            parse_interval(text)

    def test_non_string(self):
        with pytest.raises(TypeError):
            parse_interval(5)


class TestApplyInterval:
    def test_string(self):
        assert apply_interval(T0, "+90 minutes") == T0 + timedelta(minutes=90)

    def test_timedelta(self):
        assert apply_interval(T0, timedelta(days=-2)) == T0 - timedelta(days=2)

    def test_input_unchanged(self):
        original = T0
        apply_interval(original, "+1 day")
        assert original == datetime(2025, 1, 15, 12, tzinfo=timezone.utc)

    def test_keeps_timezone(self):
        plus_two = timezone(timedelta(hours=2))
        dt = datetime(2025, 1, 15, 12, tzinfo=plus_two)
        assert apply_interval(dt, "+1 hour").tzinfo is plus_two

    def test_to_timedelta_passthrough(self):
        delta = timedelta(seconds=3)
        assert to_timedelta(delta) is delta

"""Tests for time instant conversion."""

from datetime import date, datetime, timedelta, timezone

import pytest

from dynconv.time_helpers.layouts import TIME_LAYOUTS, parse_with_layout, split_fraction, zone_for_name
from dynconv.timestamps import ZERO_TIME, parse_time_text, to_time

UTC = timezone.utc


def test_zero_time_is_year_one_utc():
    assert ZERO_TIME == datetime(1, 1, 1, tzinfo=UTC)


@pytest.mark.parametrize("value", [None, "", "garbage", 20060102, "2006-13-45", [1, 2]])
def test_unparseable_values_give_zero_time(value):
    assert to_time(value) == ZERO_TIME


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2006-01-02", datetime(2006, 1, 2, tzinfo=UTC)),
        ("2006-01-02 15:04", datetime(2006, 1, 2, 15, 4, tzinfo=UTC)),
        ("2006-01-02 15:04:05", datetime(2006, 1, 2, 15, 4, 5, tzinfo=UTC)),
        ("2006-01-02 15:04:05.123456789", datetime(2006, 1, 2, 15, 4, 5, 123456, tzinfo=UTC)),
        ("2006-01-02T15:04:05", datetime(2006, 1, 2, 15, 4, 5, tzinfo=UTC)),
        ("2006-01-02T15:04", datetime(2006, 1, 2, 15, 4, tzinfo=UTC)),
        ("01/02/2006", datetime(2006, 1, 2, tzinfo=UTC)),
        ("01/02/2006 15:04", datetime(2006, 1, 2, 15, 4, tzinfo=UTC)),
        ("01/02/2006 15:04:05.5", datetime(2006, 1, 2, 15, 4, 5, 500000, tzinfo=UTC)),
        ("01/02/06", datetime(2006, 1, 2, tzinfo=UTC)),
        ("01/02/99 15:04:05", datetime(1999, 1, 2, 15, 4, 5, tzinfo=UTC)),
        ("02/Jan/2006 15:04:05", datetime(2006, 1, 2, 15, 4, 5, tzinfo=UTC)),
        ("Jan 2, 2006", datetime(2006, 1, 2, tzinfo=UTC)),
        ("Mon Jan  2 15:04:05 2006", datetime(2006, 1, 2, 15, 4, 5, tzinfo=UTC)),
        ("Mon Jan  2 15:04:05 UTC 2006", datetime(2006, 1, 2, 15, 4, 5, tzinfo=UTC)),
        ("Mon, 02 Jan 2006 15:04:05 GMT", datetime(2006, 1, 2, 15, 4, 5, tzinfo=UTC)),
        ("2006-01-02T15:04:05Z", datetime(2006, 1, 2, 15, 4, 5, tzinfo=UTC)),
        ("3:04PM", datetime(1, 1, 1, 15, 4, tzinfo=UTC)),
        ("Jan  2 15:04:05", datetime(1, 1, 2, 15, 4, 5, tzinfo=UTC)),
        ("Jan  2 15:04:05.000123", datetime(1, 1, 2, 15, 4, 5, 123, tzinfo=UTC)),
    ],
)
def test_known_layouts(text, expected):
    assert to_time(text) == expected


@pytest.mark.parametrize(
    "text, offset",
    [
        ("Mon Jan 02 15:04:05 -0700 2006", timedelta(hours=-7)),
        ("02 Jan 06 15:04 -0700", timedelta(hours=-7)),
        ("Mon, 02 Jan 2006 15:04:05 +0130", timedelta(hours=1, minutes=30)),
        ("2006-01-02T15:04:05+07:00", timedelta(hours=7)),
    ],
)
def test_numeric_offsets_are_honored(text, offset):
    parsed = to_time(text)
    assert parsed.utcoffset() == offset
    assert parsed.replace(tzinfo=None) == datetime(2006, 1, 2, 15, 4, 5 if ":05" in text else 0)


@pytest.mark.parametrize(
    "text",
    [
        "Mon Jan  2 15:04:05 MST 2006",
        "02 Jan 06 15:04 MST",
        "Monday, 02-Jan-06 15:04:05 MST",
        "Mon, 02 Jan 2006 15:04:05 MST",
    ],
)
def test_unknown_zone_abbreviations_keep_their_name(text):
    parsed = to_time(text)
    assert parsed.tzname() == "MST"
    assert parsed.utcoffset() == timedelta(0)
    assert (parsed.year, parsed.month, parsed.day) == (2006, 1, 2)


@pytest.mark.parametrize("text", ["Mon Jan  2 15:04:05 UT 2006", "02 Jan 06 15:04 Z", "Mon, 02 Jan 2006 15:04:05 GMT"])
def test_short_utc_zone_names(text):
    parsed = to_time(text)
    assert parsed.tzinfo is timezone.utc
    assert (parsed.year, parsed.month, parsed.day) == (2006, 1, 2)


def test_default_string_layout_prefers_the_numeric_offset():
    parsed = to_time("Mon Jan  2 15:04:05.123456789 -0700 MST 2006")
    assert parsed.utcoffset() == timedelta(hours=-7)
    assert parsed.microsecond == 123456


def test_rfc3339_with_fraction():
    parsed = to_time("2006-01-02T15:04:05.5+07:00")
    assert parsed.microsecond == 500000
    assert parsed.utcoffset() == timedelta(hours=7)


def test_first_matching_layout_wins():
    # Month first, as in the US slash layouts.
    assert to_time("02/01/2006") == datetime(2006, 2, 1, tzinfo=UTC)


def test_leap_day_without_year_does_not_parse():
    assert to_time("Feb 29 12:00:00") == ZERO_TIME


def test_datetimes_are_returned_aware():
    naive = datetime(2024, 5, 6, 7, 8, 9)
    aware = datetime(2024, 5, 6, 7, 8, 9, tzinfo=timezone(timedelta(hours=2)))
    assert to_time(naive) == naive.replace(tzinfo=UTC)
    assert to_time(aware) is aware


def test_dates_become_midnight_utc():
    assert to_time(date(2024, 5, 6)) == datetime(2024, 5, 6, tzinfo=UTC)


def test_bytes_are_parsed_as_text():
    assert to_time(b"2006-01-02") == datetime(2006, 1, 2, tzinfo=UTC)


class TestLayoutHelpers:
    def test_split_fraction(self) -> None:
        assert split_fraction("15:04:05.1") == ("15:04:05", 100000)
        assert split_fraction("15:04:05,25") == ("15:04:05", 250000)
        assert split_fraction("15:04") == ("15:04", 0)

    def test_zone_for_name(self) -> None:
        assert zone_for_name("UTC") is timezone.utc
        assert zone_for_name("GMT") is timezone.utc
        assert zone_for_name("-03").utcoffset(None) == timedelta(hours=-3)
        assert zone_for_name("CEST").tzname(None) == "CEST"

    def test_parse_with_layout_raises_on_mismatch(self) -> None:
        layout = next(layout for layout in TIME_LAYOUTS if layout.name == "unix_date")
        with pytest.raises(ValueError, match="unix_date"):
            parse_with_layout("Mon Jan  2 15:04:05 2006", layout)

    def test_parse_time_text_returns_none_without_match(self) -> None:
        assert parse_time_text("not a time") is None

    def test_layout_names_are_unique(self) -> None:
        names = [layout.name for layout in TIME_LAYOUTS]
        assert len(names) == len(set(names))

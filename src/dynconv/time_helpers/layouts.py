"""
Ordered timestamp layouts and the helpers that apply them.

Layouts are ``strptime`` formats tried in order; the first one that parses
wins. ``%Z`` marks a zone abbreviation, which is matched here rather than
by ``strptime`` so that any abbreviation is accepted. Fractional seconds of
any length are accepted after a seconds field in every layout, so the
``.000``-style variants fold into their base layout.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Iterator, Optional

ZONE_NAME_DIRECTIVE = "%Z"
MICROSECOND_DIGITS = 6
YEARLESS_PLACEHOLDER_YEAR = 2000
YEARLESS_RESULT_YEAR = 1

_FRACTION_PATTERN = re.compile(r"(?<=\d:\d\d:\d\d)[.,](\d+)")
_ZONE_TOKEN_PATTERN = re.compile(r"(?<!\S)(?:UT|Z|[A-Z]{3,5}|[+-]\d{2}(?:\d{2})?)(?!\S)")
_NUMERIC_ZONE_PATTERN = re.compile(r"([+-])(\d{2})(\d{2})?")
_UTC_NAMES = frozenset({"UTC", "GMT", "UT", "Z"})


@dataclass(frozen=True)
class TimeLayout:
    name: str
    format: str

    @property
    def has_zone_name(self) -> bool:
        return ZONE_NAME_DIRECTIVE in self.format

    @property
    def has_year(self) -> bool:
        return "%Y" in self.format or "%y" in self.format


TIME_LAYOUTS: tuple[TimeLayout, ...] = (
    TimeLayout("date", "%Y-%m-%d"),
    TimeLayout("date_minutes", "%Y-%m-%d %H:%M"),
    TimeLayout("date_seconds", "%Y-%m-%d %H:%M:%S"),
    TimeLayout("iso_seconds", "%Y-%m-%dT%H:%M:%S"),
    TimeLayout("iso_minutes", "%Y-%m-%dT%H:%M"),
    TimeLayout("us_date", "%m/%d/%Y"),
    TimeLayout("us_date_minutes", "%m/%d/%Y %H:%M"),
    TimeLayout("us_date_seconds", "%m/%d/%Y %H:%M:%S"),
    TimeLayout("us_short_date", "%m/%d/%y"),
    TimeLayout("us_short_date_minutes", "%m/%d/%y %H:%M"),
    TimeLayout("us_short_date_seconds", "%m/%d/%y %H:%M:%S"),
    TimeLayout("default_string", "%a %b %d %H:%M:%S %z %Z %Y"),
    TimeLayout("common_log", "%d/%b/%Y %H:%M:%S"),
    TimeLayout("month_day_year", "%b %d, %Y"),
    TimeLayout("ansic", "%a %b %d %H:%M:%S %Y"),
    TimeLayout("unix_date", "%a %b %d %H:%M:%S %Z %Y"),
    TimeLayout("ruby_date", "%a %b %d %H:%M:%S %z %Y"),
    TimeLayout("rfc822", "%d %b %y %H:%M %Z"),
    TimeLayout("rfc822z", "%d %b %y %H:%M %z"),
    TimeLayout("rfc850", "%A, %d-%b-%y %H:%M:%S %Z"),
    TimeLayout("rfc1123", "%a, %d %b %Y %H:%M:%S %Z"),
    TimeLayout("rfc1123z", "%a, %d %b %Y %H:%M:%S %z"),
    TimeLayout("rfc3339", "%Y-%m-%dT%H:%M:%S%z"),
    TimeLayout("kitchen", "%I:%M%p"),
    TimeLayout("stamp", "%b %d %H:%M:%S"),
)


def split_fraction(text: str) -> tuple[str, int]:
    """
    Remove fractional seconds following a seconds field.

    Returns:
        The text without the fraction and the fraction as microseconds
        (digits beyond microsecond precision are dropped)

    Examples:
        >>> split_fraction("2006-01-02 15:04:05.123456789")
        ('2006-01-02 15:04:05', 123456)
        >>> split_fraction("2006-01-02")
        ('2006-01-02', 0)
    """
    match = _FRACTION_PATTERN.search(text)
    if match is None:
        return text, 0
    digits = match.group(1)[:MICROSECOND_DIGITS].ljust(MICROSECOND_DIGITS, "0")
    return text[: match.start()] + text[match.end() :], int(digits)


def zone_for_name(name: str) -> tzinfo:
    """Resolve a zone abbreviation; unknown names get a zero offset carrying the name."""
    if name in _UTC_NAMES:
        return timezone.utc
    numeric = _NUMERIC_ZONE_PATTERN.fullmatch(name)
    if numeric is not None:
        sign, hours, minutes = numeric.groups()
        offset = timedelta(hours=int(hours), minutes=int(minutes or 0))
        return timezone(-offset if sign == "-" else offset, name)
    return timezone(timedelta(0), name)


def _zone_candidates(text: str) -> Iterator[tuple[str, str]]:
    for match in _ZONE_TOKEN_PATTERN.finditer(text):
        remainder = (text[: match.start()] + text[match.end() :]).strip()
        yield match.group(0), remainder


def _strptime(text: str, fmt: str, *, has_year: bool) -> datetime:
    if has_year:
        return datetime.strptime(text, fmt)
    # Parsing a day without a year is ambiguous around leap days.
    parsed = datetime.strptime(f"{text} {YEARLESS_PLACEHOLDER_YEAR}", f"{fmt} %Y")
    return parsed.replace(year=YEARLESS_RESULT_YEAR)


def _attach_zone(parsed: datetime, zone_name: Optional[str]) -> datetime:
    if parsed.tzinfo is not None:
        return parsed
    if zone_name is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.replace(tzinfo=zone_for_name(zone_name))


def parse_with_layout(text: str, layout: TimeLayout) -> datetime:
    """
    Parse text (without fractional seconds) against a single layout.

    Returns:
        Timezone-aware datetime

    Raises:
        ValueError: If the text does not match the layout
    """
    if not layout.has_zone_name:
        parsed = _strptime(text, layout.format, has_year=layout.has_year)
        return _attach_zone(parsed, None)

    fmt = layout.format.replace(ZONE_NAME_DIRECTIVE, "").strip()
    for zone_name, remainder in _zone_candidates(text):
        try:
            parsed = _strptime(remainder, fmt, has_year=layout.has_year)
        except ValueError:  # Expected exception in loop, continuing iteration  # policy_guard: allow-silent-handler
            continue
        return _attach_zone(parsed, zone_name)
    raise ValueError(f"time data {text!r} does not match layout {layout.name!r}")


__all__ = [
    "TIME_LAYOUTS",
    "TimeLayout",
    "parse_with_layout",
    "split_fraction",
    "zone_for_name",
]

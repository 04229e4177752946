"""
Duration literal parsing.

Two textual forms are understood, both producing integer nanoseconds:

- compound unit literals such as ``1h30m`` or ``-1.5s`` (:func:`parse_duration`)
- clock forms ``H:MM``, ``H:MM:SS`` and ``H:MM:SS.fraction`` (:func:`parse_clock_duration`)
"""

from __future__ import annotations

import re
from typing import Optional

NANOSECOND = 1
MICROSECOND = 1_000 * NANOSECOND
MILLISECOND = 1_000 * MICROSECOND
SECOND = 1_000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

NANOSECOND_DIGITS = 9
_MAX_DURATION = (1 << 63) - 1

UNIT_NANOSECONDS: dict[str, int] = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,  # U+00B5 micro sign
    "μs": MICROSECOND,  # U+03BC Greek mu
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

_COMPONENT_PATTERN = re.compile(r"([0-9]*)(?:\.([0-9]*))?([^0-9.]*)")

# Tried in order; the first full match wins.
CLOCK_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(-?[0-9]+):([0-9]+)"),
    re.compile(r"(-?[0-9]+):([0-9]+):([0-9]+)"),
    re.compile(r"(-?[0-9]+):([0-9]+):([0-9]+)\.([0-9]+)"),
)


def parse_duration(text: str) -> int:
    """
    Parse a compound unit duration literal into nanoseconds.

    A literal is an optional sign followed by one or more number/unit pairs,
    where numbers may carry a fraction and units are ``ns``, ``us`` (or
    ``µs``), ``ms``, ``s``, ``m`` and ``h``. The bare literal ``0`` needs no
    unit.

    Raises:
        ValueError: If the literal is malformed or overflows int64 nanoseconds

    Examples:
        >>> parse_duration("1h30m")
        5400000000000
        >>> parse_duration("-1.5s")
        -1500000000
    """
    remaining = text
    negative = False
    if remaining and remaining[0] in "+-":
        negative = remaining[0] == "-"
        remaining = remaining[1:]

    if remaining == "0":
        return 0
    if not remaining:
        raise ValueError(f"Invalid duration {text!r}")

    total = 0
    position = 0
    while position < len(remaining):
        match = _COMPONENT_PATTERN.match(remaining, position)
        whole, fraction, unit = match.groups()
        if not whole and not fraction:
            raise ValueError(f"Invalid duration {text!r}")
        if not unit:
            raise ValueError(f"Missing unit in duration {text!r}")
        if unit not in UNIT_NANOSECONDS:
            raise ValueError(f"Unknown unit {unit!r} in duration {text!r}")

        scale = UNIT_NANOSECONDS[unit]
        total += int(whole or "0") * scale
        if fraction:
            total += int(fraction) * scale // 10 ** len(fraction)
        position = match.end()

    limit = _MAX_DURATION + 1 if negative else _MAX_DURATION
    if total > limit:
        raise ValueError(f"Invalid duration {text!r}: out of range")
    return -total if negative else total


def _fraction_nanoseconds(digits: str) -> int:
    return int(digits[:NANOSECOND_DIGITS].ljust(NANOSECOND_DIGITS, "0"))


def parse_clock_duration(text: str) -> Optional[int]:
    """
    Parse ``H:MM``, ``H:MM:SS`` or ``H:MM:SS.fraction`` into nanoseconds.

    Negative hours negate the whole duration; ``-0`` hours are zero, not
    negative. The fraction is padded or truncated to nine digits.

    Returns:
        Nanoseconds, or None when no clock form matches

    Examples:
        >>> parse_clock_duration("-1:30") == -(HOUR + 30 * MINUTE)
        True
        >>> parse_clock_duration("1:30:15.5") == HOUR + 30 * MINUTE + 15 * SECOND + 500_000_000
        True
    """
    for pattern in CLOCK_PATTERNS:
        match = pattern.fullmatch(text)
        if match is None:
            continue

        hours, minutes, seconds, fraction = (match.groups() + (None, None))[:4]
        sign = -1 if int(hours) < 0 else 1
        total = abs(int(hours)) * HOUR + int(minutes) * MINUTE
        if seconds is not None:
            total += int(seconds) * SECOND
        if fraction is not None:
            total += _fraction_nanoseconds(fraction)
        return sign * total
    return None


__all__ = [
    "CLOCK_PATTERNS",
    "HOUR",
    "MICROSECOND",
    "MILLISECOND",
    "MINUTE",
    "NANOSECOND",
    "SECOND",
    "UNIT_NANOSECONDS",
    "parse_clock_duration",
    "parse_duration",
]

"""Best-effort conversion of dynamic values to time instants."""

from __future__ import annotations

import logging
from datetime import date, datetime, time, timezone
from typing import Any

from .text import to_string
from .time_helpers.layouts import TIME_LAYOUTS, parse_with_layout, split_fraction

logger = logging.getLogger(__name__)

ZERO_TIME = datetime.min.replace(tzinfo=timezone.utc)


def _ensure_aware(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def parse_time_text(text: str) -> datetime | None:
    """Return the first layout match for text, or None when no layout parses it."""
    stripped, microseconds = split_fraction(text)
    for layout in TIME_LAYOUTS:
        try:
            parsed = parse_with_layout(stripped, layout)
        except ValueError:  # Expected exception in loop, continuing iteration  # policy_guard: allow-silent-handler
            continue
        return parsed.replace(microsecond=microseconds)
    return None


def to_time(value: Any) -> datetime:
    """
    Convert value to a timezone-aware datetime.

    Datetimes are returned as-is (naive ones are taken as UTC) and dates
    become midnight UTC. Anything else is rendered to text and matched
    against ``TIME_LAYOUTS`` in order.

    Returns:
        Parsed datetime, or ``ZERO_TIME`` when nothing matches
    """
    if isinstance(value, datetime):
        return _ensure_aware(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)

    text = to_string(value)
    parsed = parse_time_text(text)
    if parsed is None:
        logger.debug("No time layout matched %r; using zero time", text)
        return ZERO_TIME
    return parsed


__all__ = ["ZERO_TIME", "parse_time_text", "to_time"]

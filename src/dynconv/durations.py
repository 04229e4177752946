"""Best-effort conversion of dynamic values to nanosecond durations."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any, Optional

import numpy as np

from .kinds import FLOAT_KINDS, INTEGER_KINDS, kind_of
from .numeric import truncate_float, wrap_signed
from .text import to_string
from .time_helpers.durations import MICROSECOND, SECOND, parse_clock_duration, parse_duration

logger = logging.getLogger(__name__)

ZERO_DURATION = np.timedelta64(0, "ns")


def _timedelta_nanoseconds(value: timedelta) -> int:
    seconds = value.days * 86_400 + value.seconds
    return seconds * SECOND + value.microseconds * MICROSECOND


def _timedelta64_nanoseconds(value: np.timedelta64) -> int:
    if np.isnat(value):
        return 0
    return int(value.astype("timedelta64[ns]").astype(np.int64))


def parse_duration_text(text: str) -> Optional[int]:
    """Try the unit literal form, then the clock forms; None when neither parses."""
    try:
        return parse_duration(text)
    except ValueError:  # Expected data validation or parsing failure  # policy_guard: allow-silent-handler
        pass  # Not a unit literal, try the clock forms
    return parse_clock_duration(text)


def _nanoseconds(value: Any) -> int:
    if isinstance(value, np.timedelta64):
        return _timedelta64_nanoseconds(value)
    if isinstance(value, timedelta):
        return _timedelta_nanoseconds(value)

    kind = kind_of(value)
    if kind in INTEGER_KINDS:
        return int(value)
    if kind in FLOAT_KINDS:
        return truncate_float(value)

    text = to_string(value)
    parsed = parse_duration_text(text)
    if parsed is None:
        logger.debug("Could not parse %r as a duration; using zero", text)
        return 0
    return parsed


def to_duration(value: Any) -> np.timedelta64:
    """
    Convert value to a ``timedelta64[ns]``.

    Numbers are read as nanosecond counts, ``timedelta`` values convert
    directly and everything else is rendered to text and parsed as a unit
    literal (``1h30m``) or a clock form (``1:30``, ``1:30:15``,
    ``1:30:15.25``).

    Returns:
        Duration with nanosecond precision, or ``ZERO_DURATION`` when nothing parses
    """
    return np.timedelta64(wrap_signed(_nanoseconds(value)), "ns")


__all__ = ["ZERO_DURATION", "parse_duration_text", "to_duration"]

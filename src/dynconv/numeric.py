"""
Canonical numeric conversion utilities.

Every value is first normalized to a canonical signed 64-bit integer,
unsigned 64-bit integer or 64-bit float. Narrower outputs are truncating
casts of those canonical values, wrapping with two's-complement semantics
and never checking for overflow.

Conversions never raise: text that does not parse, and values of kinds
without a numeric reading, produce zero. Integer text beyond the 64-bit
range saturates at the nearest bound.
"""

import logging
import math
import re
from typing import Any, Optional

import numpy as np

from .kinds import FLOAT_KINDS, INTEGER_KINDS, Kind, is_byte_sequence, kind_of
from .text import to_string

logger = logging.getLogger(__name__)

_SIGNED_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INTEGER_PATTERN = re.compile(r"[0-9]+")
_DECIMAL_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_FLOAT_PATTERN = re.compile(r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+")
_SPECIAL_FLOAT_PATTERN = re.compile(r"[+-]?(?:inf|infinity|nan)", re.IGNORECASE)

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
UINT64_MAX = (1 << 64) - 1
# Longer literals (after leading zeros) are out of range for every width.
_MAX_LITERAL_DIGITS = 20


def wrap_signed(value: int, bits: int = 64) -> int:
    """
    Truncate an integer to a signed two's-complement width.

    Examples:
        >>> wrap_signed(128, 8)
        -128
        >>> wrap_signed(-1, 64)
        -1
    """
    modulus = 1 << bits
    value &= modulus - 1
    if value >= modulus >> 1:
        value -= modulus
    return value


def wrap_unsigned(value: int, bits: int = 64) -> int:
    """
    Truncate an integer to an unsigned width.

    Examples:
        >>> wrap_unsigned(-1, 8)
        255
        >>> wrap_unsigned(256, 8)
        0
    """
    return value & ((1 << bits) - 1)


def truncate_float(value: Any) -> int:
    """Truncate toward zero; NaN and infinities become 0."""
    number = float(value)
    if not math.isfinite(number):
        return 0
    return int(number)


def _int_to_float(value: int) -> float:
    try:
        return float(value)
    except OverflowError:  # Integer wider than any float  # policy_guard: allow-silent-handler
        return math.copysign(math.inf, value)


def _saturating_int(text: str, low: int, high: int) -> int:
    negative = text.startswith("-")
    digits = text.lstrip("+-").lstrip("0")
    if len(digits) > _MAX_LITERAL_DIGITS:
        return low if negative else high
    return max(low, min(int(text), high))


def parse_signed(text: str) -> Optional[int]:
    """
    Parse a base-10 int64 literal.

    Out-of-range literals saturate at the int64 bounds.

    Returns:
        Parsed integer, or None on a syntax error

    Examples:
        >>> parse_signed("9223372036854775808")
        9223372036854775807
    """
    if not _SIGNED_INTEGER_PATTERN.fullmatch(text):
        return None
    return _saturating_int(text, INT64_MIN, INT64_MAX)


def parse_unsigned(text: str) -> Optional[int]:
    """Parse a base-10 uint64 literal (no sign), saturating at the uint64 maximum; None on syntax errors."""
    if not _UNSIGNED_INTEGER_PATTERN.fullmatch(text):
        return None
    return _saturating_int(text, 0, UINT64_MAX)


def parse_float(text: str) -> Optional[float]:
    """Parse a float literal, returning None when the text is not one."""
    if _DECIMAL_FLOAT_PATTERN.fullmatch(text) or _SPECIAL_FLOAT_PATTERN.fullmatch(text):
        return float(text)
    if _HEX_FLOAT_PATTERN.fullmatch(text):
        return float.fromhex(text)
    return None


def _is_textual(value: Any, kind: Kind) -> bool:
    return kind is Kind.STRING or is_byte_sequence(value)


def to_int64(value: Any) -> int:
    """
    Convert value to a signed 64-bit integer.

    Integers wrap, floats truncate toward zero, booleans map to 1/0 and
    anything else is rendered to text and parsed as a base-10 integer.

    Args:
        value: Value to convert

    Returns:
        Integer in the int64 range, or 0 when no reading exists
    """
    kind = kind_of(value)
    if kind is Kind.BOOL:
        return 1 if value else 0
    if kind in INTEGER_KINDS:
        return wrap_signed(int(value))
    if kind in FLOAT_KINDS:
        return wrap_signed(truncate_float(value))

    text = to_string(value)
    parsed = parse_signed(text)
    if parsed is None:
        logger.debug("Could not parse %r as int64; using 0", text)
        return 0
    return parsed


def to_uint64(value: Any) -> int:
    """
    Convert value to an unsigned 64-bit integer.

    Negative integers wrap around, floats truncate toward zero and only text
    (strings and byte sequences) is parsed.

    Args:
        value: Value to convert

    Returns:
        Integer in the uint64 range, or 0 when no reading exists
    """
    kind = kind_of(value)
    if kind is Kind.BOOL:
        return 1 if value else 0
    if kind in INTEGER_KINDS:
        return wrap_unsigned(int(value))
    if kind in FLOAT_KINDS:
        return wrap_unsigned(truncate_float(value))
    if _is_textual(value, kind):
        text = to_string(value)
        parsed = parse_unsigned(text)
        if parsed is None:
            logger.debug("Could not parse %r as uint64; using 0", text)
            return 0
        return parsed
    return 0


def to_float64(value: Any) -> float:
    """
    Convert value to a 64-bit float.

    Args:
        value: Value to convert

    Returns:
        Float value, or 0.0 when no reading exists
    """
    kind = kind_of(value)
    if kind is Kind.BOOL:
        return 1.0 if value else 0.0
    if kind in INTEGER_KINDS:
        return _int_to_float(int(value))
    if kind in FLOAT_KINDS:
        return float(value)
    if _is_textual(value, kind):
        text = to_string(value)
        parsed = parse_float(text)
        if parsed is None:
            logger.debug("Could not parse %r as float64; using 0.0", text)
            return 0.0
        return parsed
    return 0.0


def to_int(value: Any) -> int:
    return to_int64(value)


def to_int8(value: Any) -> np.int8:
    return np.int8(wrap_signed(to_int64(value), 8))


def to_int16(value: Any) -> np.int16:
    return np.int16(wrap_signed(to_int64(value), 16))


def to_int32(value: Any) -> np.int32:
    return np.int32(wrap_signed(to_int64(value), 32))


def to_uint(value: Any) -> int:
    return to_uint64(value)


def to_uint8(value: Any) -> np.uint8:
    return np.uint8(wrap_unsigned(to_uint64(value), 8))


def to_uint16(value: Any) -> np.uint16:
    return np.uint16(wrap_unsigned(to_uint64(value), 16))


def to_uint32(value: Any) -> np.uint32:
    return np.uint32(wrap_unsigned(to_uint64(value), 32))


def to_float32(value: Any) -> np.float32:
    """Narrow the float64 reading of value to float32; out of range values become ±inf."""
    with np.errstate(over="ignore"):
        return np.float32(to_float64(value))


__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "UINT64_MAX",
    "parse_float",
    "parse_signed",
    "parse_unsigned",
    "to_float32",
    "to_float64",
    "to_int",
    "to_int16",
    "to_int32",
    "to_int64",
    "to_int8",
    "to_uint",
    "to_uint16",
    "to_uint32",
    "to_uint64",
    "to_uint8",
    "truncate_float",
    "wrap_signed",
    "wrap_unsigned",
]

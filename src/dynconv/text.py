"""
Textual and byte rendering of dynamic values.

Integers are rendered digit by digit into a fixed buffer, floats in their
shortest round-trippable ``%g`` form for their own width, complex numbers
as ``(re+imi)``. Byte sequences and text cross over through the configured
codec (see :mod:`dynconv.config.settings`); when its error policy fails,
the surrogate handlers and then ``replace`` are used, so rendering never
raises.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import numpy as np

from .config import load_settings
from .kinds import COMPLEX_KINDS, FLOAT_KINDS, INTEGER_KINDS, Kind, is_byte_sequence, kind_of

logger = logging.getLogger(__name__)

# Tried in order when the configured error policy fails; "replace" is the last resort.
_DECODE_FALLBACK_ERRORS = ("surrogateescape",)
_ENCODE_FALLBACK_ERRORS = ("surrogatepass", "surrogateescape")

_DIGITS = b"0123456789"
# Wide enough for 18446744073709551615.
_UINT_BUFLEN = 20
# Shortest %g switches to exponent form at this decimal exponent.
_SHORTEST_EXPONENT_LIMIT = 6
_MIN_FIXED_EXPONENT = -4


def _digit_buffer_size(value: int) -> int:
    bits = value.bit_length()
    if bits <= 64:
        return _UINT_BUFLEN
    return bits * 302 // 1000 + 1


def uint_to_bytes(value: int) -> bytes:
    """Render a non-negative integer as base-10 ASCII digits."""
    buf = bytearray(_digit_buffer_size(value))
    i = len(buf)

    while value >= 10:
        i -= 1
        buf[i] = _DIGITS[value % 10]
        value //= 10

    i -= 1
    buf[i] = _DIGITS[value]
    return bytes(buf[i:])


def int_to_bytes(value: int) -> bytes:
    """Render a signed integer, prefixing ``-`` for negative values."""
    if value < 0:
        return b"-" + uint_to_bytes(-value)
    return uint_to_bytes(value)


def _shortest_digits(number: np.floating) -> tuple[bool, str, int]:
    """Return (negative, significant digits, decimal point position)."""
    text = np.format_float_scientific(number, unique=True, trim="-")
    mantissa, _, exponent = text.partition("e")
    negative = mantissa.startswith("-")
    digits = mantissa.lstrip("-").replace(".", "")
    return negative, digits, int(exponent) + 1


def format_float(value: Any, kind: Kind = Kind.FLOAT64) -> str:
    """
    Render a float in its shortest round-trippable decimal form.

    Numpy floating scalars keep their own precision; other values are
    rendered with float32 or float64 precision according to *kind*.

    Examples:
        >>> format_float(1e6)
        '1e+06'
        >>> format_float(0.0001)
        '0.0001'
        >>> format_float(np.float32(0.1), Kind.FLOAT32)
        '0.1'
    """
    if isinstance(value, np.floating):
        number = value
    elif kind is Kind.FLOAT32:
        number = np.float32(value)
    else:
        number = np.float64(value)

    if np.isnan(number):
        return "NaN"
    if np.isinf(number):
        return "+Inf" if number > 0 else "-Inf"

    negative, digits, point = _shortest_digits(number)
    exponent = point - 1

    if exponent < _MIN_FIXED_EXPONENT or exponent >= _SHORTEST_EXPONENT_LIMIT:
        body = digits[0]
        if len(digits) > 1:
            body += "." + digits[1:]
        body += f"e{'-' if exponent < 0 else '+'}{abs(exponent):02d}"
    elif point <= 0:
        body = "0." + "0" * -point + digits
    elif point >= len(digits):
        body = digits + "0" * (point - len(digits))
    else:
        body = digits[:point] + "." + digits[point:]

    return "-" + body if negative else body


def format_complex(value: Any) -> str:
    """Render a complex number as ``(re+imi)`` with float64 precision parts."""
    number = complex(value)
    imaginary = number.imag
    sign = "+" if imaginary >= 0 else ""
    return f"({format_float(number.real)}{sign}{format_float(imaginary)}i)"


def _render_known(value: Any, kind: Kind) -> Optional[bytes]:
    if kind is Kind.BOOL:
        return b"true" if value else b"false"
    if kind in INTEGER_KINDS:
        return int_to_bytes(int(value))
    if kind in FLOAT_KINDS:
        return format_float(value, kind).encode("ascii")
    if kind in COMPLEX_KINDS:
        return format_complex(value).encode("ascii")
    return None


def _decode(data: Any) -> str:
    settings = load_settings()
    raw = bytes(data)
    try:
        return settings.decode(raw)
    except UnicodeDecodeError as exc:  # Expected data validation or parsing failure  # policy_guard: allow-silent-handler
        logger.debug("Could not decode %r with configured codec (%s); retrying", raw, exc)

    for handler in _DECODE_FALLBACK_ERRORS:
        try:
            return raw.decode(settings.text_encoding, handler)
        except UnicodeDecodeError:  # Expected exception in loop, continuing iteration  # policy_guard: allow-silent-handler
            continue
    return raw.decode(settings.text_encoding, "replace")


def _encode(text: str) -> bytes:
    settings = load_settings()
    try:
        return settings.encode(text)
    except UnicodeEncodeError as exc:  # Expected data validation or parsing failure  # policy_guard: allow-silent-handler
        logger.debug("Could not encode %r with configured codec (%s); retrying", text, exc)

    for handler in _ENCODE_FALLBACK_ERRORS:
        try:
            return text.encode(settings.text_encoding, handler)
        except UnicodeEncodeError:  # Expected exception in loop, continuing iteration  # policy_guard: allow-silent-handler
            continue
    return text.encode(settings.text_encoding, "replace")


def to_string(value: Any) -> str:
    """
    Render any value as text.

    None renders as ``""``, strings pass through, byte sequences are decoded
    and anything unrecognized falls back to ``str(value)``.
    """
    if value is None:
        return ""

    kind = kind_of(value)
    if kind is Kind.STRING:
        return str(value)
    if is_byte_sequence(value):
        return _decode(value)

    rendered = _render_known(value, kind)
    if rendered is not None:
        return rendered.decode("ascii")
    return str(value)


def to_bytes(value: Any) -> bytes:
    """Render any value as bytes, returning byte sequences and strings without a text round-trip."""
    if value is None:
        return b""

    kind = kind_of(value)
    if kind is Kind.STRING:
        return _encode(value)
    if is_byte_sequence(value):
        return bytes(value)

    rendered = _render_known(value, kind)
    if rendered is not None:
        return rendered
    return _encode(str(value))


__all__ = [
    "format_complex",
    "format_float",
    "int_to_bytes",
    "to_bytes",
    "to_string",
    "uint_to_bytes",
]

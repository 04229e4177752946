"""
Best-effort conversion of dynamic values to primitive types.

Every ``to_*`` function returns the zero value of its target when the input
has no sensible reading (``""``, ``0``, ``False``, ``ZERO_TIME``,
``ZERO_DURATION``, ``[]``, ``{}``) and never raises. :func:`convert` is the
one entry point that reports unsupported conversions, by raising
:class:`UnsupportedConversion`.
"""

from .boolean import parse_bool, to_bool
from .dispatch import convert, convert_or_default
from .durations import ZERO_DURATION, to_duration
from .errors import ConversionError, UnsupportedConversion
from .kinds import Kind, kind_of
from .numeric import (
    to_float32,
    to_float64,
    to_int,
    to_int8,
    to_int16,
    to_int32,
    to_int64,
    to_uint,
    to_uint8,
    to_uint16,
    to_uint32,
    to_uint64,
)
from .structures import to_list, to_map
from .text import to_bytes, to_string
from .time_helpers.durations import parse_duration
from .time_helpers.layouts import TIME_LAYOUTS
from .timestamps import ZERO_TIME, to_time

__all__ = [
    "ConversionError",
    "Kind",
    "TIME_LAYOUTS",
    "UnsupportedConversion",
    "ZERO_DURATION",
    "ZERO_TIME",
    "convert",
    "convert_or_default",
    "kind_of",
    "parse_bool",
    "parse_duration",
    "to_bool",
    "to_bytes",
    "to_duration",
    "to_float32",
    "to_float64",
    "to_int",
    "to_int8",
    "to_int16",
    "to_int32",
    "to_int64",
    "to_list",
    "to_map",
    "to_string",
    "to_time",
    "to_uint",
    "to_uint8",
    "to_uint16",
    "to_uint32",
    "to_uint64",
]

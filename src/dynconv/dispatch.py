"""
Generic conversion dispatcher.

Unlike the type-specific converters, :func:`convert` reports conversions
it cannot perform by raising :class:`~dynconv.errors.UnsupportedConversion`.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, Union

from .boolean import to_bool
from .durations import to_duration
from .errors import UnsupportedConversion
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
from .timestamps import to_time

logger = logging.getLogger(__name__)

Target = Union[Kind, str]

CONVERTERS: Dict[Kind, Callable[[Any], Any]] = {
    Kind.STRING: to_string,
    Kind.BYTES: to_bytes,
    Kind.INT: to_int,
    Kind.INT8: to_int8,
    Kind.INT16: to_int16,
    Kind.INT32: to_int32,
    Kind.INT64: to_int64,
    Kind.UINT: to_uint,
    Kind.UINT8: to_uint8,
    Kind.UINT16: to_uint16,
    Kind.UINT32: to_uint32,
    Kind.UINT64: to_uint64,
    Kind.FLOAT32: to_float32,
    Kind.FLOAT64: to_float64,
    Kind.BOOL: to_bool,
    Kind.TIME: to_time,
    Kind.DURATION: to_duration,
    Kind.SLICE: to_list,
    Kind.MAP: to_map,
}

# Targets a slice may be converted into besides the passthrough.
SLICE_TARGETS = frozenset({Kind.STRING, Kind.BYTES, Kind.SLICE})


def resolve_target(target: Target) -> Optional[Kind]:
    """Return the Kind named by target, or None when it names no kind."""
    if isinstance(target, Kind):
        return target
    if isinstance(target, str):
        try:
            return Kind(target.strip().lower())
        except ValueError:  # Expected data validation or parsing failure  # policy_guard: allow-silent-handler
            return None
    return None


def convert(value: Any, target: Target) -> Any:
    """
    Convert value to the kind named by target.

    Args:
        value: Value to convert
        target: A ``Kind`` or its string value

    Returns:
        The converted value; ``interface`` returns value unchanged

    Raises:
        UnsupportedConversion: If value is a slice and target is not a
            string, bytes or slice target, or if target names no supported
            conversion
    """
    source = kind_of(value)
    kind = resolve_target(target)

    if kind is Kind.INTERFACE:
        return value
    if source is Kind.SLICE and kind not in SLICE_TARGETS:
        raise UnsupportedConversion.for_kinds(source, kind if kind is not None else target)

    converter = CONVERTERS.get(kind) if kind is not None else None
    if converter is None:
        raise UnsupportedConversion.for_kinds(source, target)
    return converter(value)


def convert_or_default(value: Any, target: Target, default: Any = None) -> Any:
    """Convert value like :func:`convert`, returning default when the conversion is unsupported."""
    try:
        return convert(value, target)
    except UnsupportedConversion as exc:  # Expected exception in operation  # policy_guard: allow-silent-handler
        logger.debug("Conversion unsupported, using default: %s", exc)
        return default


__all__ = [
    "CONVERTERS",
    "SLICE_TARGETS",
    "Target",
    "convert",
    "convert_or_default",
    "resolve_target",
]

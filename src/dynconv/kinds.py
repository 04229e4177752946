"""Runtime kind tagging for dynamic values.

``Kind`` doubles as the source tag computed by :func:`kind_of` and as the
target tag accepted by :func:`dynconv.dispatch.convert`.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import date, timedelta
from enum import Enum
from typing import Any

import numpy as np


class Kind(str, Enum):
    INVALID = "invalid"
    BOOL = "bool"
    INT = "int"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT = "uint"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    COMPLEX64 = "complex64"
    COMPLEX128 = "complex128"
    STRING = "string"
    BYTES = "bytes"
    SLICE = "slice"
    MAP = "map"
    TIME = "time"
    DURATION = "duration"
    INTERFACE = "interface"
    OTHER = "other"

    def __str__(self) -> str:
        return self.value


SIGNED_KINDS = frozenset({Kind.INT, Kind.INT8, Kind.INT16, Kind.INT32, Kind.INT64})
UNSIGNED_KINDS = frozenset({Kind.UINT, Kind.UINT8, Kind.UINT16, Kind.UINT32, Kind.UINT64})
INTEGER_KINDS = SIGNED_KINDS | UNSIGNED_KINDS
FLOAT_KINDS = frozenset({Kind.FLOAT32, Kind.FLOAT64})
COMPLEX_KINDS = frozenset({Kind.COMPLEX64, Kind.COMPLEX128})

_SIGNED_BY_SIZE = {1: Kind.INT8, 2: Kind.INT16, 4: Kind.INT32, 8: Kind.INT64}
_UNSIGNED_BY_SIZE = {1: Kind.UINT8, 2: Kind.UINT16, 4: Kind.UINT32, 8: Kind.UINT64}

BYTE_SEQUENCE_TYPES = (bytes, bytearray, memoryview)


def _numpy_scalar_kind(value: np.generic) -> Kind:
    dtype = value.dtype
    if dtype.kind == "i":
        return _SIGNED_BY_SIZE.get(dtype.itemsize, Kind.INT64)
    if dtype.kind == "u":
        return _UNSIGNED_BY_SIZE.get(dtype.itemsize, Kind.UINT64)
    if dtype.kind == "f":
        return Kind.FLOAT32 if dtype.itemsize <= 4 else Kind.FLOAT64
    if dtype.kind == "c":
        return Kind.COMPLEX64 if dtype.itemsize <= 8 else Kind.COMPLEX128
    if dtype.kind == "m":
        return Kind.DURATION
    return Kind.OTHER


def kind_of(value: Any) -> Kind:
    """Return the runtime kind of *value*."""
    if value is None:
        return Kind.INVALID
    if isinstance(value, (bool, np.bool_)):
        return Kind.BOOL
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, BYTE_SEQUENCE_TYPES):
        return Kind.SLICE
    if isinstance(value, np.generic):
        return _numpy_scalar_kind(value)
    if isinstance(value, int):
        return Kind.INT
    if isinstance(value, float):
        return Kind.FLOAT64
    if isinstance(value, complex):
        return Kind.COMPLEX128
    if isinstance(value, np.ndarray):
        return Kind.SLICE if value.ndim == 1 else Kind.OTHER
    if isinstance(value, Mapping):
        return Kind.MAP
    if isinstance(value, Sequence):
        return Kind.SLICE
    if isinstance(value, date):
        return Kind.TIME
    if isinstance(value, timedelta):
        return Kind.DURATION
    return Kind.OTHER


def is_byte_sequence(value: Any) -> bool:
    """True for bytes-like values and one-dimensional ``uint8`` arrays."""
    if isinstance(value, BYTE_SEQUENCE_TYPES):
        return True
    return isinstance(value, np.ndarray) and value.ndim == 1 and value.dtype == np.uint8


def is_slice(value: Any) -> bool:
    return kind_of(value) is Kind.SLICE


def is_mapping(value: Any) -> bool:
    return kind_of(value) is Kind.MAP


__all__ = [
    "BYTE_SEQUENCE_TYPES",
    "COMPLEX_KINDS",
    "FLOAT_KINDS",
    "INTEGER_KINDS",
    "Kind",
    "SIGNED_KINDS",
    "UNSIGNED_KINDS",
    "is_byte_sequence",
    "is_mapping",
    "is_slice",
    "kind_of",
]

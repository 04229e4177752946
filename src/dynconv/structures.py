"""List and map conversion for sequence-like and mapping-like values."""

from typing import Any, Dict, List

from .kinds import Kind, kind_of
from .text import to_string


def to_list(value: Any) -> List[Any]:
    """
    Copy the elements of a slice-like value into a new list, preserving order.

    Lists, tuples, byte sequences (as integer byte values) and
    one-dimensional arrays qualify; anything else, None included, yields an
    empty list.
    """
    if kind_of(value) is not Kind.SLICE:
        return []
    return list(value)


def to_map(value: Any) -> Dict[str, Any]:
    """
    Copy a mapping into a new dict keyed by the text rendering of each key.

    Keys that render to the same text collide; the one iterated last wins.
    Non-mappings, None included, yield an empty dict.
    """
    if kind_of(value) is not Kind.MAP:
        return {}
    return {to_string(key): item for key, item in value.items()}


__all__ = ["to_list", "to_map"]

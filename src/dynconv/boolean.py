"""Boolean normalization through the textual rendering of a value."""

import logging
from typing import Any

from .text import to_string

logger = logging.getLogger(__name__)

_TRUE_LITERALS = frozenset({"1", "t", "true"})
_FALSE_LITERALS = frozenset({"0", "f", "false"})


def parse_bool(text: str) -> bool:
    """
    Parse a boolean literal.

    Accepts ``1``, ``t``, ``true``, ``0``, ``f`` and ``false`` in any letter case.

    Raises:
        ValueError: If text is not a boolean literal
    """
    lowered = text.lower()
    if lowered in _TRUE_LITERALS:
        return True
    if lowered in _FALSE_LITERALS:
        return False
    raise ValueError(f"Cannot parse bool from string: {text!r}")


def to_bool(value: Any) -> bool:
    """Render value to text and parse it as a boolean literal, falling back to False."""
    text = to_string(value)
    try:
        return parse_bool(text)
    except ValueError:  # Expected data validation or parsing failure  # policy_guard: allow-silent-handler
        logger.debug("Could not parse %r as bool; using False", text)
        return False


__all__ = ["parse_bool", "to_bool"]

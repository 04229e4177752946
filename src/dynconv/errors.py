"""Exception classes raised by the converter.

Only the generic dispatcher raises; the type-specific converters return
zero values instead.

Exception classes support two patterns:
1. No-argument raise: raise ConversionError()
2. Contextual attributes: err = ConversionError(value=123); raise err
"""

from __future__ import annotations

from typing import Any


class ConversionError(Exception):
    """Base exception for all conversion errors.

    Supports keyword arguments that are stored as attributes for debugging.
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "Conversion error occurred"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class UnsupportedConversion(ConversionError, TypeError):
    """The requested source/target combination cannot be converted."""

    source_kind: str
    target_kind: str

    def __init__(self, message: str = "", *, source_kind: str = "", target_kind: str = "", **kwargs: Any) -> None:
        if not message:
            message = f"Could not convert {source_kind or 'value'} into {target_kind or 'target'}."
        super().__init__(message, source_kind=source_kind, target_kind=target_kind, **kwargs)

    @classmethod
    def for_kinds(cls, source_kind: object, target_kind: object) -> "UnsupportedConversion":
        """Create error naming the attempted source and target kinds."""
        source = _kind_name(source_kind)
        target = _kind_name(target_kind)
        return cls(source_kind=source, target_kind=target)


def _kind_name(kind: object) -> str:
    value = getattr(kind, "value", kind)
    return str(value)


__all__ = ["ConversionError", "UnsupportedConversion"]

"""Process-wide conversion settings read from the environment.

Settings are loaded once and cached; conversions only ever read them.
"""

from __future__ import annotations

import codecs
import logging
import threading
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError
from .runtime import env_str

TEXT_ENCODING_ENV = "DYNCONV_TEXT_ENCODING"
DECODE_ERRORS_ENV = "DYNCONV_DECODE_ERRORS"
LOG_LEVEL_ENV = "DYNCONV_LOG_LEVEL"

DEFAULT_TEXT_ENCODING = "utf-8"
DEFAULT_DECODE_ERRORS = "surrogateescape"
DEFAULT_LOG_LEVEL = "WARNING"

_settings_lock = threading.Lock()
_SETTINGS: Optional["ConversionSettings"] = None


@dataclass(frozen=True)
class ConversionSettings:
    """Codec used between byte sequences and text, plus the logging level."""

    text_encoding: str = DEFAULT_TEXT_ENCODING
    decode_errors: str = DEFAULT_DECODE_ERRORS
    log_level: str = DEFAULT_LOG_LEVEL

    def decode(self, data: bytes | bytearray | memoryview) -> str:
        return bytes(data).decode(self.text_encoding, self.decode_errors)

    def encode(self, text: str) -> bytes:
        return text.encode(self.text_encoding, self.decode_errors)


def _validate_encoding(encoding: str) -> str:
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise ConfigurationError.invalid_value(TEXT_ENCODING_ENV, encoding, "Unknown codec") from exc
    return encoding


def _validate_decode_errors(handler: str) -> str:
    try:
        codecs.lookup_error(handler)
    except LookupError as exc:
        raise ConfigurationError.invalid_value(DECODE_ERRORS_ENV, handler, "Unknown codec error handler") from exc
    return handler


def _validate_log_level(level: str) -> str:
    normalized = level.upper()
    if not isinstance(logging.getLevelName(normalized), int):
        raise ConfigurationError.invalid_value(LOG_LEVEL_ENV, level, "Unknown logging level")
    return normalized


def _read_settings() -> ConversionSettings:
    encoding = env_str(TEXT_ENCODING_ENV, DEFAULT_TEXT_ENCODING) or DEFAULT_TEXT_ENCODING
    errors = env_str(DECODE_ERRORS_ENV, DEFAULT_DECODE_ERRORS) or DEFAULT_DECODE_ERRORS
    level = env_str(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL) or DEFAULT_LOG_LEVEL
    return ConversionSettings(
        text_encoding=_validate_encoding(encoding),
        decode_errors=_validate_decode_errors(errors),
        log_level=_validate_log_level(level),
    )


def load_settings() -> ConversionSettings:
    """Return the cached settings, reading the environment on first use."""
    global _SETTINGS
    settings = _SETTINGS
    if settings is not None:
        return settings
    with _settings_lock:
        if _SETTINGS is None:
            _SETTINGS = _read_settings()
        return _SETTINGS


def reset_settings() -> None:
    """Drop the cached settings so the next load re-reads the environment."""
    global _SETTINGS
    with _settings_lock:
        _SETTINGS = None


__all__ = [
    "ConversionSettings",
    "DECODE_ERRORS_ENV",
    "LOG_LEVEL_ENV",
    "TEXT_ENCODING_ENV",
    "load_settings",
    "reset_settings",
]

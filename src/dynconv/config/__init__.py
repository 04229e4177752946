"""Shared configuration helpers and dataclasses."""

from .errors import ConfigurationError
from .runtime import env_str
from .settings import ConversionSettings, load_settings, reset_settings

__all__ = [
    "ConfigurationError",
    "ConversionSettings",
    "env_str",
    "load_settings",
    "reset_settings",
]

from __future__ import annotations

"""Runtime helpers for working with environment-backed configuration."""


import os

from .errors import ConfigurationError


def env_str(name: str, or_value: str | None = None) -> str | None:
    """Fetch an environment variable as a stripped string; unset or blank values give ``or_value``."""

    value = os.getenv(name)
    if value is None or value.strip() == "":
        return or_value
    return value.strip()


__all__ = ["ConfigurationError", "env_str"]

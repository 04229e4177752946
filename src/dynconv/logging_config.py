"""
Opt-in logging configuration for the dynconv package.

The library never installs handlers on import. Applications that want to
see the DEBUG records emitted when a best-effort conversion falls back to
a zero value call :func:`setup_logging`.
"""

import logging
import sys
import threading
from typing import Optional

from .config import load_settings

PACKAGE_LOGGER_NAME = "dynconv"

# Thread-safe lock for logging configuration
_config_lock = threading.Lock()
_HANDLER_NAME = "dynconv-console"


def _build_console_handler() -> logging.Handler:
    formatter = logging.Formatter(
        "%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - %(message)s",
        "%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.set_name(_HANDLER_NAME)
    console_handler.setFormatter(formatter)
    return console_handler


def _find_console_handler(logger: logging.Logger) -> Optional[logging.Handler]:
    for handler in logger.handlers:
        if handler.get_name() == _HANDLER_NAME:
            return handler
    return None


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a console handler to the package logger.

    Args:
        level: Logging level name; defaults to ``DYNCONV_LOG_LEVEL``

    Returns:
        The configured package logger
    """
    resolved_level = (level or load_settings().log_level).upper()

    with _config_lock:
        package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
        handler = _find_console_handler(package_logger)
        if handler is None:
            handler = _build_console_handler()
            package_logger.addHandler(handler)

        package_logger.setLevel(resolved_level)
        handler.setLevel(resolved_level)
        return package_logger


__all__ = ["PACKAGE_LOGGER_NAME", "setup_logging"]

"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import logging

import pytest

from dynconv.config.settings import DECODE_ERRORS_ENV, LOG_LEVEL_ENV, TEXT_ENCODING_ENV, reset_settings
from dynconv.logging_config import PACKAGE_LOGGER_NAME


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Run every test against default settings read from a clean environment."""
    for name in (TEXT_ENCODING_ENV, DECODE_ERRORS_ENV, LOG_LEVEL_ENV):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def package_logger():
    """Package logger restored to its pristine state after the test."""
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    yield logger
    for handler in list(logger.handlers):
        if handler not in saved_handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(saved_level)

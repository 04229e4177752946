"""Tests for the opt-in package logging setup."""

import logging

from dynconv.config.settings import LOG_LEVEL_ENV
from dynconv.logging_config import PACKAGE_LOGGER_NAME, setup_logging


def _console_handlers(logger):
    return [handler for handler in logger.handlers if handler.get_name() == "dynconv-console"]


def test_setup_logging_attaches_console_handler(package_logger):
    logger = setup_logging("debug")

    assert logger is package_logger
    assert logger.name == PACKAGE_LOGGER_NAME
    assert logger.level == logging.DEBUG
    handlers = _console_handlers(logger)
    assert len(handlers) == 1
    assert handlers[0].level == logging.DEBUG


def test_setup_logging_is_idempotent(package_logger):
    setup_logging("INFO")
    setup_logging("ERROR")

    handlers = _console_handlers(package_logger)
    assert len(handlers) == 1
    assert package_logger.level == logging.ERROR
    assert handlers[0].level == logging.ERROR


def test_level_defaults_to_environment(package_logger, monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "info")

    setup_logging()

    assert package_logger.level == logging.INFO


def test_default_level_is_warning(package_logger):
    setup_logging()

    assert package_logger.level == logging.WARNING


def test_fallback_records_reach_the_package_logger(package_logger, caplog):
    from dynconv import to_int64

    setup_logging("DEBUG")
    with caplog.at_level(logging.DEBUG, logger=PACKAGE_LOGGER_NAME):
        to_int64("not a number")

    assert any(record.name == "dynconv.numeric" for record in caplog.records)

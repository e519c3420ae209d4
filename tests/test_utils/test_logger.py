"""Tests for logger setup."""

import logging

from spring_exporter.utils.logger import setup_logger


def test_setup_logger_level():
    logger = setup_logger("test_level", "debug")

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_setup_logger_unknown_level_falls_back_to_info():
    logger = setup_logger("test_unknown_level", "foo")

    assert logger.level == logging.INFO


def test_setup_logger_replaces_handlers():
    setup_logger("test_handlers")
    logger = setup_logger("test_handlers")

    assert len(logger.handlers) == 1

"""Structured JSON logging configuration."""

import logging
import sys
from pythonjsonlogger import jsonlogger


def setup_logger(name: str = "spring_exporter", level: str = "INFO") -> logging.Logger:
    """
    Configure a JSON logger writing to stdout.

    An unknown level name falls back to INFO so that a bad LOG_LEVEL can
    still be reported through the logger itself.

    Args:
        name: Logger name; collectors and fetchers log through its children
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        logging.Logger: Configured logger instance
    """
    resolved = getattr(logging, str(level).upper(), None)
    if not isinstance(resolved, int):
        resolved = logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(resolved)
    logger.handlers = []

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(jsonlogger.JsonFormatter(
        '%(asctime)s %(name)s %(levelname)s %(message)s',
        timestamp=True
    ))
    logger.addHandler(handler)
    logger.propagate = False

    return logger

"""Logging for intercepted calls.

Loggers do not propagate, so a test suite's own logging setup never sees fake
transport chatter unless it asks for it.

Usage example:
    from fake_http_transport.observability.logging import get_logger

    logger = get_logger("fake_http_transport.infrastructure.requests_adapter")
    logger.debug("Intercepted %s %s", method, url)
"""

from __future__ import annotations

import logging
import time

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def _build_handler() -> logging.Handler:
    handler = logging.StreamHandler()
    formatter = logging.Formatter(fmt=_LOG_FORMAT, datefmt=_LOG_DATE_FORMAT)
    formatter.converter = time.gmtime
    handler.setFormatter(formatter)
    return handler


def get_logger(name: str, *, level: int | None = None) -> logging.Logger:
    """Return a stderr logger with UTC timestamps.

    Args:
        name: Logger name (use a stable module-qualified name).
        level: Level to set. The first call defaults to INFO; later calls keep the
            current level unless one is given.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.addHandler(_build_handler())
        logger.setLevel(logging.INFO)
        logger.propagate = False
    if level is not None:
        logger.setLevel(level)
    return logger

"""Logging configuration utilities for whirlpool.

By default whirlpool is silent (uses NullHandler). The process entry point
enables console logging explicitly. Log output always goes to stderr:
stdout carries the wire protocol and must only ever contain replies.

Example usage:
    import whirlpool

    whirlpool.log.enable_console_logging(level="DEBUG")
"""

from __future__ import annotations

import logging
import sys
from typing import Literal

__all__ = [
    "disable_logging",
    "enable_console_logging",
    "set_level",
]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOGGER_NAME = "whirlpool"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _get_level(level: str | int) -> int:
    """Convert a level string or int to a logging level constant."""
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.WARNING)


def _get_logger() -> logging.Logger:
    """Get the whirlpool root logger."""
    return logging.getLogger(LOGGER_NAME)


def _clear_handlers() -> None:
    """Remove and close all handlers from the whirlpool logger except NullHandler."""
    logger = _get_logger()
    for handler in logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()


def enable_console_logging(
    level: LogLevel | int = "WARNING",
    format: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> logging.StreamHandler:
    """Enable stderr logging for whirlpool.

    Any handler installed by a previous call is replaced, so calling this
    more than once never duplicates output.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL) or int.
        format: Log message format string.
        date_format: Date format string for %(asctime)s.

    Returns:
        The created StreamHandler.
    """
    _clear_handlers()

    logger = _get_logger()
    logger.setLevel(_get_level(level))

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_get_level(level))
    handler.setFormatter(logging.Formatter(format, date_format))

    logger.addHandler(handler)
    return handler


def set_level(level: LogLevel | int) -> None:
    """Change the threshold of the whirlpool logger and its handlers."""
    logger = _get_logger()
    logger.setLevel(_get_level(level))
    for handler in logger.handlers:
        handler.setLevel(_get_level(level))


def disable_logging() -> None:
    """Remove all whirlpool handlers, returning to the silent default."""
    _clear_handlers()
    _get_logger().setLevel(logging.NOTSET)

"""
Centralized logging for fuzzy_suggest.

The package logs through the standard ``logging`` module under the
``fuzzy_suggest`` logger.  As a library it stays silent by default (a
``NullHandler`` is attached); the command-line front end calls
:func:`configure_logging` to send records to stderr.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)-7s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LOG_LEVEL = "WARNING"
VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_ROOT_LOGGER_NAME = "fuzzy_suggest"

_root = logging.getLogger(_ROOT_LOGGER_NAME)
_root.addHandler(logging.NullHandler())

_stream_handler: logging.Handler | None = None


def _resolve_level(level: str | None) -> int:
    """Convert a level name to a ``logging`` constant, defaulting to WARNING."""
    name = (level or DEFAULT_LOG_LEVEL).upper().strip()
    if name not in VALID_LEVELS:
        return logging.WARNING
    return getattr(logging, name)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a child logger of the package root logger.

    Typical usage at the top of each module::

        from fuzzy_suggest.logger import get_logger
        logger = get_logger(__name__)
    """
    if name and name.startswith(_ROOT_LOGGER_NAME):
        return logging.getLogger(name)
    if name:
        return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")
    return _root


def configure_logging(level: str | None = DEFAULT_LOG_LEVEL, stream=None) -> logging.Logger:
    """Attach a single stderr handler to the package logger (idempotent)."""
    global _stream_handler

    if _stream_handler is None:
        _stream_handler = logging.StreamHandler(stream or sys.stderr)
        _stream_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        _root.addHandler(_stream_handler)
    set_log_level(level)
    return _root


def set_log_level(level: str | None) -> None:
    """Change the effective log level for the whole package at runtime."""
    _root.setLevel(_resolve_level(level))
    _root.debug("Log level set to %s", logging.getLevelName(_root.level))

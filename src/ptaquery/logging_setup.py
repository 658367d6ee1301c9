"""Logging configuration for the ``ptaquery`` package.

Library modules only call ``get_logger(__name__)``. The CLI calls
``configure_logging`` once per invocation to route package records to stderr.
"""

from __future__ import annotations

import logging
import os
from typing import IO

_PKG_LOGGER_NAME = "ptaquery"
_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

LOG_LEVEL_ENVVAR = "PTAQUERY_LOG_LEVEL"


def _parse_level(level: int | str | None) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        level = level.strip().upper()
        if level.isdigit():
            return int(level)
        numeric = getattr(logging, level, None)
        if isinstance(numeric, int):
            return numeric
        raise ValueError(f"Unknown log level '{level}'")
    env_val = os.getenv(LOG_LEVEL_ENVVAR)
    if env_val:
        return _parse_level(env_val)
    return logging.WARNING


def configure_logging(level: int | str | None = None, stream: IO[str] | None = None) -> None:
    """Route package log records at ``level`` and above to ``stream``.

    Each call replaces the handler installed by the previous one, so the
    level and stream always follow the latest call. ``level`` defaults to
    ``PTAQUERY_LOG_LEVEL`` when set, otherwise WARNING; ``stream`` defaults to
    the current ``sys.stderr``.
    """
    numeric_level = _parse_level(level)
    logger = logging.getLogger(_PKG_LOGGER_NAME)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(numeric_level)
    # Avoid double emission via the root logger.
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger by name, silent until the application configures logging."""
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)

"""Component loggers for the course platform.

Log records go to stderr; stdout carries rendered lessons and CLI tables.
The level is read once per component from ``COURSE_LOG_LEVEL`` and
defaults to WARNING, so lessons render without chatter.
"""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "COURSE_LOG_LEVEL"
DEFAULT_LEVEL = logging.WARNING

# component name -> logger, filled on first request
_loggers: dict[str, logging.Logger] = {}


def _level_from_env() -> int:
    name = os.environ.get(LOG_LEVEL_ENV, "").upper()
    level = logging.getLevelName(name) if name else DEFAULT_LEVEL
    return level if isinstance(level, int) else DEFAULT_LEVEL


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a platform component such as ``catalog`` or ``progress``.

    The logger is named ``courseplatform.<name>`` and prints
    ``[course:<name>] LEVEL: message`` lines to stderr.
    """
    cached = _loggers.get(name)
    if cached is not None:
        return cached

    logger = logging.getLogger(f"courseplatform.{name}")
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(f"[course:{name}] %(levelname)s: %(message)s"))
        logger.addHandler(handler)
        logger.setLevel(_level_from_env())

    _loggers[name] = logger
    return logger

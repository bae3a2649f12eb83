"""Logging setup for kinexplorer."""

from __future__ import annotations

import logging
import os

LOGGER_NAME = "kinexplorer"
LOG_FORMAT = "[%(asctime)s][%(levelname)s][%(name)s] %(message)s"


def env_level() -> int:
    """Level named by ``KINEXPLORER_LOG_LEVEL`` (default WARNING)."""
    level_name = os.getenv("KINEXPLORER_LOG_LEVEL", "WARNING").upper()
    return getattr(logging, level_name, logging.WARNING)


def get_logger(level: int | None = None) -> logging.Logger:
    """Return the package logger, attaching a stream handler on first use.

    An explicit ``level`` is always applied. Without one, the environment
    level is applied only when the logger is first configured, so an
    earlier caller's choice is kept.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        if level is None:
            level = env_level()
    if level is not None:
        logger.setLevel(level)
    return logger

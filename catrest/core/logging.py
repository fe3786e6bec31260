"""Logging setup for the catrest package."""
from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
ROOT_LOGGER = "catrest"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Configure the root logger once and set the package logger's level.

    The package logger has no handler of its own and propagates to the root,
    so a host that already configured logging (uvicorn, pytest) keeps its
    handlers and every line is emitted once.
    """
    resolved = logging.getLevelName((level or "INFO").upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(resolved)
    return logger

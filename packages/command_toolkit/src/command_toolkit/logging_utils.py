"""Logging helpers for the command loader."""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "command_toolkit"


class CommandLogHandler(logging.StreamHandler):
    """Stream handler installed on the package logger."""


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Install a stream handler on the package logger and set its level.

    Args:
        level: Level name or number. Repeated calls only update the level.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    if not any(isinstance(handler, CommandLogHandler) for handler in logger.handlers):
        handler = CommandLogHandler()
        handler.setFormatter(logging.Formatter("%(name)s - %(levelname)s - %(message)s"))
        logger.addHandler(handler)
    return logger

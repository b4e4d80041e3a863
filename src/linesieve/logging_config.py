"""Logging setup for linesieve."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "linesieve"


def configure_logging(level: str | int = logging.WARNING, console: Console | None = None) -> logging.Logger:
    """Route linesieve log records to stderr through rich.

    Calling it again replaces the previous handler.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    logger.handlers.clear()
    handler = RichHandler(console=console or Console(stderr=True), show_path=False, show_time=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger

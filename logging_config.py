"""Logging setup shared by the command-line entry points."""

from __future__ import annotations

import logging
import os
import sys


BASE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "WARNING") -> None:
    """Configure the root logger with a single stderr handler.

    The ``LOG_LEVEL`` environment variable overrides ``level``.
    """
    level = os.getenv("LOG_LEVEL", level)
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(numeric_level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(BASE_FORMAT, DATE_FORMAT))
    root_logger.addHandler(handler)

    # matplotlib is chatty at DEBUG about font discovery.
    logging.getLogger("matplotlib").setLevel(logging.WARNING)

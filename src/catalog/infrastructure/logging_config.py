"""Logging setup for the catalog command line."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Send ``catalog.*`` records to stderr at the given level.

    Safe to call more than once: the previous handler is replaced.
    """
    if level.upper() not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {level!r}")

    logger = logging.getLogger("catalog")
    logger.setLevel(level.upper())
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    return logger

"""Logging configuration for the jonesy package."""

from __future__ import annotations

import logging
import os
import sys

__all__ = ["setup_logger"]

logging.getLogger("jonesy").addHandler(logging.NullHandler())


def setup_logger(
    name: str = "jonesy",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger that writes to stdout.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL); defaults to
            ``JONESY_LOG_LEVEL`` or INFO
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or os.getenv("JONESY_LOG_LEVEL", "INFO")
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # the NullHandler installed at import does not count as configured
    if not any(not isinstance(h, logging.NullHandler) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper()))
        logger.propagate = False

    return logger

"""Console logging configuration for the ``mediatree`` logger hierarchy."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.WARNING, stream=None) -> logging.Logger:
    """Attach one stream handler to the package logger and return it.

    Existing handlers are removed first so repeated calls do not duplicate
    output.
    """
    logger = logging.getLogger("mediatree")
    logger.setLevel(level)
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


__all__ = [
    "LOG_FORMAT",
    "setup_logging",
]

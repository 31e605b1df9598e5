"""Logging configuration for tiny-qc command-line use."""

import logging
from typing import Optional

from tiny_qc.config import LOG_FORMAT, LOG_LEVEL


def setup_logging(name: str = "tiny_qc", level: Optional[str] = None) -> logging.Logger:
    """
    Attach a console handler to the ``name`` logger.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL);
            defaults to ``config.LOG_LEVEL``

    Returns:
        Configured logger instance
    """
    if level is None:
        level = LOG_LEVEL
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    # Calling twice must not duplicate output.
    for handler in logger.handlers:
        if getattr(handler, "_tiny_qc", False):
            handler.setLevel(numeric_level)
            return logger

    console_handler = logging.StreamHandler()
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    console_handler._tiny_qc = True
    logger.addHandler(console_handler)

    return logger

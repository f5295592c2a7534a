"""Minimal logging utilities for stringscanner.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from stringscanner.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rewinding source")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "stringscanner." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'stringscanner.mymodule'
    """
    if not (name == "stringscanner" or name.startswith("stringscanner.")):
        name = f"stringscanner.{name}"
    return logging.getLogger(name)

"""Minimal logging utilities for lexlua.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from lexlua.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("chunk ended inside long comment")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "lexlua." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'lexlua.mymodule'
    """
    if not (name == "lexlua" or name.startswith("lexlua.")):
        name = f"lexlua.{name}"
    return logging.getLogger(name)

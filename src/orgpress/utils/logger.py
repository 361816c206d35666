"""Minimal logging utilities for orgpress.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from orgpress.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Rendering document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "orgpress." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'orgpress.mymodule'
    """
    # Ensure orgpress prefix for consistent namespacing
    if not (name == "orgpress" or name.startswith("orgpress.")):
        name = f"orgpress.{name}"
    return logging.getLogger(name)

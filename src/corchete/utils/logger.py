"""Minimal logging utilities for Corchete.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from corchete.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Registered shortcode")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "corchete." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'corchete.mymodule'
    """
    if not (name == "corchete" or name.startswith("corchete.")):
        name = f"corchete.{name}"
    return logging.getLogger(name)

"""Minimal logging utilities for minilex.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from minilex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning input")
"""

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "minilex." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("scanner")
        >>> logger.name
        'minilex.scanner'
    """
    if not (name == "minilex" or name.startswith("minilex.")):
        name = f"minilex.{name}"
    return logging.getLogger(name)

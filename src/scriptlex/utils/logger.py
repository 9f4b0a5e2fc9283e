"""Minimal logging utilities for scriptlex.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; applications configure logging.

Example:
    >>> from scriptlex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Decoding script")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "scriptlex." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'scriptlex.mymodule'
    """
    if not (name == "scriptlex" or name.startswith("scriptlex.")):
        name = f"scriptlex.{name}"
    return logging.getLogger(name)

"""Minimal logging utilities for markityper.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from markityper.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "markityper." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'markityper.mymodule'
    """
    if not (name == "markityper" or name.startswith("markityper.")):
        name = f"markityper.{name}"
    return logging.getLogger(name)

"""Minimal logging utilities for colonmark.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from colonmark.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Checking directives")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "colonmark." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("diagnostics")
        >>> logger.name
        'colonmark.diagnostics'
    """
    if not (name == "colonmark" or name.startswith("colonmark.")):
        name = f"colonmark.{name}"
    return logging.getLogger(name)

"""Minimal logging utilities for codewalk.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from codewalk.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Resolving document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "codewalk." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'codewalk.mymodule'
    """
    if not (name == "codewalk" or name.startswith("codewalk.")):
        name = f"codewalk.{name}"
    return logging.getLogger(name)


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging for command-line runs.

    Args:
        verbose: Emit debug records instead of warnings only
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

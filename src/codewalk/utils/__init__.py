"""Utility modules for codewalk.

Provides:
- logger: get_logger, configure_logging
"""

from codewalk.utils.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]

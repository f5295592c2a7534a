"""Utility modules for stringscanner.

Provides:
- logger: get_logger for logging
"""

from stringscanner.utils.logger import get_logger

__all__ = [
    "get_logger",
]

"""Utility modules for Corchete.

Provides:
- logger: get_logger for logging
"""

from corchete.utils.logger import get_logger

__all__ = [
    "get_logger",
]

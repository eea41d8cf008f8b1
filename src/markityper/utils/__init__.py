"""Utility modules for markityper.

Provides:
- logger: get_logger for logging
"""

from markityper.utils.logger import get_logger

__all__ = ["get_logger"]

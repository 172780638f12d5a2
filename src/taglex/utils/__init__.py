"""Utility modules for taglex.

Provides:
- logger: get_logger for logging
"""

from taglex.utils.logger import get_logger

__all__ = ["get_logger"]

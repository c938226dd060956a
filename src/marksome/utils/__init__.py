"""Utility modules for Marksome.

Provides:
- logger: get_logger for logging
- stringbuilder: StringBuilder for O(n) string accumulation
"""

from marksome.utils.logger import get_logger
from marksome.utils.stringbuilder import StringBuilder

__all__ = ["StringBuilder", "get_logger"]

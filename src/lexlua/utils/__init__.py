"""Utility modules for lexlua.

Provides:
- logger: get_logger for logging
- lines: split_lines for physical line splitting
"""

from lexlua.utils.lines import split_lines
from lexlua.utils.logger import get_logger

__all__ = [
    "get_logger",
    "split_lines",
]

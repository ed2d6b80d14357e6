"""Utility modules for Marksmith.

Provides:
- text: escape_html, normalize_newlines, is_blank
- logger: get_logger for logging
"""

from marksmith.utils.logger import get_logger
from marksmith.utils.text import escape_html, is_blank, normalize_newlines

__all__ = [
    "escape_html",
    "get_logger",
    "is_blank",
    "normalize_newlines",
]

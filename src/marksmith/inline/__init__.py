"""Inline span parsing."""

from marksmith.inline.core import parse_inline
from marksmith.inline.escapes import ESCAPE_MAP, UNESCAPE_MAP, apply_escapes, revert_escapes

__all__ = [
    "ESCAPE_MAP",
    "UNESCAPE_MAP",
    "apply_escapes",
    "parse_inline",
    "revert_escapes",
]

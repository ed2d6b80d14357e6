"""Syntax highlighting for code blocks.

Lightweight per-language scanners producing HTML with ``syntax-*`` classes:
JSON, YAML, JavaScript, TypeScript, Bash, CSS and HTML (also used for Vue).
Other languages are escaped as plain text unless a highlighter is registered
for them.
"""

from marksmith.highlighting.hex_colors import decorate_hex_in_html, is_hex_color
from marksmith.highlighting.languages import LANGUAGE_ALIASES, normalize_language
from marksmith.highlighting.nested_json import (
    MAX_PARSE_LENGTH,
    ExpansionPredicate,
    build_nested_json_markup,
    is_nested_json,
    parse_nested_json,
)
from marksmith.highlighting.registry import (
    Highlighter,
    highlight_syntax,
    register_highlighter,
    supports_language,
)
from marksmith.highlighting.spans import HighlightSpan, render_spans

__all__ = [
    "LANGUAGE_ALIASES",
    "MAX_PARSE_LENGTH",
    "ExpansionPredicate",
    "HighlightSpan",
    "Highlighter",
    "build_nested_json_markup",
    "decorate_hex_in_html",
    "highlight_syntax",
    "is_hex_color",
    "is_nested_json",
    "normalize_language",
    "parse_nested_json",
    "register_highlighter",
    "render_spans",
    "supports_language",
]

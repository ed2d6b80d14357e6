"""Highlighter dispatch table.

Maps a canonical language name to a highlighter. Languages without an entry
are escaped as plain text.

Usage:
    from marksmith.highlighting import highlight_syntax, register_highlighter

    highlight_syntax('{"a": 1}', "json")

    def highlight_ini(code: str, nested_json=None) -> str:
        ...

    register_highlighter("ini", highlight_ini)

Thread Safety:
    Built-in highlighters are registered at import time. Register custom ones
    during application startup; lookups never mutate the table.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from marksmith.errors import HighlightError
from marksmith.highlighting.bash_syntax import highlight_bash
from marksmith.highlighting.css_syntax import highlight_css
from marksmith.highlighting.hex_colors import decorate_hex_in_html
from marksmith.highlighting.html_syntax import highlight_html
from marksmith.highlighting.javascript_syntax import highlight_javascript, highlight_typescript
from marksmith.highlighting.json_syntax import highlight_json
from marksmith.highlighting.languages import normalize_language
from marksmith.highlighting.nested_json import ExpansionPredicate
from marksmith.highlighting.yaml_syntax import highlight_yaml
from marksmith.utils.logger import get_logger
from marksmith.utils.text import escape_html

logger = get_logger(__name__)


class Highlighter(Protocol):
    """Callable turning source text into escaped HTML with ``syntax-*`` spans.

    Contract:
        - MUST escape HTML in the code
        - MUST NOT raise for malformed input
        - MAY ignore ``nested_json``
    """

    def __call__(self, code: str, nested_json: ExpansionPredicate | None = None) -> str: ...


def _ignoring_nested(highlight: Callable[[str], str]) -> Highlighter:
    def highlighter(code: str, nested_json: ExpansionPredicate | None = None) -> str:
        return highlight(code)

    return highlighter


_HIGHLIGHTERS: dict[str, Highlighter] = {
    "json": highlight_json,
    "yaml": highlight_yaml,
    "javascript": _ignoring_nested(highlight_javascript),
    "typescript": _ignoring_nested(highlight_typescript),
    "bash": _ignoring_nested(highlight_bash),
    "css": _ignoring_nested(highlight_css),
    "html": _ignoring_nested(highlight_html),
    # Vue single-file components are highlighted as HTML
    "vue": _ignoring_nested(highlight_html),
}


def register_highlighter(language: str, highlighter: Highlighter) -> None:
    """Register or replace the highlighter for a language.

    Args:
        language: Language name or alias
        highlighter: Callable taking ``(code, nested_json=None)``

    Raises:
        HighlightError: If highlighter is not callable
    """
    if not callable(highlighter):
        raise HighlightError(language, "highlighter must be callable")
    _HIGHLIGHTERS[normalize_language(language)] = highlighter


def supports_language(language: str | None) -> bool:
    """True if a highlighter is registered for the language or its alias."""
    return normalize_language(language) in _HIGHLIGHTERS


def highlight_syntax(
    code: str,
    language: str | None = "text",
    *,
    nested_json: ExpansionPredicate | None = None,
    color_swatches: bool = False,
) -> str:
    """Highlight code for display.

    Args:
        code: Source text
        language: Language name or alias; unknown languages are escaped only
        nested_json: Expansion predicate for nested JSON toggles (JSON, YAML)
        color_swatches: Decorate ``#RGB``/``#RRGGBB`` with colour previews

    Returns:
        Escaped HTML, "" for empty code
    """
    if not code:
        return ""

    highlighter = _HIGHLIGHTERS.get(normalize_language(language))
    if highlighter is None:
        logger.debug("No highlighter for %r, escaping as text", language)
        result = escape_html(code)
    else:
        result = highlighter(code, nested_json)

    if color_swatches:
        result = decorate_hex_in_html(result)
    return result

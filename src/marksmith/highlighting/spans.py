"""Highlight span types and HTML assembly.

Every highlighter classifies source text into spans drawn from a fixed class
vocabulary. The ``syntax-*`` class names are consumed by external stylesheets
and must not change.

Thread Safety:
    HighlightSpan is immutable. SpanWriter instances are local to one
    highlight call.
"""

from __future__ import annotations

import html as html_module
import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Literal, TypeAlias

from marksmith.stringbuilder import StringBuilder
from marksmith.utils.text import escape_html

SpanClass: TypeAlias = Literal[
    "keyword",
    "string",
    "number",
    "boolean",
    "null",
    "comment",
    "punctuation",
    "key",
    "template",
    # Auxiliary classes used by the JavaScript and Bash highlighters
    "operator",
    "regex",
    "variable",
    # CSS
    "selector",
    "property",
    "value",
    "at-rule",
    # HTML
    "tag",
    "attribute",
    "doctype",
]

CLASS_PREFIX = "syntax-"

_TAG_RE = re.compile(r"<[^>]*>")


@dataclass(frozen=True, slots=True)
class HighlightSpan:
    """A run of source text and its classification.

    Attributes:
        css_class: Span class without the ``syntax-`` prefix; None for text
            that is emitted unwrapped (identifiers, whitespace)
        text: Raw, unescaped source text
    """

    css_class: SpanClass | None
    text: str

    def to_html(self) -> str:
        if self.css_class is None:
            return escape_html(self.text)
        return wrap(self.css_class, escape_html(self.text))


def wrap(css_class: SpanClass, html: str) -> str:
    """Wrap already-escaped HTML in a ``syntax-*`` span."""
    return f'<span class="{CLASS_PREFIX}{css_class}">{html}</span>'


def render_spans(spans: Iterable[HighlightSpan]) -> str:
    """Escape and join spans into highlighted HTML."""
    sb = StringBuilder()
    for span in spans:
        sb.append(span.to_html())
    return sb.build()


class SpanWriter:
    """Incremental HTML output for highlighters that mix spans with markup.

    The JSON and YAML highlighters interleave ordinary spans with nested-JSON
    toggle markup, so they write HTML directly instead of yielding spans.
    The visible column is updated as each fragment is written.
    """

    __slots__ = ("_sb", "_column")

    def __init__(self) -> None:
        self._sb = StringBuilder()
        self._column = 0

    def _advance(self, visible: str) -> None:
        newline = visible.rfind("\n")
        if newline == -1:
            self._column += len(visible)
        else:
            self._column = len(visible) - newline - 1

    def span(self, css_class: SpanClass, text: str) -> SpanWriter:
        """Escape ``text`` and wrap it in a span."""
        self._sb.append(wrap(css_class, escape_html(text)))
        self._advance(text)
        return self

    def text(self, text: str) -> SpanWriter:
        """Escape ``text`` and emit it unwrapped."""
        self._sb.append(escape_html(text))
        self._advance(text)
        return self

    def markup(self, html: str) -> SpanWriter:
        """Emit HTML that is already escaped."""
        self._sb.append(html)
        self._advance(_visible_text(html))
        return self

    def visible_column(self) -> int:
        """Characters written since the last newline, ignoring tags and entities."""
        return self._column

    def build(self) -> str:
        return self._sb.build()


def _visible_text(html: str) -> str:
    return html_module.unescape(_TAG_RE.sub("", html))

"""CSS highlighter.

A scanner that tracks which part of a rule it is in:

- selector, outside any braces (``a:hover`` keeps its colon)
- property, after ``{`` or ``;`` inside braces
- value, after a property's ``:``

Brace depth is counted, so after the ``}`` of a rule nested in ``@media`` the
scanner returns to property context rather than selector context. At-rules,
comments and strings are recognised in every context.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from enum import Enum, auto

from marksmith.highlighting.spans import HighlightSpan, SpanClass, render_spans


class _Context(Enum):
    SELECTOR = auto()
    PROPERTY = auto()
    VALUE = auto()


_WHITESPACE_RE = re.compile(r"\s+")
_AT_RULE_RE = re.compile(r"@[\w-]+")

# A slash is part of a word unless it opens a comment
_SELECTOR_RE = re.compile(r"(?:[^\s{},;()\"'/]|/(?!\*))+")
_PROPERTY_RE = re.compile(r"(?:[^\s{},;:()\"'/]|/(?!\*))+")
_VALUE_RE = _SELECTOR_RE

_WORDS: dict[_Context, tuple[re.Pattern[str], SpanClass]] = {
    _Context.SELECTOR: (_SELECTOR_RE, "selector"),
    _Context.PROPERTY: (_PROPERTY_RE, "property"),
    _Context.VALUE: (_VALUE_RE, "value"),
}

PUNCTUATION = frozenset("{}:;,()")


def _string_end(code: str, start: int) -> int:
    """Index one past the closing quote, or the end of input."""
    quote = code[start]
    i = start + 1
    while i < len(code):
        if code[i] == "\\" and i + 1 < len(code):
            i += 2
        elif code[i] == quote:
            return i + 1
        else:
            i += 1
    return i


def _comment_end(code: str, start: int) -> int:
    end = code.find("*/", start + 2)
    return len(code) if end < 0 else end + 2


def tokenize_css(code: str) -> Iterator[HighlightSpan]:
    """Classify CSS source into spans.

    Yields:
        HighlightSpan per token; whitespace has no class
    """
    context = _Context.SELECTOR
    depth = 0

    i = 0
    while i < len(code):
        char = code[i]

        whitespace = _WHITESPACE_RE.match(code, i)
        if whitespace:
            yield HighlightSpan(None, whitespace.group(0))
            i = whitespace.end()
            continue

        if code.startswith("/*", i):
            end = _comment_end(code, i)
            yield HighlightSpan("comment", code[i:end])
            i = end
            continue

        if char in "\"'":
            end = _string_end(code, i)
            yield HighlightSpan("string", code[i:end])
            i = end
            continue

        at_rule = _AT_RULE_RE.match(code, i)
        if at_rule:
            yield HighlightSpan("at-rule", at_rule.group(0))
            i = at_rule.end()
            continue

        # Outside property context a colon belongs to the word (a:hover)
        if char in PUNCTUATION and (char != ":" or context is _Context.PROPERTY):
            if char == "{":
                depth += 1
                context = _Context.PROPERTY
            elif char == "}":
                depth = max(depth - 1, 0)
                context = _Context.PROPERTY if depth else _Context.SELECTOR
            elif char == ":":
                context = _Context.VALUE
            elif char == ";":
                context = _Context.PROPERTY if depth else _Context.SELECTOR
            yield HighlightSpan("punctuation", char)
            i += 1
            continue

        pattern, css_class = _WORDS[context]
        word = pattern.match(code, i)
        if word:
            yield HighlightSpan(css_class, word.group(0))
            i = word.end()
        else:
            yield HighlightSpan(None, char)
            i += 1


def highlight_css(code: str) -> str:
    """Highlight CSS source as HTML."""
    if not code:
        return ""
    return render_spans(tokenize_css(code))

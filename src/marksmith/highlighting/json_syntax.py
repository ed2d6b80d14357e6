"""JSON highlighter.

A character scanner rather than a regex pass, so the contents of a string
never get re-matched as numbers or keywords. A string followed by optional
whitespace and a colon is a key; any other string is a value.

With an expansion predicate, string values holding a JSON object or array are
wrapped in nested-json toggle markup. Their id is ``nj-<offset>``, the offset
of the opening quote in the source.
"""

from __future__ import annotations

import json
import re

from marksmith.highlighting.nested_json import (
    ExpansionPredicate,
    build_nested_json_markup,
    format_nested_json,
    parse_nested_json,
)
from marksmith.highlighting.spans import SpanWriter
from marksmith.utils.text import escape_html

_KEY_COLON_RE = re.compile(r"(\s*):")
_NUMBER_RE = re.compile(r"-?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?")

_LITERALS = (("true", "boolean"), ("false", "boolean"), ("null", "null"))
_PUNCTUATION = frozenset("{}[],:")


def _string_end(code: str, start: int) -> int:
    """Index one past the closing quote (or end of input)."""
    i = start + 1
    while i < len(code):
        if code[i] == "\\" and i + 1 < len(code):
            i += 2
        elif code[i] == '"':
            return i + 1
        else:
            i += 1
    return i


def _unquote(token: str) -> str:
    try:
        value = json.loads(token)
    except ValueError:
        return token[1:-1]
    return value if isinstance(value, str) else token[1:-1]


def _nested_value(
    out: SpanWriter, token: str, offset: int, nested_json: ExpansionPredicate
) -> bool:
    parsed = parse_nested_json(_unquote(token))
    if parsed is None:
        return False

    nested_id = f"nj-{offset}"
    expanded = nested_json(nested_id)
    parsed_html = ""
    if expanded:
        parsed_html = highlight_json(format_nested_json(parsed, out.visible_column()))
    out.markup(build_nested_json_markup(nested_id, escape_html(token), expanded, parsed_html))
    return True


def highlight_json(code: str, nested_json: ExpansionPredicate | None = None) -> str:
    """Highlight JSON source.

    Args:
        code: JSON text; need not be valid
        nested_json: Expansion predicate enabling nested JSON toggles

    Returns:
        Escaped HTML with ``syntax-*`` spans
    """
    if not code:
        return ""

    out = SpanWriter()
    i = 0
    while i < len(code):
        char = code[i]

        if char == '"':
            end = _string_end(code, i)
            token = code[i:end]
            key_colon = _KEY_COLON_RE.match(code, end)
            if key_colon:
                out.span("key", token).text(key_colon.group(1)).span("punctuation", ":")
                i = key_colon.end()
                continue
            if nested_json is None or not _nested_value(out, token, i, nested_json):
                out.span("string", token)
            i = end
            continue

        if char == "-" or char.isdigit():
            number = _NUMBER_RE.match(code, i)
            if number:
                out.span("number", number.group(0))
                i = number.end()
                continue

        for literal, css_class in _LITERALS:
            if code.startswith(literal, i):
                out.span(css_class, literal)
                i += len(literal)
                break
        else:
            if char in _PUNCTUATION:
                out.span("punctuation", char)
            else:
                out.text(char)
            i += 1

    return out.build()

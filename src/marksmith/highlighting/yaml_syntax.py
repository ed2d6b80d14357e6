"""YAML highlighter.

Line oriented, with a small state machine for constructs that span lines:

- block scalars (``|``, ``|-``, ``>``, ``>-`` ...): following lines indented
  deeper than the key are string content until the indentation drops back
- quoted strings whose closing quote is on a later line
- unquoted values that continue on more-indented lines without a ``:`` or a
  leading ``-``

Scalar values are classified as number (integer, decimal, signed, exponent),
boolean (``true``/``false``, any case), null (``null``/``~``, any case) or
string. With an expansion predicate, a scalar holding a JSON object or array
(bare or quoted) gets nested-json toggle markup. Comments are wrapped in
``syntax-punctuation`` rather than ``syntax-comment`` so they dim like the
other YAML structure characters.

Thread Safety:
    A _YamlHighlighter is created per call.
"""

from __future__ import annotations

import re
from enum import Enum, auto

from marksmith.highlighting.json_syntax import highlight_json
from marksmith.highlighting.nested_json import (
    ExpansionPredicate,
    build_nested_json_markup,
    format_nested_json,
    parse_nested_json,
)
from marksmith.highlighting.spans import wrap
from marksmith.utils.text import escape_html

# key: value (the colon must be followed by whitespace or end of line)
KEY_VALUE_RE = re.compile(r"^(\s*)([^:]+?)(:)(?:(\s+)(.*))?$")
ARRAY_ITEM_RE = re.compile(r"^(\s*)(-)(\s+|$)(.*)$")
COMMENT_RE = re.compile(r"^(\s*)(#.*)$")
BLOCK_SCALAR_RE = re.compile(r"^[|>][-+]?\d*$")

NUMBER_RE = re.compile(r"^-?\d+(\.\d+)?([eE][+-]?\d+)?$")
BOOLEAN_RE = re.compile(r"^(true|false)$", re.IGNORECASE)
NULL_RE = re.compile(r"^(null|~)$", re.IGNORECASE)


class _Mode(Enum):
    PLAIN = auto()
    BLOCK_SCALAR = auto()
    QUOTED = auto()
    UNQUOTED = auto()


def _indent(line: str) -> int:
    return len(line) - len(line.lstrip())


def _closing_quote(text: str, quote: str) -> int:
    """Index of the first unescaped ``quote`` in ``text``, or -1."""
    i = 0
    while i < len(text):
        if text[i] == "\\":
            i += 2
            continue
        if text[i] == quote:
            return i
        i += 1
    return -1


def _is_quoted(value: str) -> bool:
    return len(value) >= 2 and value[0] in "\"'" and value[-1] == value[0]


def classify_scalar(value: str) -> str:
    """Highlight a complete single-line scalar."""
    escaped = escape_html(value)
    if _is_quoted(value):
        return wrap("string", escaped)
    if NUMBER_RE.match(value):
        return wrap("number", escaped)
    if BOOLEAN_RE.match(value):
        return wrap("boolean", escaped)
    if NULL_RE.match(value):
        return wrap("null", escaped)
    if BLOCK_SCALAR_RE.match(value):
        return wrap("punctuation", escaped)
    return wrap("string", escaped)


class _YamlHighlighter:
    __slots__ = ("_lines", "_nested_json", "_mode", "_mode_indent", "_quote")

    def __init__(self, code: str, nested_json: ExpansionPredicate | None) -> None:
        self._lines = code.split("\n")
        self._nested_json = nested_json
        self._mode = _Mode.PLAIN
        self._mode_indent = 0
        self._quote = '"'

    def run(self) -> str:
        out: list[str] = []
        offset = 0
        for index, line in enumerate(self._lines):
            out.append(self._line(index, line, offset))
            offset += len(line) + 1
        return "\n".join(out)

    def _line(self, index: int, line: str, offset: int) -> str:
        indent = _indent(line)
        stripped = line.strip()

        if self._mode is _Mode.BLOCK_SCALAR:
            if stripped and indent <= self._mode_indent:
                self._mode = _Mode.PLAIN
            else:
                return wrap("string", escape_html(line)) if line else ""

        if self._mode is _Mode.QUOTED:
            return self._quoted_continuation(line)

        if self._mode is _Mode.UNQUOTED:
            if stripped and indent <= self._mode_indent:
                self._mode = _Mode.PLAIN
            elif stripped:
                return wrap("string", escape_html(line))
            else:
                return escape_html(line)

        comment = COMMENT_RE.match(line)
        if comment:
            return escape_html(comment.group(1)) + wrap(
                "punctuation", escape_html(comment.group(2))
            )

        prefix = ""
        rest, rest_offset = line, offset
        item = ARRAY_ITEM_RE.match(line)
        if item:
            prefix = (
                escape_html(item.group(1))
                + wrap("punctuation", "-")
                + escape_html(item.group(3))
            )
            rest, rest_offset = item.group(4), offset + item.start(4)
            if KEY_VALUE_RE.match(rest) is None:
                return prefix + self._value(rest, rest_offset, indent)

        pair = KEY_VALUE_RE.match(rest)
        if pair:
            return prefix + self._key_value(pair, index, rest_offset, indent)

        return escape_html(line)

    def _key_value(self, pair: re.Match[str], index: int, offset: int, indent: int) -> str:
        lead, key, colon = pair.group(1), pair.group(2), pair.group(3)
        space = pair.group(4) or ""
        value = pair.group(5) or ""

        head = (
            escape_html(lead)
            + wrap("key", escape_html(key))
            + wrap("punctuation", colon)
            + escape_html(space)
        )
        if not value:
            return head

        value_offset = offset + pair.start(5)
        if (
            value[0] not in "\"'"
            and BLOCK_SCALAR_RE.match(value.strip()) is None
            and self._starts_unquoted_multiline(index, indent)
        ):
            self._mode = _Mode.UNQUOTED
            self._mode_indent = indent
            return head + wrap("string", escape_html(value))

        return head + self._value(value, value_offset, indent)

    def _value(self, value: str, offset: int, indent: int) -> str:
        if not value:
            return ""

        if BLOCK_SCALAR_RE.match(value.strip()):
            self._mode = _Mode.BLOCK_SCALAR
            self._mode_indent = indent
            return wrap("punctuation", escape_html(value))

        if value[0] in "\"'" and len(value) > 1 and _closing_quote(value[1:], value[0]) < 0:
            self._mode = _Mode.QUOTED
            self._quote = value[0]
            return wrap("string", escape_html(value))

        if self._nested_json is not None:
            nested = self._nested(value, offset)
            if nested:
                return nested

        return classify_scalar(value)

    def _nested(self, value: str, offset: int) -> str | None:
        candidate = value[1:-1] if _is_quoted(value) else value
        parsed = parse_nested_json(candidate)
        if parsed is None or self._nested_json is None:
            return None

        nested_id = f"nj-{offset}"
        expanded = self._nested_json(nested_id)
        parsed_html = highlight_json(format_nested_json(parsed)) if expanded else ""
        return build_nested_json_markup(nested_id, escape_html(value), expanded, parsed_html)

    def _starts_unquoted_multiline(self, index: int, indent: int) -> bool:
        if index + 1 >= len(self._lines):
            return False
        following = self._lines[index + 1]
        stripped = following.strip()
        return (
            bool(stripped)
            and _indent(following) > indent
            and ":" not in stripped
            and not stripped.startswith("-")
        )

    def _quoted_continuation(self, line: str) -> str:
        close = _closing_quote(line, self._quote)
        if close < 0:
            return wrap("string", escape_html(line)) if line else ""
        self._mode = _Mode.PLAIN
        return wrap("string", escape_html(line[: close + 1])) + escape_html(line[close + 1 :])


def highlight_yaml(code: str, nested_json: ExpansionPredicate | None = None) -> str:
    """Highlight YAML source.

    Args:
        code: YAML text; need not be valid
        nested_json: Expansion predicate enabling nested JSON toggles

    Returns:
        Escaped HTML with ``syntax-*`` spans, one output line per input line
    """
    if not code:
        return ""
    return _YamlHighlighter(code, nested_json).run()

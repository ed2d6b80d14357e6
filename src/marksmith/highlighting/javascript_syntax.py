"""JavaScript and TypeScript highlighter.

A single-pass scanner yielding HighlightSpans. TypeScript reuses the scanner
with an extra keyword set instead of a second implementation.

A ``/`` starts a regex literal only where an expression may begin: at the
start of input, after an operator, after opening punctuation, or after a
keyword such as ``return``. Elsewhere it is division.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from marksmith.highlighting.spans import HighlightSpan, SpanClass, render_spans

JS_KEYWORDS = frozenset(
    {
        "async",
        "await",
        "break",
        "case",
        "catch",
        "class",
        "const",
        "continue",
        "debugger",
        "default",
        "delete",
        "do",
        "else",
        "export",
        "extends",
        "finally",
        "for",
        "from",
        "function",
        "if",
        "import",
        "in",
        "instanceof",
        "let",
        "new",
        "of",
        "return",
        "as",
        "static",
        "super",
        "switch",
        "this",
        "throw",
        "try",
        "typeof",
        "var",
        "void",
        "while",
        "with",
        "yield",
    }
)

TS_EXTRA_KEYWORDS = frozenset(
    {
        "type",
        "interface",
        "enum",
        "namespace",
        "declare",
        "abstract",
        "implements",
        "readonly",
        "keyof",
        "infer",
        "is",
        "asserts",
        "override",
        "satisfies",
        "public",
        "private",
        "protected",
        "never",
        "unknown",
        "any",
    }
)

BOOLEANS = frozenset({"true", "false"})
NULLISH = frozenset({"null", "undefined", "NaN", "Infinity"})

# Keywords after which an expression (and so a regex) may start
_REGEX_KEYWORDS = frozenset(
    {
        "return",
        "typeof",
        "instanceof",
        "in",
        "of",
        "new",
        "delete",
        "void",
        "throw",
        "case",
        "do",
        "else",
        "yield",
        "await",
    }
)
_REGEX_PUNCTUATION = frozenset("([{,;")

# Longest first
OPERATORS = (
    ">>>=",
    "===",
    "!==",
    "**=",
    "...",
    "<<=",
    ">>=",
    ">>>",
    "&&=",
    "||=",
    "??=",
    "=>",
    "==",
    "!=",
    "<=",
    ">=",
    "&&",
    "||",
    "??",
    "++",
    "--",
    "+=",
    "-=",
    "*=",
    "/=",
    "%=",
    "&=",
    "|=",
    "^=",
    "**",
    "<<",
    ">>",
    "=",
    "+",
    "-",
    "*",
    "/",
    "%",
    "<",
    ">",
    "!",
    "~",
    "&",
    "|",
    "^",
    "?",
    ":",
)
_OPERATOR_RE = re.compile("|".join(re.escape(op) for op in OPERATORS))

PUNCTUATION = frozenset("{}()[];,.")

_IDENTIFIER_RE = re.compile(r"(?:[^\W\d]|\$)(?:\w|\$)*")
_NUMBER_RE = re.compile(
    r"0[xX][0-9a-fA-F_]+n?"
    r"|0[bB][01_]+n?"
    r"|0[oO][0-7_]+n?"
    r"|(?:\d[\d_]*(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?n?"
)
_WHITESPACE_RE = re.compile(r"\s+")


def _quoted_end(code: str, start: int) -> int:
    """End of a '...' or "..." string; unterminated strings stop at a newline."""
    quote = code[start]
    i = start + 1
    while i < len(code):
        char = code[i]
        if char == "\\" and i + 1 < len(code):
            i += 2
            continue
        if char == "\n":
            return i
        i += 1
        if char == quote:
            return i
    return i


def _template_end(code: str, start: int) -> int:
    """End of a template literal, skipping over ``${...}`` with nested braces."""
    i = start + 1
    depth = 0
    while i < len(code):
        char = code[i]
        if char == "\\" and i + 1 < len(code):
            i += 2
            continue
        if depth == 0 and char == "`":
            return i + 1
        if code.startswith("${", i):
            depth += 1
            i += 2
            continue
        if depth and char == "{":
            depth += 1
        elif depth and char == "}":
            depth -= 1
        i += 1
    return i


def _regex_end(code: str, start: int) -> int:
    """End of a regex literal including flags; stops at a newline if unterminated."""
    i = start + 1
    in_class = False
    while i < len(code):
        char = code[i]
        if char == "\\" and i + 1 < len(code):
            i += 2
            continue
        if char == "\n":
            return i
        if char == "[":
            in_class = True
        elif char == "]":
            in_class = False
        elif char == "/" and not in_class:
            i += 1
            while i < len(code) and (code[i].isalpha()):
                i += 1
            return i
        i += 1
    return i


def _comment_end(code: str, start: int) -> int:
    if code.startswith("//", start):
        end = code.find("\n", start)
        return len(code) if end < 0 else end
    end = code.find("*/", start + 2)
    return len(code) if end < 0 else end + 2


def _word_class(word: str, keywords: frozenset[str]) -> SpanClass | None:
    if word in BOOLEANS:
        return "boolean"
    if word in NULLISH:
        return "null"
    if word in keywords:
        return "keyword"
    return None


def tokenize_javascript(
    code: str, extra_keywords: frozenset[str] = frozenset()
) -> Iterator[HighlightSpan]:
    """Classify JavaScript source into spans.

    Args:
        code: Source text
        extra_keywords: Additional words to class as keywords (TypeScript)

    Yields:
        HighlightSpan per token; whitespace and identifiers have no class
    """
    keywords = JS_KEYWORDS | extra_keywords
    # Last significant token, used to tell a regex from a division
    last: tuple[SpanClass | None, str] | None = None

    def regex_allowed() -> bool:
        if last is None:
            return True
        kind, text = last
        if kind == "operator":
            return True
        if kind == "punctuation":
            return text in _REGEX_PUNCTUATION
        if kind == "keyword":
            return text in _REGEX_KEYWORDS
        return False

    i = 0
    while i < len(code):
        char = code[i]

        whitespace = _WHITESPACE_RE.match(code, i)
        if whitespace:
            yield HighlightSpan(None, whitespace.group(0))
            i = whitespace.end()
            continue

        if code.startswith("//", i) or code.startswith("/*", i):
            end = _comment_end(code, i)
            yield HighlightSpan("comment", code[i:end])
            i = end
            continue

        span: HighlightSpan
        if char in "\"'":
            end = _quoted_end(code, i)
            span = HighlightSpan("string", code[i:end])
        elif char == "`":
            end = _template_end(code, i)
            span = HighlightSpan("template", code[i:end])
        elif char == "/" and regex_allowed():
            end = _regex_end(code, i)
            span = HighlightSpan("regex", code[i:end])
        elif code.startswith("...", i):
            end = i + 3
            span = HighlightSpan("operator", "...")
        elif number := _NUMBER_RE.match(code, i):
            end = number.end()
            span = HighlightSpan("number", number.group(0))
        elif identifier := _IDENTIFIER_RE.match(code, i):
            end = identifier.end()
            word = identifier.group(0)
            span = HighlightSpan(_word_class(word, keywords), word)
        elif char in PUNCTUATION:
            end = i + 1
            span = HighlightSpan("punctuation", char)
        elif operator := _OPERATOR_RE.match(code, i):
            end = operator.end()
            span = HighlightSpan("operator", operator.group(0))
        else:
            end = i + 1
            span = HighlightSpan(None, char)

        yield span
        last = (span.css_class, span.text)
        i = end


def highlight_javascript(code: str, extra_keywords: frozenset[str] = frozenset()) -> str:
    """Highlight JavaScript source as HTML."""
    if not code:
        return ""
    return render_spans(tokenize_javascript(code, extra_keywords))


def highlight_typescript(code: str) -> str:
    """Highlight TypeScript source as HTML."""
    return highlight_javascript(code, TS_EXTRA_KEYWORDS)

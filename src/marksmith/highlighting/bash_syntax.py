"""Bash highlighter.

Any word in command position is highlighted as a keyword, not just known
builtins, so ``docker-compose up`` and ``./deploy.sh`` read the same way as
``echo``. Command position starts each line and is restored after ``|``,
``;``, ``&&``, ``||``, ``;;``, ``(`` and ``{``, and after shell keywords such
as ``then`` and ``do``.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from marksmith.highlighting.spans import HighlightSpan, render_spans

BASH_KEYWORDS = frozenset(
    {
        "if",
        "then",
        "else",
        "elif",
        "fi",
        "for",
        "while",
        "until",
        "do",
        "done",
        "case",
        "esac",
        "in",
        "function",
        "return",
        "local",
        "export",
        "source",
        "eval",
        "exec",
        "select",
    }
)

# (operator, starts a new command)
_TWO_CHAR_OPERATORS = {
    "||": True,
    "&&": True,
    ";;": True,
    ">>": False,
    "<<": False,
    "2>": False,
    "&>": False,
}
_ONE_CHAR_OPERATORS = {"|": True, ";": True, ">": False, "<": False, "&": False}

_PUNCTUATION = frozenset("(){}[]")
_COMMAND_OPENERS = frozenset("({")

_COMMAND_RE = re.compile(r"[A-Za-z0-9_\-./:]+")
_WORD_RE = re.compile(r"[A-Za-z_]\w*")
_NUMBER_RE = re.compile(r"(?:0[xX][0-9a-fA-F]*|\d+)(?!\w)")
_VARIABLE_RE = re.compile(r"\$(?:\{[^}]*\}?|[0-9@?#$!*_]|[A-Za-z_]\w*)?")


def _string_end(code: str, start: int) -> int:
    quote = code[start]
    i = start + 1
    while i < len(code):
        # Single quotes are literal: no escapes inside
        if quote == '"' and code[i] == "\\" and i + 1 < len(code):
            i += 2
            continue
        i += 1
        if code[i - 1] == quote:
            return i
    return i


def tokenize_bash(code: str) -> Iterator[HighlightSpan]:
    """Classify shell source into spans."""
    expect_command = True
    i = 0
    while i < len(code):
        char = code[i]

        if char == "\n":
            yield HighlightSpan(None, char)
            expect_command = True
            i += 1
            continue

        if char in " \t":
            yield HighlightSpan(None, char)
            i += 1
            continue

        if char == "#":
            end = code.find("\n", i)
            end = len(code) if end < 0 else end
            yield HighlightSpan("comment", code[i:end])
            i = end
            continue

        if char in "\"'":
            end = _string_end(code, i)
            yield HighlightSpan("string", code[i:end])
            expect_command = False
            i = end
            continue

        if char == "$":
            variable = _VARIABLE_RE.match(code, i)
            end = variable.end() if variable else i + 1
            yield HighlightSpan("variable", code[i:end])
            expect_command = False
            i = end
            continue

        pair = code[i : i + 2]
        if pair in _TWO_CHAR_OPERATORS:
            yield HighlightSpan("operator", pair)
            expect_command = _TWO_CHAR_OPERATORS[pair] or expect_command
            i += 2
            continue

        if char in _ONE_CHAR_OPERATORS:
            yield HighlightSpan("operator", char)
            expect_command = _ONE_CHAR_OPERATORS[char] or expect_command
            i += 1
            continue

        number = _NUMBER_RE.match(code, i) if char.isdigit() else None
        if number:
            yield HighlightSpan("number", number.group(0))
            expect_command = False
            i = number.end()
            continue

        if expect_command and (char in "./" or char.isalpha() or char == "_"):
            command = _COMMAND_RE.match(code, i)
            if command:
                yield HighlightSpan("keyword", command.group(0))
                expect_command = command.group(0) in BASH_KEYWORDS
                i = command.end()
                continue

        word = _WORD_RE.match(code, i)
        if word:
            text = word.group(0)
            if text in BASH_KEYWORDS:
                yield HighlightSpan("keyword", text)
                expect_command = True
            else:
                yield HighlightSpan(None, text)
            i = word.end()
            continue

        if char in _PUNCTUATION:
            yield HighlightSpan("punctuation", char)
            if char in _COMMAND_OPENERS:
                expect_command = True
            i += 1
            continue

        yield HighlightSpan(None, char)
        i += 1


def highlight_bash(code: str) -> str:
    """Highlight shell source as HTML."""
    if not code:
        return ""
    return render_spans(tokenize_bash(code))

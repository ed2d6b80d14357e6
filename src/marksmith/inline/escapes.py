"""Backslash escape sequences.

An escaped marker (``\\*``, ``\\[`` ...) must survive every formatting rule
as its literal character. Each sequence is swapped for a Private Use Area
codepoint before the rules run and swapped back to the bare character at the
very end.

Escaping runs after HTML sanitizing, so ``\\>`` is seen as ``\\&gt;`` and is
restored to ``&gt;``.
"""

from __future__ import annotations

import re

_PLACEHOLDER_BASE = 0xE000

_ESCAPED = (
    "*",
    "_",
    "~",
    "`",
    "[",
    "]",
    "#",
    "&gt;",
    "-",
    "+",
    ".",
    "!",
    "=",
    "^",
)

# "\\*" -> "\\ue000", ...
ESCAPE_MAP: dict[str, str] = {
    "\\" + literal: chr(_PLACEHOLDER_BASE + offset) for offset, literal in enumerate(_ESCAPED)
}

# "\\ue000" -> "*", ...
UNESCAPE_MAP: dict[str, str] = {
    placeholder: sequence[1:] for sequence, placeholder in ESCAPE_MAP.items()
}

_ESCAPE_RE = re.compile("|".join(re.escape(sequence) for sequence in ESCAPE_MAP))
_UNESCAPE_RE = re.compile("[" + "".join(UNESCAPE_MAP) + "]")


def apply_escapes(text: str) -> str:
    """Replace escape sequences with placeholders.

    A backslash before any other character is left alone.
    """
    if not text:
        return ""
    return _ESCAPE_RE.sub(lambda m: ESCAPE_MAP[m.group(0)], text)


def revert_escapes(text: str) -> str:
    """Replace placeholders with the literal characters they stand for."""
    if not text:
        return ""
    return _UNESCAPE_RE.sub(lambda m: UNESCAPE_MAP[m.group(0)], text)

"""Emphasis and other paired-delimiter spans.

Rules are applied in order, longest delimiter first, so ``***x***`` becomes
strong+em before ``**`` or ``*`` get a chance to split it. Underscore forms
only open and close at word boundaries (``snake_case_name`` is left alone).
None of the patterns cross a newline.
"""

from __future__ import annotations

import re

# (pattern, replacement) in application order
EMPHASIS_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\*\*\*(.+?)\*\*\*"), r"<strong><em>\1</em></strong>"),
    (re.compile(r"(?<!\w)___(.+?)___(?!\w)"), r"<strong><em>\1</em></strong>"),
    (re.compile(r"\*\*(.+?)\*\*"), r"<strong>\1</strong>"),
    (re.compile(r"(?<!\w)__(.+?)__(?!\w)"), r"<strong>\1</strong>"),
    (re.compile(r"(?<!\*)\*(?!\s)([^*\n]+?)(?<!\s)\*(?!\*)"), r"<em>\1</em>"),
    (re.compile(r"(?<!\w)_(?!\s)([^_\n]+?)_(?!\w)"), r"<em>\1</em>"),
)

# Extended syntax: ~~del~~, ==mark==, x^sup^, H~sub~O
DECORATION_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"~~(.+?)~~"), r"<del>\1</del>"),
    (re.compile(r"==(.+?)=="), r"<mark>\1</mark>"),
    (re.compile(r"\^([^\s^]+)\^"), r"<sup>\1</sup>"),
    (re.compile(r"(?<!~)~([^\s~]+)~(?!~)"), r"<sub>\1</sub>"),
)


def apply_rules(text: str, rules: tuple[tuple[re.Pattern[str], str], ...]) -> str:
    for pattern, replacement in rules:
        text = pattern.sub(replacement, text)
    return text


def apply_emphasis(text: str) -> str:
    """Bold-italic, then bold, then italic."""
    return apply_rules(text, EMPHASIS_RULES)


def apply_decorations(text: str) -> str:
    """Strikethrough, highlight, superscript, subscript."""
    return apply_rules(text, DECORATION_RULES)

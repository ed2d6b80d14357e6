"""ATX and setext heading recognizers."""

from __future__ import annotations

import re
from collections.abc import Sequence

from marksmith.tokenizer.lines import LIST_ITEM_RE, is_horizontal_rule
from marksmith.tokens import BlockMatch, Heading

# 1-6 hashes, at least one whitespace, then content (7+ hashes never match)
ATX_HEADING_RE = re.compile(r"^(#{1,6})\s+(.*)$")

SETEXT_UNDERLINE_RE = re.compile(r"^(=+|-+)\s*$")


def parse_atx_heading(lines: Sequence[str], index: int) -> BlockMatch | None:
    """Recognise ``# Heading`` through ``###### Heading``.

    A marker with nothing after it (``"# "``, ``"###"``) is not a heading.
    """
    match = ATX_HEADING_RE.match(lines[index])
    if match is None:
        return None

    content = match.group(2).strip()
    if not content:
        return None

    return BlockMatch(Heading(level=len(match.group(1)), content=content), index + 1)


def parse_setext_heading(lines: Sequence[str], index: int) -> BlockMatch | None:
    """Recognise a text line underlined with ``=`` (level 1) or ``-`` (level 2).

    List items and thematic breaks are never heading text, so ``- item``
    followed by ``---`` stays a list followed by a rule.
    """
    if index + 1 >= len(lines):
        return None

    line = lines[index]
    if not line.strip():
        return None
    if LIST_ITEM_RE.match(line) or is_horizontal_rule(line):
        return None

    underline = SETEXT_UNDERLINE_RE.match(lines[index + 1])
    if underline is None:
        return None

    level = 1 if underline.group(1)[0] == "=" else 2
    return BlockMatch(Heading(level=level, content=line.strip()), index + 2)

"""Paragraph recognizer, the dispatcher's fallback."""

from __future__ import annotations

import re
from collections.abc import Sequence

from marksmith.tokenizer.lines import LIST_ITEM_RE, is_horizontal_rule
from marksmith.tokenizer.structured_data import parse_json_block
from marksmith.tokens import BlockMatch, Paragraph

_HEADING_START_RE = re.compile(r"^#{1,6}\s")


def _starts_block(lines: Sequence[str], index: int) -> bool:
    line = lines[index]
    stripped = line.lstrip()
    if _HEADING_START_RE.match(line):
        return True
    if stripped.startswith(("```", ">", "{")):
        return True
    if LIST_ITEM_RE.match(line) or is_horizontal_rule(line):
        return True
    return stripped.startswith("[") and parse_json_block(lines, index) is not None


def parse_paragraph(lines: Sequence[str], index: int) -> BlockMatch:
    """Collect text lines up to a blank line or the start of another block.

    The first line always belongs to the paragraph, so the dispatcher makes
    progress on any input. A terminating blank line is consumed.
    """
    body = [lines[index]]
    i = index + 1
    while i < len(lines):
        if not lines[i].strip():
            i += 1
            break
        if _starts_block(lines, i):
            break
        body.append(lines[i])
        i += 1

    return BlockMatch(Paragraph(content="\n".join(body)), i)

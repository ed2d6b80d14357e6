"""Horizontal rule and blockquote recognizers."""

from __future__ import annotations

from collections.abc import Sequence

from marksmith.tokenizer.lines import is_horizontal_rule
from marksmith.tokens import BlockMatch, Blockquote, HorizontalRule


def parse_horizontal_rule(lines: Sequence[str], index: int) -> BlockMatch | None:
    """Recognise ``---``, ``***`` or ``___`` (three or more, nothing else)."""
    if not is_horizontal_rule(lines[index]):
        return None
    return BlockMatch(HorizontalRule(), index + 1)


def parse_blockquote(lines: Sequence[str], index: int) -> BlockMatch | None:
    """Recognise consecutive ``>`` lines.

    The marker and one following space are removed. A blank line ends the
    quote. The inner text is tokenized again so quotes can hold headings,
    lists, code, or further quotes.
    """
    if not lines[index].strip().startswith(">"):
        return None

    body: list[str] = []
    i = index
    while i < len(lines):
        text = lines[i].lstrip()
        if not text.startswith(">"):
            break
        text = text[1:]
        if text.startswith(" "):
            text = text[1:]
        body.append(text)
        i += 1

    # Import here: the dispatcher imports this module
    from marksmith.tokenizer.core import tokenize_lines

    return BlockMatch(
        Blockquote(content="\n".join(body), children=tuple(tokenize_lines(body))),
        i,
    )

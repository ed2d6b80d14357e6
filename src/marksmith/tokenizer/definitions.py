"""Extraction of link reference and footnote definitions.

Definitions may appear anywhere in a document and are referenced from
anywhere, so they are pulled out of the source in one pass before any block
is recognised. Lines inside fenced code blocks are left untouched.
"""

from __future__ import annotations

import re

from marksmith.state import ParserState

# [id]: url  |  [id]: <url>  |  [id]: url "title"  |  [id]: url 'title'
LINK_REF_RE = re.compile(
    r"""^\s*\[([^\]^][^\]]*)\]:\s*<?([^\s>]+)>?(?:\s+(?:"([^"]*)"|'([^']*)'))?\s*$"""
)

# [^id]: content
FOOTNOTE_DEF_RE = re.compile(r"^\s*\[\^([^\]]+)\]:\s*(.*)$")


def extract_definitions(text: str, state: ParserState) -> str:
    """Register definitions on ``state`` and return the remaining text.

    Args:
        text: Markdown source with normalised line endings
        state: Registry for this conversion

    Returns:
        The source with every definition line removed
    """
    kept: list[str] = []
    in_fence = False

    for line in text.split("\n"):
        if line.lstrip().startswith("```"):
            in_fence = not in_fence
            kept.append(line)
            continue
        if in_fence:
            kept.append(line)
            continue

        footnote = FOOTNOTE_DEF_RE.match(line)
        if footnote:
            state.set_footnote(footnote.group(1), footnote.group(2).strip())
            continue

        link_ref = LINK_REF_RE.match(line)
        if link_ref:
            title = link_ref.group(3) if link_ref.group(3) is not None else link_ref.group(4)
            state.set_link_ref(link_ref.group(1), link_ref.group(2), title)
            continue

        kept.append(line)

    return "\n".join(kept)

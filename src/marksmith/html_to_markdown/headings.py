"""Heading element conversion.

Example:
    >>> from bs4 import BeautifulSoup
    >>> h2 = BeautifulSoup("<h2> Section <em>one</em></h2>", "html.parser").h2
    >>> convert_heading(h2)
    '## Section one\\n\\n'
"""

from __future__ import annotations

import re

from bs4.element import Tag

_HEADING_TAG_RE = re.compile(r"^h([1-6])$")


def get_heading_level(element: Tag) -> int:
    """Return 1-6 for ``h1``-``h6``, 0 for anything else."""
    match = _HEADING_TAG_RE.match((element.name or "").lower())
    return int(match.group(1)) if match else 0


def is_heading_element(element: Tag) -> bool:
    return get_heading_level(element) > 0


def convert_heading(element: Tag) -> str:
    """Convert a heading element to an ATX heading.

    Nested markup is flattened to its text, so ``<h1>A <b>B</b></h1>``
    becomes ``# A B``.

    Returns:
        ``"#" * level + " " + text + "\\n\\n"``, or "" for non-heading
        elements and headings with no visible text
    """
    level = get_heading_level(element)
    if not level:
        return ""

    text = element.get_text().strip()
    if not text:
        return ""

    return f"{'#' * level} {text}\n\n"

"""Inline parser: block content text to an HTML fragment.

Rules run as a fixed sequence of substitutions because they interact: code
spans must be protected before emphasis sees their asterisks, images must run
before links, and colour previews must not touch the markup produced earlier.

Order:
    1. HTML-escape (when sanitizing)
    2. Backslash escapes to placeholders
    3. Code spans stashed
    4. Bold-italic, bold, italic
    5. Strikethrough, highlight, superscript, subscript
    6. Images, then links
    7. Reference links (full, collapsed, shortcut)
    8. Autolinks
    9. Footnote references
    10. Hex colour previews
    11. Hard line breaks
    12. Code spans restored, escape placeholders reverted

Thread Safety:
    No module state. Reference and footnote lookups go through the
    ParserState passed by the caller.
"""

from __future__ import annotations

from marksmith.inline.emphasis import apply_decorations, apply_emphasis
from marksmith.inline.escapes import apply_escapes, revert_escapes
from marksmith.inline.links import (
    apply_autolinks,
    apply_images_and_links,
    apply_reference_links,
)
from marksmith.inline.special import (
    CodeSpanStash,
    apply_color_previews,
    apply_footnote_refs,
    apply_hard_breaks,
)
from marksmith.state import ParserState
from marksmith.utils.text import escape_html


def parse_inline(
    text: str | None, sanitize: bool = True, *, state: ParserState | None = None
) -> str:
    """Convert inline Markdown to HTML.

    Args:
        text: Inline Markdown (may span several lines)
        sanitize: Escape ``< > & " '`` before parsing; with False, raw HTML in
            the text passes through untouched
        state: Link references and footnotes for this conversion

    Returns:
        HTML fragment, "" for empty input

    Example:
        >>> parse_inline("**bold** and *italic*")
        '<strong>bold</strong> and <em>italic</em>'
    """
    if not text:
        return ""

    if state is None:
        state = ParserState()

    result = escape_html(text) if sanitize else text
    result = apply_escapes(result)

    code_spans = CodeSpanStash()
    result = code_spans.protect(result)

    result = apply_emphasis(result)
    result = apply_decorations(result)
    result = apply_images_and_links(result)
    result = apply_reference_links(result, state, sanitize)
    result = apply_autolinks(result)
    result = apply_footnote_refs(result, state)
    result = apply_color_previews(result)
    result = apply_hard_breaks(result)

    result = code_spans.restore(result)
    return revert_escapes(result)

"""Text helpers shared by the inline parser, renderer and highlighters.

Example:
    >>> from marksmith.utils.text import escape_html
    >>> escape_html("<b>'hi'</b>")
    '&lt;b&gt;&#039;hi&#039;&lt;/b&gt;'
"""

from __future__ import annotations

import html as html_module
import re

_NEWLINES_RE = re.compile(r"\r\n?")


def escape_html(text: str) -> str:
    """Escape HTML special characters.

    Converts the five characters that matter in both text and attribute
    context:
    - & becomes &amp;
    - < becomes &lt;
    - > becomes &gt;
    - " becomes &quot;
    - ' becomes &#039;

    The numeric form for the apostrophe is part of the output contract:
    highlighters and the hex-colour decorator rely on it never looking like
    a ``#RGB`` token.

    Args:
        text: Text to escape

    Returns:
        Escaped text, safe for element content and quoted attribute values
    """
    if not text:
        return ""

    return html_module.escape(text, quote=True).replace("&#x27;", "&#039;")


def normalize_newlines(text: str) -> str:
    """Convert CRLF and bare CR line endings to LF."""
    return _NEWLINES_RE.sub("\n", text)


def is_blank(line: str) -> bool:
    """Return True for empty or whitespace-only lines."""
    return not line.strip()

"""Links, images, reference links and autolinks.

Inline forms:
    ![alt](src "title")     image
    [text](url "title")     link
    [text][id]              full reference
    [text][]                collapsed reference (id = text)
    [id]                    shortcut reference
    <https://example.com>   autolink
    <user@example.com>      email autolink

Titles may be quoted with ``"`` or, after sanitizing, ``&quot;``. Reference ids
are looked up case-insensitively on the ParserState; an id that is not
defined leaves the bracket text exactly as written.
"""

from __future__ import annotations

import re

from marksmith.state import LinkReference, ParserState
from marksmith.utils.text import escape_html

_QUOTE = r'(?:&quot;|")'
_TITLE = rf"(?:\s+{_QUOTE}(.*?){_QUOTE})?"

IMAGE_RE = re.compile(rf"!\[([^\]]*)\]\(([^)\s]+){_TITLE}\)")
LINK_RE = re.compile(rf"\[([^\]]+)\]\(([^)\s]+){_TITLE}\)")

FULL_REFERENCE_RE = re.compile(r"\[([^\]]+)\]\[([^\]]*)\]")
SHORTCUT_REFERENCE_RE = re.compile(r"(?<!\])\[([^\]^][^\]]*)\](?![\[(:])")

URL_AUTOLINK_RE = re.compile(r"(?:&lt;|<)((?:https?|ftp)://[^\s<>]+?)(?:&gt;|>)")
EMAIL_AUTOLINK_RE = re.compile(r"(?:&lt;|<)([^\s@<>&;]+@[^\s@<>&;]+\.[^\s@<>&;]+)(?:&gt;|>)")


def _title_attr(title: str | None) -> str:
    return f' title="{title}"' if title else ""


def _image(match: re.Match[str]) -> str:
    alt, src, title = match.group(1), match.group(2), match.group(3)
    return f'<img src="{src}" alt="{alt}"{_title_attr(title)} />'


def _link(match: re.Match[str]) -> str:
    text, href, title = match.group(1), match.group(2), match.group(3)
    return f'<a href="{href}"{_title_attr(title)}>{text}</a>'


def apply_images_and_links(text: str) -> str:
    """Images first: ``![a](b)`` would otherwise match as ``!`` + link."""
    text = IMAGE_RE.sub(_image, text)
    return LINK_RE.sub(_link, text)


def _reference_anchor(text: str, ref: LinkReference, sanitize: bool) -> str:
    url = escape_html(ref.url) if sanitize else ref.url
    title = ref.title
    if title and sanitize:
        title = escape_html(title)
    return f'<a href="{url}"{_title_attr(title)}>{text}</a>'


def apply_reference_links(text: str, state: ParserState, sanitize: bool = True) -> str:
    """Resolve full, collapsed and shortcut references against ``state``."""
    if not state.link_refs:
        return text

    def full(match: re.Match[str]) -> str:
        label, ref_id = match.group(1), match.group(2)
        ref = state.get_link_ref(ref_id or label)
        if ref is None:
            return match.group(0)
        return _reference_anchor(label, ref, sanitize)

    def shortcut(match: re.Match[str]) -> str:
        label = match.group(1)
        ref = state.get_link_ref(label)
        if ref is None:
            return match.group(0)
        return _reference_anchor(label, ref, sanitize)

    text = FULL_REFERENCE_RE.sub(full, text)
    return SHORTCUT_REFERENCE_RE.sub(shortcut, text)


def apply_autolinks(text: str) -> str:
    """Angle-bracketed URLs and email addresses, escaped or raw."""
    text = URL_AUTOLINK_RE.sub(lambda m: f'<a href="{m.group(1)}">{m.group(1)}</a>', text)
    return EMAIL_AUTOLINK_RE.sub(
        lambda m: f'<a href="mailto:{m.group(1)}">{m.group(1)}</a>', text
    )

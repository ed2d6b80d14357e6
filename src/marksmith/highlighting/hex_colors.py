"""Colour swatches for hex codes in highlighted HTML.

Only text between tags is decorated. ``#`` is never escaped by escape_html,
and the lookbehind rejects ``&#039;`` and similar entities, so the decorator
is safe to run over any highlighter's output.
"""

from __future__ import annotations

import re

# Six digits first so #abcdef is not read as #abc + "def"
HEX_COLOR_RE = re.compile(
    r"(?<![&\w])#[0-9a-fA-F]{6}(?![0-9a-fA-F])|(?<![&\w])#[0-9a-fA-F]{3}(?![0-9a-fA-F])"
)

VALID_HEX_RE = re.compile(r"^#([0-9a-fA-F]{6}|[0-9a-fA-F]{3})$")

_SEGMENT_RE = re.compile(r"<[^>]*>|[^<]+")


def is_hex_color(value: str) -> bool:
    return VALID_HEX_RE.match(value) is not None


def _swatch(match: re.Match[str]) -> str:
    color = match.group(0)
    return f'<span class="color-preview" style="--swatch-color: {color}">{color}</span>'


def _decorate_segment(match: re.Match[str]) -> str:
    segment = match.group(0)
    if segment.startswith("<"):
        return segment
    return HEX_COLOR_RE.sub(_swatch, segment)


def decorate_hex_in_html(html: str) -> str:
    """Wrap ``#RGB`` and ``#RRGGBB`` in text segments with swatch spans."""
    if not html or "#" not in html:
        return html
    return _SEGMENT_RE.sub(_decorate_segment, html)

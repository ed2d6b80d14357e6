"""Code spans, footnote references, colour previews and hard breaks."""

from __future__ import annotations

import re

from marksmith.state import ParserState

CODE_SPAN_RE = re.compile(r"`([^`]+)`")

# Private Use Area brackets around the index of a stashed code span. Kept
# clear of the escape placeholders, which start at U+E000.
_CODE_OPEN = "\ue100"
_CODE_CLOSE = "\ue101"
_CODE_PLACEHOLDER_RE = re.compile(f"{_CODE_OPEN}(\\d+){_CODE_CLOSE}")

FOOTNOTE_REF_RE = re.compile(r"\[\^([^\]]+)\]")

# Standalone #RGB / #RRGGBB: not after a word character or "&" (entities such
# as &#039;), not followed by further word characters
HEX_COLOR_RE = re.compile(r"(?<![&\w])#([0-9a-fA-F]{6}|[0-9a-fA-F]{3})(?![\w])")

# Tags are left alone by the colour preview
_TAG_SPLIT_RE = re.compile(r"(<[^>]*>)")

HARD_BREAK_RE = re.compile(r" {2,}\n")


class CodeSpanStash:
    """Holds rendered code spans while the other rules run.

    Usage:
        >>> stash = CodeSpanStash()
        >>> text = stash.protect("use `*x*` here")
        >>> stash.restore(text)
        'use <code>*x*</code> here'
    """

    __slots__ = ("_spans",)

    def __init__(self) -> None:
        self._spans: list[str] = []

    def _stash(self, match: re.Match[str]) -> str:
        self._spans.append(f"<code>{match.group(1)}</code>")
        return f"{_CODE_OPEN}{len(self._spans) - 1}{_CODE_CLOSE}"

    def protect(self, text: str) -> str:
        return CODE_SPAN_RE.sub(self._stash, text)

    def _unstash(self, match: re.Match[str]) -> str:
        index = int(match.group(1))
        # Placeholder-like text that was already in the source is left as is
        if index >= len(self._spans):
            return match.group(0)
        return self._spans[index]

    def restore(self, text: str) -> str:
        if not self._spans:
            return text
        return _CODE_PLACEHOLDER_RE.sub(self._unstash, text)


def apply_footnote_refs(text: str, state: ParserState) -> str:
    """Link ``[^id]`` to its definition; unknown ids are left as written."""
    if not state.footnotes:
        return text

    def replace(match: re.Match[str]) -> str:
        footnote_id = match.group(1)
        footnote = state.get_footnote(footnote_id)
        if footnote is None:
            return match.group(0)
        return (
            f'<a href="#fn-{footnote_id}" id="fnref-{footnote_id}" '
            f'class="footnote-ref">[{footnote.index}]</a>'
        )

    return FOOTNOTE_REF_RE.sub(replace, text)


def _color_preview(match: re.Match[str]) -> str:
    color = match.group(0)
    return (
        '<span class="color-preview">'
        f'<span class="color-swatch" style="background-color: {color}"></span>'
        f"{color}</span>"
    )


def apply_color_previews(text: str) -> str:
    """Add a swatch before hex colour tokens in text, never inside a tag."""
    if "#" not in text:
        return text
    parts = _TAG_SPLIT_RE.split(text)
    return "".join(
        part if part.startswith("<") else HEX_COLOR_RE.sub(_color_preview, part)
        for part in parts
    )


def apply_hard_breaks(text: str) -> str:
    """Two or more trailing spaces before a newline become ``<br />``."""
    return HARD_BREAK_RE.sub("<br />\n", text)

"""Inline element conversion.

Handles text with inline formatting: bold, italic, code, links, images,
strikethrough, highlight, superscript, subscript, footnote references and
line breaks. Block-level tags met here contribute only their inline content.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable

from bs4.element import NavigableString, PageElement, PreformattedString, Tag

CustomElementProcessor = Callable[[Tag], str | None]
"""Hook consulted before the built-in converters.

Return a string to use it as the element's Markdown, or None to fall back to
the default conversion.
"""

ZERO_WIDTH_SPACE = "\u200b"

# Tag -> delimiter for formatting that wraps its content on both sides
WRAPPERS: dict[str, str] = {
    "strong": "**",
    "b": "**",
    "em": "*",
    "i": "*",
    "del": "~~",
    "s": "~~",
    "mark": "==",
    "sup": "^",
    "sub": "~",
}

_FOOTNOTE_HREF_RE = re.compile(r"^#fn-(.+)$")


def strip_zero_width_spaces(text: str) -> str:
    """Remove U+200B, which editors insert to break out of formatting."""
    return text.replace(ZERO_WIDTH_SPACE, "")


def has_class(element: Tag, name: str) -> bool:
    classes = element.get("class") or []
    return name in classes


def text_of(node: PageElement) -> str | None:
    """Text of a string node, or None for comments, doctypes and tags."""
    if isinstance(node, PreformattedString):
        return None
    if isinstance(node, NavigableString):
        return strip_zero_width_spaces(str(node))
    return None


def wrap(delimiter: str, content: str) -> str:
    """Surround content with a delimiter, or "" when it has no visible text."""
    if not content.strip():
        return ""
    return f"{delimiter}{content}{delimiter}"


def convert_link(element: Tag, content: str) -> str:
    return f"[{content}]({element.get('href', '')})"


def convert_image(element: Tag) -> str:
    return f"![{element.get('alt', '')}]({element.get('src', '')})"


def convert_footnote_ref(element: Tag) -> str:
    """``<a class="footnote-ref" href="#fn-ID">`` back to ``[^ID]``."""
    match = _FOOTNOTE_HREF_RE.match(str(element.get("href", "")))
    if match:
        return f"[^{match.group(1)}]"
    return f"[^{element.get_text().strip('[] ')}]"


def convert_inline_nodes(
    nodes: Iterable[PageElement],
    processor: CustomElementProcessor | None = None,
) -> str:
    """Convert a run of sibling nodes to inline Markdown."""
    parts: list[str] = []
    for node in nodes:
        if not isinstance(node, Tag):
            text = text_of(node)
            if text:
                parts.append(text)
            continue
        parts.append(convert_inline_element(node, processor))
    return "".join(parts)


def process_inline_content(
    element: Tag,
    processor: CustomElementProcessor | None = None,
) -> str:
    """Convert an element's children to inline Markdown."""
    return convert_inline_nodes(element.children, processor)


def convert_inline_element(element: Tag, processor: CustomElementProcessor | None = None) -> str:
    if processor is not None:
        result = processor(element)
        if result is not None:
            return result

    tag = element.name

    if tag == "span" and has_class(element, "color-preview"):
        return element.get_text()
    if tag == "a" and has_class(element, "footnote-ref"):
        return convert_footnote_ref(element)
    if tag == "a" and has_class(element, "footnote-backref"):
        return ""

    match tag:
        case "code":
            text = strip_zero_width_spaces(element.get_text())
            return f"`{text}`" if text else ""
        case "br":
            return "  \n"
        case "img":
            return convert_image(element)
        case "a":
            return convert_link(element, process_inline_content(element, processor))
        case _ if tag in WRAPPERS:
            return wrap(WRAPPERS[tag], process_inline_content(element, processor))
        case _:
            return process_inline_content(element, processor)

"""Block-level dispatcher.

Walks a node's children and converts each element by tag: paragraphs, code
blocks, blockquotes, lists, tables, definition lists, rules and the wrapper
markup produced by the renderer (footnotes section, code-block mounts,
colour previews). Inline tags met at block level are converted the same way
as inside a paragraph.
"""

from __future__ import annotations

import re

from bs4.element import Tag

from marksmith.html_to_markdown.headings import convert_heading, is_heading_element
from marksmith.html_to_markdown.inline import (
    WRAPPERS,
    CustomElementProcessor,
    convert_footnote_ref,
    convert_image,
    convert_link,
    has_class,
    process_inline_content,
    strip_zero_width_spaces,
    text_of,
    wrap,
)
from marksmith.html_to_markdown.lists import convert_list
from marksmith.html_to_markdown.tables import convert_table
from marksmith.utils.logger import get_logger

logger = get_logger(__name__)

_LANGUAGE_CLASS_RE = re.compile(r"language-(\w+)")

# Elements that are walked without a marker of their own
_TRANSPARENT = frozenset({
    "html", "body", "div", "span", "section", "article", "main", "header", "footer",
    "aside", "nav", "figure", "figcaption", "thead", "tbody", "tr", "td", "th", "dt", "dd",
})


def fence(code: str, language: str = "") -> str:
    return f"```{language}\n{code}\n```\n\n"


def convert_pre(element: Tag) -> str:
    """``pre`` to a fenced block, language from a ``language-*`` class on ``code``."""
    code = element.find("code")
    if isinstance(code, Tag):
        text = code.get_text()
        match = _LANGUAGE_CLASS_RE.search(" ".join(code.get("class") or []))
        language = match.group(1) if match else ""
    else:
        text = element.get_text()
        language = ""
    return fence(strip_zero_width_spaces(text), language)


def convert_code_block_mount(element: Tag) -> str:
    """Wrapper ``div[data-code-block-id]`` holding the code in its mount point."""
    mount = element.select_one(".code-viewer-mount-point")
    content = str(mount.get("data-content", "")) if mount is not None else ""
    language = str(mount.get("data-language", "")) if mount is not None else ""
    return fence(content, language)


def convert_blockquote(element: Tag, processor: CustomElementProcessor | None) -> str:
    content = process_node(element, processor).strip()
    quoted = "\n".join(f"> {line}" if line else ">" for line in content.split("\n"))
    return f"{quoted}\n\n"


def convert_definition_list(element: Tag, processor: CustomElementProcessor | None) -> str:
    """``dl`` back to a ``term`` line followed by one ``: definition`` line per ``dd``."""
    lines: list[str] = []
    for child in element.find_all(["dt", "dd"], recursive=False):
        content = process_inline_content(child, processor).strip()
        lines.append(content if child.name == "dt" else f": {content}")
    if not lines:
        return ""
    return "\n".join(lines) + "\n\n"


def convert_footnotes_section(element: Tag, processor: CustomElementProcessor | None) -> str:
    """``div.footnotes`` back to one ``[^id]: content`` line per item."""
    lines: list[str] = []
    for item in element.find_all("li", class_="footnote-item"):
        footnote_id = str(item.get("id", "")).removeprefix("fn-")
        content = process_inline_content(item, processor).strip()
        lines.append(f"[^{footnote_id}]: {content}")
    if not lines:
        return ""
    return "\n".join(lines) + "\n\n"


def convert_element(element: Tag, processor: CustomElementProcessor | None = None) -> str:
    """Convert one element found at block level."""
    if processor is not None:
        result = processor(element)
        if result is not None:
            return result

    if is_heading_element(element):
        return convert_heading(element)

    tag = element.name
    match tag:
        case "p":
            return f"{process_inline_content(element, processor)}\n\n"
        case "br":
            return "  \n"
        case "hr":
            return "---\n\n"
        case "code":
            parent = element.parent
            if parent is not None and parent.name == "pre":
                return element.get_text()
            text = element.get_text()
            return f"`{text}`" if text else ""
        case "pre":
            return convert_pre(element)
        case "blockquote":
            return convert_blockquote(element, processor)
        case "ul" | "ol":
            return convert_list(element, processor)
        case "li":
            return process_inline_content(element, processor)
        case "table":
            return convert_table(element, processor)
        case "dl":
            return convert_definition_list(element, processor)
        case "img":
            return convert_image(element)
        case "a" if has_class(element, "footnote-ref"):
            return convert_footnote_ref(element)
        case "a":
            return convert_link(element, process_inline_content(element, processor))
        case "div" if element.has_attr("data-code-block-id"):
            return convert_code_block_mount(element)
        case "div" if has_class(element, "footnotes"):
            return convert_footnotes_section(element, processor)
        case "span" if has_class(element, "color-preview"):
            return element.get_text()
        case _ if tag in WRAPPERS:
            return wrap(WRAPPERS[tag], process_inline_content(element, processor))
        case _:
            if tag not in _TRANSPARENT:
                logger.debug("No converter for <%s>, converting its children", tag)
            return process_node(element, processor)


def process_node(node: Tag, processor: CustomElementProcessor | None = None) -> str:
    """Convert every child of a node and join the results."""
    parts: list[str] = []
    for child in node.children:
        if isinstance(child, Tag):
            parts.append(convert_element(child, processor))
        else:
            text = text_of(child)
            if text:
                parts.append(text)
    return "".join(parts)

"""HTML to Markdown conversion.

Converts rendered HTML (from HtmlRenderer or a rich-text editor) back to
Markdown source. Parsing is done by BeautifulSoup with the stdlib
``html.parser`` backend, so no compiled parser is required.

Usage:
    >>> from marksmith.html_to_markdown import html_to_markdown
    >>> html_to_markdown("<p>Hello <strong>World</strong></p>")
    'Hello **World**'

    >>> # Application-specific elements
    >>> def tokens(tag):
    ...     if tag.has_attr("data-token-id"):
    ...         return "{{" + tag["data-token-id"] + "}}"
    ...     return None
    >>> html_to_markdown('<p>Hi <span data-token-id="name"></span></p>', processor=tokens)
    'Hi {{name}}'

Thread Safety:
    Conversion builds a new soup per call and keeps no module state.
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup
from bs4.element import Tag

from marksmith.errors import ConversionError
from marksmith.html_to_markdown.blocks import process_node
from marksmith.html_to_markdown.headings import (
    convert_heading,
    get_heading_level,
    is_heading_element,
)
from marksmith.html_to_markdown.inline import CustomElementProcessor, strip_zero_width_spaces
from marksmith.html_to_markdown.lists import convert_list
from marksmith.html_to_markdown.tables import convert_table

HTML_PARSER = "html.parser"

_EXCESS_NEWLINES_RE = re.compile(r"\n{3,}")

_MARKDOWN_SPECIAL_RE = re.compile(r"([\\`*_{}\[\]()#+\-.!])")


def escape_markdown_chars(text: str) -> str:
    r"""Backslash-escape characters with Markdown meaning.

    Example:
        >>> escape_markdown_chars("*bold* and _italic_")
        '\\*bold\\* and \\_italic\\_'
    """
    return _MARKDOWN_SPECIAL_RE.sub(r"\\\1", text)


def html_to_markdown(
    html_or_element: str | Tag,
    *,
    processor: CustomElementProcessor | None = None,
) -> str:
    """Convert HTML to Markdown.

    Args:
        html_or_element: HTML markup, or a parsed bs4 Tag whose children
            are converted
        processor: Called with every element before the built-in converters;
            a non-None return replaces the default conversion

    Returns:
        Markdown text with zero-width spaces removed, at most one blank line
        in a row, and no leading or trailing whitespace

    Raises:
        ConversionError: If given neither a string nor a bs4 Tag
    """
    if isinstance(html_or_element, str):
        root: Tag = BeautifulSoup(html_or_element, HTML_PARSER)
    elif isinstance(html_or_element, Tag):
        root = html_or_element
    else:
        raise ConversionError(
            f"Expected HTML string or bs4 Tag, got {type(html_or_element).__name__}"
        )

    markdown = process_node(root, processor)
    markdown = strip_zero_width_spaces(markdown)
    return _EXCESS_NEWLINES_RE.sub("\n\n", markdown).strip()


__all__ = [
    "CustomElementProcessor",
    "convert_heading",
    "convert_list",
    "convert_table",
    "escape_markdown_chars",
    "get_heading_level",
    "html_to_markdown",
    "is_heading_element",
]

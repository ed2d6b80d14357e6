"""HTML (and Vue template) highlighter.

Tags are scanned into a ``syntax-tag`` name (with its ``<`` or ``</``),
``syntax-attribute`` names, ``=`` punctuation and ``syntax-string`` values
(quoted or bare). The closing ``>`` or ``/>`` is part of the tag class.
Comments and CDATA sections use ``syntax-comment`` and ``<!DOCTYPE ...>``
uses ``syntax-doctype``. Text between tags is escaped only.

The body of ``<style>`` is handed to the CSS scanner and the body of
``<script>`` to the JavaScript scanner.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator

from marksmith.highlighting.css_syntax import tokenize_css
from marksmith.highlighting.javascript_syntax import tokenize_javascript
from marksmith.highlighting.spans import HighlightSpan, render_spans

_TAG_OPEN_RE = re.compile(r"</?[A-Za-z][\w:.-]*")
_DOCTYPE_RE = re.compile(r"<![A-Za-z]")
_WHITESPACE_RE = re.compile(r"\s+")
_ATTRIBUTE_RE = re.compile(r"[^\s=>/\"']+")
_BARE_VALUE_RE = re.compile(r"[^\s>]+")
_TEXT_RE = re.compile(r"[^<]+")

_EMBEDDED: dict[str, Callable[[str], Iterator[HighlightSpan]]] = {
    "style": tokenize_css,
    "script": tokenize_javascript,
}


def _until(code: str, start: int, terminator: str) -> int:
    """Index one past ``terminator``, or the end of input."""
    end = code.find(terminator, start)
    return len(code) if end < 0 else end + len(terminator)


def _quoted_end(code: str, start: int) -> int:
    end = code.find(code[start], start + 1)
    return len(code) if end < 0 else end + 1


def _tag_body(code: str, start: int) -> Iterator[tuple[HighlightSpan, int]]:
    """Spans from after a tag name up to and including its closing bracket.

    Yields each span with the index just past it, so the caller can resume.
    """
    i = start
    while i < len(code):
        if code.startswith("/>", i):
            yield HighlightSpan("tag", "/>"), i + 2
            return
        char = code[i]
        if char == ">":
            yield HighlightSpan("tag", ">"), i + 1
            return

        whitespace = _WHITESPACE_RE.match(code, i)
        if whitespace:
            i = whitespace.end()
            yield HighlightSpan(None, whitespace.group(0)), i
            continue

        if char == "=":
            i += 1
            yield HighlightSpan("punctuation", "="), i
            whitespace = _WHITESPACE_RE.match(code, i)
            if whitespace:
                i = whitespace.end()
                yield HighlightSpan(None, whitespace.group(0)), i
            if i < len(code) and code[i] in "\"'":
                end = _quoted_end(code, i)
            elif value := _BARE_VALUE_RE.match(code, i):
                end = value.end()
            else:
                continue
            yield HighlightSpan("string", code[i:end]), end
            i = end
            continue

        if char in "\"'":
            end = _quoted_end(code, i)
            yield HighlightSpan("string", code[i:end]), end
            i = end
            continue

        attribute = _ATTRIBUTE_RE.match(code, i)
        if attribute:
            i = attribute.end()
            yield HighlightSpan("attribute", attribute.group(0)), i
            continue

        i += 1
        yield HighlightSpan(None, char), i


def tokenize_html(code: str) -> Iterator[HighlightSpan]:
    """Classify HTML source into spans.

    Yields:
        HighlightSpan per token; text content has no class
    """
    i = 0
    while i < len(code):
        if code.startswith("<!--", i):
            end = _until(code, i + 4, "-->")
            yield HighlightSpan("comment", code[i:end])
            i = end
            continue

        if code.startswith("<![CDATA[", i):
            end = _until(code, i + 9, "]]>")
            yield HighlightSpan("comment", code[i:end])
            i = end
            continue

        if _DOCTYPE_RE.match(code, i):
            end = _until(code, i, ">")
            yield HighlightSpan("doctype", code[i:end])
            i = end
            continue

        tag = _TAG_OPEN_RE.match(code, i)
        if tag is None:
            text = _TEXT_RE.match(code, i)
            end = text.end() if text else i + 1
            yield HighlightSpan(None, code[i:end])
            i = end
            continue

        yield HighlightSpan("tag", tag.group(0))
        i = tag.end()
        closing = ""
        for span, i in _tag_body(code, i):
            yield span
            closing = span.text

        name = tag.group(0).lstrip("<").lower()
        embedded = _EMBEDDED.get(name)
        if embedded is not None and closing == ">":
            close = re.compile(f"</{name}", re.IGNORECASE).search(code, i)
            end = close.start() if close else len(code)
            yield from embedded(code[i:end])
            i = end


def highlight_html(code: str) -> str:
    """Highlight HTML source as HTML."""
    if not code:
        return ""
    return render_spans(tokenize_html(code))

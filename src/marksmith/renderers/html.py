"""HTML renderer using StringBuilder pattern.

Renders a block token sequence to HTML. Top-level blocks are joined with a
newline; markup inside a block (list items, table rows) is emitted without
separators.

Thread Safety:
All per-render state is encapsulated in RenderContext, created fresh for each
render() call. Multiple threads can safely share a single HtmlRenderer instance
and call render() concurrently, provided each call gets its own ParserState.

Footnotes:
When the ParserState holds any footnote definitions, a footnotes section is
appended after the last block, ordered by definition index.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from marksmith.errors import RenderError
from marksmith.highlighting import highlight_syntax
from marksmith.inline import parse_inline
from marksmith.state import ParserState
from marksmith.stringbuilder import StringBuilder
from marksmith.tokenizer import tokenize_lines
from marksmith.tokens import (
    Alignment,
    BlockToken,
    Blockquote,
    CodeBlock,
    DefinitionList,
    FootnoteDef,
    Heading,
    HorizontalRule,
    ListBlock,
    ListItem,
    Paragraph,
    Table,
)
from marksmith.utils.text import escape_html

logger = logging.getLogger(__name__)

BACKREF_GLYPH = "↩"


@dataclass(slots=True)
class RenderContext:
    """Per-render state.

    Thread Safety:
        Each render() call creates its own RenderContext instance.
    """

    state: ParserState
    sanitize: bool

    def inline(self, text: str) -> str:
        return parse_inline(text, self.sanitize, state=self.state)

    def inline_lines(self, text: str) -> str:
        """Inline HTML with every source newline shown as ``<br />``."""
        return self.inline(text).replace("<br />\n", "<br />").replace("\n", "<br />")


def _align_attr(alignment: Alignment) -> str:
    return f' style="text-align: {alignment}"' if alignment else ""


class HtmlRenderer:
    """Render block tokens to HTML.

    Usage:
        >>> from marksmith.tokenizer import tokenize
        >>> renderer = HtmlRenderer()
        >>> renderer.render(tokenize("# Hello **World**"))
        '<h1>Hello <strong>World</strong></h1>'

    Thread Safety:
        Multiple threads can safely share a single HtmlRenderer instance.
        Each render() call creates an independent RenderContext.
    """

    __slots__ = ("_sanitize", "_highlight", "_color_swatches")

    def __init__(
        self,
        *,
        sanitize: bool = True,
        highlight: bool = False,
        color_swatches: bool = False,
    ) -> None:
        """Initialize renderer.

        Args:
            sanitize: Escape raw HTML in text before inline parsing
            highlight: Run code block content through the syntax highlighters
            color_swatches: Decorate hex colours in highlighted code
        """
        self._sanitize = sanitize
        self._highlight = highlight
        self._color_swatches = color_swatches

    def render(self, tokens: Sequence[BlockToken], state: ParserState | None = None) -> str:
        """Render tokens to an HTML string.

        Args:
            tokens: Block tokens from tokenize()
            state: Registry the tokens were produced with; reference links
                and footnotes resolve against it

        Returns:
            HTML string, "" for no tokens and no footnotes

        Raises:
            RenderError: If a token is not a known block token type
        """
        if state is None:
            state = ParserState()
        ctx = RenderContext(state=state, sanitize=self._sanitize)

        blocks = StringBuilder()
        for token in tokens:
            blocks.append(self._render_block(token, ctx))

        if ctx.state.has_footnotes:
            blocks.append(self._render_footnotes(ctx))

        return blocks.build(separator="\n")

    # =========================================================================
    # Block rendering
    # =========================================================================

    def _render_block(self, block: BlockToken, ctx: RenderContext) -> str:
        """Render one block; FootnoteDef renders nothing."""
        match block:
            case Heading():
                return f"<h{block.level}>{ctx.inline(block.content)}</h{block.level}>"
            case Paragraph():
                return f"<p>{ctx.inline_lines(block.content)}</p>"
            case CodeBlock():
                return self._render_code(block)
            case ListBlock():
                return self._render_list(block, ctx)
            case Table():
                return self._render_table(block, ctx)
            case Blockquote():
                return self._render_blockquote(block, ctx)
            case HorizontalRule():
                return "<hr />"
            case DefinitionList():
                return self._render_definition_list(block, ctx)
            case FootnoteDef():
                # Definitions live on ParserState and render in the footnotes section
                return ""
            case _:
                raise RenderError(block)

    def _render_code(self, code: CodeBlock) -> str:
        """Render code block, highlighted when enabled."""
        lang_class = f' class="language-{escape_html(code.language)}"' if code.language else ""
        detected = " autodetected" if code.auto_detected else ""

        if self._highlight and code.language:
            body = highlight_syntax(
                code.content, code.language, color_swatches=self._color_swatches
            )
        else:
            body = escape_html(code.content)

        return f"<pre><code{lang_class}{detected}>{body}</code></pre>"

    def _render_blockquote(self, quote: Blockquote, ctx: RenderContext) -> str:
        children: Sequence[BlockToken] = quote.children
        if not children and quote.content:
            # Hand-built quotes may carry only raw content
            children = tokenize_lines(quote.content.split("\n"))

        sb = StringBuilder()
        for child in children:
            sb.append(self._render_block(child, ctx))
        return f"<blockquote>{sb.build()}</blockquote>"

    def _render_list(self, lst: ListBlock, ctx: RenderContext) -> str:
        """Render ordered, unordered or task list."""
        sb = StringBuilder()
        if lst.ordered:
            start_attr = f' start="{lst.start}"' if lst.start != 1 else ""
            sb.append(f"<ol{start_attr}>")
        elif lst.is_task_list:
            sb.append('<ul class="task-list">')
        else:
            sb.append("<ul>")

        for item in lst.items:
            sb.append(self._render_list_item(item, ctx))

        sb.append("</ol>" if lst.ordered else "</ul>")
        return sb.build()

    def _render_list_item(self, item: ListItem, ctx: RenderContext) -> str:
        """Render list item; nested blocks go inside the <li> after its text."""
        sb = StringBuilder()
        if item.is_task:
            checked = " checked" if item.checked else ""
            sb.append(f'<li class="task-list-item"><input type="checkbox"{checked} disabled /> ')
        else:
            sb.append("<li>")

        sb.append(ctx.inline_lines(item.content))
        for child in item.children:
            sb.append(self._render_block(child, ctx))

        sb.append("</li>")
        return sb.build()

    def _render_table(self, table: Table, ctx: RenderContext) -> str:
        """Render pipe table; <tbody> only when there are body rows."""
        sb = StringBuilder()
        sb.append("<table><thead><tr>")
        for column, header in enumerate(table.headers):
            sb.append(f"<th{_align_attr(table.alignment(column))}>{ctx.inline(header)}</th>")
        sb.append("</tr></thead>")

        if table.rows:
            sb.append("<tbody>")
            for row in table.rows:
                sb.append("<tr>")
                for column, cell in enumerate(row):
                    sb.append(f"<td{_align_attr(table.alignment(column))}>{ctx.inline(cell)}</td>")
                sb.append("</tr>")
            sb.append("</tbody>")

        sb.append("</table>")
        return sb.build()

    def _render_definition_list(self, dl: DefinitionList, ctx: RenderContext) -> str:
        sb = StringBuilder()
        sb.append("<dl>")
        for item in dl.items:
            sb.append(f"<dt>{ctx.inline(item.term)}</dt>")
            sb.extend(f"<dd>{ctx.inline(definition)}</dd>" for definition in item.definitions)
        sb.append("</dl>")
        return sb.build()

    # =========================================================================
    # Footnotes
    # =========================================================================

    def _render_footnotes(self, ctx: RenderContext) -> str:
        """Render footnotes section in definition order."""
        footnotes = ctx.state.sorted_footnotes()
        logger.debug("Rendering %d footnotes", len(footnotes))

        sb = StringBuilder()
        sb.append('<div class="footnotes"><hr /><ol class="footnote-list">')
        for footnote in footnotes:
            fn_id = escape_html(footnote.id)
            sb.append(
                f'<li id="fn-{fn_id}" class="footnote-item">{ctx.inline(footnote.content)} '
                f'<a href="#fnref-{fn_id}" class="footnote-backref">{BACKREF_GLYPH}</a></li>'
            )
        sb.append("</ol></div>")
        return sb.build()

"""
Marksmith: Markdown to HTML and back, with code highlighting.

A small converter for documentation and chat-style content: a line-oriented
block tokenizer, a regex-driven inline parser, an HTML renderer, a
BeautifulSoup-based HTML to Markdown converter, and lightweight highlighters
for JSON, YAML, JavaScript, TypeScript and Bash.

Quick Start:
    >>> from marksmith import render_markdown
    >>> render_markdown("# Hello **World**")
    '<h1>Hello <strong>World</strong></h1>'

    >>> # Or use the high-level Markdown class
    >>> from marksmith import Markdown, ParseConfig
    >>> md = Markdown(ParseConfig(highlight_code=True))
    >>> html = md("```json\\n{\\"a\\": 1}\\n```")

    >>> # And back again
    >>> from marksmith import html_to_markdown
    >>> html_to_markdown("<h2>Title</h2><p>Body</p>")
    '## Title\\n\\nBody'

Installation:
    pip install marksmith
"""

from __future__ import annotations

from marksmith.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from marksmith.errors import (
    ConversionError,
    HighlightError,
    MarksmithError,
    ParseError,
    RenderError,
)
from marksmith.highlighting import (
    highlight_syntax,
    is_nested_json,
    normalize_language,
    parse_nested_json,
    register_highlighter,
)
from marksmith.html_to_markdown import escape_markdown_chars, html_to_markdown
from marksmith.inline import parse_inline
from marksmith.renderers.html import HtmlRenderer
from marksmith.state import Footnote, LinkReference, ParserState
from marksmith.tokenizer import tokenize
from marksmith.tokens import (
    Blockquote,
    BlockToken,
    CodeBlock,
    DefinitionItem,
    DefinitionList,
    FootnoteDef,
    Heading,
    HorizontalRule,
    ListBlock,
    ListItem,
    Paragraph,
    Table,
)

__version__ = "0.1.0"


def render_markdown(
    text: str,
    *,
    config: ParseConfig | None = None,
    state: ParserState | None = None,
) -> str:
    """Convert Markdown text to HTML.

    Args:
        text: Markdown source text
        config: Conversion switches; the active context config if None
        state: Registry for link references and footnotes. A fresh one is
            created when None, so separate calls never share definitions.

    Returns:
        HTML string, "" for empty input

    Example:
        >>> render_markdown("Hello *world*")
        '<p>Hello <em>world</em></p>'
    """
    cfg = config if config is not None else get_parse_config()
    if state is None:
        state = ParserState()

    with parse_config_context(cfg):
        tokens = tokenize(text, state)
        renderer = HtmlRenderer(
            sanitize=cfg.sanitize,
            highlight=cfg.highlight_code,
            color_swatches=cfg.color_swatches,
        )
        return renderer.render(tokens, state)


class Markdown:
    """High-level Markdown processor bound to one configuration.

    Usage:
        >>> md = Markdown()
        >>> md("**bold**")
        '<p><strong>bold</strong></p>'

        >>> # Access the tokens
        >>> tokens, state = md.parse("[a]: https://example.com\\n\\n# Heading")
        >>> tokens[0].level
        1
        >>> state.get_link_ref("A").url
        'https://example.com'

    Thread Safety:
        The config is immutable and every call gets its own ParserState, so
        one instance can be shared across threads.

    """

    __slots__ = ("_config",)

    def __init__(self, config: ParseConfig | None = None) -> None:
        """Initialize Markdown processor.

        Args:
            config: Conversion switches (defaults if None)
        """
        self._config = config if config is not None else ParseConfig()

    @property
    def config(self) -> ParseConfig:
        return self._config

    def __call__(self, text: str) -> str:
        """Tokenize and render Markdown in one call.

        Args:
            text: Markdown source text

        Returns:
            HTML string

        """
        return render_markdown(text, config=self._config)

    def parse(self, text: str) -> tuple[list[BlockToken], ParserState]:
        """Tokenize Markdown without rendering.

        Args:
            text: Markdown source text

        Returns:
            Block tokens and the ParserState holding the document's link
            references and footnotes. Pass both to HtmlRenderer.render().

        """
        state = ParserState()
        with parse_config_context(self._config):
            return tokenize(text, state), state

    def render(self, tokens: list[BlockToken], state: ParserState | None = None) -> str:
        """Render tokens produced by parse() with this instance's config."""
        renderer = HtmlRenderer(
            sanitize=self._config.sanitize,
            highlight=self._config.highlight_code,
            color_swatches=self._config.color_swatches,
        )
        return renderer.render(tokens, state)


__all__ = [
    # Main API
    "render_markdown",
    "tokenize",
    "parse_inline",
    "html_to_markdown",
    "escape_markdown_chars",
    "highlight_syntax",
    "register_highlighter",
    "normalize_language",
    "is_nested_json",
    "parse_nested_json",
    "Markdown",
    "HtmlRenderer",
    # State
    "ParserState",
    "LinkReference",
    "Footnote",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Tokens
    "BlockToken",
    "Heading",
    "Paragraph",
    "CodeBlock",
    "ListBlock",
    "ListItem",
    "Table",
    "Blockquote",
    "HorizontalRule",
    "DefinitionItem",
    "DefinitionList",
    "FootnoteDef",
    # Errors
    "MarksmithError",
    "ParseError",
    "RenderError",
    "ConversionError",
    "HighlightError",
    # Version
    "__version__",
]

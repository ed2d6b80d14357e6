"""Block tokenizer dispatcher.

Recognizers share one signature, ``(lines, index) -> BlockMatch | None``, and
are tried in a fixed priority order at every position. The first match wins
and the dispatcher jumps to its ``end_index``. The paragraph recognizer always
matches, so every position makes progress.

Priority:
    fenced code > ATX heading > setext heading > rule > blockquote > table >
    definition list > list > indented code > JSON > YAML > paragraph

Structured data comes late so that lists such as ``- Buy: milk`` stay lists.

Thread Safety:
    Recognizer tables are immutable tuples. Definitions are written only to the
    ParserState passed by the caller.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeAlias

from marksmith.config import get_parse_config
from marksmith.errors import ParseError
from marksmith.state import ParserState
from marksmith.tokenizer.code import parse_fenced_code, parse_indented_code
from marksmith.tokenizer.definition_list import parse_definition_list
from marksmith.tokenizer.definitions import extract_definitions
from marksmith.tokenizer.headings import parse_atx_heading, parse_setext_heading
from marksmith.tokenizer.lists import parse_list
from marksmith.tokenizer.paragraph import parse_paragraph
from marksmith.tokenizer.quotes import parse_blockquote, parse_horizontal_rule
from marksmith.tokenizer.structured_data import parse_json_block, parse_yaml_block
from marksmith.tokenizer.table import parse_table
from marksmith.tokens import BlockMatch, BlockToken
from marksmith.utils.logger import get_logger
from marksmith.utils.text import normalize_newlines

logger = get_logger(__name__)

Recognizer: TypeAlias = Callable[[Sequence[str], int], BlockMatch | None]

_BLOCKS: tuple[Recognizer, ...] = (
    parse_fenced_code,
    parse_atx_heading,
    parse_setext_heading,
    parse_horizontal_rule,
    parse_blockquote,
    parse_table,
    parse_definition_list,
    parse_list,
    parse_indented_code,
)

_STRUCTURED: tuple[Recognizer, ...] = (parse_json_block, parse_yaml_block)


def recognizers(structured_data: bool = True) -> tuple[Recognizer, ...]:
    """Recognizers in priority order, excluding the paragraph fallback."""
    if structured_data:
        return _BLOCKS + _STRUCTURED
    return _BLOCKS


def tokenize_lines(lines: Sequence[str]) -> list[BlockToken]:
    """Tokenize already-split lines.

    Definitions are not extracted here; blockquote bodies reach this function
    after the enclosing document has been through ``extract_definitions``.
    """
    chain = recognizers(get_parse_config().structured_data_enabled)
    tokens: list[BlockToken] = []

    i = 0
    while i < len(lines):
        if not lines[i].strip():
            i += 1
            continue

        for recognize in chain:
            match = recognize(lines, i)
            if match is not None:
                break
        else:
            match = parse_paragraph(lines, i)

        tokens.append(match.token)
        i = match.end_index

    return tokens


def tokenize(text: str, state: ParserState | None = None) -> list[BlockToken]:
    """Split Markdown text into block tokens.

    Link reference and footnote definitions are registered on ``state`` and
    removed from the text first.

    Args:
        text: Markdown source
        state: Registry for this conversion; a throwaway one is used if omitted

    Returns:
        Block tokens in document order

    Raises:
        ParseError: If text is not a string
    """
    if not text:
        return []
    if not isinstance(text, str):
        raise ParseError(f"Expected Markdown text, got {type(text).__name__}")

    if state is None:
        state = ParserState()

    source = extract_definitions(normalize_newlines(text), state)
    tokens = tokenize_lines(source.split("\n"))
    logger.debug(
        "Tokenized %d blocks (%d link refs, %d footnotes)",
        len(tokens),
        len(state.link_refs),
        len(state.footnotes),
    )
    return tokens

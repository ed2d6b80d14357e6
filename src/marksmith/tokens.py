"""Block tokens produced by the tokenizer.

All tokens are frozen dataclasses with slots, so a token list can be shared
between threads and pattern-matched in the renderer:

Token kinds:
├── Heading          level 1-6, inline content
├── Paragraph        lines joined with newlines
├── CodeBlock        fenced, indented, or auto-detected JSON/YAML
├── ListBlock        ordered/unordered, items carry nested children
├── Table            headers, per-column alignment, body rows
├── Blockquote       raw content plus its own token list
├── HorizontalRule
├── DefinitionList   terms with one or more definitions
└── FootnoteDef      captured into ParserState, never emitted

Every block recognizer returns a BlockMatch (token plus the index of the first
line it did not consume) or None when the line does not start that block.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, NamedTuple, TypeAlias

Alignment: TypeAlias = Literal["left", "center", "right"] | None


@dataclass(frozen=True, slots=True)
class Heading:
    """ATX (``# Title``) or setext (underlined) heading."""

    level: int
    content: str


@dataclass(frozen=True, slots=True)
class Paragraph:
    """Run of text lines; newlines are kept and rendered as ``<br />``."""

    content: str


@dataclass(frozen=True, slots=True)
class CodeBlock:
    """Literal code.

    Attributes:
        language: Language tag from the opening fence, "" when absent
        content: Code text with fence or indentation removed
        auto_detected: True when the block was unfenced JSON/YAML recognised
            by its structure
    """

    language: str
    content: str
    auto_detected: bool = False


@dataclass(frozen=True, slots=True)
class ListItem:
    """One list entry.

    Attributes:
        content: Inline text of the item (continuation lines joined by newlines)
        checked: None for ordinary items; True/False for task items
        children: Nested blocks (currently nested lists) owned by this item
    """

    content: str
    checked: bool | None = None
    children: tuple[BlockToken, ...] = ()

    @property
    def is_task(self) -> bool:
        return self.checked is not None


@dataclass(frozen=True, slots=True)
class ListBlock:
    """Ordered or unordered list.

    ``start`` is only meaningful for ordered lists and comes from the first
    item's number.
    """

    ordered: bool
    items: tuple[ListItem, ...]
    start: int = 1

    @property
    def is_task_list(self) -> bool:
        """A single task item turns the whole list into a task list."""
        return any(item.is_task for item in self.items)


@dataclass(frozen=True, slots=True)
class Table:
    """Pipe table.

    ``alignments`` may be shorter than ``headers``; missing columns have no
    alignment.
    """

    headers: tuple[str, ...]
    alignments: tuple[Alignment, ...]
    rows: tuple[tuple[str, ...], ...] = ()

    def alignment(self, column: int) -> Alignment:
        if column < len(self.alignments):
            return self.alignments[column]
        return None


@dataclass(frozen=True, slots=True)
class Blockquote:
    """Quoted block; ``children`` is ``content`` tokenized on its own."""

    content: str
    children: tuple[BlockToken, ...] = ()


@dataclass(frozen=True, slots=True)
class HorizontalRule:
    """Thematic break (``---``, ``***``, ``___``)."""


@dataclass(frozen=True, slots=True)
class DefinitionItem:
    term: str
    definitions: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class DefinitionList:
    items: tuple[DefinitionItem, ...]


@dataclass(frozen=True, slots=True)
class FootnoteDef:
    """``[^id]: content``.

    Definitions are registered on ParserState during tokenization and are not
    part of the token stream; the type exists for callers that build token
    lists by hand.
    """

    id: str
    content: str


BlockToken: TypeAlias = (
    Heading
    | Paragraph
    | CodeBlock
    | ListBlock
    | Table
    | Blockquote
    | HorizontalRule
    | DefinitionList
    | FootnoteDef
)


class BlockMatch(NamedTuple):
    """Successful recognizer result."""

    token: BlockToken
    end_index: int


__all__ = [
    "Alignment",
    "BlockMatch",
    "BlockToken",
    "Blockquote",
    "CodeBlock",
    "DefinitionItem",
    "DefinitionList",
    "FootnoteDef",
    "Heading",
    "HorizontalRule",
    "ListBlock",
    "ListItem",
    "Paragraph",
    "Table",
]

"""Per-conversion registry of link references and footnote definitions.

The tokenizer writes definitions it strips out of the source
(``[id]: url "title"`` and ``[^id]: text``); the inline parser and the
footnotes section of the renderer read them back.

Thread Safety:
    A ParserState belongs to exactly one conversion. render_markdown() builds
    a fresh instance per call and passes it down explicitly, so concurrent
    conversions never share reference or footnote ids. There is no module-level
    instance to fall back on.

Usage:
    >>> state = ParserState()
    >>> state.set_footnote("note", "A side remark")
    Footnote(id='note', content='A side remark', index=1)
    >>> state.get_footnote("note").index
    1
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class LinkReference:
    """Target of a reference-style link.

    Attributes:
        url: Link destination
        title: Optional title attribute
    """

    url: str
    title: str | None = None


@dataclass(frozen=True, slots=True)
class Footnote:
    """A footnote definition with its display number.

    Attributes:
        id: Identifier used in ``[^id]`` references
        content: Raw Markdown content of the definition
        index: 1-based display number, in order of definition
    """

    id: str
    content: str
    index: int


@dataclass(slots=True)
class ParserState:
    """Mutable registry filled during tokenization, read during rendering.

    Link reference ids are case-insensitive and stored lowercased. Footnote
    ids are kept exactly as written.

    Footnote numbering follows definition order, not reference order. The
    counter only ever grows within one conversion: redefining an id gives it
    the next number instead of reusing the old one.
    """

    link_refs: dict[str, LinkReference] = field(default_factory=dict)
    footnotes: dict[str, Footnote] = field(default_factory=dict)
    next_footnote_index: int = 1

    def set_link_ref(self, ref_id: str, url: str, title: str | None = None) -> LinkReference:
        """Register a reference-style link target."""
        ref = LinkReference(url=url, title=title)
        self.link_refs[ref_id.lower()] = ref
        return ref

    def get_link_ref(self, ref_id: str) -> LinkReference | None:
        """Look up a link reference, ignoring case."""
        return self.link_refs.get(ref_id.lower())

    def set_footnote(self, footnote_id: str, content: str) -> Footnote:
        """Register a footnote definition and assign its display number.

        Args:
            footnote_id: Identifier from ``[^id]:``
            content: Definition text

        Returns:
            The stored Footnote
        """
        footnote = Footnote(id=footnote_id, content=content, index=self.next_footnote_index)
        self.footnotes[footnote_id] = footnote
        self.next_footnote_index += 1
        return footnote

    def get_footnote(self, footnote_id: str) -> Footnote | None:
        """Look up a footnote definition by its exact id."""
        return self.footnotes.get(footnote_id)

    @property
    def has_footnotes(self) -> bool:
        """True if at least one footnote has been defined."""
        return bool(self.footnotes)

    def sorted_footnotes(self) -> list[Footnote]:
        """Return footnotes in ascending display order."""
        return sorted(self.footnotes.values(), key=lambda fn: fn.index)

    def reset(self) -> None:
        """Forget every definition and restart footnote numbering at 1."""
        self.link_refs.clear()
        self.footnotes.clear()
        self.next_footnote_index = 1

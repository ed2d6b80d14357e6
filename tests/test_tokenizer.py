"""Tests for the block tokenizer and its recognizers."""

from marksmith import ParserState, tokenize
from marksmith.tokenizer import (
    parse_atx_heading,
    parse_blockquote,
    parse_definition_list,
    parse_fenced_code,
    parse_horizontal_rule,
    parse_indented_code,
    parse_paragraph,
    parse_pipe_row,
    parse_setext_heading,
    parse_table,
    recognizers,
)
from marksmith.tokens import (
    Blockquote,
    CodeBlock,
    DefinitionItem,
    DefinitionList,
    Heading,
    HorizontalRule,
    ListBlock,
    Paragraph,
    Table,
)


class TestDispatcher:
    """Recognizer ordering and fallthrough."""

    def test_empty_input(self) -> None:
        """Empty text produces no tokens."""
        assert tokenize("") == []

    def test_blank_lines_only(self) -> None:
        """Whitespace-only input produces no tokens."""
        assert tokenize("\n  \n\t\n") == []

    def test_mixed_document(self) -> None:
        """Blocks come out in document order."""
        tokens = tokenize("# Title\n\nSome text\n\n---\n\n- item")
        assert [type(token) for token in tokens] == [
            Heading,
            Paragraph,
            HorizontalRule,
            ListBlock,
        ]

    def test_crlf_is_normalized(self) -> None:
        """Windows line endings behave like LF."""
        assert tokenize("line one\r\nline two") == [Paragraph("line one\nline two")]

    def test_recognizer_order(self) -> None:
        """Structured data detection comes after every Markdown block."""
        names = [fn.__name__ for fn in recognizers()]
        assert names.index("parse_list") < names.index("parse_json_block")
        assert names.index("parse_indented_code") < names.index("parse_json_block")
        assert names[-2:] == ["parse_json_block", "parse_yaml_block"]

    def test_recognizers_without_structured_data(self) -> None:
        """Disabling structured data drops exactly the JSON/YAML recognizers."""
        names = {fn.__name__ for fn in recognizers(structured_data=False)}
        assert "parse_json_block" not in names
        assert "parse_yaml_block" not in names
        assert "parse_table" in names


class TestHeadings:
    """ATX and setext headings."""

    def test_atx_levels(self) -> None:
        """One to six hashes give levels one to six."""
        for level in range(1, 7):
            assert tokenize(f"{'#' * level} Title") == [Heading(level, "Title")]

    def test_seven_hashes_is_paragraph(self) -> None:
        """Seven hashes is not a heading."""
        assert tokenize("####### Seven") == [Paragraph("####### Seven")]

    def test_hash_without_space(self) -> None:
        """#tag is plain text."""
        assert tokenize("#tag") == [Paragraph("#tag")]

    def test_empty_atx_heading(self) -> None:
        """A bare marker is not a heading."""
        assert parse_atx_heading(["# "], 0) is None

    def test_atx_content_is_trimmed(self) -> None:
        """Trailing whitespace is dropped from heading text."""
        match = parse_atx_heading(["##   Spaced   "], 0)
        assert match is not None
        assert match.token == Heading(2, "Spaced")
        assert match.end_index == 1

    def test_setext_levels(self) -> None:
        """= underline is level 1, - underline is level 2."""
        assert tokenize("Title\n=====") == [Heading(1, "Title")]
        assert tokenize("Title\n---") == [Heading(2, "Title")]

    def test_setext_needs_text(self) -> None:
        """A list item followed by a rule stays a list and a rule."""
        tokens = tokenize("- item\n---")
        assert isinstance(tokens[0], ListBlock)
        assert tokens[1] == HorizontalRule()

    def test_setext_at_end_of_input(self) -> None:
        """The last line cannot have an underline."""
        assert parse_setext_heading(["Title"], 0) is None


class TestCodeBlocks:
    """Fenced and indented code."""

    def test_fenced_with_language(self) -> None:
        """The info string becomes the language."""
        tokens = tokenize("```python\nprint('hi')\n```")
        assert tokens == [CodeBlock("python", "print('hi')")]

    def test_fenced_keeps_inner_blank_lines(self) -> None:
        """Content is kept verbatim."""
        tokens = tokenize("```\na\n\n# not a heading\n```")
        assert tokens == [CodeBlock("", "a\n\n# not a heading")]

    def test_unterminated_fence_runs_to_end(self) -> None:
        """A missing closing fence consumes the rest of the input."""
        match = parse_fenced_code(["```js", "let a", "let b"], 0)
        assert match is not None
        assert match.token == CodeBlock("js", "let a\nlet b")
        assert match.end_index == 3

    def test_indented_code(self) -> None:
        """Four spaces or a tab start indented code."""
        assert tokenize("    code line\n    second") == [CodeBlock("", "code line\nsecond")]
        assert tokenize("\tx = 1") == [CodeBlock("", "x = 1")]

    def test_indented_code_trailing_blanks(self) -> None:
        """Blank lines at the end are consumed but not kept."""
        match = parse_indented_code(["    a", "", "    b", "", "text"], 0)
        assert match is not None
        assert match.token == CodeBlock("", "a\n\nb")
        assert match.end_index == 4


class TestBlockquotes:
    """Quoted blocks and their children."""

    def test_simple_quote(self) -> None:
        """Markers are stripped and the body is tokenized."""
        tokens = tokenize("> quote\n> more")
        assert tokens == [
            Blockquote(content="quote\nmore", children=(Paragraph("quote\nmore"),))
        ]

    def test_quote_with_heading(self) -> None:
        """Quotes can hold other blocks."""
        match = parse_blockquote(["> # Title", "> body"], 0)
        assert match is not None
        assert match.token.children == (Heading(1, "Title"), Paragraph("body"))

    def test_nested_quote(self) -> None:
        """A quote inside a quote is tokenized recursively."""
        (outer,) = tokenize("> > inner")
        assert isinstance(outer, Blockquote)
        (inner,) = outer.children
        assert isinstance(inner, Blockquote)
        assert inner.children == (Paragraph("inner"),)

    def test_not_a_quote(self) -> None:
        """Lines without > do not match."""
        assert parse_blockquote(["plain"], 0) is None


class TestHorizontalRules:
    """Thematic breaks."""

    def test_rule_characters(self) -> None:
        """Three or more -, * or _ make a rule."""
        for line in ("---", "***", "___", "-----"):
            assert parse_horizontal_rule([line], 0) is not None

    def test_two_characters_is_not_a_rule(self) -> None:
        """Two characters are too few."""
        assert parse_horizontal_rule(["--"], 0) is None


class TestTables:
    """Pipe tables."""

    def test_basic_table(self) -> None:
        """Headers, separator and one row."""
        tokens = tokenize("| A | B |\n|---|---|\n| 1 | 2 |")
        assert tokens == [Table(("A", "B"), (None, None), (("1", "2"),))]

    def test_alignments(self) -> None:
        """Colons set left, center and right alignment."""
        match = parse_table(["| a | b | c | d |", "|:--|:-:|--:|---|"], 0)
        assert match is not None
        assert match.token.alignments == ("left", "center", "right", None)

    def test_missing_separator_is_paragraph(self) -> None:
        """Without a separator row the lines form a paragraph."""
        assert tokenize("| A | B |\n| 1 | 2 |") == [Paragraph("| A | B |\n| 1 | 2 |")]

    def test_table_ends_at_blank_line(self) -> None:
        """Body rows stop at the first blank line."""
        tokens = tokenize("| A |\n|---|\n| 1 |\n\n| 2 |")
        assert isinstance(tokens[0], Table)
        assert tokens[0].rows == (("1",),)
        assert tokens[1] == Paragraph("| 2 |")

    def test_pipe_row_escaped_pipe(self) -> None:
        r"""\| is a literal pipe inside a cell."""
        assert parse_pipe_row(r"| a | b \| c |") == ["a", "b | c"]

    def test_pipe_row_without_outer_pipes(self) -> None:
        """Outer pipes are optional."""
        assert parse_pipe_row("x | y") == ["x", "y"]


class TestDefinitionLists:
    """Term and definition groups."""

    def test_single_definition(self) -> None:
        """One term, one definition."""
        assert tokenize("Term\n: Definition") == [
            DefinitionList((DefinitionItem("Term", ("Definition",)),))
        ]

    def test_multiple_terms_and_definitions(self) -> None:
        """Blank lines between groups keep the list open."""
        match = parse_definition_list(
            ["Term", ": One", ": Two", "", "Other", ": Three"], 0
        )
        assert match is not None
        assert match.token == DefinitionList(
            (
                DefinitionItem("Term", ("One", "Two")),
                DefinitionItem("Other", ("Three",)),
            )
        )
        assert match.end_index == 6

    def test_term_without_definition(self) -> None:
        """A term line alone is not a definition list."""
        assert parse_definition_list(["Term", "next"], 0) is None


class TestParagraphs:
    """The fallback recognizer."""

    def test_lines_are_joined(self) -> None:
        """Consecutive lines form one paragraph."""
        assert tokenize("line one\nline two") == [Paragraph("line one\nline two")]

    def test_blank_line_separates(self) -> None:
        """A blank line ends the paragraph."""
        assert tokenize("one\n\ntwo") == [Paragraph("one"), Paragraph("two")]

    def test_heading_interrupts(self) -> None:
        """An ATX heading line starts a new block."""
        assert tokenize("Text\n# Heading") == [Paragraph("Text"), Heading(1, "Heading")]

    def test_list_interrupts(self) -> None:
        """A list marker starts a new block."""
        tokens = tokenize("Text\n- item")
        assert tokens[0] == Paragraph("Text")
        assert isinstance(tokens[1], ListBlock)

    def test_first_line_always_taken(self) -> None:
        """The fallback always makes progress."""
        match = parse_paragraph(["# not really", "# next"], 0)
        assert match.token == Paragraph("# not really")
        assert match.end_index == 1


class TestDefinitions:
    """Reference and footnote definitions are pulled out first."""

    def test_link_reference_extracted(self) -> None:
        """The definition line disappears and lands on the state."""
        state = ParserState()
        tokens = tokenize("[ref]: https://example.com\n\nSee [ref]", state)
        assert tokens == [Paragraph("See [ref]")]
        ref = state.get_link_ref("REF")
        assert ref is not None
        assert ref.url == "https://example.com"

    def test_link_reference_title(self) -> None:
        """Double or single quoted titles are captured."""
        state = ParserState()
        tokenize("[a]: https://a.com \"Title A\"\n[b]: <https://b.com> 'Title B'", state)
        assert state.get_link_ref("a") is not None
        assert state.get_link_ref("a").title == "Title A"  # type: ignore[union-attr]
        assert state.get_link_ref("b").url == "https://b.com"  # type: ignore[union-attr]
        assert state.get_link_ref("b").title == "Title B"  # type: ignore[union-attr]

    def test_footnote_extracted(self) -> None:
        """Footnote definitions are numbered as they appear."""
        state = ParserState()
        tokens = tokenize("Text[^1]\n\n[^1]: The note\n[^x]: Another", state)
        assert tokens == [Paragraph("Text[^1]")]
        assert state.get_footnote("1").index == 1  # type: ignore[union-attr]
        assert state.get_footnote("x").content == "Another"  # type: ignore[union-attr]

    def test_definitions_in_fences_are_kept(self) -> None:
        """Lines inside fenced code are never treated as definitions."""
        state = ParserState()
        tokens = tokenize("```\n[a]: https://example.com\n```", state)
        assert state.link_refs == {}
        assert tokens == [CodeBlock("", "[a]: https://example.com")]

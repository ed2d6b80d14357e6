"""Tests for HTML to Markdown conversion."""

import logging

import pytest
from bs4 import BeautifulSoup
from bs4.element import Tag

from marksmith import ConversionError, escape_markdown_chars, html_to_markdown, render_markdown
from marksmith.html_to_markdown import convert_heading, get_heading_level, is_heading_element


def first_tag(html: str) -> Tag:
    tag = BeautifulSoup(html, "html.parser").find(True)
    assert isinstance(tag, Tag)
    return tag


class TestInlineFormatting:
    """Formatting tags inside paragraphs."""

    def test_bold(self) -> None:
        """strong becomes **."""
        assert html_to_markdown("<p>Hello <strong>World</strong></p>") == "Hello **World**"

    def test_nested_formatting(self) -> None:
        """strong around em gives ***."""
        assert html_to_markdown("<p><strong><em>x</em></strong></p>") == "***x***"

    def test_alternate_tags(self) -> None:
        """b, i and s map like strong, em and del."""
        assert html_to_markdown("<p><b>a</b> <i>b</i> <s>c</s></p>") == "**a** *b* ~~c~~"

    def test_extended_formatting(self) -> None:
        """mark, sup and sub."""
        assert html_to_markdown("<p><mark>hi</mark> x<sup>2</sup> H<sub>2</sub>O</p>") == (
            "==hi== x^2^ H~2~O"
        )

    def test_empty_formatting_is_dropped(self) -> None:
        """Wrappers around whitespace produce nothing."""
        assert html_to_markdown("<p>a<strong> </strong>b</p>") == "ab"

    def test_inline_code(self) -> None:
        """code outside pre becomes a backtick span."""
        assert html_to_markdown("<p>use <code>x = 1</code> here</p>") == "use `x = 1` here"

    def test_line_break(self) -> None:
        """br becomes a hard break."""
        assert html_to_markdown("<p>a<br>b</p>") == "a  \nb"

    def test_lone_break(self) -> None:
        """A document of only a br is empty."""
        assert html_to_markdown("<br>") == ""

    def test_links_and_images(self) -> None:
        """a and img keep their targets."""
        assert html_to_markdown('<p><a href="https://x.com">text</a></p>') == (
            "[text](https://x.com)"
        )
        assert html_to_markdown('<img src="/a.png" alt="A">') == "![A](/a.png)"

    def test_formatted_link_text(self) -> None:
        """Link text keeps its formatting."""
        assert html_to_markdown('<p><a href="/x"><em>go</em></a></p>') == "[*go*](/x)"

    def test_color_preview(self) -> None:
        """Colour previews collapse back to the hex code."""
        assert html_to_markdown(render_markdown("Color #ff0000 here")) == "Color #ff0000 here"


class TestBlocks:
    """Block elements."""

    def test_headings(self) -> None:
        """h1 to h6 become ATX headings."""
        for level in range(1, 7):
            html = f"<h{level}>Title</h{level}>"
            assert html_to_markdown(html) == f"{'#' * level} Title"

    def test_paragraphs_are_separated(self) -> None:
        """Each paragraph is followed by a blank line."""
        assert html_to_markdown("<p>one</p><p>two</p>") == "one\n\ntwo"

    def test_definition_list(self) -> None:
        """Each dt starts a term line and each dd adds a ``: `` line."""
        html = "<dl><dt>Term</dt><dd>One</dd><dd>Two</dd><dt>Other</dt><dd>Three</dd></dl>"
        assert html_to_markdown(html) == "Term\n: One\n: Two\nOther\n: Three"

    def test_definition_list_is_a_block(self) -> None:
        """A paragraph after the list is separated by a blank line."""
        html = "<dl><dt><b>Term</b></dt><dd>Definition</dd></dl><p>after</p>"
        assert html_to_markdown(html) == "**Term**\n: Definition\n\nafter"

    def test_rendered_definition_list(self) -> None:
        """A rendered definition list converts back to its source."""
        assert html_to_markdown(render_markdown("Term\n: Definition")) == "Term\n: Definition"

    def test_horizontal_rule(self) -> None:
        """hr becomes ---."""
        assert html_to_markdown("<p>a</p><hr><p>b</p>") == "a\n\n---\n\nb"

    def test_code_block_language(self) -> None:
        """The language-* class becomes the fence info string."""
        html = '<pre><code class="language-python">x = 1 &lt; 2</code></pre>'
        assert html_to_markdown(html) == "```python\nx = 1 < 2\n```"

    def test_code_block_without_code_tag(self) -> None:
        """A bare pre still becomes a fence."""
        assert html_to_markdown("<pre>raw</pre>") == "```\nraw\n```"

    def test_code_block_mount(self) -> None:
        """Editor code blocks are read from their mount point."""
        html = (
            '<div data-code-block-id="1"><div class="code-viewer-mount-point" '
            'data-content="x = 1" data-language="python"></div></div>'
        )
        assert html_to_markdown(html) == "```python\nx = 1\n```"

    def test_empty_code_block_mount(self) -> None:
        """A mount without a mount point gives an empty fence."""
        assert html_to_markdown('<div data-code-block-id="1"></div>') == "```\n\n```"

    def test_blockquote(self) -> None:
        """Every line is quoted; blank lines become a bare >."""
        html = "<blockquote><p>quote</p><p>two</p></blockquote>"
        assert html_to_markdown(html) == "> quote\n>\n> two"

    def test_comments_are_dropped(self) -> None:
        """HTML comments never reach the output."""
        assert html_to_markdown("<p>a<!-- hidden -->b</p>") == "ab"

    def test_zero_width_spaces_removed(self) -> None:
        """U+200B is stripped everywhere."""
        assert html_to_markdown("<p>a\u200bb</p>") == "ab"

    def test_excess_blank_lines_collapse(self) -> None:
        """At most one blank line survives between blocks."""
        assert html_to_markdown("<p>a</p>\n\n\n<p>b</p>") == "a\n\nb"

    def test_unknown_tags_convert_children(self, caplog: pytest.LogCaptureFixture) -> None:
        """Unknown elements are walked and logged at debug level."""
        caplog.set_level(logging.DEBUG, logger="marksmith")
        assert html_to_markdown("<custom-tag><p>inside</p></custom-tag>") == "inside"
        assert "No converter for <custom-tag>" in caplog.text


class TestLists:
    """ul and ol."""

    def test_unordered(self) -> None:
        """ul items get dashes."""
        assert html_to_markdown("<ul><li>a</li><li>b</li></ul>") == "- a\n- b"

    def test_ordered_start(self) -> None:
        """ol numbering honours start."""
        assert html_to_markdown('<ol start="3"><li>a</li><li>b</li></ol>') == "3. a\n4. b"

    def test_nested(self) -> None:
        """Nested lists are indented under their item."""
        html = "<ul><li>Parent<ol><li>Child</li></ol></li><li>Next</li></ul>"
        assert html_to_markdown(html) == "- Parent\n  1. Child\n- Next"

    def test_checkboxes(self) -> None:
        """Checkbox inputs become task markers."""
        html = (
            '<ul><li><input type="checkbox" disabled> Todo</li>'
            '<li><input type="checkbox" checked disabled> Done</li></ul>'
        )
        assert html_to_markdown(html) == "- [ ] Todo\n- [x] Done"


class TestTables:
    """table."""

    def test_alignment(self) -> None:
        """text-align on header cells becomes the separator row."""
        html = (
            "<table><thead><tr>"
            '<th style="text-align: left">A</th><th style="text-align: center">B</th>'
            '<th style="text-align: right">C</th><th>D</th>'
            "</tr></thead><tbody><tr><td>1</td><td>2</td><td>3</td><td>4</td></tr></tbody>"
            "</table>"
        )
        assert html_to_markdown(html) == (
            "| A | B | C | D |\n| :--- | :---: | ---: | --- |\n| 1 | 2 | 3 | 4 |"
        )

    def test_without_thead(self) -> None:
        """The first row is the header when there is no thead."""
        html = "<table><tr><td>a</td><td>b</td></tr><tr><td>1</td><td>2</td></tr></table>"
        assert html_to_markdown(html) == "| a | b |\n| --- | --- |\n| 1 | 2 |"

    def test_cell_formatting_and_newlines(self) -> None:
        """Cells keep inline formatting; newlines become spaces."""
        html = "<table><tr><td><b>x</b>\ny</td></tr></table>"
        assert html_to_markdown(html) == "| **x** y |\n| --- |"

    def test_empty_table(self) -> None:
        """Tables without rows vanish."""
        assert html_to_markdown("<table></table>") == ""


class TestFootnotes:
    """References and the footnotes section."""

    def test_reference_from_href(self) -> None:
        """The id comes from the #fn- href."""
        html = '<p>Text<a href="#fn-note" class="footnote-ref">[1]</a></p>'
        assert html_to_markdown(html) == "Text[^note]"

    def test_reference_without_href(self) -> None:
        """The link text is used when the href is not a footnote anchor."""
        html = '<p>Text<a href="#x" class="footnote-ref">[3]</a></p>'
        assert html_to_markdown(html) == "Text[^3]"

    def test_section(self) -> None:
        """Footnote items become definitions; back-references disappear."""
        html = (
            '<div class="footnotes"><hr /><ol class="footnote-list">'
            '<li id="fn-a" class="footnote-item">First <a href="#fnref-a" '
            'class="footnote-backref">↩</a></li>'
            '<li id="fn-b" class="footnote-item"><em>Second</em></li>'
            "</ol></div>"
        )
        assert html_to_markdown(html) == "[^a]: First\n[^b]: *Second*"


class TestRoundTrip:
    """Markdown rendered to HTML converts back."""

    @pytest.mark.parametrize(
        "markdown",
        [
            "# Title\n\nSome **bold** and *italic* text",
            "- one\n- two\n  1. nested",
            "- [ ] Todo\n- [x] Done",
            "Text[^1]\n\n[^1]: Note",
            "```js\nconst a = 1;\n```",
            "> quoted",
            "Term\n: First\n: Second\nOther\n: Third",
            "[link](https://example.com) and ![img](/a.png)",
        ],
    )
    def test_round_trip(self, markdown: str) -> None:
        """Conversion back reproduces the source."""
        assert html_to_markdown(render_markdown(markdown)) == markdown

    def test_table_alignment(self) -> None:
        """Alignment survives, written in the long form."""
        html = render_markdown("| A | B |\n|:--|--:|\n| 1 | 2 |")
        assert html_to_markdown(html) == "| A | B |\n| :--- | ---: |\n| 1 | 2 |"


class TestEntryPoint:
    """Argument handling, hooks and helpers."""

    def test_custom_processor(self) -> None:
        """The processor runs before the built-in converters."""

        def tokens(tag: Tag) -> str | None:
            if tag.has_attr("data-token-id"):
                return "{{" + str(tag["data-token-id"]) + "}}"
            return None

        html = '<p>Before <span data-token-id="42"></span> after</p>'
        assert html_to_markdown(html, processor=tokens) == "Before {{42}} after"

    def test_processor_can_fall_through(self) -> None:
        """Returning None keeps the default conversion."""
        assert html_to_markdown("<p><b>x</b></p>", processor=lambda tag: None) == "**x**"

    def test_tag_input_converts_children(self) -> None:
        """A parsed element is converted through its children."""
        assert html_to_markdown(first_tag("<div><p>a</p><p>b</p></div>")) == "a\n\nb"

    def test_pre_tag_input(self) -> None:
        """Passing a pre gives its raw code."""
        assert html_to_markdown(first_tag("<pre><code>x = 1</code></pre>")) == "x = 1"

    def test_wrong_type(self) -> None:
        """Anything but markup or a Tag is rejected."""
        with pytest.raises(ConversionError, match="got int"):
            html_to_markdown(42)  # type: ignore[arg-type]

    def test_escape_markdown_chars(self) -> None:
        """Special characters get a backslash."""
        assert escape_markdown_chars("*bold* and _italic_") == r"\*bold\* and \_italic\_"
        assert escape_markdown_chars("1. item") == r"1\. item"
        assert escape_markdown_chars("plain") == "plain"


class TestHeadingHelpers:
    """Heading helper functions."""

    def test_get_heading_level(self) -> None:
        """Level from the tag name, 0 for other tags."""
        assert get_heading_level(first_tag("<h3>x</h3>")) == 3
        assert get_heading_level(first_tag("<p>x</p>")) == 0
        assert get_heading_level(first_tag("<h7>x</h7>")) == 0

    def test_is_heading_element(self) -> None:
        """Only h1 to h6."""
        assert is_heading_element(first_tag("<h1>x</h1>"))
        assert not is_heading_element(first_tag("<header>x</header>"))

    def test_convert_heading(self) -> None:
        """Text is trimmed; empty headings vanish."""
        assert convert_heading(first_tag("<h2>  Spaced  </h2>")) == "## Spaced\n\n"
        assert convert_heading(first_tag("<h2> </h2>")) == ""
        assert convert_heading(first_tag("<p>x</p>")) == ""

"""Tests for inline parsing: emphasis, code, links, escapes and extras."""

from hypothesis import given
from hypothesis import strategies as st

from marksmith import ParserState, parse_inline
from marksmith.inline import apply_escapes, revert_escapes
from marksmith.utils.text import escape_html


class TestEmphasis:
    """Paired delimiters."""

    def test_bold_and_italic(self) -> None:
        """** is strong and * is em."""
        assert parse_inline("**bold** and *italic*") == (
            "<strong>bold</strong> and <em>italic</em>"
        )

    def test_bold_italic(self) -> None:
        """*** nests em inside strong."""
        assert parse_inline("***both***") == "<strong><em>both</em></strong>"

    def test_underscore_forms(self) -> None:
        """__x__ and _x_ work at word boundaries."""
        assert parse_inline("__bold__ _it_") == "<strong>bold</strong> <em>it</em>"

    def test_snake_case_is_left_alone(self) -> None:
        """Underscores inside words are literal."""
        assert parse_inline("snake_case_name") == "snake_case_name"

    def test_decorations(self) -> None:
        """Strikethrough, highlight, superscript and subscript."""
        assert parse_inline("~~gone~~") == "<del>gone</del>"
        assert parse_inline("==hot==") == "<mark>hot</mark>"
        assert parse_inline("x^2^") == "x<sup>2</sup>"
        assert parse_inline("H~2~O") == "H<sub>2</sub>O"


class TestCodeSpans:
    """Backtick spans are opaque to other rules."""

    def test_code_span(self) -> None:
        """Emphasis markers inside code stay literal."""
        assert parse_inline("use `*x*` here") == "use <code>*x*</code> here"

    def test_code_span_is_escaped(self) -> None:
        """HTML inside code is escaped when sanitizing."""
        assert parse_inline("`<b>`") == "<code>&lt;b&gt;</code>"

    def test_link_syntax_in_code(self) -> None:
        """Links are not formed inside code."""
        assert parse_inline("`[a](b)`") == "<code>[a](b)</code>"


class TestEscapes:
    """Backslash escapes."""

    def test_escaped_asterisks(self) -> None:
        r"""\* is a literal asterisk."""
        assert parse_inline(r"\*not italic\*") == "*not italic*"

    def test_escaped_greater_than(self) -> None:
        r"""\> survives sanitizing as &gt;."""
        assert parse_inline(r"\> quote") == "&gt; quote"

    def test_other_backslashes_kept(self) -> None:
        """A backslash before an ordinary character is untouched."""
        assert parse_inline(r"C:\path") == r"C:\path"

    def test_placeholders_round_trip(self) -> None:
        """apply_escapes then revert_escapes drops only the backslashes."""
        assert revert_escapes(apply_escapes(r"\[x\] \# \!")) == "[x] # !"


class TestLinks:
    """Inline links, images and autolinks."""

    def test_link_with_title(self) -> None:
        """Quoted titles become the title attribute."""
        assert parse_inline('[text](https://example.com "Title")') == (
            '<a href="https://example.com" title="Title">text</a>'
        )

    def test_image(self) -> None:
        """Images run before links."""
        assert parse_inline("![alt](/img.png)") == '<img src="/img.png" alt="alt" />'

    def test_url_autolink(self) -> None:
        """<https://...> becomes a link."""
        assert parse_inline("<https://example.com>") == (
            '<a href="https://example.com">https://example.com</a>'
        )

    def test_email_autolink(self) -> None:
        """<user@host> becomes a mailto link."""
        assert parse_inline("<me@example.com>") == (
            '<a href="mailto:me@example.com">me@example.com</a>'
        )


class TestReferenceLinks:
    """Links resolved through ParserState."""

    def make_state(self) -> ParserState:
        state = ParserState()
        state.set_link_ref("docs", "https://docs.example.com")
        return state

    def test_full_reference(self) -> None:
        """[text][id] uses the id."""
        assert parse_inline("[Read][docs]", state=self.make_state()) == (
            '<a href="https://docs.example.com">Read</a>'
        )

    def test_collapsed_reference(self) -> None:
        """[id][] uses the text as the id."""
        assert parse_inline("[Docs][]", state=self.make_state()) == (
            '<a href="https://docs.example.com">Docs</a>'
        )

    def test_shortcut_reference(self) -> None:
        """[id] alone resolves too."""
        assert parse_inline("see [docs]", state=self.make_state()) == (
            'see <a href="https://docs.example.com">docs</a>'
        )

    def test_undefined_reference_is_literal(self) -> None:
        """Unknown ids leave the brackets as written."""
        text = "[text][undefined-ref]"
        assert parse_inline(text, state=self.make_state()) == text


class TestFootnoteReferences:
    """[^id] links."""

    def test_known_footnote(self) -> None:
        """Defined footnotes link to their entry by number."""
        state = ParserState()
        state.set_footnote("note", "The note")
        assert parse_inline("Text[^note]", state=state) == (
            'Text<a href="#fn-note" id="fnref-note" class="footnote-ref">[1]</a>'
        )

    def test_unknown_footnote(self) -> None:
        """Undefined footnotes stay literal."""
        state = ParserState()
        state.set_footnote("1", "x")
        assert parse_inline("Text[^2]", state=state) == "Text[^2]"


class TestExtras:
    """Colour previews, hard breaks and sanitizing."""

    def test_color_preview(self) -> None:
        """A standalone hex colour gets a swatch."""
        assert parse_inline("Color #ff0000 here") == (
            'Color <span class="color-preview">'
            '<span class="color-swatch" style="background-color: #ff0000"></span>'
            "#ff0000</span> here"
        )

    def test_short_hex_color(self) -> None:
        """#RGB is recognised."""
        assert 'style="background-color: #abc"' in parse_inline("#abc")

    def test_not_a_color(self) -> None:
        """Hex runs inside words or too long are left alone."""
        assert parse_inline("issue#123") == "issue#123"
        assert parse_inline("#ff00001") == "#ff00001"

    def test_hard_break(self) -> None:
        """Two trailing spaces force a line break."""
        assert parse_inline("a  \nb") == "a<br />\nb"

    def test_raw_html_without_sanitizing(self) -> None:
        """sanitize=False passes markup through."""
        assert parse_inline("<b>x</b>", sanitize=False) == "<b>x</b>"

    def test_empty_input(self) -> None:
        """None and "" give ""."""
        assert parse_inline(None) == ""
        assert parse_inline("") == ""

    @given(st.text(alphabet="abc <>&\"'"))
    def test_plain_text_is_only_escaped(self, text: str) -> None:
        """Text without Markdown syntax comes back HTML-escaped and nothing more."""
        assert parse_inline(text) == escape_html(text)

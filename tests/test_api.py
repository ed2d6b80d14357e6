"""Tests for the top-level API: render_markdown and Markdown."""

import marksmith
from marksmith import (
    Markdown,
    ParseConfig,
    ParserState,
    parse_config_context,
    render_markdown,
)
from marksmith.tokens import Heading, Paragraph


class TestRenderMarkdown:
    """render_markdown()."""

    def test_basic(self) -> None:
        """Inline formatting inside a paragraph."""
        assert render_markdown("Hello *world*") == "<p>Hello <em>world</em></p>"

    def test_empty(self) -> None:
        """Empty input gives ""."""
        assert render_markdown("") == ""

    def test_calls_do_not_share_definitions(self) -> None:
        """A reference defined in one call is unknown in the next."""
        first = render_markdown("[a]: https://example.com\n\n[a]")
        second = render_markdown("[a]")
        assert first == '<p><a href="https://example.com">a</a></p>'
        assert second == "<p>[a]</p>"

    def test_footnote_numbering_restarts(self) -> None:
        """Each call numbers footnotes from 1."""
        source = "A[^x]\n\n[^x]: note"
        assert render_markdown(source) == render_markdown(source)
        assert ">[1]</a>" in render_markdown(source)

    def test_explicit_state_collects_definitions(self) -> None:
        """A caller-supplied state is filled in."""
        state = ParserState()
        render_markdown("[a]: /a\n[^n]: note\n\ntext", state=state)
        assert state.get_link_ref("a") is not None
        assert state.get_footnote("n") is not None

    def test_explicit_config_wins(self) -> None:
        """The config argument overrides the context config."""
        with parse_config_context(ParseConfig(sanitize=False)):
            assert render_markdown("<i>x</i>") == "<p><i>x</i></p>"
            assert render_markdown("<i>x</i>", config=ParseConfig()) == (
                "<p>&lt;i&gt;x&lt;/i&gt;</p>"
            )

    def test_crlf_input(self) -> None:
        """Windows line endings render like LF."""
        assert render_markdown("# A\r\n\r\nB") == render_markdown("# A\n\nB")


class TestMarkdownClass:
    """Markdown instances."""

    def test_call(self) -> None:
        """Calling renders HTML."""
        assert Markdown()("**bold**") == "<p><strong>bold</strong></p>"

    def test_config_property(self) -> None:
        """Defaults apply when no config is given."""
        assert Markdown().config == ParseConfig()
        config = ParseConfig(highlight_code=True)
        assert Markdown(config).config is config

    def test_parse_and_render(self) -> None:
        """parse() returns tokens and their state; render() uses both."""
        md = Markdown()
        tokens, state = md.parse("[a]: https://example.com\n\n# Heading\n\nSee [a]")
        assert tokens[0] == Heading(1, "Heading")
        ref = state.get_link_ref("A")
        assert ref is not None
        assert ref.url == "https://example.com"
        assert md.render(tokens, state) == (
            '<h1>Heading</h1>\n<p>See <a href="https://example.com">a</a></p>'
        )

    def test_parse_uses_instance_config(self) -> None:
        """parse() honours the instance's structured data switch."""
        md = Markdown(ParseConfig(structured_data_enabled=False))
        tokens, _ = md.parse("a: 1\nb: 2")
        assert tokens == [Paragraph("a: 1\nb: 2")]

    def test_highlighting_instance(self) -> None:
        """Instances carry their highlighting switch."""
        md = Markdown(ParseConfig(highlight_code=True))
        assert '<span class="syntax-keyword">echo</span>' in md("```sh\necho hi\n```")


class TestPackage:
    """Package metadata and exports."""

    def test_version(self) -> None:
        """__version__ is a string."""
        assert isinstance(marksmith.__version__, str)

    def test_all_exports_exist(self) -> None:
        """Every name in __all__ is importable."""
        for name in marksmith.__all__:
            assert hasattr(marksmith, name), name

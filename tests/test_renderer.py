"""Test rendering layout lines as terminal strings.

:author: Shay Hill
:created: 2026-10-19
"""

import pytest
from conftest import PARAGRAPH, new_words, strip_ansi

import term_justify.renderer as mod
from term_justify.layout import LayoutLine, Whitespace, Word, calculate_layout
from term_justify.markdown_parser import Markdown
from term_justify.styled_word import Style, StyledWord


class TestRenderLine:
    def test_plain(self) -> None:
        """Without color, a line is its text."""
        line = calculate_layout(12, new_words("Hello", "world"))[0]
        assert mod.render_line(line, color=False) == "Hello world "

    def test_unstyled_words_have_no_escapes(self) -> None:
        line = calculate_layout(12, new_words("Hello", "world"))[0]
        assert mod.render_line(line) == "Hello world "

    def test_styled(self) -> None:
        """Each styled word is wrapped in its own escapes."""
        line = LayoutLine(
            (
                Word(StyledWord("b", Style(bold=True))),
                Whitespace(2),
                Word(StyledWord("c", Style(italic=True, code=True))),
            )
        )
        assert mod.render_line(line) == "\x1b[1mb\x1b[0m  \x1b[3;36mc\x1b[0m"

    def test_extra_params(self) -> None:
        line = LayoutLine((Word(StyledWord("u")),))
        assert mod.render_line(line, extra_params=("4",)) == "\x1b[4mu\x1b[0m"


class TestRenderMarkdown:
    def test_paragraph(self) -> None:
        markdown = Markdown.parse("Hello dear world")
        lines = mod.render_markdown(markdown, 10, color=False)
        assert lines == ["Hello dear", "world     "]

    def test_block_gap(self) -> None:
        """Blank lines between blocks are full width."""
        markdown = Markdown.parse("# Hi\n\nthere")
        lines = mod.render_markdown(markdown, 5, color=False)
        assert lines == ["Hi   ", "     ", "there"]

    def test_no_block_gap(self) -> None:
        markdown = Markdown.parse("# Hi\n\nthere")
        lines = mod.render_markdown(markdown, 5, color=False, block_gap=0)
        assert lines == ["Hi   ", "there"]

    def test_large_heading(self) -> None:
        """Headings are bold. Large headings are underlined too."""
        markdown = Markdown.parse("# Hi")
        assert mod.render_markdown(markdown, 5) == ["\x1b[1;4mHi\x1b[0m   "]

    def test_underline_skips_gaps(self) -> None:
        """Each heading word is underlined on its own. The space between is not."""
        markdown = Markdown.parse("# Hi there")
        assert mod.render_markdown(markdown, 8) == [
            "\x1b[1;4mHi\x1b[0m \x1b[1;4mthere\x1b[0m"
        ]

    def test_matches_layout(self) -> None:
        """Rendered lines without color are the text of the layout lines."""
        markdown = Markdown.parse(f"# Sample\n\n{PARAGRAPH}\n\n## End")
        layout = mod.layout_markdown(markdown, 17, block_gap=2)
        lines = mod.render_markdown(markdown, 17, color=False, block_gap=2)
        assert lines == [x.text for x in layout]

    def test_small_heading(self) -> None:
        markdown = Markdown.parse("### Hi")
        assert mod.render_markdown(markdown, 5) == ["\x1b[1mHi\x1b[0m   "]

    @pytest.mark.parametrize("width", [1, 7, 30, 79])
    def test_printed_width(self, width: int) -> None:
        """Every line occupies exactly width columns."""
        markdown = Markdown.parse(f"# Sample\n\n**{PARAGRAPH}**\n\n`{PARAGRAPH}`")
        lines = mod.render_markdown(markdown, width)
        assert all(len(strip_ansi(x)) == width for x in lines)

    def test_bad_width(self) -> None:
        with pytest.raises(ValueError):
            _ = mod.render_markdown(Markdown.parse("a"), 0)

    def test_bad_block_gap(self) -> None:
        with pytest.raises(ValueError):
            _ = mod.render_markdown(Markdown.parse("a"), 5, block_gap=-1)


class TestRenderElement:
    def test_heading(self) -> None:
        """One element, no block gaps."""
        heading = Markdown.parse("## Hi").elements[0]
        assert mod.render_element(3, heading) == ["\x1b[1mHi\x1b[0m "]


class TestLayoutMarkdown:
    def test_blank_lines(self) -> None:
        """Blank lines are single whitespace elements."""
        lines = mod.layout_markdown(Markdown.parse("a\n\nb"), 3, block_gap=2)
        assert [x.text for x in lines] == ["a  ", "   ", "   ", "b  "]
        assert lines[1] == LayoutLine((Whitespace(3),))

    def test_heading_bold(self) -> None:
        lines = mod.layout_markdown(Markdown.parse("## Hi"), 3)
        assert lines[0].words == [StyledWord("Hi", Style(bold=True))]


class TestRenderLayout:
    def test_join(self) -> None:
        layout = calculate_layout(10, new_words("Hello", "dear", "world"))
        assert mod.render_layout(layout) == "Hello dear\nworld     "

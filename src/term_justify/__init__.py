"""Import functions into the package namespace.

:author: Shay Hill
:created: 2026-10-19
"""

from term_justify.gap_sampler import GAP_SAMPLER_SEED, sample_gaps
from term_justify.layout import (
    LayoutElement,
    LayoutLine,
    Whitespace,
    Word,
    WordsInLine,
    calculate_layout,
    pack_lines,
    split_wide_words,
)
from term_justify.markdown_parser import Heading, HeadingSize, Markdown, Paragraph
from term_justify.renderer import (
    layout_markdown,
    render_element,
    render_layout,
    render_line,
    render_markdown,
)
from term_justify.snapshot import new_snapshot_root, write_snapshot, write_svg
from term_justify.styled_word import Style, StyledWord, words_from_text
from term_justify.terminal import TerminalError, get_terminal_width

__all__ = [
    "GAP_SAMPLER_SEED",
    "Heading",
    "HeadingSize",
    "LayoutElement",
    "LayoutLine",
    "Markdown",
    "Paragraph",
    "Style",
    "StyledWord",
    "TerminalError",
    "Whitespace",
    "Word",
    "WordsInLine",
    "calculate_layout",
    "get_terminal_width",
    "layout_markdown",
    "new_snapshot_root",
    "pack_lines",
    "render_element",
    "render_layout",
    "render_line",
    "render_markdown",
    "sample_gaps",
    "split_wide_words",
    "words_from_text",
    "write_snapshot",
    "write_svg",
]

"""Render layout lines as terminal strings.

:author: Shay Hill
:created: 2026-10-19

Words are wrapped in ANSI SGR escapes for their style. Whitespace is plain
spaces. Escapes take no columns, so every rendered line still occupies exactly
the layout width on a terminal.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from term_justify.layout import LayoutLine, Whitespace, Word, calculate_layout
from term_justify.markdown_parser import Heading, HeadingSize

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

    from term_justify.markdown_parser import Markdown, MarkdownElement
    from term_justify.styled_word import Style

# SGR parameters
SGR_RESET = "0"
SGR_BOLD = "1"
SGR_ITALIC = "3"
SGR_UNDERLINE = "4"
SGR_CODE = "36"  # cyan foreground

DEFAULT_BLOCK_GAP = 1


def _sgr(*params: str) -> str:
    """Create one escape sequence from SGR parameters."""
    return f"\x1b[{';'.join(params)}m"


def style_params(style: Style) -> list[str]:
    """Get the SGR parameters for a word style.

    :param style: the word style
    :return: SGR parameters, empty for an unstyled word
    """
    params: list[str] = []
    if style.bold:
        params.append(SGR_BOLD)
    if style.italic:
        params.append(SGR_ITALIC)
    if style.code:
        params.append(SGR_CODE)
    return params


def render_line(
    line: LayoutLine, *, color: bool = True, extra_params: Sequence[str] = ()
) -> str:
    """Render one layout line as a string.

    :param line: a LayoutLine
    :param color: if False, return plain text with no escapes
    :param extra_params: SGR parameters to add to every word. Whitespace is never
        styled, so an underline stops at the gaps between words.
    :return: the rendered line. Without escapes, len(result) == line.width
    """
    if not color:
        return line.text
    parts: list[str] = []
    for element in line:
        if not isinstance(element, Word):
            parts.append(" " * element.count)
            continue
        params = [*style_params(element.word.style), *extra_params]
        if params:
            parts.append(f"{_sgr(*params)}{element.word.text}{_sgr(SGR_RESET)}")
        else:
            parts.append(element.word.text)
    return "".join(parts)


def _layout_element(width: int, element: MarkdownElement) -> list[LayoutLine]:
    """Lay out one markdown element. Heading words are bold."""
    if isinstance(element, Heading):
        words = [w.with_style(w.style.with_bold()) for w in element.words]
        return calculate_layout(width, words)
    return calculate_layout(width, element.words)


def _heading_params(element: MarkdownElement) -> tuple[str, ...]:
    if isinstance(element, Heading) and element.size is HeadingSize.LARGE:
        return (SGR_UNDERLINE,)
    return ()


def render_element(
    width: int, element: MarkdownElement, *, color: bool = True
) -> list[str]:
    """Lay out and render one heading or paragraph.

    :param width: terminal width (>= 1)
    :param element: a Heading or Paragraph
    :param color: if False, return plain text with no escapes
    :return: rendered lines
    :raises ValueError: if width < 1
    """
    extra = _heading_params(element)
    return [
        render_line(x, color=color, extra_params=extra)
        for x in _layout_element(width, element)
    ]


def _check_block_args(width: int, block_gap: int) -> None:
    """Raise a ValueError for a width or block gap that cannot be laid out."""
    if width < 1:
        msg = f"width must be at least 1, not {width}."
        raise ValueError(msg)
    if block_gap < 0:
        msg = f"block_gap cannot be negative, not {block_gap}."
        raise ValueError(msg)


def _layout_blocks(
    markdown: Markdown, width: int, block_gap: int
) -> Iterator[tuple[LayoutLine, tuple[str, ...]]]:
    """Yield each line of a document with the SGR parameters of its block.

    Blank separator lines are one Whitespace element `width` wide.
    """
    _check_block_args(width, block_gap)
    blank = LayoutLine((Whitespace(width),))
    for i, element in enumerate(markdown.elements):
        if i:
            yield from ((blank, ()) for _ in range(block_gap))
        extra = _heading_params(element)
        for line in _layout_element(width, element):
            yield line, extra


def layout_markdown(
    markdown: Markdown, width: int, *, block_gap: int = DEFAULT_BLOCK_GAP
) -> list[LayoutLine]:
    """Lay out a whole markdown document without rendering it.

    :param markdown: a parsed Markdown document
    :param width: terminal width (>= 1)
    :param block_gap: number of blank lines between headings and paragraphs
    :return: LayoutLines. A blank line is one Whitespace element `width` wide.
    :raises ValueError: if width < 1 or block_gap < 0
    """
    return [line for line, _ in _layout_blocks(markdown, width, block_gap)]


def render_markdown(
    markdown: Markdown,
    width: int,
    *,
    color: bool = True,
    block_gap: int = DEFAULT_BLOCK_GAP,
) -> list[str]:
    """Lay out and render a markdown document.

    :param markdown: a parsed Markdown document
    :param width: terminal width (>= 1)
    :param color: if False, return plain text with no escapes
    :param block_gap: number of blank lines between headings and paragraphs
    :return: rendered lines. Blank lines are `width` spaces, so every line has
        the same printed width.
    :raises ValueError: if width < 1 or block_gap < 0
    """
    return [
        render_line(line, color=color, extra_params=extra)
        for line, extra in _layout_blocks(markdown, width, block_gap)
    ]


def render_layout(lines: Iterable[LayoutLine], *, color: bool = True) -> str:
    """Join rendered layout lines with newlines.

    :param lines: LayoutLines from `calculate_layout`
    :param color: if False, return plain text with no escapes
    :return: one string, one line per LayoutLine
    """
    return "\n".join(render_line(x, color=color) for x in lines)

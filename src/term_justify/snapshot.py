"""Draw layout lines as an svg picture of a terminal.

:author: Shay Hill
:created: 2026-10-19

Each LayoutLine becomes one ``text`` element. Each word is a ``tspan`` placed on
a fixed character grid, so whitespace is never written, only skipped. A
monospace font with an advance of `cell_width` will line the words up exactly
as a terminal would.
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, TYPE_CHECKING, TypeGuard

from lxml import etree

from term_justify.layout import Word
from term_justify.string_conversion import format_number, set_attributes, svg_tostring

if TYPE_CHECKING:
    from collections.abc import Sequence

    from lxml.etree import (
        _Element as EtreeElement,  # pyright: ignore[reportPrivateUsage]
    )

    from term_justify.attrib_hints import ElemAttrib
    from term_justify.layout import LayoutLine
    from term_justify.styled_word import Style

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
NSMAP = {None: SVG_NAMESPACE}

DEFAULT_FONT_SIZE = 16.0
DEFAULT_CELL_WIDTH = 9.6  # 0.6em, the advance of most monospace fonts
DEFAULT_LINE_HEIGHT = 20.0
DEFAULT_PAD = 8.0

FOREGROUND = "#d0d0d0"
BACKGROUND = "#1e1e1e"
CODE_FOREGROUND = "#5fd7d7"


def _svg_tag(tag: str) -> str:
    return f"{{{SVG_NAMESPACE}}}{tag}"


def _new_sub_element(
    parent: EtreeElement, tag: str, **attributes: ElemAttrib
) -> EtreeElement:
    """Create an svg-namespaced etree.SubElement with formatted attributes."""
    elem = etree.SubElement(parent, _svg_tag(tag))
    set_attributes(elem, **attributes)
    return elem


def _word_attributes(style: Style) -> dict[str, ElemAttrib]:
    """Get tspan attributes for a word style.

    :param style: the word style
    :return: attributes. Unstyled words inherit everything from the text element.
    """
    attributes: dict[str, ElemAttrib] = {}
    if style.bold:
        attributes["font_weight"] = "bold"
    if style.italic:
        attributes["font_style"] = "italic"
    if style.code:
        attributes["fill"] = CODE_FOREGROUND
    return attributes


def new_snapshot_root(
    lines: Sequence[LayoutLine],
    *,
    font_size: float = DEFAULT_FONT_SIZE,
    cell_width: float = DEFAULT_CELL_WIDTH,
    line_height: float = DEFAULT_LINE_HEIGHT,
    pad: float = DEFAULT_PAD,
) -> EtreeElement:
    """Create an svg root element showing the lines on a character grid.

    :param lines: LayoutLines, usually all the same width
    :param font_size: font size of every line
    :param cell_width: horizontal advance of one character
    :param line_height: vertical distance between baselines
    :param pad: margin around the text on all sides
    :return: svg root element with a background rect and one text element per line
    """
    columns = max((x.width for x in lines), default=0)
    width = columns * cell_width + 2 * pad
    height = len(lines) * line_height + 2 * pad

    root = etree.Element(_svg_tag("svg"), nsmap=NSMAP)
    view_box = " ".join(format_number(x) for x in (0, 0, width, height))
    set_attributes(root, viewBox=view_box, width=width, height=height)
    _ = _new_sub_element(root, "rect", width=width, height=height, fill=BACKGROUND)

    for i, line in enumerate(lines):
        baseline = pad + (i + 0.8) * line_height
        text = _new_sub_element(
            root,
            "text",
            y=baseline,
            font_family="monospace",
            font_size=font_size,
            fill=FOREGROUND,
        )
        column = 0
        for element in line:
            if isinstance(element, Word):
                x = pad + column * cell_width
                attributes = _word_attributes(element.word.style)
                _ = _new_sub_element(
                    text, "tspan", x=x, text=element.word.text, **attributes
                )
            column += element.width
    return root


def _is_io_bytes(obj: object) -> TypeGuard[IO[bytes]]:
    """Determine if an object is file-like.

    :param obj: object
    :return: True if object is file-like
    """
    return hasattr(obj, "read") and hasattr(obj, "write")


def write_svg(
    svg: str | Path | IO[bytes], root: EtreeElement, **tostring_kwargs: str | bool
) -> str:
    """Write an xml element as an svg file.

    :param svg: open binary file object or path to output file (include extension .svg)
    :param root: root node of your svg geometry
    :param tostring_kwargs: keyword arguments to etree.tostring.
    :return: svg filename
    :effects: creates svg file at ``svg``
    :raises TypeError: if ``svg`` is not a Path, str, or binary file object
    """
    svg_contents = svg_tostring(root, **tostring_kwargs)

    if _is_io_bytes(svg):
        _ = svg.write(svg_contents)
        return svg.name
    if isinstance(svg, (str, Path)):
        with Path(svg).open("wb") as svg_file:
            _ = svg_file.write(svg_contents)
        return str(svg)
    msg = f"svg must be a path-like object or a file-like object, not {type(svg)}"
    raise TypeError(msg)


def write_snapshot(
    svg: str | Path | IO[bytes], lines: Sequence[LayoutLine], **kwargs: float
) -> str:
    """Write layout lines to an svg file.

    :param svg: open binary file object or path to output file
    :param lines: LayoutLines from `calculate_layout`
    :param kwargs: optional font_size, cell_width, line_height, pad
    :return: svg filename
    """
    return write_svg(svg, new_snapshot_root(lines, **kwargs))

"""Styled words, the unit of input to the layout engine.

:author: Shay Hill
:created: 2026-10-19

A StyledWord is a whitespace-free run of text with one style. Every character
is one unit wide. There is no font metric anywhere in this package.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclasses.dataclass(frozen=True)
class Style:
    """Three independent style flags. Any combination is valid."""

    bold: bool = False
    italic: bool = False
    code: bool = False

    def with_bold(self) -> Style:
        """Return a copy of this style with bold set."""
        return dataclasses.replace(self, bold=True)


@dataclasses.dataclass(frozen=True)
class StyledWord:
    """A whitespace-free text span and its style.

    :param text: the characters of the word. Must not contain whitespace.
    :param style: the style used to render every character of the word
    """

    text: str
    style: Style = Style()

    def __len__(self) -> int:
        """Width of the word in character units."""
        return len(self.text)

    def with_text(self, text: str) -> StyledWord:
        """Create a new word with the same style and different text.

        :param text: the text of the new word
        :return: a new StyledWord sharing this word's style
        """
        return StyledWord(text, self.style)

    def with_style(self, style: Style) -> StyledWord:
        """Create a new word with the same text and a different style."""
        return StyledWord(self.text, style)

    def chunks(self, width: int) -> Iterator[StyledWord]:
        """Cut this word into consecutive pieces no wider than width.

        :param width: maximum width of each piece (>= 1)
        :yield: pieces of ``width`` characters, then the remainder. A word no
            wider than ``width`` yields itself.
        """
        text = self.text
        while len(text) > width:
            yield self.with_text(text[:width])
            text = text[width:]
        yield self.with_text(text)


def words_from_text(text: str, style: Style | None = None) -> list[StyledWord]:
    """Split plain text on whitespace into words of one style.

    :param text: any text
    :param style: optional style for every word. Default is no style.
    :return: one StyledWord per whitespace-delimited run in ``text``

        >>> [w.text for w in words_from_text("  Hello\\n world ")]
        ['Hello', 'world']
    """
    style = style or Style()
    return [StyledWord(x, style) for x in text.split()]

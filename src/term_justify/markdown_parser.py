"""Turn markdown text into headings and paragraphs of styled words.

:author: Shay Hill
:created: 2026-10-19

markdown-it-py does the parsing. Block tokens come flat, in open / inline / close
triplets; inline content lives in ``token.children`` of the ``inline`` token.
Only the block structure needed to lay out words is kept: headings, paragraphs
(wherever they are nested), and code blocks.
"""

from __future__ import annotations

import dataclasses
import enum
import logging
from typing import TYPE_CHECKING, TypeAlias

from markdown_it import MarkdownIt

from term_justify.styled_word import Style, StyledWord

if TYPE_CHECKING:
    from collections.abc import Iterable

    from markdown_it.token import Token

_log = logging.getLogger(__name__)

_md_parser = MarkdownIt("commonmark")


class HeadingSize(enum.Enum):
    """Heading sizes a terminal can tell apart."""

    SMALL = enum.auto()
    MEDIUM = enum.auto()
    LARGE = enum.auto()

    @classmethod
    def from_tag(cls, tag: str) -> HeadingSize:
        """Map an html heading tag to a size.

        :param tag: "h1" through "h6"
        :return: LARGE for h1, MEDIUM for h2, SMALL for anything else
        """
        return {"h1": cls.LARGE, "h2": cls.MEDIUM}.get(tag, cls.SMALL)


@dataclasses.dataclass
class Heading:
    """A heading line."""

    words: list[StyledWord]
    size: HeadingSize = HeadingSize.SMALL


@dataclasses.dataclass
class Paragraph:
    """A run of words to be wrapped together."""

    words: list[StyledWord]


MarkdownElement: TypeAlias = Heading | Paragraph


@dataclasses.dataclass
class _InlineWords:
    """Collect words from inline tokens while tracking the current style."""

    words: list[StyledWord] = dataclasses.field(default_factory=list)
    bold: bool = False
    italic: bool = False
    # True when the last text added did not end in whitespace
    _open_word: bool = dataclasses.field(default=False, init=False)

    @property
    def style(self) -> Style:
        return Style(bold=self.bold, italic=self.italic)

    def add_text(self, text: str, style: Style | None = None) -> None:
        """Add text, splitting on whitespace.

        :param text: text that may contain any amount of whitespace
        :param style: optional style override. Default is the current style.

        A piece with no whitespace before it continues the previous word and
        keeps that word's style.
        """
        if not text:
            return
        style = style or self.style
        pieces = text.split()
        if pieces and self._open_word and not text[0].isspace():
            last = self.words.pop()
            self.words.append(last.with_text(last.text + pieces.pop(0)))
        self.words.extend(StyledWord(x, style) for x in pieces)
        self._open_word = not text[-1].isspace()

    def break_word(self) -> None:
        """End the current word."""
        self._open_word = False


def _inline_to_words(token: Token | None) -> list[StyledWord]:
    """Convert the children of an ``inline`` token to styled words.

    :param token: an inline token or None
    :return: the words in reading order
    """
    if token is None or token.type != "inline":
        return []
    if token.children is None:
        return [StyledWord(x) for x in token.content.split()]

    collector = _InlineWords()
    for child in token.children:
        kind = child.type
        if kind == "text":
            collector.add_text(child.content)
        elif kind in ("softbreak", "hardbreak"):
            collector.break_word()
        elif kind in ("strong_open", "strong_close"):
            collector.bold = kind == "strong_open"
        elif kind in ("em_open", "em_close"):
            collector.italic = kind == "em_open"
        elif kind == "code_inline":
            style = dataclasses.replace(collector.style, code=True)
            collector.add_text(child.content, style)
        elif child.content:
            collector.add_text(child.content)
        else:
            _log.debug("no words in inline token %s", kind)
    return collector.words


def _code_words(text: str) -> list[StyledWord]:
    """Split a code block into code-styled words."""
    return [StyledWord(x, Style(code=True)) for x in text.split()]


def _iter_elements(tokens: list[Token]) -> Iterable[MarkdownElement]:
    """Pick headings, paragraphs, and code blocks out of a flat token stream.

    :param tokens: block tokens from MarkdownIt.parse
    :yield: one element per non-empty block
    """
    for i, token in enumerate(tokens):
        inline = tokens[i + 1] if i + 1 < len(tokens) else None
        if token.type == "heading_open":
            words = _inline_to_words(inline)
            if words:
                yield Heading(words, HeadingSize.from_tag(token.tag))
        elif token.type == "paragraph_open":
            words = _inline_to_words(inline)
            if words:
                yield Paragraph(words)
        elif token.type in ("fence", "code_block"):
            words = _code_words(token.content)
            if words:
                yield Paragraph(words)


@dataclasses.dataclass
class Markdown:
    """A markdown document reduced to headings and paragraphs."""

    elements: list[MarkdownElement] = dataclasses.field(default_factory=list)

    @classmethod
    def parse(cls, text: str) -> Markdown:
        """Parse markdown text.

        :param text: commonmark text
        :return: a Markdown instance with one element per non-empty block
        """
        tokens = _md_parser.parse(text)
        return cls(list(_iter_elements(tokens)))

    @property
    def words(self) -> list[StyledWord]:
        """Every word in the document, in reading order."""
        return [w for element in self.elements for w in element.words]

"""Wrap and justify styled words into lines of one exact width.

:author: Shay Hill
:created: 2026-10-19

Three passes over the words:

1. `split_wide_words` cuts any word wider than the target width.
2. `pack_lines` fills lines greedily, one word of look-ahead.
3. each packed line is justified. Interior lines are spread evenly, the last
   line is aligned left and padded.

Every LayoutLine returned by `calculate_layout` is exactly `target_width`
characters wide, counting every Word and every Whitespace element.
"""

from __future__ import annotations

import dataclasses
import itertools as it
import logging
from typing import TYPE_CHECKING, TypeAlias

from term_justify.gap_sampler import sample_gaps

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from term_justify.styled_word import StyledWord

_log = logging.getLogger(__name__)


# ============================================================================
# Layout elements
# ============================================================================


@dataclasses.dataclass(frozen=True)
class Word:
    """A word placed on a line."""

    word: StyledWord

    @property
    def width(self) -> int:
        """Width of the word in character units."""
        return len(self.word)


@dataclasses.dataclass(frozen=True)
class Whitespace:
    """A run of `count` spaces. Never empty."""

    count: int

    def __post_init__(self) -> None:
        """Reject empty and negative runs.

        :raises ValueError: if count < 1
        """
        if self.count < 1:
            msg = f"Whitespace must be at least one space wide, not {self.count}."
            raise ValueError(msg)

    @property
    def width(self) -> int:
        """Width of the run in character units."""
        return self.count


LayoutElement: TypeAlias = Word | Whitespace


@dataclasses.dataclass(frozen=True)
class LayoutLine:
    """One output line: words and whitespace runs in order."""

    elements: tuple[LayoutElement, ...] = ()

    def __iter__(self) -> Iterator[LayoutElement]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    @property
    def width(self) -> int:
        """Sum of all word widths and whitespace counts."""
        return sum(x.width for x in self.elements)

    @property
    def words(self) -> list[StyledWord]:
        """The words on this line, without whitespace."""
        return [x.word for x in self.elements if isinstance(x, Word)]

    @property
    def text(self) -> str:
        """The line as plain, unstyled text."""
        return "".join(
            x.word.text if isinstance(x, Word) else " " * x.count
            for x in self.elements
        )


# ============================================================================
# Packing and justification
# ============================================================================


@dataclasses.dataclass
class WordsInLine:
    """Words chosen for one line, before any whitespace is placed.

    :param words: the words on the line, at least one
    :param remaining_space: width left after the words and one mandatory
        separator between each pair of words
    """

    words: list[StyledWord]
    remaining_space: int

    @property
    def gaps(self) -> int:
        """Number of gaps between words."""
        return len(self.words) - 1

    def align_left(self) -> LayoutLine:
        """Separate words with one space and put the leftover at the end.

        :return: a LayoutLine. No trailing whitespace if the line is full.
        """
        elements: list[LayoutElement] = [Word(self.words[0])]
        for word in self.words[1:]:
            elements.extend((Whitespace(1), Word(word)))
        if self.remaining_space > 0:
            elements.append(Whitespace(self.remaining_space))
        return LayoutLine(tuple(elements))

    def spread_evenly(self) -> LayoutLine:
        """Distribute the leftover width between the gaps.

        :return: a LayoutLine starting and ending with a word. A one-word line
            cannot be spread and is aligned left instead.

        Each gap gets its mandatory separator plus `remaining_space // gaps`.
        The remainder goes one space each to gaps chosen by `sample_gaps`.
        """
        if not self.gaps:
            return self.align_left()
        base = self.remaining_space // self.gaps
        extra_count = self.remaining_space - self.gaps * base
        wider = set(sample_gaps(extra_count, self.gaps))

        elements: list[LayoutElement] = [Word(self.words[0])]
        for i, word in enumerate(self.words[1:]):
            elements.append(Whitespace(1 + base + (i in wider)))
            elements.append(Word(word))
        return LayoutLine(tuple(elements))


def _check_target_width(target_width: int) -> None:
    """Raise a ValueError if no word could fit on a line.

    :raises ValueError: if target_width < 1
    """
    if target_width < 1:
        msg = f"target_width must be at least 1, not {target_width}."
        raise ValueError(msg)


def split_wide_words(
    target_width: int, words: Iterable[StyledWord]
) -> list[StyledWord]:
    """Cut every word wider than target_width into target_width-wide pieces.

    :param target_width: line width (>= 1)
    :param words: words in reading order
    :return: words in reading order, none wider than target_width
    :raises ValueError: if target_width < 1

    Each word is cut from its own first character, regardless of where lines
    will later break. A word exactly target_width wide is not cut.
    """
    _check_target_width(target_width)
    return list(it.chain.from_iterable(w.chunks(target_width) for w in words))


def pack_lines(target_width: int, words: Iterable[StyledWord]) -> list[WordsInLine]:
    """Greedily fill lines with words.

    :param target_width: line width (>= 1)
    :param words: words in reading order, none wider than target_width
    :return: one WordsInLine per output line, each with at least one word
    :raises ValueError: if target_width < 1 or a word is wider than target_width
    """
    _check_target_width(target_width)
    words_ = list(words)
    if any(len(w) > target_width for w in words_):
        msg = "Words must be split to target_width before packing."
        raise ValueError(msg)

    lines: list[WordsInLine] = []
    beg = 0
    while beg < len(words_):
        line = WordsInLine([], target_width)
        for end in range(beg, len(words_)):
            word = words_[end]
            line.words.append(word)
            line.remaining_space -= len(word)
            is_last = end + 1 == len(words_)
            if is_last or line.remaining_space <= len(words_[end + 1]):
                break
            line.remaining_space -= 1
        beg += len(line.words)
        lines.append(line)
    return lines


def calculate_layout(
    target_width: int, words: Iterable[StyledWord]
) -> list[LayoutLine]:
    """Lay out words in lines exactly target_width wide.

    :param target_width: line width in characters (>= 1)
    :param words: words in reading order
    :return: justified lines. Every line but the last is spread evenly; the last
        is aligned left. No words, no lines.
    :raises ValueError: if target_width < 1
    """
    split = split_wide_words(target_width, words)
    packed = pack_lines(target_width, split)
    _log.debug(
        "laid out %d words in %d lines of width %d",
        len(split),
        len(packed),
        target_width,
    )
    layout = [x.spread_evenly() for x in packed[:-1]]
    layout.extend(x.align_left() for x in packed[-1:])
    return layout

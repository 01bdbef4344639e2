"""Test configuration for pytest.

:author: Shay Hill
:created: 2026-10-19
"""

from __future__ import annotations

import re
from typing import Any

from paragraphs import par

from term_justify.styled_word import StyledWord, words_from_text


def pytest_assertrepr_compare(
    config: Any, op: str, left: str, right: str
) -> list[str] | None:
    """See full error diffs"""
    del config
    if op in ("==", "!="):
        return [f"{left} {op} {right}"]
    return None


PARAGRAPH = par(
    """The quick brown fox jumps over the lazy dog. This sentence contains every letter
    of the alphabet and serves as a useful test for typography and text rendering. When
    designing fonts or testing text layout algorithms, it is important to have sample
    text that exercises all characters. Incomprehensibilities and
    antidisestablishmentarianism give the splitter something to chew on."""
)

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Remove SGR escapes from a rendered line."""
    return _ANSI.sub("", text)


def new_words(*texts: str) -> list[StyledWord]:
    """Create unstyled words from strings."""
    return [StyledWord(x) for x in texts]


PARAGRAPH_WORDS = words_from_text(PARAGRAPH)

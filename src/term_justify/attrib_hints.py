"""Type hints for pass-through arguments to lxml constructors.

:author: Shay Hill
:created: 2026-10-19
"""

from typing import TypeAlias

# Types term_justify can format to pass through to lxml constructors.
ElemAttrib: TypeAlias = str | float | None

"""Ask the terminal how wide it is.

:author: Shay Hill
:created: 2026-10-19

The layout engine needs a width before it can do anything. If the width cannot
be found, raise here rather than guess.
"""

from __future__ import annotations

import os


class TerminalError(OSError):
    """The terminal could not be queried."""


def get_terminal_width(fallback: int | None = None) -> int:
    """Get the number of columns in the terminal.

    :param fallback: width to use when stdout is not a terminal. If None, raise
        instead.
    :return: number of columns (>= 1). A positive COLUMNS environment variable
        wins over the terminal. Any other COLUMNS value is ignored.
    :raises TerminalError: if no width can be found and there is no fallback
    """
    env_columns = os.environ.get("COLUMNS", "")
    if env_columns.isdigit() and int(env_columns) > 0:
        return int(env_columns)
    try:
        columns = os.get_terminal_size().columns
    except OSError as e:
        if fallback is None:
            msg = "Cannot determine terminal width. Pass a width explicitly."
            raise TerminalError(msg) from e
        columns = fallback
    if columns < 1:
        msg = f"Terminal reports an unusable width: {columns}."
        raise TerminalError(msg)
    return columns

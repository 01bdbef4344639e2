"""Print a markdown file justified to the terminal width.

:author: Shay Hill
:created: 2026-10-19

    python -m term_justify README.md --width 60 --svg readme.svg
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from term_justify.markdown_parser import Markdown
from term_justify.renderer import DEFAULT_BLOCK_GAP, layout_markdown, render_markdown
from term_justify.snapshot import write_snapshot
from term_justify.terminal import get_terminal_width

if TYPE_CHECKING:
    from collections.abc import Sequence

_log = logging.getLogger("term_justify")


def _new_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="term_justify",
        description="Wrap and fully justify a markdown file for the terminal.",
    )
    parser.add_argument("file", help="markdown file to render, or - for stdin")
    parser.add_argument(
        "-w", "--width", type=int, help="line width (default: terminal width)"
    )
    parser.add_argument(
        "--plain", action="store_true", help="no ANSI styles in the output"
    )
    parser.add_argument(
        "--gap",
        type=int,
        default=DEFAULT_BLOCK_GAP,
        help="blank lines between paragraphs (default: %(default)s)",
    )
    parser.add_argument("--svg", type=Path, help="also write an svg snapshot here")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def _read_text(file: str) -> str:
    """Read the input file as utf-8. A dash reads stdin."""
    if file == "-":
        return sys.stdin.read()
    return Path(file).read_text(encoding="utf-8")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line interface.

    :param argv: command line arguments without the program name. Default is
        sys.argv[1:].
    :return: exit status, 0 for success and 1 for any failure
    """
    args = _new_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        markdown = Markdown.parse(_read_text(args.file))
        width = args.width if args.width is not None else get_terminal_width()
        _log.debug("rendering %d blocks at width %d", len(markdown.elements), width)
        for line in render_markdown(
            markdown, width, color=not args.plain, block_gap=args.gap
        ):
            print(line)
        if args.svg is not None:
            lines = layout_markdown(markdown, width, block_gap=args.gap)
            _log.info("wrote %s", write_snapshot(args.svg, lines))
    except (OSError, ValueError) as e:
        # TerminalError is an OSError
        print(f"term_justify: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

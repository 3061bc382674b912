#!/usr/bin/env python3
"""CLI for parsing Kindle clippings files."""

import argparse
from collections import Counter
from pathlib import Path

from rich.markup import escape

from common.env import env
from common.logger import error, get_logger, progress, setup_logging, success, warning

from .document import read_clippings_file
from .errors import ClippingsError
from .export import write_highlights_file

logger = get_logger(__name__)


def _load(input_path: Path):
    if not input_path.is_file():
        error(f"Clippings file not found: {input_path}")
        return None

    try:
        highlights = read_clippings_file(input_path)
    except ClippingsError as e:
        error(f"Could not parse {input_path}: {e.kind}: {escape(str(e))}")
        return None

    if not highlights:
        warning(f"No highlights found in {input_path}")
    return highlights


def cmd_parse(args):
    """Parse a clippings file and write the highlights as JSON.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    highlights = _load(args.input)
    if highlights is None:
        return 1

    write_highlights_file(args.output, highlights, source_file=args.input.name)
    success(f"Wrote {len(highlights)} highlights to {args.output}")
    return 0


def cmd_check(args):
    """Parse a clippings file and report highlight counts per book.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    highlights = _load(args.input)
    if highlights is None:
        return 1

    per_book = Counter((h.book.title, h.book.author) for h in highlights)
    for (title, author), count in sorted(per_book.items()):
        progress(f"{count:5d}  {escape(title)} ({escape(author)})")

    success(f"{len(highlights)} highlights across {len(per_book)} books")
    return 0


def main(argv: list[str] | None = None):
    """Main entry point for the clippings CLI."""
    parser = argparse.ArgumentParser(description="Parse Kindle 'My Clippings.txt' exports")
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write log output to this file",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_parser = subparsers.add_parser("parse", help="Parse clippings and export them as JSON")
    parse_parser.add_argument(
        "--input",
        type=Path,
        default=env.clippings_path(),
        help="Clippings file to parse (default: CLIPPINGS_PATH or 'My Clippings.txt')",
    )
    parse_parser.add_argument(
        "--output",
        type=Path,
        default=env.output_path(),
        help="JSON file to write (default: CLIPPINGS_OUTPUT or ./data/highlights.json)",
    )
    parse_parser.set_defaults(func=cmd_parse)

    check_parser = subparsers.add_parser("check", help="Validate clippings and count highlights per book")
    check_parser.add_argument(
        "--input",
        type=Path,
        default=env.clippings_path(),
        help="Clippings file to parse (default: CLIPPINGS_PATH or 'My Clippings.txt')",
    )
    check_parser.set_defaults(func=cmd_check)

    args = parser.parse_args(argv)
    setup_logging(level=env.log_level(), log_file=args.log_file)
    logger.debug(f"Running {args.command} on {args.input}")
    return args.func(args)


if __name__ == "__main__":
    exit(main())

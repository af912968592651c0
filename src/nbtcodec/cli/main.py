"""Main CLI entry point for nbtcodec."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from .. import __version__
from ..config import LimiterConfig
from ..exceptions import NbtError
from ..framing import Framing
from ..limiter import REFERENCE_MAX_DEPTH, REFERENCE_MAX_LENGTH
from .analyze import analyze_file, dump_file


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nbtcodec",
        description="nbtcodec: NBT Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  nbtcodec --dump level.dat                   Print the tree
  nbtcodec --dump packet.bin --framing plain  Print a tree without a root name
  nbtcodec --analyze level.dat --unlimited    Show tag counts and sizes
  nbtcodec --version                          Show version
        """,
    )

    action = parser.add_mutually_exclusive_group()
    action.add_argument(
        "--dump",
        metavar="FILE",
        type=str,
        help="Decode a file and print its tree",
    )
    action.add_argument(
        "--analyze",
        metavar="FILE",
        type=str,
        help="Decode a file and show tag counts, depth and size",
    )

    parser.add_argument(
        "--framing",
        choices=[framing.value for framing in Framing],
        default=Framing.NAMED.value,
        help="Top-level framing (default: named)",
    )
    parser.add_argument("--json", action="store_true", help="Dump as JSON")
    parser.add_argument(
        "--max-length",
        type=int,
        default=REFERENCE_MAX_LENGTH,
        help=f"Maximum bytes to read (default: {REFERENCE_MAX_LENGTH})",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=REFERENCE_MAX_DEPTH,
        help=f"Maximum nesting depth (default: {REFERENCE_MAX_DEPTH})",
    )
    parser.add_argument("--unlimited", action="store_true", help="Disable all limits")
    parser.add_argument(
        "--strict-names", action="store_true", help="Reject non-empty root names (unnamed framing)"
    )
    parser.add_argument(
        "--no-long-arrays", action="store_true", help="Reject the long array type"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--version",
        action="version",
        version=f"nbtcodec {__version__}",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the nbtcodec CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    target = args.dump or args.analyze
    if not target:
        # If no command specified, show help
        parser.print_help()
        return 0

    file_path = Path(target)
    if not file_path.exists():
        print(f"Error: File not found: {file_path}", file=sys.stderr)
        return 1

    try:
        config = LimiterConfig(
            max_length=args.max_length,
            max_depth=args.max_depth,
            unlimited=args.unlimited,
            strict_empty_names=args.strict_names,
            allow_long_arrays=not args.no_long_arrays,
        )
    except ValidationError as e:
        print(f"Error: Invalid limits: {e}", file=sys.stderr)
        return 1

    framing = Framing(args.framing)
    try:
        if args.dump:
            dump_file(file_path, config, framing, args.json)
        else:
            analyze_file(file_path, config, framing)
        return 0
    except (NbtError, OSError) as e:
        print(f"Error reading {file_path}: {type(e).__name__}: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

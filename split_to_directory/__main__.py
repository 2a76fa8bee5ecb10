#!/usr/bin/env python3
"""
Directory Splitter - CLI Entry Point
====================================

Usage:
    python -m split_to_directory /path/to/dir
    python -m split_to_directory /path/to/dir --chunk 1000 --order mtime
    python -m split_to_directory /path/to/dir --dry-run
"""

import argparse
import sys
from pathlib import Path

from . import __version__
from .errors import SplitError
from .executor import relocate
from .ordering import DEFAULT_ORDERING, ORDERINGS
from .splitter import DEFAULT_CHUNK_SIZE, FileSplitToDirectoryBuilder
from .utils import console, print_error, print_header, print_plan_table, print_success, print_warning


def positive_int(value: str) -> int:
    """argparse type for a strictly positive integer."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="split-to-directory",
        description="Split the files of a large flat directory into numbered subdirectories",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("path", type=Path, help="Directory whose files are split")
    parser.add_argument("--chunk", "-c", type=positive_int, default=DEFAULT_CHUNK_SIZE,
                        help=f"Each folder with [chunk] files (default: {DEFAULT_CHUNK_SIZE})")
    parser.add_argument("--order", choices=sorted(ORDERINGS), default=DEFAULT_ORDERING,
                        help=f"File order before splitting (default: {DEFAULT_ORDERING})")
    parser.add_argument("--dry-run", action="store_true",
                        help="Show the planned directories without moving files")
    parser.add_argument("--quiet", "-q", action="store_true",
                        help="Only report errors")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(args) -> int:
    """Plan the split and, unless dry-running, apply it."""
    operation = (
        FileSplitToDirectoryBuilder()
        .with_path(args.path)
        .with_chunk(args.chunk)
        .with_sort_cmp(ORDERINGS[args.order])
        .build()
    )

    if not args.quiet:
        print_header("Directory Splitter", f"Root: {operation.path}\nChunk: {operation.chunk}\nOrder: {args.order}")

    chunks = operation.plan()
    total = sum(len(chunk) for chunk in chunks)

    if not chunks:
        if not args.quiet:
            print_success("No files to split")
        return 0

    if args.dry_run:
        print_plan_table(chunks)
        print_warning("This was a DRY-RUN. No files were actually moved.")
        return 0

    if not args.quiet:
        console.print(f"[INFO] Moving {total} files into {len(chunks)} directories...")

    report = relocate(operation.path, chunks, progress=not args.quiet)

    if not args.quiet:
        print_success(
            f"Moved {report['moved_files']} files "
            f"({report['created_directories']} new directories)"
        )
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        return run(args)
    except SplitError as e:
        print_error(str(e))
        return 1
    except KeyboardInterrupt:
        print_error("Operation cancelled by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())

"""Command line: convert between sequence formats, report GC content or statistics."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from .converter import UnsupportedFormatError, load_records
from .gc import run_gc
from .stats import run_stats
from .writer import write_records


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fastaparser",
        description="Convert sequence files between FASTA, JSON, CSV, TSV and XML.",
    )
    parser.add_argument("input", type=Path)
    parser.add_argument("output", type=Path, nargs="?", help="Optional output file path")
    parser.add_argument("--gc", action="store_true",
                        help="Compute and print GC content only")
    parser.add_argument("--stats", action="store_true",
                        help="Generate length & GC%% stats & plots")
    return parser


def _convert(source: Path, target: Path | None) -> int:
    try:
        records = load_records(source)
    except UnsupportedFormatError as error:
        print(f"Unsupported input format: {error.extension}", file=sys.stderr)
        return 1

    output_ext = (target.suffix.lstrip(".") if target is not None else "") or "csv"

    try:
        if target is None:
            write_records(sys.stdout, records, output_ext)
        else:
            with open(target, "w", encoding="utf-8", newline="") as handle:
                write_records(handle, records, output_ext)
    except UnsupportedFormatError as error:
        print(f"Unsupported output format: {error.extension}", file=sys.stderr)
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = _build_parser().parse_args(argv)
    try:
        if args.stats:
            run_stats(args.input)
            return 0
        if args.gc:
            run_gc(args.input)
            return 0
        return _convert(args.input, args.output)
    except (OSError, ValueError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
# Copyright (c) 2025-2026 Tobias Weber <weber.tobias.md@gmail.com>
#
# This file is part of the benchratio tool.
#
# Licensed under the MIT License. See LICENSE file in the project root
# for full license information.

"""
Benchmark Baseline Comparator

Reads a JSON benchmark report and prints, for every benchmarked type, the
speed of each operation relative to the baseline type.

Usage:
    benchratio <report.json> [--baseline=PREFIX]
    benchratio - < report.json

Options:
    --baseline=PREFIX   Name prefix selecting the baseline records
                        (default: MapBenchmarks<default_std_unordered_map_t>)
    --sort-types        Print type groups in alphabetical order
    --strict            Fail on repeated (type, operation) measurements
    --output=PATH       Write the lines to a file (default: stdout)

Each output line is ``Type|Operation|ratio`` with ratio = baseline / type
cpu time, sorted ascending within each type.
"""

import argparse
import sys

from .__version__ import __version__
from .compare import compare
from .constants import DEFAULT_BASELINE_PREFIX
from .errors import BenchRatioError
from .output import write_table
from .report import load_file


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="benchratio",
        description="Compare benchmarked types against a baseline type",
    )
    parser.add_argument("report",
                        help="JSON benchmark report ('-' reads stdin)")
    parser.add_argument("--baseline", default=DEFAULT_BASELINE_PREFIX,
                        help=f"Baseline name prefix (default: {DEFAULT_BASELINE_PREFIX})")
    parser.add_argument("--sort-types", action="store_true",
                        help="Print type groups in alphabetical order")
    parser.add_argument("--strict", action="store_true",
                        help="Reject repeated measurements instead of keeping the last")
    parser.add_argument("--output", default=None,
                        help="Write lines to file (default: stdout)")
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {__version__}")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        report = load_file(args.report)
        table = compare(report, args.baseline, strict=args.strict)
    except BenchRatioError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                count = write_table(table, f, sort_types=args.sort_types)
        except OSError as e:
            print(f"ERROR: Cannot write {args.output}: {e}", file=sys.stderr)
            return 1
        print(f"{count} line(s) written to: {args.output}", file=sys.stderr)
    else:
        write_table(table, sys.stdout, sort_types=args.sort_types)

    return 0

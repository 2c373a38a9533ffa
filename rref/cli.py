"""
Command-line interface.

Usage:
    python main.py MATRIX [OPTIONS]

Examples:
    python main.py "4 3; 6 3"
    python main.py "2 1 -1; -3 -1 2; -2 1 2" -b "8; -11; -3" --all-steps
    python main.py "1/2, pi; 3, 4" -o steps.tex --format "%.2f"
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from rref.config import ReduceConfig, load_settings
from rref.engine import reduce_trace, trace_to_result
from rref.errors import ReductionError
from rref.latex import write_trace


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rref-latex",
        description="Reduce a matrix to RREF and print the derivation as LaTeX.",
    )
    parser.add_argument("matrix", help='Matrix A, rows separated by ";" (e.g. "4 3; 6 3")')
    parser.add_argument("-b", "--rhs", default=None,
                        help="Augmented block b with the same number of rows as A")
    parser.add_argument("-o", "--output", default=None,
                        help="Write the LaTeX to this file instead of standard output")
    parser.add_argument("--append", action="store_true",
                        help="Append to --output instead of overwriting it")
    parser.add_argument("-a", "--all-steps", action=argparse.BooleanOptionalAction, default=None,
                        help="Show each row elimination as its own step (overrides --settings)")
    parser.add_argument("-f", "--format", dest="number_format", default=None,
                        help='Number format, printf style (default "%%.3f")')
    parser.add_argument("--settings", default=None,
                        help="JSON settings file (show_all_steps, number_format)")
    parser.add_argument("--json", action="store_true",
                        help="Print the step trail as JSON instead of LaTeX")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log pivot choices and recorded steps")
    return parser


def _config_from_args(args: argparse.Namespace) -> ReduceConfig:
    settings = load_settings(args.settings) if args.settings else {}
    if args.all_steps is not None:
        settings["show_all_steps"] = args.all_steps
    if args.number_format is not None:
        settings["number_format"] = args.number_format
    return ReduceConfig.from_settings(settings)


def _write(trace, args: argparse.Namespace, sink) -> None:
    if args.json:
        sink.write(json.dumps(trace_to_result(trace), indent=2, ensure_ascii=False) + "\n")
    else:
        write_trace(trace, sink)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = _config_from_args(args)
        trace = reduce_trace(args.matrix, args.rhs, config)
        if args.output:
            with open(args.output, "a" if args.append else "w", encoding="utf-8") as f:
                _write(trace, args, f)
        else:
            _write(trace, args, sys.stdout)
    except (ValueError, ReductionError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0

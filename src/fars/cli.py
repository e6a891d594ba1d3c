"""
FARS Command-Line Interface

Exposes two subcommands:

    fars summarize --years <Y> [<Y> ...] [...]   Monthly accident counts per year
    fars map       --state <S> --year <Y> [...]  Map accidents for one state

The package must be installed (``pip install -e .``) for the ``fars`` entry
point to be available.

Package Location: src/fars/cli.py
"""

from __future__ import annotations

import argparse
import logging
import sys
import traceback
from pathlib import Path
from typing import List, Optional

import pandas as pd

from .data.reader import SchemaMismatchError
from .data.years import summarize_years
from .plotting.state_map import InvalidStateError
from .reports.generators import ReportGenerator
from .utils.logging import configure_logging

# Errors that are reported as one-line messages instead of tracebacks
_USER_ERRORS = (FileNotFoundError, InvalidStateError, SchemaMismatchError, ValueError)


def _die(message: str) -> None:
    """Print an error message and exit with status 1.

    Args:
        message: Human-readable error text.
    """
    print(f"\nError: {message}", file=sys.stderr)
    sys.exit(1)


# ===========================================================================
# Subcommand handlers
# ===========================================================================

def handle_summarize(args: argparse.Namespace) -> None:
    """Print (and optionally save) the monthly summary for ``args.years``.

    Exits with status 1 when none of the requested years could be loaded.

    Args:
        args: Parsed CLI arguments.
    """
    if args.output_dir:
        gen = ReportGenerator(data_dir=Path(args.data_dir), output_dir=Path(args.output_dir))
        summary = gen.generate_summary(args.years)
    else:
        summary = summarize_years(args.years, data_dir=Path(args.data_dir))

    if summary.empty:
        _die(f"No accident data found for years: {', '.join(args.years)}")

    with pd.option_context("display.max_columns", None, "display.width", 120):
        print(summary.to_string())


def handle_map(args: argparse.Namespace) -> None:
    """Write the accident map for one state and year as HTML.

    Args:
        args: Parsed CLI arguments.
    """
    gen = ReportGenerator(data_dir=Path(args.data_dir), output_dir=Path(args.output_dir))
    out_path = gen.generate_state_map(args.state, args.year, show=args.show)
    if out_path is None:
        print("no accidents to plot")
    else:
        print(f"Map saved → {out_path}")


# ===========================================================================
# Argument parser construction
# ===========================================================================

def _build_parser() -> argparse.ArgumentParser:
    """Construct and return the top-level argument parser.

    Returns:
        Configured ``ArgumentParser`` with ``summarize`` and ``map``
        subcommands attached.
    """
    parser = argparse.ArgumentParser(
        prog="fars",
        description=(
            "FARS – Fatality Analysis Reporting System toolkit\n"
            "Monthly accident summaries and state accident maps."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug logging and print full tracebacks on errors.",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=False,
        help="Emit log records as single-line JSON objects.",
    )
    subs = parser.add_subparsers(dest="command", metavar="<command>")
    subs.required = True

    # ------------------------------------------------------------------
    # summarize
    # ------------------------------------------------------------------
    p_sum = subs.add_parser(
        "summarize",
        help="Count accidents per month for one or more years.",
        description=(
            "Read accident_<year>.csv.bz2 for every requested year and print\n"
            "a table with one row per month and one column per year.\n"
            "Years whose file is missing are skipped with a warning."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p_sum.add_argument(
        "--years",
        required=True,
        nargs="+",
        metavar="YYYY",
        help="One or more report years, e.g. --years 2013 2014 2015",
    )
    p_sum.add_argument(
        "--data-dir",
        default=".",
        metavar="DIR",
        help="Directory holding the accident files (default: current directory).",
    )
    p_sum.add_argument(
        "--output-dir",
        default=None,
        metavar="DIR",
        help="Also write the summary as CSV into this directory.",
    )
    p_sum.set_defaults(func=handle_summarize)

    # ------------------------------------------------------------------
    # map
    # ------------------------------------------------------------------
    p_map = subs.add_parser(
        "map",
        help="Map the accidents of one state in one year.",
        description=(
            "Plot every accident of the given state and year at its recorded\n"
            "position.  Output is written to <output-dir>/State_<S>_<Y>.html"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p_map.add_argument(
        "--state",
        required=True,
        type=int,
        metavar="CODE",
        help="Numeric (FIPS) state code, e.g. 31 for Nebraska.",
    )
    p_map.add_argument(
        "--year",
        required=True,
        type=int,
        metavar="YYYY",
        help="Report year.",
    )
    p_map.add_argument(
        "--data-dir",
        default=".",
        metavar="DIR",
        help="Directory holding the accident files (default: current directory).",
    )
    p_map.add_argument(
        "--output-dir",
        default="outputs",
        metavar="DIR",
        help="Directory for the HTML map (default: outputs).",
    )
    p_map.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Also open the map after writing it.",
    )
    p_map.set_defaults(func=handle_map)

    return parser


# ===========================================================================
# Entry point
# ===========================================================================

def main(argv: Optional[List[str]] = None) -> None:
    """Parse CLI arguments and dispatch to the appropriate handler.

    This function is registered as the ``fars`` console script entry point
    in ``pyproject.toml``.

    Args:
        argv: Argument list; defaults to ``sys.argv[1:]``.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(
        level=logging.DEBUG if args.verbose else logging.INFO,
        json_format=args.log_json,
    )
    try:
        args.func(args)
    except _USER_ERRORS as exc:
        if args.verbose:
            traceback.print_exc()
        _die(str(exc))


if __name__ == "__main__":
    main()

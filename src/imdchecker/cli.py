"""
IMD Postcode Checker — command line
===================================
Thin wrapper around the imdchecker library.

Usage:
    imdchecker "SW1A 1AA" "M1 1AE"           # postcodes as arguments
    imdchecker -f postcodes.txt -d 3         # one postcode per line
    cat postcodes.txt | imdchecker --json    # read stdin

The database path comes from --db, else the IMD_DB environment variable,
else imd.sqlite3 in the current working directory.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Optional, TextIO

from imdchecker import config
from imdchecker.client import IMDChecker
from imdchecker.decile import decile_for_display
from imdchecker.exceptions import BatchTooLarge, DatabaseInvalid, DatabaseNotFound
from imdchecker.log import configure_logging
from imdchecker.models import RESULT_FIELDS, RESULT_HEADERS, LookupResult
from imdchecker.render import NO_RESULTS_MESSAGE, display_value, render_table


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="imdchecker",
        description="Look up Index of Multiple Deprivation ranks for UK postcodes.",
    )
    p.add_argument("postcodes", nargs="*", help="Postcodes to look up")
    p.add_argument(
        "-f", "--file",
        help="Read postcodes from a file, one per line ('-' for stdin)",
    )
    p.add_argument(
        "-d", "--decile",
        help="Only show results at or below this decile (1-10)",
    )
    p.add_argument("--db", default=None, help="Path to the IMD SQLite database")
    fmt = p.add_mutually_exclusive_group()
    fmt.add_argument("--json", action="store_true", help="Print results as JSON")
    fmt.add_argument("--html", action="store_true", help="Print an HTML table")
    p.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug detail to stderr"
    )
    return p


def _read_input(args: argparse.Namespace, stdin: TextIO) -> str:
    if args.postcodes:
        return "\n".join(args.postcodes)
    if args.file is None or args.file == "-":
        return stdin.read()
    with open(args.file, "r", encoding="utf-8") as fh:
        return fh.read()


def _format_text(result: LookupResult) -> str:
    """Fixed-width table, one matched postcode per line."""
    if not result.found:
        return NO_RESULTS_MESSAGE
    table = [list(RESULT_HEADERS)]
    for row in result.rows:
        values = row.to_dict()
        table.append([display_value(values[name]) for name in RESULT_FIELDS])
    widths = [max(len(line[i]) for line in table) for i in range(len(RESULT_FIELDS))]
    lines = [
        "  ".join(cell.ljust(width) for cell, width in zip(line, widths)).rstrip()
        for line in table
    ]
    lines.insert(1, "  ".join("-" * width for width in widths))
    return "\n".join(lines)


def main(argv: Optional[list[str]] = None, stdin: TextIO = sys.stdin) -> int:
    """Entry point. Returns the process exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.postcodes and args.file is not None:
        parser.error("give postcodes as arguments or with -f, not both")

    try:
        configure_logging("DEBUG" if args.verbose else config.LOG_LEVEL)
    except ValueError as exc:
        print(f"Error: {exc} (check IMD_LOG_LEVEL)", file=sys.stderr)
        return 2

    try:
        raw_postcodes = _read_input(args, stdin)
    except (OSError, UnicodeDecodeError) as exc:
        reason = getattr(exc, "strerror", None) or exc
        print(f"Error: cannot read {args.file or 'stdin'}: {reason}", file=sys.stderr)
        return 2
    decile_present = args.decile is not None

    try:
        checker = IMDChecker(db_path=args.db, truncate=False)
    except (DatabaseNotFound, DatabaseInvalid) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print(
            "Pass --db or set the IMD_DB environment variable, "
            "or run from the directory containing imd.sqlite3.",
            file=sys.stderr,
        )
        return 2

    with checker:
        try:
            result = checker.lookup(raw_postcodes, decile_present, args.decile)
        except BatchTooLarge as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1

    if args.json:
        payload = result.to_dict()
        payload["decile_input"] = decile_for_display(decile_present, args.decile)
        print(json.dumps(payload, indent=2))
    elif args.html:
        print(render_table(result.rows, RESULT_FIELDS))
    else:
        print(_format_text(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""CLI for checking street names against a dictionary."""

from __future__ import annotations

import argparse
from typing import List

from streetmangler.checker.models import STATUSES
from streetmangler.checker.output import FORMATS
from streetmangler.checker.runner import run_check, run_lookup
from streetmangler.errors import StreetManglerError
from streetmangler.shared.log import eprint, set_verbose

MAX_SPELLING_DEPTH = 3


def _spelling_depth(value: str) -> int:
    try:
        depth = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value}") from None
    if not 0 <= depth <= MAX_SPELLING_DEPTH:
        raise argparse.ArgumentTypeError(f"must be between 0 and {MAX_SPELLING_DEPTH}")
    return depth


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-l", "--locale",
        type=str,
        default=None,
        help="Locale of the dictionary, e.g. ru_RU or en_US (default: $STREETMANGLER_LOCALE or ru_RU).",
    )
    parser.add_argument(
        "--locale-file",
        type=str,
        default=None,
        help="Extra locale table (YAML). Its locale is used unless --locale is given.",
    )
    parser.add_argument(
        "-d", "--database",
        action="append",
        required=True,
        help="Dictionary file with one correct street name per line. Can be repeated.",
    )
    parser.add_argument(
        "-s", "--spelling-depth",
        type=_spelling_depth,
        default=1,
        help=f"Maximum edit distance for spelling suggestions, 0-{MAX_SPELLING_DEPTH} (0 disables).",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=FORMATS,
        default="text",
        help="Output format.",
    )
    parser.add_argument("--out", type=str, default="-", help="Output file path ('-' for stdout).")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging.")


def parse_args(argv: List[str] | None = None):
    parser = argparse.ArgumentParser(
        prog="streetmangler check",
        description="Check street names found in OSM files against a dictionary.",
    )
    _add_common(parser)
    parser.add_argument(
        "--only",
        action="append",
        choices=STATUSES,
        default=None,
        help="Only report names with this status. Can be repeated.",
    )
    parser.add_argument("inputs", nargs="+", help="OSM XML files ('-' for stdin).")
    return parser.parse_args(argv)


def parse_lookup_args(argv: List[str] | None = None):
    parser = argparse.ArgumentParser(
        prog="streetmangler lookup",
        description="Check the given street names against a dictionary.",
    )
    _add_common(parser)
    parser.add_argument("names", nargs="+", help="Street names to check.")
    return parser.parse_args(argv)


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    set_verbose(args.verbose)
    try:
        run_check(args)
        return 0
    except (StreetManglerError, OSError) as e:
        eprint(f"error: {e}")
        return 1


def lookup_main(argv: List[str] | None = None) -> int:
    args = parse_lookup_args(argv)
    set_verbose(args.verbose)
    try:
        results = run_lookup(args)
    except (StreetManglerError, OSError) as e:
        eprint(f"error: {e}")
        return 1
    # skipped names count as not exact
    checked = sum(r.count for r in results)
    return 0 if checked == len(args.names) and all(r.ok for r in results) else 3


if __name__ == "__main__":
    raise SystemExit(main())

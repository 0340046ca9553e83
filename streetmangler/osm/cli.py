"""CLI for dumping candidate street names from OSM files."""

from __future__ import annotations

import argparse
import sys
from typing import List

from streetmangler.errors import StreetManglerError
from streetmangler.osm.extractor import NameExtractor
from streetmangler.shared.log import eprint, set_verbose


def parse_args(argv: List[str] | None = None):
    parser = argparse.ArgumentParser(
        prog="streetmangler extract",
        description="Print street names (addr:street and named highways) found in OSM XML files.",
    )
    parser.add_argument("inputs", nargs="+", help="OSM XML files ('-' for stdin).")
    parser.add_argument("--unique", action="store_true", help="Print each distinct name once.")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging.")
    return parser.parse_args(argv)


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    set_verbose(args.verbose)

    seen = set()

    def emit(name: str) -> None:
        if args.unique:
            if name in seen:
                return
            seen.add(name)
        sys.stdout.write(name + "\n")

    extractor = NameExtractor(emit)
    try:
        for inp in args.inputs:
            extractor.parse_file(inp)
    except StreetManglerError as e:
        eprint(f"error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""Unified CLI with check, lookup and extract commands."""

from __future__ import annotations

import sys
from typing import List

from streetmangler import __version__
from streetmangler.checker import cli as checker_cli
from streetmangler.osm import cli as osm_cli

USAGE = """usage: streetmangler <check|lookup|extract> [args...]

subcommands:
  check     check street names found in OSM files against a dictionary
  lookup    check street names given on the command line
  extract   print street names found in OSM files

examples:
  streetmangler check -l ru_RU -d streets.txt city.osm
  streetmangler lookup -l en_US -d streets.txt "Main st." "Mian Street"
  streetmangler extract --unique city.osm
"""


def main(argv: List[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    if argv and argv[0] in {"-h", "--help", "help"}:
        print(USAGE)
        return 0
    if argv and argv[0] == "--version":
        print(f"streetmangler {__version__}")
        return 0
    if not argv:
        print(USAGE)
        return 2

    cmd = argv[0]
    rest = argv[1:]

    if cmd == "check":
        return checker_cli.main(rest)
    if cmd == "lookup":
        return checker_cli.lookup_main(rest)
    if cmd == "extract":
        return osm_cli.main(rest)

    print(f"unknown command: {cmd}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())

"""Check pipeline: build the database, extract names, classify, report."""

from __future__ import annotations

import argparse
from typing import Iterable, List, Optional

from streetmangler.checker.checks import check_names, summarize
from streetmangler.checker.models import CheckResult
from streetmangler.checker.output import print_summary, write_results
from streetmangler.db.database import Database, DatabaseBuilder
from streetmangler.locales import get_registry, load_locale_file
from streetmangler.osm.extractor import NameExtractor
from streetmangler.shared.log import debug, eprint
from streetmangler.shared.paths import default_locale


def open_database(locale_name: Optional[str],
                  dictionaries: Iterable[str],
                  locale_file: Optional[str] = None) -> Database:
    registry = get_registry()
    if locale_file:
        extra = load_locale_file(locale_file)
        registry = registry.with_locale(extra)
        locale_name = locale_name or extra.name
    locale = registry.get(locale_name or default_locale())

    builder = DatabaseBuilder(locale)
    for path in dictionaries:
        count = builder.load(path)
        eprint(f"[ok] loaded {count} names from {path}")
    db = builder.build()
    debug(f"database for {locale.name}: {len(db)} distinct names")
    return db


def _filter(results: List[CheckResult], only: Optional[List[str]]) -> List[CheckResult]:
    if not only:
        return results
    wanted = set(only)
    return [r for r in results if r.status in wanted]


def run_check(args: argparse.Namespace) -> List[CheckResult]:
    db = open_database(args.locale, args.database, args.locale_file)

    names: List[str] = []
    extractor = NameExtractor(names.append)
    for inp in args.inputs:
        extractor.parse_file(inp)
    debug(f"extracted {len(names)} candidate names from {len(args.inputs)} input(s)")

    results = check_names(db, names, args.spelling_depth)
    write_results(_filter(results, args.only), args.out, args.format)
    print_summary(summarize(results))
    return results


def run_lookup(args: argparse.Namespace) -> List[CheckResult]:
    db = open_database(args.locale, args.database, args.locale_file)
    results = check_names(db, args.names, args.spelling_depth)
    write_results(results, args.out, args.format)
    return results

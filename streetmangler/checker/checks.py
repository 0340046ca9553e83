"""Classification of names against a database."""

from __future__ import annotations

from typing import Dict, Iterable, List

from streetmangler.checker.models import (
    CANONICAL,
    EXACT,
    SPELLING,
    STRIPPED,
    UNKNOWN,
    CheckResult,
)
from streetmangler.checker.ranking import rank_suggestions, score_suggestions
from streetmangler.db.database import Database
from streetmangler.errors import NameEncodingError
from streetmangler.name import Name
from streetmangler.shared.log import warn


def classify(db: Database, name: str, max_distance: int = 1) -> CheckResult:
    """Run the checks from strictest to loosest and stop at the first hit."""
    tokenized = Name(name, db.locale)

    if db.check_exact_match(tokenized):
        return CheckResult(name=name, status=EXACT)

    found = db.check_canonical_form(tokenized)
    if found:
        return CheckResult(name=name, status=CANONICAL, suggestions=score_suggestions(name, found))

    found = db.check_stripped_status(tokenized)
    if found:
        return CheckResult(name=name, status=STRIPPED, suggestions=score_suggestions(name, found))

    if max_distance > 0:
        found = db.check_spelling(tokenized, max_distance)
        if found:
            return CheckResult(name=name, status=SPELLING, suggestions=rank_suggestions(name, found))

    return CheckResult(name=name, status=UNKNOWN)


def check_names(db: Database, names: Iterable[str], max_distance: int = 1) -> List[CheckResult]:
    """Classify each distinct name once; ``count`` holds its occurrences.

    Names that are not valid Unicode are skipped with a warning.
    """
    results: Dict[str, CheckResult] = {}
    for name in names:
        res = results.get(name)
        if res is not None:
            res.count += 1
            continue
        try:
            results[name] = classify(db, name, max_distance)
        except NameEncodingError as e:
            warn(f"skipping {name!r}: {e}")
    return list(results.values())


def summarize(results: Iterable[CheckResult]) -> Dict[str, int]:
    """Occurrences per status."""
    counts: Dict[str, int] = {}
    for r in results:
        counts[r.status] = counts.get(r.status, 0) + r.count
    return counts

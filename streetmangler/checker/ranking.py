"""Similarity scores for suggestions."""

from __future__ import annotations

from typing import Iterable, List

from rapidfuzz import fuzz

from streetmangler.checker.models import Suggestion


def similarity(name: str, suggestion: str) -> int:
    """0-100 similarity of two names, ignoring case."""
    if not name or not suggestion:
        return 0
    return int(round(fuzz.ratio(name.casefold(), suggestion.casefold())))


def score_suggestions(name: str, suggestions: Iterable[str]) -> List[Suggestion]:
    """Attach scores, keeping the given order."""
    return [Suggestion(name=s, score=similarity(name, s)) for s in suggestions]


def rank_suggestions(name: str, suggestions: Iterable[str]) -> List[Suggestion]:
    """Score suggestions and order them best first; ties by name."""
    scored = score_suggestions(name, suggestions)
    scored.sort(key=lambda s: (-s.score, s.name))
    return scored

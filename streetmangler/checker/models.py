"""Data models for check results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

EXACT = "exact"
CANONICAL = "canonical"
STRIPPED = "stripped"
SPELLING = "spelling"
UNKNOWN = "unknown"

STATUSES = (EXACT, CANONICAL, STRIPPED, SPELLING, UNKNOWN)


@dataclass
class Suggestion:
    name: str
    score: int = 0


@dataclass
class CheckResult:
    name: str
    status: str
    suggestions: List[Suggestion] = field(default_factory=list)
    count: int = 1

    @property
    def ok(self) -> bool:
        return self.status == EXACT

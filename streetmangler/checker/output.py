"""Output helpers for check results."""

from __future__ import annotations

import csv
import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import IO, Dict, Iterable, List, Optional

from streetmangler.checker.models import SPELLING, STATUSES, CheckResult
from streetmangler.shared.log import eprint

FORMATS = ("text", "csv", "json", "jsonl")


def is_stdout(path_str: Optional[str]) -> bool:
    return (path_str is None) or (path_str == "-")


def prepare_output_location(path_str: str) -> Path:
    """Ensure the parent directory of an output file exists."""
    p = Path(path_str)
    p.parent.mkdir(parents=True, exist_ok=True)
    return p


def serialize_suggestions(result: CheckResult) -> str:
    return "|".join(s.name for s in result.suggestions)


def _write_text(results: Iterable[CheckResult], f: IO[str]) -> None:
    for r in results:
        line = f"{r.status}\t{r.name}"
        if r.count > 1:
            line += f" (x{r.count})"
        if r.suggestions:
            line += " -> " + ", ".join(
                f"{s.name} [{s.score}%]" if r.status == SPELLING else s.name
                for s in r.suggestions
            )
        f.write(line + "\n")


def _write_csv(results: Iterable[CheckResult], f: IO[str]) -> None:
    w = csv.writer(f, quoting=csv.QUOTE_MINIMAL)
    w.writerow(["status", "name", "count", "suggestions", "best_score"])
    for r in results:
        best = max((s.score for s in r.suggestions), default="")
        w.writerow([r.status, r.name, r.count, serialize_suggestions(r), best])


def _write_json(results: Iterable[CheckResult], f: IO[str]) -> None:
    json.dump([asdict(r) for r in results], f, ensure_ascii=False, indent=2)
    f.write("\n")


def _write_jsonl(results: Iterable[CheckResult], f: IO[str]) -> None:
    for r in results:
        json.dump(asdict(r), f, ensure_ascii=False)
        f.write("\n")


_WRITERS = {
    "text": _write_text,
    "csv": _write_csv,
    "json": _write_json,
    "jsonl": _write_jsonl,
}


def write_results(results: List[CheckResult], out_path: Optional[str] = "-", fmt: str = "text") -> None:
    writer = _WRITERS.get(fmt)
    if writer is None:
        raise ValueError(f"unknown output format: {fmt}")

    if is_stdout(out_path):
        writer(results, sys.stdout)
        return

    p = prepare_output_location(out_path)
    with open(p, "w", newline="" if fmt == "csv" else None, encoding="utf-8") as f:
        writer(results, f)


def print_summary(counts: Dict[str, int]) -> None:
    total = sum(counts.values())
    parts = [f"{st}={counts.get(st, 0)}" for st in STATUSES]
    eprint(f"[ok] checked {total} names: " + " ".join(parts))

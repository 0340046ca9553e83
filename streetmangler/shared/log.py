"""Minimal logging helpers."""

from __future__ import annotations

import os
import sys
from typing import Any

_verbose = False


def eprint(*args: Any, **kwargs: Any) -> None:
    """Print to stderr."""
    print(*args, file=sys.stderr, **kwargs)


def set_verbose(enabled: bool) -> None:
    global _verbose
    _verbose = bool(enabled)


def debug_enabled() -> bool:
    return _verbose or os.environ.get("STREETMANGLER_DEBUG") == "1"


def debug(msg: str) -> None:
    # Verbose logs are opt-in to keep report output clean.
    if debug_enabled():
        eprint(f"debug: {msg}")


def warn(msg: str) -> None:
    eprint(f"warning: {msg}")

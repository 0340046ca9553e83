"""Path helpers for packaged resources."""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_LOCALE = "ru_RU"


def package_root() -> Path:
    return Path(__file__).resolve().parents[1]


def locales_dir() -> Path:
    return package_root() / "data" / "locales"


def default_locale() -> str:
    return os.environ.get("STREETMANGLER_LOCALE") or DEFAULT_LOCALE

"""Locale status tables and the process-wide locale registry.

A locale is an ordered list of status parts (the "street"/"avenue" words of
a name). Tables are YAML files; the bundled ones live in
``streetmangler/data/locales``. The registry of bundled locales is built
once, on the first ``get_registry()`` call, and is read-only afterwards.
Build it before creating any ``DatabaseBuilder``.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

import yaml

from streetmangler.errors import LocaleError
from streetmangler.shared.log import debug
from streetmangler.shared.paths import locales_dir


# where the status word of a name usually stands
ANY = "any"
PREFIX = "prefix"
SUFFIX = "suffix"
STATUS_POSITIONS = (ANY, PREFIX, SUFFIX)


def is_punct(ch: str) -> bool:
    """Punctuation other than the hyphen, which is part of words like "пр-т"."""
    return ch != "-" and unicodedata.category(ch).startswith("P")


def fold_variant(text: str) -> str:
    """Key used to compare a word against status variants."""
    start, end = 0, len(text)
    while start < end and is_punct(text[start]):
        start += 1
    while end > start and is_punct(text[end - 1]):
        end -= 1
    return text[start:end].casefold()


@dataclass(frozen=True)
class StatusPart:
    full_form: str
    canonical_form: str = ""
    abbreviated_form: str = ""
    variants: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.canonical_form:
            object.__setattr__(self, "canonical_form", self.full_form)
        if not self.abbreviated_form:
            object.__setattr__(self, "abbreviated_form", self.canonical_form)


@dataclass(frozen=True)
class Locale:
    name: str
    status_parts: Tuple[StatusPart, ...]
    status_position: str = ANY
    _by_variant: Mapping[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.status_position not in STATUS_POSITIONS:
            raise LocaleError(
                f"locale {self.name}: status_position must be one of {', '.join(STATUS_POSITIONS)}"
            )
        by_variant: Dict[str, int] = {}
        for idx, part in enumerate(self.status_parts):
            for variant in part.variants:
                key = fold_variant(variant)
                if key in by_variant and by_variant[key] != idx:
                    other = self.status_parts[by_variant[key]].full_form
                    raise LocaleError(
                        f"locale {self.name}: variant {variant!r} of {part.full_form!r} "
                        f"already belongs to {other!r}"
                    )
                by_variant[key] = idx
        object.__setattr__(self, "_by_variant", MappingProxyType(by_variant))

    def status_precedence(self, word: str) -> Optional[int]:
        """Index of the status part ``word`` is a variant of, or None."""
        return self._by_variant.get(fold_variant(word))

    def status_part(self, word: str) -> Optional[StatusPart]:
        idx = self.status_precedence(word)
        return None if idx is None else self.status_parts[idx]


def _str_list(value, where: str) -> List[str]:
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list) or not all(isinstance(v, str) and v for v in value):
        raise LocaleError(f"{where}: 'variants' must be a list of non-empty strings")
    return list(value)


def parse_locale(data, source: str = "<data>") -> Locale:
    """Build a Locale from the mapping read out of a locale YAML file."""
    if not isinstance(data, dict):
        raise LocaleError(f"{source}: locale table must be a mapping")
    name = data.get("locale")
    if not isinstance(name, str) or not name:
        raise LocaleError(f"{source}: missing 'locale' identifier")
    raw_parts = data.get("status_parts") or []
    if not isinstance(raw_parts, list):
        raise LocaleError(f"{source}: 'status_parts' must be a list")

    parts: List[StatusPart] = []
    for i, body in enumerate(raw_parts):
        where = f"{source}: status_parts[{i}]"
        if not isinstance(body, dict):
            raise LocaleError(f"{where}: must be a mapping")
        full = body.get("full")
        if not isinstance(full, str) or not full:
            raise LocaleError(f"{where}: missing 'full' form")
        variants = _str_list(body.get("variants") or [full], where)
        parts.append(StatusPart(
            full_form=full,
            canonical_form=body.get("canonical") or "",
            abbreviated_form=body.get("abbreviated") or "",
            variants=tuple(variants),
        ))
    position = data.get("status_position") or ANY
    if position not in STATUS_POSITIONS:
        raise LocaleError(
            f"{source}: 'status_position' must be one of {', '.join(STATUS_POSITIONS)}, got {position!r}"
        )
    return Locale(name=name, status_parts=tuple(parts), status_position=position)


def load_locale_file(path: str | Path) -> Locale:
    p = Path(path)
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise LocaleError(f"cannot read locale file {p}: {e.strerror or e}") from e
    except yaml.YAMLError as e:
        raise LocaleError(f"cannot parse locale file {p}: {e}") from e
    locale = parse_locale(data, source=str(p))
    debug(f"loaded locale {locale.name} ({len(locale.status_parts)} status parts) from {p}")
    return locale


class LocaleRegistry:
    """Read-only mapping from locale identifier to Locale."""

    def __init__(self, locales: Iterable[Locale] = ()):
        table: Dict[str, Locale] = {}
        for loc in locales:
            if loc.name in table:
                raise LocaleError(f"locale {loc.name} registered twice")
            table[loc.name] = loc
        self._locales = MappingProxyType(table)

    @classmethod
    def from_directory(cls, path: str | Path) -> "LocaleRegistry":
        files = sorted(Path(path).glob("*.yaml"))
        return cls(load_locale_file(p) for p in files)

    def with_locale(self, locale: Locale) -> "LocaleRegistry":
        """Return a new registry that also contains ``locale``."""
        merged = {name: loc for name, loc in self._locales.items() if name != locale.name}
        merged[locale.name] = locale
        return LocaleRegistry(merged.values())

    def get(self, name: str) -> Locale:
        try:
            return self._locales[name]
        except KeyError:
            known = ", ".join(self.names()) or "none"
            raise LocaleError(f"unknown locale {name!r} (known: {known})") from None

    def names(self) -> List[str]:
        return sorted(self._locales)

    def __contains__(self, name: object) -> bool:
        return name in self._locales

    def __iter__(self) -> Iterator[Locale]:
        return iter(self._locales.values())

    def __len__(self) -> int:
        return len(self._locales)


@lru_cache(maxsize=1)
def get_registry() -> LocaleRegistry:
    """Registry of the bundled locales."""
    return LocaleRegistry.from_directory(locales_dir())

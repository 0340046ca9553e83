"""Street name database.

Names are added to a ``DatabaseBuilder``; ``build()`` turns it into a
read-only ``Database`` that answers four questions about a name:

* ``check_exact_match``: is it written exactly as in the dictionary;
* ``check_canonical_form``: is it a dictionary name once the status word
  form, position, case, whitespace and punctuation are ignored;
* ``check_stripped_status``: is it a dictionary name missing its status word;
* ``check_spelling``: which dictionary names are a few edits away.
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping, Set, Tuple, Union

from streetmangler.db.loader import load_dictionary
from streetmangler.db.spelltrie import SpellTrie
from streetmangler.errors import DatabaseSealedError
from streetmangler.locales import Locale
from streetmangler.name import JoinFlags, Name

NameLike = Union[str, Name]

HASH_FLAGS = (
    JoinFlags.STATUS_TO_LEFT
    | JoinFlags.EXPAND_STATUS
    | JoinFlags.NORMALIZE_WHITESPACE
    | JoinFlags.NORMALIZE_PUNCT
)


def name_hash(name: Name) -> str:
    """Lookup identity of a name, independent of status word spelling."""
    return name.join(HASH_FLAGS).casefold()


def _append_unique(index: Dict[str, List[str]], key: str, value: str) -> None:
    values = index.setdefault(key, [])
    if value not in values:
        values.append(value)


class DatabaseBuilder:
    """Write side of the database. Not thread-safe; add names sequentially."""

    def __init__(self, locale: Locale):
        self.locale = locale
        self._names: Set[str] = set()
        self._canonical: Dict[str, List[str]] = {}
        self._stripped: Dict[str, List[str]] = {}
        self._spell = SpellTrie()
        self._built = False

    def add(self, name: str) -> None:
        if self._built:
            raise DatabaseSealedError("database already built; create a new builder to add names")
        tokenized = Name(name, self.locale)
        if not tokenized.text.strip():
            return

        key = name_hash(tokenized)
        # with canonical != full form, the canonical form is the reference
        canonical = tokenized.join(JoinFlags.CANONICALIZE_STATUS)

        self._names.add(canonical)
        _append_unique(self._canonical, key, canonical)
        self._spell.insert(key)

        if tokenized.join(JoinFlags.REMOVE_STATUS) != tokenized.text:
            stripped = tokenized.join(JoinFlags.REMOVE_STATUS | JoinFlags.NORMALIZE_WHITESPACE)
            _append_unique(self._stripped, stripped, canonical)

    def load(self, path: Union[str, Path]) -> int:
        return load_dictionary(self, path)

    def __len__(self) -> int:
        return len(self._names)

    def build(self) -> "Database":
        """Seal the builder and return the queryable database."""
        if self._built:
            raise DatabaseSealedError("database already built")
        self._built = True
        return Database(
            locale=self.locale,
            names=frozenset(self._names),
            canonical={k: tuple(v) for k, v in self._canonical.items()},
            stripped={k: tuple(v) for k, v in self._stripped.items()},
            spell=self._spell,
        )


class Database:
    """Read side of the database; safe to share between threads."""

    def __init__(self,
                 locale: Locale,
                 names: FrozenSet[str],
                 canonical: Dict[str, Tuple[str, ...]],
                 stripped: Dict[str, Tuple[str, ...]],
                 spell: SpellTrie):
        self.locale = locale
        self._names = names
        self._canonical: Mapping[str, Tuple[str, ...]] = MappingProxyType(canonical)
        self._stripped: Mapping[str, Tuple[str, ...]] = MappingProxyType(stripped)
        self._spell = spell

    def _name(self, name: NameLike) -> Name:
        return name if isinstance(name, Name) else Name(name, self.locale)

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._names

    def check_exact_match(self, name: NameLike) -> bool:
        return self._name(name).text in self._names

    def check_canonical_form(self, name: NameLike) -> List[str]:
        return list(self._canonical.get(name_hash(self._name(name)), ()))

    def check_stripped_status(self, name: NameLike) -> List[str]:
        key = self._name(name).join(JoinFlags.NORMALIZE_WHITESPACE)
        return list(self._stripped.get(key, ()))

    def check_spelling(self, name: NameLike, max_distance: int = 1) -> List[str]:
        matches = self._spell.find_approx(name_hash(self._name(name)), max_distance)
        suggestions: List[str] = []
        for key in sorted(matches, key=lambda k: (matches[k], k)):
            suggestions.extend(self._canonical.get(key, ()))
        return suggestions

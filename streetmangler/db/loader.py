"""Dictionary file reader.

One name per line, UTF-8; a leading byte order mark is ignored. ``#``
starts a comment, runs of spaces and tabs collapse to a single space,
blank lines are skipped.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import TYPE_CHECKING, Iterator

from streetmangler.errors import DictionaryError
from streetmangler.shared.log import debug, warn

if TYPE_CHECKING:
    from streetmangler.db.database import DatabaseBuilder

_BLANKS_RE = re.compile(r"[ \t]+")


def clean_line(line: str) -> str:
    line = line.split("#", 1)[0]
    return _BLANKS_RE.sub(" ", line).strip()


def iter_dictionary_names(path: str | Path) -> Iterator[str]:
    p = Path(path)
    try:
        f = open(p, "rb")
    except OSError as e:
        raise DictionaryError(f"cannot open database {p}: {e.strerror or e}") from e

    with f:
        lineno = 0
        try:
            for raw in f:
                lineno += 1
                try:
                    # utf-8-sig drops a leading byte order mark
                    line = raw.decode("utf-8-sig" if lineno == 1 else "utf-8")
                except UnicodeDecodeError as e:
                    warn(f"{p}:{lineno}: skipping line, not valid UTF-8 ({e.reason})")
                    continue
                name = clean_line(line)
                if name:
                    yield name
        except OSError as e:
            raise DictionaryError(f"read error in {p}: {e.strerror or e}") from e


def load_dictionary(builder: "DatabaseBuilder", path: str | Path) -> int:
    """Feed every name in ``path`` to ``builder``; return how many were read."""
    count = 0
    for name in iter_dictionary_names(path):
        builder.add(name)
        count += 1
    debug(f"loaded {count} names from {path}")
    return count

"""Exception types raised by streetmangler."""

from __future__ import annotations

from typing import Optional


class StreetManglerError(Exception):
    """Base class for all streetmangler errors."""


class LocaleError(StreetManglerError):
    """Unknown locale or malformed locale table."""


class DictionaryError(StreetManglerError):
    """Dictionary file cannot be opened or read."""


class ExtractError(StreetManglerError):
    """OSM input cannot be read or is not well-formed XML."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} at line {line} pos {column}"
        super().__init__(message)


class NameEncodingError(StreetManglerError, ValueError):
    """Name text is not valid Unicode."""


class DatabaseSealedError(StreetManglerError, RuntimeError):
    """Names were added to a builder that has already been built."""

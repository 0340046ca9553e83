"""Tokenized street names and their normalized joins."""

from __future__ import annotations

import enum
import re
from typing import List, Optional, Tuple, Union

from streetmangler.errors import NameEncodingError
from streetmangler.locales import PREFIX, SUFFIX, Locale, StatusPart, is_punct

_TOKEN_RE = re.compile(r"\s+|\S+")


class JoinFlags(enum.IntFlag):
    NONE = 0
    STATUS_TO_LEFT = 1
    STATUS_TO_RIGHT = 2
    EXPAND_STATUS = 4
    CANONICALIZE_STATUS = 8
    SHRINK_STATUS = 16
    REMOVE_STATUS = 32
    NORMALIZE_WHITESPACE = 64
    NORMALIZE_PUNCT = 128


_REWRITE_FLAGS = JoinFlags.EXPAND_STATUS | JoinFlags.CANONICALIZE_STATUS | JoinFlags.SHRINK_STATUS
_LAYOUT_FLAGS = (
    JoinFlags.STATUS_TO_LEFT
    | JoinFlags.STATUS_TO_RIGHT
    | JoinFlags.NORMALIZE_WHITESPACE
    | JoinFlags.NORMALIZE_PUNCT
)


def _decode(text: Union[str, bytes]) -> str:
    if isinstance(text, bytes):
        try:
            return text.decode("utf-8")
        except UnicodeDecodeError as e:
            raise NameEncodingError(f"name is not valid UTF-8: {e}") from e
    try:
        # lone surrogates (e.g. from surrogateescape) are not encodable
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise NameEncodingError(f"name is not valid Unicode: {e}") from e
    return text


def _match_case(template: str, replacement: str) -> str:
    letters = [ch for ch in template if ch.isalpha()]
    if not letters or not letters[0].isupper():
        return replacement
    # "ST" is all caps, a single "Ш" only capitalized
    if len(letters) > 1 and all(ch.isupper() for ch in letters):
        return replacement.upper()
    return replacement[:1].upper() + replacement[1:]


def strip_punct(text: str) -> str:
    return "".join(" " if is_punct(ch) else ch for ch in text)


class Name:
    """A street name split into words, with its status word (if any) located.

    ``join()`` without flags gives back the original text. Flags rewrite,
    move or drop the status word and normalize whitespace and punctuation.
    """

    def __init__(self, text: Union[str, bytes], locale: Locale):
        self.text = _decode(text)
        self.locale = locale
        self._tokens: List[str] = _TOKEN_RE.findall(self.text)
        self._status_token: Optional[int] = None
        self.status: Optional[StatusPart] = None
        self._detect_status()

    def _detect_status(self) -> None:
        word_idx = [i for i, tok in enumerate(self._tokens) if not tok.isspace()]
        # a lone status word is a name on its own
        if len(word_idx) < 2:
            return
        found: List[Tuple[int, int]] = []
        for i in word_idx:
            prec = self.locale.status_precedence(self._tokens[i])
            if prec is not None:
                found.append((prec, i))
        if not found:
            return

        position = self.locale.status_position
        if position == SUFFIX:
            prec, idx = found[-1]
        elif position == PREFIX:
            prec, idx = found[0]
        else:
            # table order first, then a leading or trailing word over an inner one
            edges = (word_idx[0], word_idx[-1])
            prec, idx = min(found, key=lambda c: (c[0], c[1] not in edges))
        self._status_token = idx
        self.status = self.locale.status_parts[prec]

    @property
    def words(self) -> List[str]:
        return [tok for tok in self._tokens if not tok.isspace()]

    @property
    def status_word(self) -> Optional[str]:
        if self._status_token is None:
            return None
        return self._tokens[self._status_token]

    @property
    def has_status(self) -> bool:
        return self.status is not None

    def _status_text(self, flags: JoinFlags) -> Optional[str]:
        """Status word as it should appear in the join, None if removed."""
        original = self._tokens[self._status_token]
        if flags & JoinFlags.REMOVE_STATUS:
            return None
        if flags & JoinFlags.EXPAND_STATUS:
            return _match_case(original, self.status.full_form)
        if flags & JoinFlags.CANONICALIZE_STATUS:
            return _match_case(original, self.status.canonical_form)
        if flags & JoinFlags.SHRINK_STATUS:
            return _match_case(original, self.status.abbreviated_form)
        return original

    def join(self, flags: JoinFlags = JoinFlags.NONE) -> str:
        if not flags & _LAYOUT_FLAGS:
            return self._join_in_place(flags)

        moving = bool(flags & (JoinFlags.STATUS_TO_LEFT | JoinFlags.STATUS_TO_RIGHT))
        words: List[str] = []
        status: Optional[str] = None
        for i, tok in enumerate(self._tokens):
            if tok.isspace():
                continue
            if i == self._status_token:
                status = self._status_text(flags)
                if status is not None and not moving:
                    words.append(status)
                continue
            words.append(tok)

        if status is not None and moving:
            if flags & JoinFlags.STATUS_TO_LEFT:
                words.insert(0, status)
            else:
                words.append(status)

        out = " ".join(words)
        if flags & JoinFlags.NORMALIZE_PUNCT:
            out = " ".join(strip_punct(out).split())
        return out

    def _join_in_place(self, flags: JoinFlags) -> str:
        if self._status_token is None or not flags & (_REWRITE_FLAGS | JoinFlags.REMOVE_STATUS):
            return self.text
        tokens = list(self._tokens)
        pos = self._status_token
        status = self._status_text(flags)
        if status is not None:
            tokens[pos] = status
            return "".join(tokens)

        # drop the word together with one neighbouring whitespace run
        if pos > 0 and tokens[pos - 1].isspace():
            del tokens[pos - 1:pos + 1]
        elif pos + 1 < len(tokens) and tokens[pos + 1].isspace():
            del tokens[pos:pos + 2]
        else:
            del tokens[pos]
        return "".join(tokens)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"Name({self.text!r}, status={self.status_word!r})"

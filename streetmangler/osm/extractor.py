"""Candidate street names from OpenStreetMap XML."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import BinaryIO, Callable, Dict, List, Optional
from xml.parsers import expat

from streetmangler.errors import ExtractError
from streetmangler.shared.log import debug

CHUNK_SIZE = 65536

# highway values whose names are not street names
EXCLUDED_HIGHWAYS = frozenset({
    "footway",
    "cycleway",
    "path",
    "track",
    "bus_stop",
    "emergency_access_point",
})

_WATCHED_KEYS = ("highway", "name", "addr:street")


class NameExtractor:
    """Stream OSM XML and hand every candidate name to ``callback``.

    ``addr:street`` of any node or way is always a candidate; the ``name`` of
    a way is one when the way is a highway of a kind that carries street
    names.
    """

    def __init__(self, callback: Callable[[str], None]):
        self.callback = callback
        self._tags: Dict[str, str] = {}
        self.elements = 0
        self.emitted = 0

    def _start(self, name: str, attrs: Dict[str, str]) -> None:
        if name in ("node", "way"):
            self._tags = {}
            return
        if name != "tag":
            return
        k = attrs.get("k", "")
        if k in _WATCHED_KEYS:
            self._tags[k] = attrs.get("v", "")

    def _end(self, name: str) -> None:
        if name not in ("node", "way"):
            return
        self.elements += 1

        street = self._tags.get("addr:street", "")
        if street:
            self._emit(street)

        if name == "way":
            highway = self._tags.get("highway", "")
            way_name = self._tags.get("name", "")
            if highway and way_name and highway not in EXCLUDED_HIGHWAYS:
                self._emit(way_name)

    def _emit(self, value: str) -> None:
        self.emitted += 1
        self.callback(value)

    def parse_stream(self, stream: BinaryIO, source: str = "<stream>") -> None:
        parser = expat.ParserCreate()
        parser.StartElementHandler = self._start
        parser.EndElementHandler = self._end
        try:
            while True:
                try:
                    buf = stream.read(CHUNK_SIZE)
                except OSError as e:
                    raise ExtractError(f"error parsing {source}: read error: {e.strerror or e}",
                                       parser.CurrentLineNumber, parser.CurrentColumnNumber) from e
                parser.Parse(buf, not buf)
                if not buf:
                    break
        except expat.ExpatError as e:
            raise ExtractError(f"error parsing {source}: {expat.ErrorString(e.code)}",
                               e.lineno, e.offset) from e
        debug(f"{source}: {self.elements} nodes/ways, {self.emitted} candidate names")

    def parse_file(self, path: str | Path) -> None:
        if str(path) == "-":
            self.parse_stream(sys.stdin.buffer, source="<stdin>")
            return
        try:
            f = open(path, "rb")
        except OSError as e:
            raise ExtractError(f"cannot open OSM file {path}: {e.strerror or e}") from e
        with f:
            self.parse_stream(f, source=str(path))


def extract_names(path: str | Path, stream: Optional[BinaryIO] = None) -> List[str]:
    """All candidate names of one OSM document, in document order."""
    names: List[str] = []
    extractor = NameExtractor(names.append)
    if stream is not None:
        extractor.parse_stream(stream, source=str(path))
    else:
        extractor.parse_file(path)
    return names

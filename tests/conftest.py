from __future__ import annotations

import pytest

from streetmangler.db import DatabaseBuilder
from streetmangler.locales import get_registry, parse_locale

EN_NAMES = [
    "Main Street",
    "Oak Avenue",
    "Elm St.",
    "Broadway",
    "St. Marks Place",
    "Main Street",
]

OSM_SAMPLE = b"""<?xml version="1.0" encoding="UTF-8"?>
<osm version="0.6">
  <node id="1" lat="0" lon="0">
    <tag k="addr:street" v="Main Street"/>
    <tag k="addr:housenumber" v="1"/>
  </node>
  <node id="2" lat="0" lon="0">
    <tag k="name" v="Cafe"/>
    <tag k="highway" v="bus_stop"/>
  </node>
  <way id="10">
    <nd ref="1"/>
    <tag k="highway" v="residential"/>
    <tag k="name" v="Oak Avenue"/>
  </way>
  <way id="11">
    <tag k="highway" v="footway"/>
    <tag k="name" v="Park Path"/>
  </way>
  <way id="12">
    <tag k="building" v="yes"/>
    <tag k="addr:street" v="Elm St."/>
    <tag k="name" v="Some House"/>
  </way>
  <way id="13">
    <tag k="highway" v="primary"/>
  </way>
  <node id="3" lat="0" lon="0">
    <tag k="name" v="Lone"/>
  </node>
  <way id="14">
    <tag k="highway" v="residential"/>
    <tag k="name" v="Maim Street"/>
  </way>
</osm>
"""


@pytest.fixture
def en_locale():
    return get_registry().get("en_US")


@pytest.fixture
def ru_locale():
    return get_registry().get("ru_RU")


@pytest.fixture
def tiny_locale():
    return parse_locale({
        "locale": "xx_XX",
        "status_parts": [
            {"full": "road", "abbreviated": "rd.", "variants": ["road", "rd"]},
            {"full": "lane", "canonical": "ln", "variants": ["lane", "ln"]},
        ],
    })


@pytest.fixture
def en_db(en_locale):
    builder = DatabaseBuilder(en_locale)
    for name in EN_NAMES:
        builder.add(name)
    return builder.build()


@pytest.fixture
def osm_file(tmp_path):
    p = tmp_path / "sample.osm"
    p.write_bytes(OSM_SAMPLE)
    return p


@pytest.fixture
def dict_file(tmp_path):
    p = tmp_path / "streets.txt"
    p.write_text("# test dictionary\nMain Street\nOak Avenue\nElm Street\n", encoding="utf-8")
    return p


@pytest.fixture
def en_names():
    return list(EN_NAMES)

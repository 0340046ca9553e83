from __future__ import annotations

import pytest

from streetmangler.errors import NameEncodingError
from streetmangler.locales import parse_locale
from streetmangler.name import JoinFlags, Name


class TestStatusDetection:
    def test_trailing_status(self, en_locale):
        name = Name("Main Street", en_locale)
        assert name.has_status
        assert name.status.full_form == "street"
        assert name.status_word == "Street"
        assert name.words == ["Main", "Street"]

    def test_abbreviated_with_period(self, en_locale):
        name = Name("Main St.", en_locale)
        assert name.status.full_form == "street"
        assert name.status_word == "St."

    def test_no_status(self, en_locale):
        name = Name("Broadway", en_locale)
        assert not name.has_status
        assert name.status_word is None

    def test_lone_status_word_is_a_name(self, en_locale):
        assert Name("Street", en_locale).status is None

    def test_trailing_word_wins_in_suffix_locale(self, en_locale):
        name = Name("St. Marks Place", en_locale)
        assert name.status.full_form == "place"
        assert name.status_word == "Place"

    def test_saint_name(self, en_locale):
        name = Name("St. Paul Street", en_locale)
        assert name.status_word == "Street"
        assert name.join(JoinFlags.CANONICALIZE_STATUS) == "St. Paul Street"
        assert name.join(JoinFlags.REMOVE_STATUS) == "St. Paul"

    def test_title_before_name(self, en_locale):
        name = Name("Dr. Martin Luther King Jr. Street", en_locale)
        assert name.status.full_form == "street"
        assert name.join(JoinFlags.CANONICALIZE_STATUS) == "Dr. Martin Luther King Jr. Street"

    def test_leading_word_wins_in_prefix_locale(self):
        locale = parse_locale({
            "locale": "fr_FR",
            "status_position": "prefix",
            "status_parts": [
                {"full": "rue", "variants": ["rue"]},
                {"full": "avenue", "variants": ["avenue", "av"]},
            ],
        })
        name = Name("Avenue de la Rue", locale)
        assert name.status.full_form == "avenue"
        assert name.status_word == "Avenue"

    def test_edge_word_beats_inner_word(self, tiny_locale):
        name = Name("Old Road Mill Road", tiny_locale)
        assert name.join(JoinFlags.REMOVE_STATUS) == "Old Road Mill"

    def test_table_order_ru(self, ru_locale):
        name = Name("переулок Одесский проезд", ru_locale)
        assert name.status.full_form == "переулок"

    def test_hyphenated_variant(self, ru_locale):
        name = Name("пр-т. Мира", ru_locale)
        assert name.status.full_form == "проспект"

    def test_case_insensitive(self, ru_locale):
        assert Name("Ленина УЛ.", ru_locale).status.full_form == "улица"


class TestJoin:
    def test_no_flags_returns_original(self, en_locale):
        text = "  Main   St.  "
        assert Name(text, en_locale).join() == text

    def test_expand(self, en_locale):
        assert Name("Main St.", en_locale).join(JoinFlags.EXPAND_STATUS) == "Main Street"

    def test_expand_keeps_lowercase(self, en_locale):
        assert Name("main st", en_locale).join(JoinFlags.EXPAND_STATUS) == "main street"

    def test_expand_keeps_all_caps(self, en_locale):
        assert Name("MAIN ST", en_locale).join(JoinFlags.CANONICALIZE_STATUS) == "MAIN STREET"

    def test_single_capital_is_not_all_caps(self, ru_locale):
        assert Name("Ш. Энтузиастов", ru_locale).join(JoinFlags.EXPAND_STATUS) == "Шоссе Энтузиастов"

    def test_shrink(self, en_locale):
        assert Name("Main Street", en_locale).join(JoinFlags.SHRINK_STATUS) == "Main St."

    def test_canonicalize_differs_from_full(self, tiny_locale):
        name = Name("Green Lane", tiny_locale)
        assert name.join(JoinFlags.CANONICALIZE_STATUS) == "Green Ln"
        assert name.join(JoinFlags.EXPAND_STATUS) == "Green Lane"

    def test_rewrite_without_status_is_identity(self, en_locale):
        assert Name("Broadway", en_locale).join(JoinFlags.EXPAND_STATUS) == "Broadway"

    def test_remove_trailing(self, en_locale):
        assert Name("Main Street", en_locale).join(JoinFlags.REMOVE_STATUS) == "Main"

    def test_remove_leading(self, ru_locale):
        assert Name("улица Ленина", ru_locale).join(JoinFlags.REMOVE_STATUS) == "Ленина"

    def test_remove_without_status(self, en_locale):
        assert Name("Broadway", en_locale).join(JoinFlags.REMOVE_STATUS) == "Broadway"

    def test_status_to_left(self, en_locale):
        flags = JoinFlags.STATUS_TO_LEFT | JoinFlags.NORMALIZE_WHITESPACE
        assert Name("  Main   Street ", en_locale).join(flags) == "Street Main"

    def test_status_to_right(self, ru_locale):
        assert Name("улица Ленина", ru_locale).join(JoinFlags.STATUS_TO_RIGHT) == "Ленина улица"

    def test_normalize_whitespace(self, en_locale):
        assert Name(" Main \t Street ", en_locale).join(JoinFlags.NORMALIZE_WHITESPACE) == "Main Street"

    def test_normalize_punct(self, en_locale):
        name = Name("Main, Street", en_locale)
        assert name.status_word == "Street"
        assert name.join(JoinFlags.NORMALIZE_PUNCT) == "Main Street"

    def test_normalize_punct_keeps_hyphen(self, ru_locale):
        name = Name("улица Римского-Корсакова.", ru_locale)
        assert name.join(JoinFlags.NORMALIZE_PUNCT) == "улица Римского-Корсакова"

    def test_remove_and_normalize(self, en_locale):
        flags = JoinFlags.REMOVE_STATUS | JoinFlags.NORMALIZE_WHITESPACE
        assert Name("St.  Marks  Place", en_locale).join(flags) == "St. Marks"


class TestEncoding:
    def test_bytes_are_decoded(self, en_locale):
        assert Name("Main Street".encode("utf-8"), en_locale).text == "Main Street"

    def test_invalid_utf8_bytes(self, en_locale):
        with pytest.raises(NameEncodingError):
            Name(b"Main \xff\xfe", en_locale)

    def test_lone_surrogate(self, en_locale):
        with pytest.raises(ValueError):
            Name("Main \udcff Street", en_locale)

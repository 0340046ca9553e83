from __future__ import annotations

import pytest
from rapidfuzz.distance import Levenshtein

from streetmangler.db.spelltrie import SpellTrie

WORDS = [
    "street main",
    "street maine",
    "street mann",
    "avenue oak",
    "avenue oaks",
    "broadway",
    "broad way",
    "place st marks",
    "улица ленина",
    "улица ленена",
    "a",
    "ab",
]


def _trie(words):
    trie = SpellTrie()
    for w in words:
        trie.insert(w)
    return trie


def _brute(query, max_distance):
    out = {}
    for w in set(WORDS):
        d = Levenshtein.distance(query, w)
        if d <= max_distance:
            out[w] = d
    return out


class TestSet:
    def test_insert_and_contains(self):
        trie = SpellTrie()
        assert trie.insert("main") is True
        assert trie.insert("main") is False
        assert "main" in trie
        assert "mai" not in trie
        assert "mains" not in trie
        assert len(trie) == 1

    def test_iter_sorted(self):
        trie = _trie(["b", "ab", "a", "abc"])
        assert list(trie) == ["a", "ab", "abc", "b"]

    def test_empty_string_key(self):
        trie = _trie([""])
        assert "" in trie
        assert trie.find_approx("a", 1) == {"": 1}


class TestFindApprox:
    def test_exact(self):
        trie = _trie(WORDS)
        assert trie.find_approx("street main", 0) == {"street main": 0}

    def test_classic_distance(self):
        trie = _trie(["kitten"])
        assert trie.find_approx("sitting", 2) == {}
        assert trie.find_approx("sitting", 3) == {"kitten": 3}

    def test_transposition_costs_two(self):
        trie = _trie(["ab"])
        assert trie.find_approx("ba", 1) == {}
        assert trie.find_approx("ba", 2) == {"ab": 2}

    def test_empty_query(self):
        trie = _trie(["a", "ab"])
        assert trie.find_approx("", 1) == {"a": 1}

    def test_cyrillic(self):
        trie = _trie(WORDS)
        assert trie.find_approx("улица ленона", 1) == {"улица ленина": 1, "улица ленена": 1}

    def test_negative_distance(self):
        with pytest.raises(ValueError):
            SpellTrie().find_approx("x", -1)

    def test_empty_trie(self):
        assert SpellTrie().find_approx("main", 2) == {}

    @pytest.mark.parametrize("query", ["street mian", "avenu oak", "brodway", "x", "", "улица ленин"])
    @pytest.mark.parametrize("max_distance", [0, 1, 2, 3])
    def test_matches_levenshtein(self, query, max_distance):
        trie = _trie(WORDS)
        assert trie.find_approx(query, max_distance) == _brute(query, max_distance)

    def test_monotonic_radius(self):
        trie = _trie(WORDS)
        for query in ("street man", "broadwy", "place st mark"):
            prev = set()
            for d in range(5):
                cur = set(trie.find_approx(query, d))
                assert prev <= cur
                prev = cur

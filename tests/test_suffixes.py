"""
Tests for suffixes.py - composing inflected forms from cached stems.
"""

from shobdo.cache import StemCache
from shobdo.candidate import Candidate, Source, texts
from shobdo.database import MemoryDatabase
from shobdo.suffixes import add_suffix_to_suggestions, join_suffix

from conftest import SUFFIXES

GLIDE = "য়"


def make_cache(mapping):
    return StemCache.from_mapping({
        key: [Candidate(word, Source.DICTIONARY) for word in words]
        for key, words in mapping.items()
    })


class TestJoinSuffix:
    """Bengali joining rules."""

    def test_plain_concatenation(self):
        assert join_suffix("কম্পিউটার", "গুলো") == "কম্পিউটারগুলো"

    def test_consonant_end_vowel_sign(self):
        assert join_suffix("কম্পিউটার", "ে") == "কম্পিউটারে"

    def test_independent_vowel_takes_glide(self):
        assert join_suffix("ভাই", "ের") == "ভাই" + GLIDE + "ের"

    def test_vowel_sign_end_concatenates(self):
        assert join_suffix("মা", "ের") == "মাের"
        assert join_suffix("মা", "ে") == "মাে"

    def test_vowel_before_consonant_suffix(self):
        assert join_suffix("মা", "গুলো") == "মাগুলো"

    def test_khandatta_becomes_ta(self):
        assert join_suffix("হঠাৎ", "ের") == "হঠাতের"

    def test_anushar_becomes_nga(self):
        assert join_suffix("এবং", "মালা") == "এবঙমালা"

    def test_empty_parts(self):
        assert join_suffix("", "ে") == "ে"
        assert join_suffix("মা", "") == "মা"


class TestAddSuffixToSuggestions:
    """Composition over the session cache."""

    def setup_method(self):
        self.db = MemoryDatabase(suffixes=SUFFIXES)
        self.cache = make_cache({
            "computer": ["কম্পিউটার"],
            "ebong": ["এবং"],
        })

    def suggest(self, middle):
        return texts(add_suffix_to_suggestions(middle, self.cache, self.db))

    def test_unsuffixed_falls_back_to_cache(self):
        assert self.suggest("computer") == ["কম্পিউটার"]

    def test_vowel_sign_suffix(self):
        assert self.suggest("computere") == ["কম্পিউটারে"]

    def test_plural_suffix(self):
        assert self.suggest("computergulo") == ["কম্পিউটারগুলো"]

    def test_anushar_stem(self):
        assert self.suggest("ebongmala") == ["এবঙমালা"]

    def test_unknown_core_is_empty(self):
        assert self.suggest("xyzgulo") == []
        assert self.suggest("nothing") == []

    def test_short_core_is_not_split(self):
        self.cache.put("a", [Candidate("আ", Source.DICTIONARY)])
        assert self.suggest("ae") == []

    def test_source_is_suffix(self):
        result = add_suffix_to_suggestions("computere", self.cache, self.db)
        assert [c.source for c in result] == [Source.SUFFIX]

    def test_fallback_keeps_source(self):
        result = add_suffix_to_suggestions("computer", self.cache, self.db)
        assert [c.source for c in result] == [Source.DICTIONARY]

    def test_every_split_point_contributes(self):
        db = MemoryDatabase(suffixes={"er": "ের", "r": "র"})
        cache = make_cache({"bhai": ["ভাই"], "bhaie": ["ভাইএ"]})
        result = texts(add_suffix_to_suggestions("bhaier", cache, db))
        # Longest suffix first
        assert result == ["ভাই" + GLIDE + "ের", "ভাইএর"]

    def test_all_stem_candidates_are_joined(self):
        self.cache.put("as", [
            Candidate("আস", Source.DICTIONARY),
            Candidate("আশ", Source.DICTIONARY),
        ])
        assert self.suggest("asgulo") == ["আসগুলো", "আশগুলো"]

    def test_cache_is_not_modified(self):
        before = {key: self.cache.get(key) for key in self.cache}
        self.suggest("computergulo")
        self.suggest("missinggulo")
        assert {key: self.cache.get(key) for key in self.cache} == before

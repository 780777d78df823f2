"""
Tests for suggestion.py - the full suggestion pipeline.
"""

import threading

import pytest

from shobdo.cache import StemCache
from shobdo.candidate import Source
from shobdo.database import MemoryDatabase
from shobdo.suggestion import PhoneticSuggestion

from conftest import WORDS, AUTOCORRECT, SUFFIXES

AS_WORDS = ["আস", "আশ", "এস", "আঁশ"]


class TestSuggest:
    """Known scenarios."""

    def test_emoticon(self, engine):
        assert engine.suggest(":)") == [":)", "ঃ)"]

    def test_dictionary_word(self, engine):
        assert engine.suggest("as") == AS_WORDS

    def test_suffix_after_stem_seen(self, engine):
        engine.suggest("as")
        assert engine.suggest("asgulo") == [
            "আসগুলো", "আশগুলো", "এসগুলো", "আঁশগুলো", "আসগুল",
        ]

    def test_suffix_without_stem_seen(self, engine):
        assert engine.suggest("asgulo") == ["আসগুল"]

    def test_decorated_token(self, engine):
        assert engine.suggest("(as)") == ["(আস)", "(আশ)", "(এস)", "(আঁশ)"]

    def test_single_letter_ranked(self, engine):
        assert engine.suggest("a") == ["আ", "আঃ", "া", "এ", "অ্যা", "অ্যাঁ"]

    def test_unknown_word_is_phonetic_only(self, engine, phonetic):
        assert engine.suggest("bangla") == [phonetic.convert("bangla")]

    def test_digit(self, engine):
        assert engine.suggest("1") == ["১"]

    def test_meta_only_token(self, engine):
        assert engine.suggest("...") == ["..."]

    def test_self_mapped_core_is_symbol(self, engine, phonetic):
        result = engine.suggest(":D")
        assert result == [":D", phonetic.convert(":D")]

    def test_self_mapped_core_conversion_once(self, engine):
        candidates = engine.suggest_candidates(":D")
        assert [c.source for c in candidates] == [Source.SYMBOL, Source.AUTOCORRECT]
        assert Source.AUTOCORRECT in [c.source for c in engine.cache.get(":D")]


class TestAutocorrect:
    """Whole-token replacement first, then autocorrect candidates, on every call."""

    def test_autocorrect_first(self, engine, phonetic):
        assert engine.suggest("kmn") == ["kemon", "কেমন", phonetic.convert("kmn")]

    def test_autocorrect_on_repeat(self, engine):
        first = engine.suggest("kmn")
        assert engine.suggest("kmn") == first
        assert first[:2] == ["kemon", "কেমন"]

    def test_autocorrect_source(self, engine):
        candidates = engine.suggest_candidates("kmn")
        assert candidates[0].source is Source.SYMBOL
        assert candidates[1].source is Source.AUTOCORRECT
        assert candidates[-1].source is Source.PHONETIC

    def test_autocorrect_decorated(self, engine, phonetic):
        assert engine.suggest("(kmn)") == ["(কেমন)", f"({phonetic.convert('kmn')})"]

    def test_autocorrect_with_suffix(self, engine):
        engine.suggest("kmn")
        assert engine.suggest("kmne")[0] == "কেমনে"


class TestSuggestionProperties:
    """Invariants over a handful of inputs."""

    TERMS = ["a", "as", "asgulo", "(as)", ":)", ":D", "kmn", "computergulo",
             "ebongmala", "bhaier", "...", "1", "(asgulo)", "xyz"]

    @pytest.mark.parametrize("term", TERMS)
    def test_never_empty(self, engine, term):
        assert engine.suggest(term)

    @pytest.mark.parametrize("term", TERMS)
    def test_no_duplicates(self, engine, term):
        engine.suggest("as")
        result = engine.suggest(term)
        assert len(result) == len(set(result))

    @pytest.mark.parametrize("term", ["(as)", "'kmn'", "--asgulo--", "[computer]"])
    def test_decoration_kept(self, engine, term):
        splitted = engine.split(term)
        for candidate in engine.suggest_candidates(term):
            if candidate.source is Source.SYMBOL:
                continue
            assert candidate.text.startswith(splitted.prefix)
            assert candidate.text.endswith(splitted.suffix)

    @pytest.mark.parametrize("term", ["as", "asgulo", "(as)", "kmn", "bangla"])
    def test_phonetic_present_once(self, engine, phonetic, term):
        splitted = engine.split(term)
        plain = splitted.decorate(phonetic.convert(splitted.middle))
        assert engine.suggest(term).count(plain) == 1

    def test_stateful_ordering(self, engine):
        before = engine.suggest("asgulo")
        engine.suggest("as")
        after = engine.suggest("asgulo")
        assert len(after) > len(before)


class TestSuffixJoining:
    """Bengali joining through the whole pipeline."""

    def test_computer_forms(self, engine):
        engine.suggest("computer")
        assert engine.suggest("computere")[0] == "কম্পিউটারে"
        assert engine.suggest("computergulo")[0] == "কম্পিউটারগুলো"

    def test_anushar(self, engine):
        engine.suggest("ebong")
        assert engine.suggest("ebongmala")[0] == "এবঙমালা"

    def test_khandatta(self, engine):
        engine.suggest("hothat")
        assert "হঠাতের" in engine.suggest("hothater")

    def test_glide(self, engine):
        engine.suggest("bhai")
        assert "ভাইয়ের" in engine.suggest("bhaier")


class TestSession:
    """Cache lifetime and sharing."""

    def test_cache_filled_per_core(self, engine):
        engine.suggest("(as)")
        assert "as" in engine.cache
        assert "(as)" not in engine.cache

    def test_clear_cache_forgets_stems(self, engine):
        engine.suggest("as")
        engine.clear_cache()
        assert engine.suggest("asgulo") == ["আসগুল"]

    def test_bounded_cache(self, memory_db):
        engine = PhoneticSuggestion(memory_db, cache=StemCache(2))
        for term in ["as", "a", "computer", "ebong"]:
            engine.suggest(term)
        assert len(engine.cache) == 2
        assert "as" not in engine.cache

    def test_sessions_are_independent(self, memory_db):
        first = PhoneticSuggestion(memory_db)
        second = PhoneticSuggestion(memory_db)
        first.suggest("as")
        assert "as" not in second.cache
        assert second.suggest("asgulo") == ["আসগুল"]

    def test_shared_between_threads(self):
        calls = []

        class CountingDatabase(MemoryDatabase):
            def search(self, romanized):
                calls.append(romanized)
                return super().search(romanized)

        engine = PhoneticSuggestion(CountingDatabase(WORDS, AUTOCORRECT, SUFFIXES))
        results = []

        def worker():
            results.append(engine.suggest("as"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert calls == ["as"]
        assert all(r == AS_WORDS for r in results)


class TestSuggestResult:
    """Pydantic result model."""

    def test_fields(self, engine, phonetic):
        result = engine.suggest_result("(as)")
        assert result.term == "(as)"
        assert (result.prefix, result.middle, result.suffix) == ("(", "as", ")")
        assert result.phonetic == phonetic.convert("as")
        assert result.texts == ["(আস)", "(আশ)", "(এস)", "(আঁশ)"]

    def test_sources(self, engine):
        engine.suggest("as")
        result = engine.suggest_result("asgulo")
        sources = [s.source for s in result.suggestions]
        assert sources == ["suffix"] * 4 + ["phonetic"]

    def test_symbol_source(self, engine):
        result = engine.suggest_result(":)")
        assert result.suggestions[0].source == "symbol"

    def test_serializable(self, engine):
        data = engine.suggest_result("kmn").model_dump()
        assert data["suggestions"][0] == {"text": "kemon", "source": "symbol"}
        assert data["suggestions"][1] == {"text": "কেমন", "source": "autocorrect"}

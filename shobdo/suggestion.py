"""
Suggestion making module for Shobdo.

PhoneticSuggestion turns one typed token into an ordered list of Bengali
candidates:

1. split decoration off the token ("(asgulo)" -> "(", "asgulo", ")")
2. convert the core phonetically ("আসগুল")
3. on the first sight of a core, look it up in the dictionary and the
   autocorrect table and remember the result in the session cache
4. compose suffixed candidates from cached stems ("as" + "gulo")
5. rank them by edit distance to the phonetic conversion
6. put autocorrect candidates first, the phonetic conversion last
7. wrap everything back in the token's decoration
8. let an exact whole-token autocorrect entry (an emoticon like ":)", or
   "kmn" -> "kemon") jump to the top
"""

import logging
import threading
from typing import List, Optional

from shobdo.cache import StemCache
from shobdo.candidate import Candidate, Source, texts, unique
from shobdo.characters import BENGALI, ScriptRules
from shobdo.database import Database
from shobdo.models import SuggestionResult
from shobdo.phonetic import AvroPhonetic, Transliterator
from shobdo.ranking import rank_suggestions
from shobdo.segment import SplitToken, split_string
from shobdo.suffixes import add_suffix_to_suggestions

logger = logging.getLogger(__name__)


class PhoneticSuggestion:
    """
    Suggestion session.

    Owns the stem cache for its lifetime. The lookup that fills the cache is
    serialized by a lock, so a single instance may be shared between threads.
    """

    def __init__(
        self,
        database: Database,
        phonetic: Optional[Transliterator] = None,
        rules: ScriptRules = BENGALI,
        cache: Optional[StemCache] = None,
    ):
        self.database = database
        self.phonetic = phonetic if phonetic is not None else AvroPhonetic()
        self.rules = rules
        self.cache = cache if cache is not None else StemCache()
        self._lock = threading.RLock()

    def split(self, term: str) -> SplitToken:
        return split_string(term, self.rules.meta_characters)

    def _search(self, middle: str) -> List[Candidate]:
        """Dictionary and autocorrect lookup for a core not yet cached."""
        candidates = [Candidate(word, Source.DICTIONARY) for word in self.database.search(middle)]

        # Auto Correct
        corrected = self.database.get_corrected(middle)
        if corrected is not None:
            word = self.phonetic.convert(corrected)
            candidates.insert(0, Candidate(word, Source.AUTOCORRECT))

        logger.debug(f"Cache miss for {middle!r}: {len(candidates)} candidates")
        return candidates

    def lookup(self, middle: str) -> List[Candidate]:
        """
        Get the cached candidates for a core, filling the cache on a miss.
        """
        with self._lock:
            cached = self.cache.get(middle)
            if cached is None:
                cached = self._search(middle)
                self.cache.put(middle, cached)
            return cached

    def suggest_candidates(self, term: str) -> List[Candidate]:
        """
        Make suggestions from the given term, keeping their provenance.

        Args:
            term: Token exactly as typed.

        Returns:
            Ordered candidates. Never empty: the phonetic conversion of the
            core is always present.
        """
        splitted = self.split(term)
        phonetic = self.phonetic.convert(splitted.middle)

        with self._lock:
            cached = self.lookup(splitted.middle)
            with_suffix = add_suffix_to_suggestions(
                splitted.middle, self.cache, self.database, self.rules
            )

        suggestions = [c for c in cached if c.source is Source.AUTOCORRECT]
        suggestions.extend(rank_suggestions(with_suffix, phonetic))

        # Last Item: Phonetic
        suggestions.append(Candidate(phonetic, Source.PHONETIC))
        suggestions = unique(suggestions)

        suggestions = [c.decorate(splitted.prefix, splitted.suffix) for c in suggestions]

        # Emoticons Auto Corrects
        symbol = self.database.get_corrected(term)
        if symbol is not None:
            suggestions.insert(0, Candidate(symbol, Source.SYMBOL))

        return suggestions

    def suggest(self, term: str) -> List[str]:
        """Make suggestions from the given term."""
        return texts(self.suggest_candidates(term))

    def suggest_result(self, term: str) -> SuggestionResult:
        """Make suggestions from the given term as an API model."""
        splitted = self.split(term)
        return SuggestionResult.from_candidates(
            term, splitted, self.phonetic.convert(splitted.middle),
            self.suggest_candidates(term),
        )

    def clear_cache(self) -> None:
        with self._lock:
            self.cache.clear()

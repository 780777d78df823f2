"""
Session cache for dictionary lookups.

Maps a romanized stem to the candidates found for it. The cache is the
memory a suggestion session relies on for suffix composition: once "as"
has been looked up, "asgulo" can be built from its candidates.
"""

import threading
from collections import OrderedDict
from typing import Dict, Iterator, List, Optional

from shobdo.candidate import Candidate


class StemCache:
    """
    Stem -> candidate list cache, optionally bounded.

    With maxsize=None the cache grows for the lifetime of its owner and
    never evicts. With a positive maxsize the least recently used stem is
    dropped once the bound is exceeded.
    """

    def __init__(self, maxsize: Optional[int] = None):
        if maxsize is not None and maxsize <= 0:
            maxsize = None
        self.maxsize = maxsize
        self._data: "OrderedDict[str, List[Candidate]]" = OrderedDict()
        self._lock = threading.Lock()

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._data))

    def get(self, key: str, default: Optional[List[Candidate]] = None) -> Optional[List[Candidate]]:
        """
        Get the candidates stored for a stem.

        Args:
            key: Romanized stem.
            default: Returned when the stem is not cached.

        Returns:
            A copy of the cached list, or default.
        """
        with self._lock:
            value = self._data.get(key)
            if value is None:
                return default
            if self.maxsize is not None:
                self._data.move_to_end(key)
            return list(value)

    def put(self, key: str, candidates: List[Candidate]) -> None:
        """Store the candidates for a stem, evicting if over the bound."""
        with self._lock:
            self._data[key] = list(candidates)
            self._data.move_to_end(key)
            if self.maxsize is not None:
                while len(self._data) > self.maxsize:
                    self._data.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    @classmethod
    def from_mapping(cls, mapping: Dict[str, List[Candidate]], maxsize: Optional[int] = None) -> "StemCache":
        """Build a cache pre-filled from a mapping (insertion order kept)."""
        cache = cls(maxsize)
        for key, value in mapping.items():
            cache.put(key, value)
        return cache

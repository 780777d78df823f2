"""
Dictionary access for Shobdo.

The suggestion engine needs three exact-match lookups:
- search: Bengali words for a romanized stem
- get_corrected: preferred replacement for a whole token (word or symbol)
- find_suffix: Bengali rendering of a romanized suffix

Database is the interface; SqlDatabase reads the SQLite dictionary built by
dict_load, MemoryDatabase holds plain mappings (bundled seed data or tests).
"""

import logging
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence, Union

from sqlalchemy import select
from sqlalchemy.orm import Session

from shobdo.db.models import Word, AutoCorrect, Suffix
from shobdo.settings import DATA_DIR

logger = logging.getLogger(__name__)


class Database(ABC):
    """Lookup interface consumed by the suggestion engine."""

    @abstractmethod
    def search(self, romanized: str) -> List[str]:
        """Bengali candidates for an exact romanized stem (may be empty)."""

    @abstractmethod
    def get_corrected(self, term: str) -> Optional[str]:
        """Replacement registered for an exact token, if any."""

    @abstractmethod
    def find_suffix(self, romanized: str) -> Optional[str]:
        """Bengali rendering of a romanized suffix, if it is a known suffix."""

    def close(self):
        """Release any resources held by the dictionary."""


class MemoryDatabase(Database):
    """Dictionary held in plain mappings."""

    def __init__(
        self,
        words: Optional[Mapping[str, Sequence[str]]] = None,
        autocorrect: Optional[Mapping[str, str]] = None,
        suffixes: Optional[Mapping[str, str]] = None,
    ):
        self.words: Dict[str, List[str]] = {k: list(v) for k, v in (words or {}).items()}
        self.autocorrect: Dict[str, str] = dict(autocorrect or {})
        self.suffixes: Dict[str, str] = dict(suffixes or {})

    def search(self, romanized: str) -> List[str]:
        return list(self.words.get(romanized, ()))

    def get_corrected(self, term: str) -> Optional[str]:
        return self.autocorrect.get(term)

    def find_suffix(self, romanized: str) -> Optional[str]:
        return self.suffixes.get(romanized)

    @classmethod
    def from_data_dir(cls, data_dir: Union[str, Path, None] = None) -> "MemoryDatabase":
        """
        Load the TSV seed files into memory.

        Args:
            data_dir: Directory with words.tsv, autocorrect.tsv and suffix.tsv.
                Defaults to the bundled data directory.
        """
        from shobdo.dict_load import (
            read_tsv, group_words, WORDS_FILE, AUTOCORRECT_FILE, SUFFIX_FILE,
        )

        data_dir = Path(data_dir) if data_dir is not None else DATA_DIR
        db = cls(
            words=group_words(read_tsv(data_dir / WORDS_FILE)),
            autocorrect=dict(read_tsv(data_dir / AUTOCORRECT_FILE)),
            suffixes=dict(read_tsv(data_dir / SUFFIX_FILE)),
        )
        logger.debug(
            f"Loaded {len(db.words)} stems, {len(db.autocorrect)} autocorrect "
            f"entries and {len(db.suffixes)} suffixes from {data_dir}"
        )
        return db


class SqlDatabase(Database):
    """
    Dictionary backed by the SQLite database.

    Word lookups go to the database on every call. The autocorrect and suffix
    tables are small and probed many times per keystroke, so they are read
    into memory once, on first use.
    """

    def __init__(self, session: Session):
        self.session = session
        self._autocorrect: Dict[str, str] = {}
        self._suffixes: Dict[str, str] = {}
        self._lock = threading.Lock()
        self._initialized = False

    def _ensure_tables(self):
        if self._initialized:
            return

        with self._lock:
            if self._initialized:
                return
            self._autocorrect = {
                row.term: row.replacement
                for row in self.session.execute(select(AutoCorrect)).scalars()
            }
            self._suffixes = {
                row.romanized: row.text
                for row in self.session.execute(select(Suffix)).scalars()
            }
            self._initialized = True
            logger.debug(
                f"Cached {len(self._autocorrect)} autocorrect entries "
                f"and {len(self._suffixes)} suffixes"
            )

    def reset(self):
        """Drop the in-memory tables so they are re-read on next use."""
        with self._lock:
            self._initialized = False
            self._autocorrect = {}
            self._suffixes = {}

    def search(self, romanized: str) -> List[str]:
        return list(self.session.execute(
            select(Word.text)
            .where(Word.romanized == romanized)
            .order_by(Word.ord, Word.id)
        ).scalars().all())

    def get_corrected(self, term: str) -> Optional[str]:
        self._ensure_tables()
        return self._autocorrect.get(term)

    def find_suffix(self, romanized: str) -> Optional[str]:
        self._ensure_tables()
        return self._suffixes.get(romanized)

    def close(self):
        self.session.close()

"""
Shared fixtures for shobdo tests.
"""

import pytest

from shobdo.database import MemoryDatabase, SqlDatabase
from shobdo.db.connection import get_session
from shobdo.dict_load import load_words, load_autocorrect, load_suffixes
from shobdo.phonetic import AvroPhonetic
from shobdo.suggestion import PhoneticSuggestion


WORDS = {
    "a": ["আ", "আঃ", "া", "এ", "অ্যা", "অ্যাঁ"],
    "as": ["আস", "আশ", "এস", "আঁশ"],
    "computer": ["কম্পিউটার"],
    "ebong": ["এবং"],
    "bhai": ["ভাই"],
    "ma": ["মা"],
    "hothat": ["হঠাৎ"],
    "kemon": ["কেমন"],
}

AUTOCORRECT = {
    ":)": ":)",
    ":D": ":D",
    "kmn": "kemon",
}

SUFFIXES = {
    "e": "ে",
    "er": "ের",
    "gulo": "গুলো",
    "mala": "মালা",
}


def word_rows():
    return [(key, word) for key, words in WORDS.items() for word in words]


@pytest.fixture
def memory_db():
    """In-memory dictionary with the test data."""
    return MemoryDatabase(WORDS, AUTOCORRECT, SUFFIXES)


@pytest.fixture
def db_session():
    """SQLite in-memory session loaded with the test data."""
    session = get_session(":memory:")
    load_words(session, word_rows())
    load_autocorrect(session, AUTOCORRECT.items())
    load_suffixes(session, SUFFIXES.items())
    session.commit()
    yield session
    session.close()


@pytest.fixture
def sql_db(db_session):
    return SqlDatabase(db_session)


@pytest.fixture(scope="session")
def phonetic():
    return AvroPhonetic()


@pytest.fixture
def engine(memory_db, phonetic):
    """Fresh suggestion session over the in-memory dictionary."""
    return PhoneticSuggestion(memory_db, phonetic)

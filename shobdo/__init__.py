"""
Shobdo: Bengali Phonetic Suggestion Engine
Turns Avro-style romanized input into ranked Bengali suggestions.
"""

import logging
import threading
from pathlib import Path
from typing import List, Optional, Union

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

_default_engine = None
_default_lock = threading.Lock()


def open_database(db_path: Union[str, Path, None] = None):
    """
    Open the dictionary used for suggestions.

    Args:
        db_path: SQLite dictionary to use. If None, the configured path is
            used when it exists, otherwise the bundled seed data is loaded
            into memory.

    Returns:
        A Database implementation.
    """
    from shobdo.database import MemoryDatabase, SqlDatabase
    from shobdo.db.connection import get_db_path, get_session

    if db_path is None:
        db_path = get_db_path()
        if db_path is None:
            logger.warning("No dictionary database found, using bundled seed data")
            return MemoryDatabase.from_data_dir()

    return SqlDatabase(get_session(db_path))


def new_session(db_path: Union[str, Path, None] = None, cache_size: Optional[int] = None):
    """
    Create a suggestion session.

    Args:
        db_path: Dictionary database, see open_database.
        cache_size: Maximum number of cached stems. None uses
            settings.CACHE_SIZE; 0 means unbounded.

    Returns:
        PhoneticSuggestion instance.

    Example:
        >>> import shobdo
        >>> engine = shobdo.new_session()
        >>> engine.suggest("ami")[0]
        'আমি'
    """
    from shobdo.cache import StemCache
    from shobdo.settings import CACHE_SIZE
    from shobdo.suggestion import PhoneticSuggestion

    if cache_size is None:
        cache_size = CACHE_SIZE

    return PhoneticSuggestion(open_database(db_path), cache=StemCache(cache_size or None))


def suggest(term: str) -> List[str]:
    """
    Suggest Bengali words for a romanized token.

    This is the main high-level API. It uses one shared session, created on
    first call.
    """
    global _default_engine

    if _default_engine is None:
        with _default_lock:
            if _default_engine is None:
                _default_engine = new_session()

    return _default_engine.suggest(term)

"""
Dictionary database package: ORM models and session management.
"""

from shobdo.db.models import Base, Word, AutoCorrect, Suffix
from shobdo.db.connection import (
    DatabaseNotFoundError, get_db_path, get_engine, get_session, init_db,
)

__all__ = [
    "Base", "Word", "AutoCorrect", "Suffix",
    "DatabaseNotFoundError", "get_db_path", "get_engine", "get_session", "init_db",
]

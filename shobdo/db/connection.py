"""
Database connection management for Shobdo.

Provides engine/session creation for the SQLite dictionary database.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from shobdo.db.models import Base
from shobdo.settings import DB_PATH

logger = logging.getLogger(__name__)

MEMORY_URL = "sqlite://"


class DatabaseNotFoundError(FileNotFoundError):
    """Raised when an explicit database path does not exist."""


def get_db_path() -> Optional[Path]:
    """
    Get the configured database path.

    Returns:
        Path to the database file, or None if it has not been created yet.
    """
    if DB_PATH.exists():
        return DB_PATH
    return None


def _set_sqlite_pragma(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    # Optimize for read-heavy workload
    cursor.execute("PRAGMA journal_mode = WAL")
    cursor.execute("PRAGMA synchronous = NORMAL")
    cursor.close()


def get_engine(db_path: Union[str, Path, None] = None, create: bool = False) -> Engine:
    """
    Create an engine for a dictionary database.

    Args:
        db_path: Path to the SQLite file. ":memory:" gives an in-memory database.
        create: Allow creating a database file that does not exist yet.

    Returns:
        SQLAlchemy engine.

    Raises:
        DatabaseNotFoundError: If db_path does not exist and create is False.
    """
    if db_path is None:
        db_path = DB_PATH

    if str(db_path) == ":memory:":
        return create_engine(
            MEMORY_URL,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    path = Path(db_path)
    if not path.exists():
        if not create:
            raise DatabaseNotFoundError(f"Database not found: {path}")
        path.parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(f"sqlite:///{path}")
    event.listen(engine, "connect", _set_sqlite_pragma)
    logger.debug(f"Opened database engine for {path}")
    return engine


def init_db(engine: Engine) -> None:
    """Create all dictionary tables that do not exist yet."""
    Base.metadata.create_all(engine)


def get_session(db_path: Union[str, Path, None] = None, create: bool = False) -> Session:
    """
    Open a session on a dictionary database.

    Args:
        db_path: Path to the SQLite file (defaults to settings.DB_PATH).
        create: Create the file and schema if missing.

    Returns:
        SQLAlchemy session bound to the database.
    """
    engine = get_engine(db_path, create=create)
    if create or str(db_path) == ":memory:":
        init_db(engine)
    return sessionmaker(bind=engine)()

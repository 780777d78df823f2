"""
Dictionary loading module for Shobdo.

Handles loading the word list, the autocorrect table and the suffix table
from tab-separated files into the SQLite database.

File format: one entry per line, "key<TAB>value". Lines starting with '#'
and blank lines are ignored. The word list may repeat a key; the order of
the lines is kept as the suggestion order for that key.
"""

import csv
import logging
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union

from sqlalchemy import delete
from sqlalchemy.orm import Session

from shobdo.db.connection import get_session
from shobdo.db.models import Word, AutoCorrect, Suffix
from shobdo.settings import (
    DATA_DIR, LOAD_BATCH_SIZE,
    WORDS_TSV_PATH, AUTOCORRECT_TSV_PATH, SUFFIX_TSV_PATH,
)

logger = logging.getLogger(__name__)

WORDS_FILE = WORDS_TSV_PATH.name
AUTOCORRECT_FILE = AUTOCORRECT_TSV_PATH.name
SUFFIX_FILE = SUFFIX_TSV_PATH.name


# ============================================================================
# TSV Reading
# ============================================================================

def read_tsv(path: Union[str, Path]) -> List[Tuple[str, str]]:
    """
    Read key/value pairs from a tab-separated file.

    Args:
        path: File to read.

    Returns:
        List of (key, value) pairs in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    rows = []
    with open(path, "r", encoding="utf-8", newline="") as f:
        reader = csv.reader(f, delimiter="\t", quoting=csv.QUOTE_NONE)
        for line_no, row in enumerate(reader, start=1):
            if not row or not row[0] or row[0].startswith("#"):
                continue
            if len(row) < 2 or not row[1]:
                logger.warning(f"{path}:{line_no}: missing value, skipped")
                continue
            rows.append((row[0], row[1]))
    return rows


def group_words(rows: Iterable[Tuple[str, str]]) -> Dict[str, List[str]]:
    """Group (romanized, word) rows by romanized key, keeping order."""
    words: Dict[str, List[str]] = {}
    for romanized, text in rows:
        bucket = words.setdefault(romanized, [])
        if text not in bucket:
            bucket.append(text)
    return words


# ============================================================================
# Table Loaders
# ============================================================================

def load_words(session: Session, rows: Iterable[Tuple[str, str]],
               progress_callback: Optional[Callable[[int], None]] = None) -> int:
    """
    Insert word rows into the words table.

    Returns:
        Number of rows inserted.
    """
    count = 0
    for romanized, texts in group_words(rows).items():
        for ord_, text in enumerate(texts):
            session.add(Word(romanized=romanized, text=text, ord=ord_))
            count += 1
            if count % LOAD_BATCH_SIZE == 0:
                session.flush()
                if progress_callback:
                    progress_callback(count)
    session.flush()
    return count


def load_autocorrect(session: Session, rows: Iterable[Tuple[str, str]]) -> int:
    """Insert autocorrect rows; a repeated term keeps its last value."""
    table = dict(rows)
    session.add_all(AutoCorrect(term=term, replacement=value) for term, value in table.items())
    session.flush()
    return len(table)


def load_suffixes(session: Session, rows: Iterable[Tuple[str, str]]) -> int:
    """Insert suffix rows; a repeated suffix keeps its last rendering."""
    table = dict(rows)
    session.add_all(Suffix(romanized=key, text=value) for key, value in table.items())
    session.flush()
    return len(table)


def clear_tables(session: Session) -> None:
    for model in (Word, AutoCorrect, Suffix):
        session.execute(delete(model))


# ============================================================================
# Full Load
# ============================================================================

def load_dictionary(
    db_path: Union[str, Path],
    data_dir: Union[str, Path, None] = None,
    progress_callback: Optional[Callable[[int], None]] = None,
) -> Dict[str, int]:
    """
    Build (or rebuild) a dictionary database from TSV files.

    Args:
        db_path: SQLite file to create or overwrite.
        data_dir: Directory holding words.tsv, autocorrect.tsv and suffix.tsv.
            Defaults to the bundled data directory.
        progress_callback: Called with the running word count every batch.

    Returns:
        Row counts per table.
    """
    data_dir = Path(data_dir) if data_dir is not None else DATA_DIR

    words = read_tsv(data_dir / WORDS_FILE)
    autocorrect = read_tsv(data_dir / AUTOCORRECT_FILE)
    suffixes = read_tsv(data_dir / SUFFIX_FILE)

    session = get_session(db_path, create=True)
    try:
        clear_tables(session)
        counts = {
            "words": load_words(session, words, progress_callback),
            "autocorrect": load_autocorrect(session, autocorrect),
            "suffixes": load_suffixes(session, suffixes),
        }
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()

    logger.info(
        f"Loaded {counts['words']} words, {counts['autocorrect']} autocorrect "
        f"entries and {counts['suffixes']} suffixes into {db_path}"
    )
    return counts

"""
Settings and configuration for Shobdo.

All values can be overridden through environment variables.
"""

import os
from pathlib import Path

# Data directory paths
PACKAGE_DIR = Path(__file__).parent
DATA_DIR = PACKAGE_DIR / "data"

# Database path - defaults to data/shobdo.db
DEFAULT_DB_PATH = DATA_DIR / "shobdo.db"

# Environment variable for custom database path
DB_PATH = Path(os.environ.get("SHOBDO_DB_PATH", DEFAULT_DB_PATH))

# Seed data files (bundled with package)
WORDS_TSV_PATH = DATA_DIR / "words.tsv"
AUTOCORRECT_TSV_PATH = DATA_DIR / "autocorrect.tsv"
SUFFIX_TSV_PATH = DATA_DIR / "suffix.tsv"

# Debug mode
DEBUG = os.environ.get("SHOBDO_DEBUG", "").lower() in ("1", "true", "yes")

# Maximum number of stems kept in a suggestion session cache (0 = unbounded)
CACHE_SIZE = int(os.environ.get("SHOBDO_CACHE_SIZE", "0") or 0)

# Rows inserted per flush when loading the dictionary
LOAD_BATCH_SIZE = 5000

"""
Command line interface for shobdo.

Usage:
    python -m shobdo.cli ami                 # suggestions, one per line
    python -m shobdo.cli -j "(asgulo)"       # suggestions with sources as JSON
    python -m shobdo.cli init-db             # build the SQLite dictionary
"""

import argparse
import json
import logging
import sys
import time
from pathlib import Path
from typing import Optional

from shobdo import __version__, new_session
from shobdo.dict_load import load_dictionary
from shobdo.settings import DATA_DIR, DB_PATH, DEBUG


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if (verbose or DEBUG) else logging.WARNING
    logging.basicConfig(level=level, format='%(asctime)s - %(levelname)s - %(name)s - %(message)s')


def init_db_command(args) -> int:
    """Build the shobdo dictionary database."""
    data_dir = Path(args.data) if args.data else DATA_DIR
    db_path = Path(args.output) if args.output else DB_PATH

    if not data_dir.is_dir():
        print(f"Error: data directory not found: {data_dir}", file=sys.stderr)
        return 1

    # Confirm overwrite
    if db_path.exists() and not args.force:
        print(f"Database already exists: {db_path}")
        response = input("Overwrite? [y/N]: ").strip().lower()
        if response != 'y':
            print("Aborted.")
            return 1

    print("Initializing database...")
    print(f"  Data:   {data_dir}")
    print(f"  Output: {db_path}")

    t0 = time.perf_counter()

    def progress(count):
        print(f"  {count:,} words loaded...")

    try:
        counts = load_dictionary(db_path, data_dir, progress_callback=progress)
    except Exception as e:
        print(f"Error initializing database: {e}", file=sys.stderr)
        return 1

    elapsed = time.perf_counter() - t0
    print()
    print("Database initialized.")
    print(f"   Words:       {counts['words']:,}")
    print(f"   Autocorrect: {counts['autocorrect']:,}")
    print(f"   Suffixes:    {counts['suffixes']:,}")
    print(f"   Time: {elapsed:.2f}s")
    print()
    print("Set SHOBDO_DB_PATH to use a database outside the package:")
    print(f'  export SHOBDO_DB_PATH="{db_path.absolute()}"')
    return 0


def main_init_db(args: list) -> int:
    """CLI entry point for init-db subcommand."""
    parser = argparse.ArgumentParser(
        description='Build the shobdo dictionary database from TSV files',
        prog='shobdo init-db',
    )

    parser.add_argument(
        '--data', '-d',
        type=str,
        metavar='DIR',
        help='Directory with words.tsv, autocorrect.tsv and suffix.tsv (default: bundled data)',
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        metavar='PATH',
        help='Output database path (default: SHOBDO_DB_PATH or data/shobdo.db)',
    )

    parser.add_argument(
        '--force', '-f',
        action='store_true',
        help='Overwrite existing database without prompting',
    )

    parsed = parser.parse_args(args)
    return init_db_command(parsed)


def main(args: Optional[list] = None) -> int:
    """Main CLI entry point."""
    # Check for subcommands
    args_list = args if args is not None else sys.argv[1:]

    if args_list and args_list[0] == 'init-db':
        setup_logging()
        return main_init_db(args_list[1:])

    parser = argparse.ArgumentParser(
        description='Command line interface for Shobdo (Bengali phonetic suggestions)',
        prog='shobdo',
        epilog='Subcommands:\n  shobdo init-db    Build the dictionary database from TSV files',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        'terms',
        nargs='*',
        help='Romanized tokens to suggest for',
    )

    parser.add_argument(
        '-j', '--json',
        action='store_true',
        help='Print suggestions with their sources as JSON',
    )

    parser.add_argument(
        '-d', '--database',
        type=str,
        default=None,
        metavar='PATH',
        help='Path to SQLite database file',
    )

    parser.add_argument(
        '-c', '--cache-size',
        type=int,
        default=None,
        metavar='N',
        help='Maximum number of cached stems (default: SHOBDO_CACHE_SIZE, 0 = unbounded)',
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Log lookups to stderr',
    )

    parser.add_argument(
        '-v', '--version',
        action='store_true',
        help='Show version information',
    )

    parsed = parser.parse_args(args)

    if parsed.version:
        print(f'shobdo {__version__}')
        return 0

    if not parsed.terms:
        parser.print_help()
        return 1

    setup_logging(parsed.debug)

    try:
        engine = new_session(parsed.database, cache_size=parsed.cache_size)
    except Exception as e:
        print(f'Error opening dictionary: {e}', file=sys.stderr)
        return 1

    try:
        if parsed.json:
            output = [engine.suggest_result(term).model_dump() for term in parsed.terms]
            print(json.dumps(output, ensure_ascii=False))
        else:
            for term in parsed.terms:
                print(' '.join(engine.suggest(term)))
        return 0

    except Exception as e:
        print(f'Error processing text: {e}', file=sys.stderr)
        return 1

    finally:
        engine.database.close()


if __name__ == '__main__':
    sys.exit(main())

"""
Suffix handling module for Shobdo.

Users type inflected forms (plurals, case endings) that are rarely
dictionary entries on their own, while the stem usually is. For a typed
core like "computergulo" every tail that is a known suffix ("gulo") is
peeled off, the remaining stem ("computer") is looked up in the session
cache, and each cached rendering is joined with the suffix's rendering:

    কম্পিউটার + গুলো -> কম্পিউটারগুলো

Joining is not always plain concatenation. A stem ending in an independent
vowel takes a glide before a vowel-sign suffix, and a stem ending in Khandatta or
Anushar gets the full consonant back:

    ভাই + ের  -> ভাইয়ের
    এবং + মালা -> এবঙমালা
"""

import logging
from typing import List

from shobdo.cache import StemCache
from shobdo.candidate import Candidate, Source
from shobdo.characters import BENGALI, ScriptRules
from shobdo.database import Database

logger = logging.getLogger(__name__)

# Cores this short are never split
MIN_SPLIT_LENGTH = 3


def join_suffix(item: str, suffix: str, rules: ScriptRules = BENGALI) -> str:
    """
    Join a stem rendering with a suffix rendering.

    Args:
        item: Rendering of the stem.
        suffix: Rendering of the suffix.
        rules: Script constants.

    Returns:
        The joined word.
    """
    if not item or not suffix:
        return f"{item}{suffix}"

    item_rmc = item[-1]     # Right most character
    suffix_lmc = suffix[0]  # Left most character

    if rules.is_independent_vowel(item_rmc) and rules.is_kar(suffix_lmc):
        return f"{item}{rules.glide}{suffix}"
    if item_rmc == rules.khandatta:
        return f"{item.rstrip(rules.khandatta)}{rules.khandatta_substitute}{suffix}"
    if item_rmc == rules.anushar:
        return f"{item.rstrip(rules.anushar)}{rules.anushar_substitute}{suffix}"
    return f"{item}{suffix}"


def add_suffix_to_suggestions(
    middle: str,
    cache: StemCache,
    database: Database,
    rules: ScriptRules = BENGALI,
) -> List[Candidate]:
    """
    Build suffixed candidates for a core from cached stem candidates.

    Every split point contributes, from the longest tail to the shortest.
    The cache is only read.

    Args:
        middle: Romanized core of the typed token.
        cache: Session cache of stem -> candidates.
        database: Source of suffix renderings.
        rules: Script constants used for joining.

    Returns:
        The joined candidates, or the cached candidates for the whole core
        when no split produced anything.
    """
    results: List[Candidate] = []

    if len(middle) >= MIN_SPLIT_LENGTH:
        for i in range(1, len(middle)):
            suffix_key = middle[i:]
            suffix = database.find_suffix(suffix_key)
            if suffix is None:
                continue

            key = middle[:len(middle) - len(suffix_key)]
            stems = cache.get(key)
            if not stems:
                continue

            logger.debug(f"Suffix {suffix_key!r} on cached stem {key!r} ({len(stems)} candidates)")
            for item in stems:
                results.append(Candidate(join_suffix(item.text, suffix, rules), Source.SUFFIX))

    if results:
        return results
    return cache.get(middle, [])

"""
Character handling for Shobdo.

Provides the Bengali character tables, the meta (decoration) character set
and the ScriptRules object that carries every script-specific constant the
suggestion engine depends on: vowel classification, the glide inserted
between a vowel and a vowel sign, and the Khandatta / Anushar substitutions
applied at a suffix boundary.
"""

from dataclasses import dataclass
from typing import FrozenSet

# ============================================================================
# Meta Characters
# ============================================================================

# Punctuation that never takes part in phonetic content. Leading and
# trailing runs of these are split off a token and re-attached afterwards.
# ':' and '$' are absent on purpose: both have phonetic mappings.
META_CHARACTERS = "-]~!@#%&*()_=+[{}'\";<>/?|.,"

# ============================================================================
# Bengali Character Tables
# ============================================================================

# Independent vowels: অ আ ই ঈ উ ঊ ঋ এ ঐ ও ঔ
BENGALI_VOWELS = (
    "অআইঈউঊঋএঐওঔ"
)

# Dependent vowel signs (kar): া ি ী ু ূ ৃ ে ৈ ো ৌ
BENGALI_KARS = (
    "ািীুূৃেৈোৌ"
)

# য় (Ya with nukta), inserted between a vowel ending and a vowel sign
BENGALI_GLIDE = "\u09DF"

# ৎ (Khandatta) is written as ত (Ta) once something follows it
BENGALI_KHANDATTA = "\u09CE"
BENGALI_TA = "\u09A4"

# ং (Anushar) is written as ঙ (Nga) once something follows it
BENGALI_ANUSHAR = "\u0982"
BENGALI_NGA = "\u0999"

# Other marks used by the phonetic tables
BENGALI_HASANTA = "্"
BENGALI_CHANDRABINDU = "ঁ"
BENGALI_BISHORGO = "ঃ"
BENGALI_DIGITS = "০১২৩৪৫৬৭৮৯"


# ============================================================================
# Script Rules
# ============================================================================

@dataclass(frozen=True)
class ScriptRules:
    """
    Immutable bundle of script-specific constants.

    independent_vowels are the stand-alone vowel letters; vowel_signs are the
    dependent signs (kar) that cannot directly follow one of them.
    """
    meta_characters: str
    independent_vowels: FrozenSet[str]
    vowel_signs: FrozenSet[str]
    glide: str
    khandatta: str
    khandatta_substitute: str
    anushar: str
    anushar_substitute: str

    def is_independent_vowel(self, char: str) -> bool:
        return char in self.independent_vowels

    def is_kar(self, char: str) -> bool:
        """Check if a character is a dependent vowel sign."""
        return char in self.vowel_signs


BENGALI = ScriptRules(
    meta_characters=META_CHARACTERS,
    independent_vowels=frozenset(BENGALI_VOWELS),
    vowel_signs=frozenset(BENGALI_KARS),
    glide=BENGALI_GLIDE,
    khandatta=BENGALI_KHANDATTA,
    khandatta_substitute=BENGALI_TA,
    anushar=BENGALI_ANUSHAR,
    anushar_substitute=BENGALI_NGA,
)

"""
Phonetic module for Shobdo.

Converts romanized Bengali (Avro phonetic spelling) to Bengali script.

The converter walks the input left to right and, at every position, tries
the longest pattern whose text matches there. A pattern can carry context
rules: a rule fires when all of its prefix/suffix conditions hold, and its
replacement is used instead of the pattern's default.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Tuple

from shobdo.characters import (
    BENGALI_KHANDATTA, BENGALI_HASANTA, BENGALI_CHANDRABINDU,
    BENGALI_BISHORGO, BENGALI_DIGITS,
)


# ============================================================================
# Character Classes (romanized side)
# ============================================================================

VOWELS = "aeiou"
CONSONANTS = "bcdfghjklmnpqrstvwxyz"

# Letters whose upper and lower case map to different Bengali letters.
# Every other letter is folded to lower case before conversion.
CASE_SENSITIVE = "oiudgjnrstyz"

# Precomposed nukta letters
RRA = "\u09DC"   # ড়
RHA = "\u09DD"   # ঢ়
YYA = "\u09DF"   # য়

ZWNJ = "\u200C"


# ============================================================================
# Pattern Tables
# ============================================================================

@dataclass(frozen=True)
class Match:
    """A single context condition: type is 'prefix' or 'suffix'."""
    type: str
    scope: str
    value: str = ""


@dataclass(frozen=True)
class Rule:
    replace: str
    matches: Tuple[Match, ...]


@dataclass(frozen=True)
class Pattern:
    find: str
    replace: str
    rules: Tuple[Rule, ...] = ()


def _pre(scope: str, value: str = "") -> Match:
    return Match("prefix", scope, value)


def _suf(scope: str, value: str = "") -> Match:
    return Match("suffix", scope, value)


def _rule(replace: str, *matches: Match) -> Rule:
    return Rule(replace, tuple(matches))


def _independent(vowel: str) -> Rule:
    """Rule producing the independent vowel form when not after a consonant."""
    return _rule(vowel, _pre("!consonant"), _suf("!exact", "`"))


# Plain substitutions, no context
SIMPLE_PATTERNS: List[Tuple[str, str]] = [
    # B / V
    ("bhl", "ভ্ল"), ("bdh", "ব্ধ"), ("bj", "ব্জ"), ("bd", "ব্দ"),
    ("bb", "ব্ব"), ("bl", "ব্ল"), ("bh", "ভ"), ("vl", "ভ্ল"),
    ("b", "ব"), ("v", "ভ"),
    # C
    ("cch", "চ্ছ"), ("cc", "চ্চ"), ("ch", "ছ"), ("c", "চ"),
    # D
    ("dhn", "ধ্ন"), ("dhm", "ধ্ম"), ("dgh", "দ্ঘ"), ("ddh", "দ্ধ"),
    ("dbh", "দ্ভ"), ("dv", "দ্ভ"), ("dm", "দ্ম"), ("DD", "ড্ড"),
    ("Dh", "ঢ"), ("dh", "ধ"), ("dg", "দ্গ"), ("dd", "দ্দ"),
    ("D", "ড"), ("d", "দ"),
    # Full stop
    ("...", "..."), (".`", "."), ("..", "।।"), (".", "।"),
    # G
    ("ghn", "ঘ্ন"), ("Ghn", "ঘ্ন"), ("gdh", "গ্ধ"), ("Gdh", "গ্ধ"),
    ("gN", "গ্ণ"), ("GN", "গ্ণ"), ("gn", "গ্ন"), ("Gn", "গ্ন"),
    ("gm", "গ্ম"), ("Gm", "গ্ম"), ("gl", "গ্ল"), ("Gl", "গ্ল"),
    ("gg", "জ্ঞ"), ("GG", "জ্ঞ"), ("Gg", "জ্ঞ"), ("gG", "জ্ঞ"),
    ("gh", "ঘ"), ("Gh", "ঘ"), ("g", "গ"), ("G", "গ"),
    # H
    ("hN", "হ্ণ"), ("hn", "হ্ন"), ("hm", "হ্ম"), ("hl", "হ্ল"), ("h", "হ"),
    # J
    ("jjh", "জ্ঝ"), ("jNG", "জ্ঞ"), ("jh", "ঝ"), ("jj", "জ্জ"),
    ("j", "জ"), ("J", "জ"),
    # K
    ("kkhN", "ক্ষ্ণ"), ("kShN", "ক্ষ্ণ"), ("kkhm", "ক্ষ্ম"), ("kShm", "ক্ষ্ম"),
    ("kxN", "ক্ষ্ণ"), ("kxm", "ক্ষ্ম"), ("kkh", "ক্ষ"), ("kSh", "ক্ষ"),
    ("ksh", "কশ"), ("kx", "ক্ষ"), ("kk", "ক্ক"), ("kT", "ক্ট"),
    ("kt", "ক্ত"), ("kl", "ক্ল"), ("ks", "ক্স"), ("kh", "খ"), ("k", "ক"),
    # L
    ("lbh", "ল্ভ"), ("ldh", "ল্ধ"), ("lkh", "লখ"), ("lgh", "লঘ"),
    ("lph", "লফ"), ("lk", "ল্ক"), ("lg", "ল্গ"), ("lT", "ল্ট"),
    ("lD", "ল্ড"), ("lp", "ল্প"), ("lv", "ল্ভ"), ("lm", "ল্ম"),
    ("ll", "ল্ল"), ("lb", "ল্ব"), ("l", "ল"),
    # M
    ("mth", "ম্থ"), ("mph", "ম্ফ"), ("mbh", "ম্ভ"), ("mpl", "মপ্ল"),
    ("mn", "ম্ন"), ("mp", "ম্প"), ("mv", "ম্ভ"), ("mm", "ম্ম"),
    ("ml", "ম্ল"), ("mb", "ম্ব"), ("mf", "ম্ফ"), ("m", "ম"),
    # N
    ("ngkh", "ঙ্খ"), ("nggh", "ঙ্ঘ"), ("ngk", "ঙ্ক"), ("ngg", "ঙ্গ"),
    ("NGc", "ঞ্চ"), ("NGj", "ঞ্জ"), ("NG", "ঞ"), ("Ng", "ঙ"), ("ng", "ং"),
    ("nth", "ন্থ"), ("nTh", "ণ্ঠ"), ("ndh", "ন্ধ"), ("nD", "ন্ড"),
    ("nd", "ন্দ"), ("nT", "ন্ট"), ("nt", "ন্ত"), ("nm", "ন্ম"),
    ("nn", "ন্ন"), ("NT", "ণ্ট"), ("ND", "ণ্ড"), ("NN", "ণ্ণ"),
    ("n", "ন"), ("N", "ণ"),
    # P / F / Q
    ("phl", "ফ্ল"), ("pT", "প্ট"), ("pt", "প্ত"), ("pn", "প্ন"),
    ("pp", "প্প"), ("pl", "প্ল"), ("ps", "প্স"), ("ph", "ফ"),
    ("p", "প"), ("fl", "ফ্ল"), ("f", "ফ"), ("q", "ক"),
    # R
    ("Rh", RHA), ("R", RRA),
    # S
    ("ShTh", "ষ্ঠ"), ("ShT", "ষ্ট"), ("shch", "শ্ছ"), ("sh", "শ"),
    ("Sh", "ষ"), ("sk", "স্ক"), ("st", "স্ত"), ("sp", "স্প"),
    ("sm", "স্ম"), ("sn", "স্ন"), ("sl", "স্ল"), ("S", "শ"), ("s", "স"),
    # T
    ("t``", BENGALI_KHANDATTA), ("tth", "ত্থ"), ("tt", "ত্ত"),
    ("tm", "ত্ম"), ("tn", "ত্ন"), ("th", "থ"), ("TT", "ট্ট"),
    ("Th", "ঠ"), ("T", "ট"), ("t", "ত"),
    # Y / Z
    ("Y", YYA), ("Z", BENGALI_HASANTA + "য"), ("z", "য"),
    # Signs
    (":", BENGALI_BISHORGO), ("^", BENGALI_CHANDRABINDU),
    (",,", BENGALI_HASANTA + ZWNJ), ("$", "৳"), ("``", BENGALI_KHANDATTA),
    ("`", ""),
] + [(str(digit), BENGALI_DIGITS[digit]) for digit in range(10)]


# Substitutions that depend on the surrounding letters
RULE_PATTERNS: List[Pattern] = [
    # Vowels
    Pattern("o", "", (
        _rule("অ", _pre("vowel"), _pre("!exact", "o")),
        _rule("ও", _pre("vowel"), _pre("exact", "o")),
        _rule("অ", _pre("punctuation")),
    )),
    Pattern("oo", "ু", (_independent("উ"),)),
    Pattern("OI", "ৈ", (_independent("ঐ"),)),
    Pattern("OU", "ৌ", (_independent("ঔ"),)),
    Pattern("O", "ো", (_independent("ও"),)),
    Pattern("a", "া", (
        _rule("আ", _pre("punctuation"), _suf("!exact", "`")),
        _rule(YYA + "া", _pre("!consonant"), _pre("!exact", "a"), _suf("!exact", "`")),
        _rule("আ", _pre("exact", "a"), _suf("!exact", "`")),
    )),
    Pattern("ee", "ী", (_independent("ঈ"),)),
    Pattern("e", "ে", (_independent("এ"),)),
    Pattern("i", "ি", (_independent("ই"),)),
    Pattern("I", "ী", (_independent("ঈ"),)),
    Pattern("u", "ু", (_independent("উ"),)),
    Pattern("U", "ূ", (_independent("ঊ"),)),
    Pattern("rri", "ঋ", (_rule("ৃ", _pre("consonant")),)),
    # Consonants that change shape after another consonant
    Pattern("r", "র", (
        _rule(
            BENGALI_HASANTA + "র",
            _pre("consonant"), _pre("!exact", "r"), _pre("!exact", "y"),
            _pre("!exact", "w"), _pre("!exact", "x"),
        ),
    )),
    Pattern("w", "ও", (
        _rule(BENGALI_HASANTA + "ব", _pre("consonant"), _pre("!exact", "w")),
    )),
    Pattern("x", "ক্স", (_rule("এক্স", _pre("punctuation")),)),
    Pattern("y", BENGALI_HASANTA + "য", (
        _rule(YYA, _pre("!consonant"), _pre("!punctuation")),
        _rule("ই" + YYA, _pre("punctuation")),
    )),
]


def build_pattern_index(patterns: List[Pattern]) -> Dict[str, List[Pattern]]:
    """
    Group patterns by their first character, longest first.

    Returns:
        Mapping of first character to the candidate patterns for it.
    """
    index: Dict[str, List[Pattern]] = {}
    for pattern in patterns:
        index.setdefault(pattern.find[0], []).append(pattern)
    for bucket in index.values():
        bucket.sort(key=lambda p: -len(p.find))
    return index


ALL_PATTERNS: List[Pattern] = (
    RULE_PATTERNS + [Pattern(find, replace) for find, replace in SIMPLE_PATTERNS]
)


# ============================================================================
# Transliterators
# ============================================================================

class Transliterator(ABC):
    """Converts romanized text into native script."""

    @abstractmethod
    def convert(self, text: str) -> str:
        """Convert romanized text. Must be total and side-effect free."""


def fix_string(text: str) -> str:
    """Fold every letter that is not case-sensitive to lower case."""
    return "".join(
        char if char.lower() in CASE_SENSITIVE else char.lower()
        for char in text
    )


def _is_vowel(char: str) -> bool:
    return char.lower() in VOWELS


def _is_consonant(char: str) -> bool:
    return char.lower() in CONSONANTS


def _is_punctuation(char: str) -> bool:
    return not (_is_vowel(char) or _is_consonant(char))


class AvroPhonetic(Transliterator):
    """
    Rule-based Avro phonetic converter.

    Example:
        >>> AvroPhonetic().convert("ami")
        'আমি'
    """

    def __init__(self, patterns: List[Pattern] = None):
        self._index = build_pattern_index(patterns or ALL_PATTERNS)

    def convert(self, text: str) -> str:
        fixed = fix_string(text)
        output = []
        cur = 0

        while cur < len(fixed):
            matched = False

            for pattern in self._index.get(fixed[cur], ()):
                end = cur + len(pattern.find)
                if fixed[cur:end] != pattern.find:
                    continue

                output.append(self._apply(pattern, fixed, cur, end))
                cur = end
                matched = True
                break

            if not matched:
                # Keep the character as-is
                output.append(fixed[cur])
                cur += 1

        return "".join(output)

    def _apply(self, pattern: Pattern, text: str, start: int, end: int) -> str:
        for rule in pattern.rules:
            if all(self._check(match, text, start, end) for match in rule.matches):
                return rule.replace
        return pattern.replace

    @staticmethod
    def _check(match: Match, text: str, start: int, end: int) -> bool:
        negative = match.scope.startswith("!")
        scope = match.scope.lstrip("!")
        chk = end if match.type == "suffix" else start - 1
        in_bounds = 0 <= chk < len(text)

        if scope == "punctuation":
            ok = not in_bounds or _is_punctuation(text[chk])
        elif scope == "vowel":
            ok = in_bounds and _is_vowel(text[chk])
        elif scope == "consonant":
            ok = in_bounds and _is_consonant(text[chk])
        elif scope == "exact":
            if match.type == "suffix":
                s, e = end, end + len(match.value)
            else:
                s, e = start - len(match.value), start
            ok = s >= 0 and e <= len(text) and text[s:e] == match.value
        else:
            ok = False

        return ok != negative

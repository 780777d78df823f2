"""
Suggestion candidates with provenance.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, List


class Source(Enum):
    """Where a candidate came from."""
    AUTOCORRECT = "autocorrect"
    DICTIONARY = "dictionary"
    SUFFIX = "suffix"
    PHONETIC = "phonetic"
    SYMBOL = "symbol"


@dataclass(frozen=True)
class Candidate:
    """A native-script rendering and the lookup that produced it."""
    text: str
    source: Source

    def decorate(self, prefix: str, suffix: str) -> "Candidate":
        return replace(self, text=f"{prefix}{self.text}{suffix}")


def texts(candidates: Iterable[Candidate]) -> List[str]:
    return [c.text for c in candidates]


def unique(candidates: Iterable[Candidate]) -> List[Candidate]:
    """Drop candidates whose text was already seen, keeping the first."""
    seen = set()
    result = []
    for candidate in candidates:
        if candidate.text in seen:
            continue
        seen.add(candidate.text)
        result.append(candidate)
    return result

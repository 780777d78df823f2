"""
Ranking of suggestion candidates.

Candidates are ordered by Levenshtein distance to the plain phonetic
conversion of the typed text, so the closest spelling comes first.
"""

from typing import List

from rapidfuzz.distance import Levenshtein

from shobdo.candidate import Candidate


def edit_distance(a: str, b: str) -> int:
    """Unit-cost Levenshtein distance over code points."""
    return Levenshtein.distance(a, b)


def rank_suggestions(candidates: List[Candidate], reference: str) -> List[Candidate]:
    """
    Sort candidates by ascending edit distance to reference.

    The sort is stable: candidates at equal distance keep their input order.

    Args:
        candidates: Candidates to order.
        reference: Plain phonetic conversion of the typed text.

    Returns:
        New sorted list.
    """
    return sorted(candidates, key=lambda c: edit_distance(reference, c.text))

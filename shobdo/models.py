"""
Pydantic models for shobdo API responses.

These models provide:
- Type-safe response schemas
- Automatic JSON serialization (used by the CLI --json output)

Usage:
    from shobdo.models import SuggestionResult

    result = engine.suggest_result("(asgulo)")
    print(result.model_dump_json())
"""

from typing import List

from pydantic import BaseModel, Field

from shobdo.candidate import Candidate
from shobdo.segment import SplitToken


class CandidateResult(BaseModel):
    """A single suggestion with where it came from."""
    text: str = Field(..., description="Suggested text, decoration included")
    source: str = Field(..., description="autocorrect, dictionary, suffix, phonetic or symbol")

    @classmethod
    def from_candidate(cls, candidate: Candidate) -> "CandidateResult":
        return cls(text=candidate.text, source=candidate.source.value)


class SuggestionResult(BaseModel):
    """
    Suggestions for one typed token.
    """
    term: str = Field(..., description="Token as typed")
    prefix: str = Field("", description="Leading decoration")
    middle: str = Field("", description="Romanized core that was looked up")
    suffix: str = Field("", description="Trailing decoration")
    phonetic: str = Field("", description="Plain phonetic conversion of the core")
    suggestions: List[CandidateResult] = Field(default_factory=list, description="Ordered suggestions")

    @classmethod
    def from_candidates(
        cls,
        term: str,
        splitted: SplitToken,
        phonetic: str,
        candidates: List[Candidate],
    ) -> "SuggestionResult":
        return cls(
            term=term,
            prefix=splitted.prefix,
            middle=splitted.middle,
            suffix=splitted.suffix,
            phonetic=phonetic,
            suggestions=[CandidateResult.from_candidate(c) for c in candidates],
        )

    @property
    def texts(self) -> List[str]:
        return [s.text for s in self.suggestions]

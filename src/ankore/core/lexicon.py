# src/ankore/core/lexicon.py
"""
Data model for expression lookups.

A dictionary sense becomes a DefinitionCandidate:
  "give up" → DefinitionCandidate("To stop trying.", "Never give up.")

Everything here is created per lookup and owned by the caller.
"""

from dataclasses import dataclass, field
from enum import Enum


class MeaningMode(str, Enum):
    NORMAL = "normal"
    PRECISE = "precise"


class MeaningConfidence(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class DefinitionCandidate:
    definition: str
    example: str | None = None


@dataclass(frozen=True)
class ScoredCandidate:
    candidate: DefinitionCandidate
    score: float

    @property
    def definition(self) -> str:
        return self.candidate.definition


@dataclass
class ResolvedMeaning:
    definition: str
    meaning_candidates: list[str]
    meaning_confidence: MeaningConfidence


@dataclass
class DictionaryExtraction:
    """Typed result of walking one or more dictionary payloads."""
    candidates: list[DefinitionCandidate] = field(default_factory=list)
    related: list[DefinitionCandidate] = field(default_factory=list)  # other headwords
    examples: list[str] = field(default_factory=list)
    phonetic: str = "N/A"


@dataclass
class WordData:
    expression: str
    definition: str
    phonetic: str
    sentence: str
    sentence_candidates: list[str]
    meaning_candidates: list[str]
    meaning_confidence: MeaningConfidence

    def to_dict(self) -> dict:
        return {
            "expression": self.expression,
            "definition": self.definition,
            "phonetic": self.phonetic,
            "sentence": self.sentence,
            "sentence_candidates": list(self.sentence_candidates),
            "meaning_candidates": list(self.meaning_candidates),
            "meaning_confidence": self.meaning_confidence.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WordData":
        return cls(
            expression=data["expression"],
            definition=data["definition"],
            phonetic=data.get("phonetic", "N/A"),
            sentence=data["sentence"],
            sentence_candidates=list(data.get("sentence_candidates", [])),
            meaning_candidates=list(data.get("meaning_candidates", [])),
            meaning_confidence=MeaningConfidence(data.get("meaning_confidence", "medium")),
        )

# src/ankore/core/meaning.py
"""
Meaning resolution: pick one definition for the card.

Two modes:
- normal:  first extracted candidate, confidence fixed at medium
- precise: score every candidate against the sentence pool, take the best

Precise score for a candidate:
  max token overlap(definition, pool sentence)
  + expression_in_definition   if the definition contains the expression
  + expression_in_example      if its example contains the expression
  + min(example_overlap_cap, summed overlap(example, every pool sentence))
  - generic_tone               if the definition reads like a template
  - short_definition           if the definition is very short
"""

import re
from dataclasses import dataclass
from typing import Iterable

from ankore.core.lexicon import (
    DefinitionCandidate,
    MeaningConfidence,
    MeaningMode,
    ResolvedMeaning,
    ScoredCandidate,
)
from ankore.core.matcher import contains_expression


MAX_MEANING_CANDIDATES = 5

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")
_GENERIC_TONE_RE = re.compile(
    r"\b(?:something|someone|thing|a kind of|an act of|used to|to do)\b",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class ScoringWeights:
    expression_in_definition: float = 2.0
    expression_in_example: float = 2.0
    example_overlap_cap: float = 3.0
    generic_tone: float = 1.5
    short_definition: float = 0.5
    short_definition_length: int = 20
    min_token_length: int = 3


@dataclass(frozen=True)
class ConfidenceThresholds:
    high_score: float = 5.0
    high_gap: float = 2.0
    medium_score: float = 3.0
    medium_gap: float = 1.0


DEFAULT_WEIGHTS = ScoringWeights()
DEFAULT_THRESHOLDS = ConfidenceThresholds()


def overlap_tokens(text: str, min_length: int = 3) -> set[str]:
    cleaned = _NON_ALNUM_RE.sub(" ", text.lower())
    return {t for t in cleaned.split() if len(t) >= min_length}


def is_generic(definition: str) -> bool:
    return _GENERIC_TONE_RE.search(definition) is not None


def score_candidate(
    candidate: DefinitionCandidate,
    pool: list[str],
    expression: str,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> float:
    pool_tokens = [overlap_tokens(s, weights.min_token_length) for s in pool]
    definition_tokens = overlap_tokens(candidate.definition, weights.min_token_length)

    score = float(max((len(definition_tokens & s) for s in pool_tokens), default=0))

    if contains_expression(candidate.definition, expression):
        score += weights.expression_in_definition

    if candidate.example:
        if contains_expression(candidate.example, expression):
            score += weights.expression_in_example

        example_tokens = overlap_tokens(candidate.example, weights.min_token_length)
        shared = sum(len(example_tokens & s) for s in pool_tokens)
        score += min(weights.example_overlap_cap, float(shared))

    if is_generic(candidate.definition):
        score -= weights.generic_tone

    if len(candidate.definition) < weights.short_definition_length:
        score -= weights.short_definition

    return score


def rank_candidates(
    candidates: Iterable[DefinitionCandidate],
    pool: list[str],
    expression: str,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> list[ScoredCandidate]:
    """Best first. Ties keep extraction order (sorted is stable)."""
    scored = [
        ScoredCandidate(c, score_candidate(c, pool, expression, weights))
        for c in candidates
    ]
    return sorted(scored, key=lambda s: s.score, reverse=True)


def confidence_for(
    ranked: list[ScoredCandidate],
    thresholds: ConfidenceThresholds = DEFAULT_THRESHOLDS,
) -> MeaningConfidence:
    if not ranked:
        return MeaningConfidence.LOW

    top = ranked[0].score
    # a lone candidate is measured against zero
    runner_up = ranked[1].score if len(ranked) > 1 else 0.0
    gap = top - runner_up

    if top >= thresholds.high_score and gap >= thresholds.high_gap:
        return MeaningConfidence.HIGH
    if top >= thresholds.medium_score and gap >= thresholds.medium_gap:
        return MeaningConfidence.MEDIUM
    return MeaningConfidence.LOW


def distinct_definitions(definitions: Iterable[str], limit: int = MAX_MEANING_CANDIDATES) -> list[str]:
    output = []
    for definition in definitions:
        if definition in output:
            continue
        output.append(definition)
        if len(output) >= limit:
            break
    return output


def resolve_meaning(
    candidates: list[DefinitionCandidate],
    pool: list[str],
    expression: str,
    mode: MeaningMode | str = MeaningMode.NORMAL,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    thresholds: ConfidenceThresholds = DEFAULT_THRESHOLDS,
) -> ResolvedMeaning | None:
    """
    Returns None when there are no candidates at all; the caller decides
    what placeholder to show.
    """
    if not candidates:
        return None

    mode = MeaningMode(mode)

    if mode is MeaningMode.NORMAL:
        chosen = candidates[0].definition
        return ResolvedMeaning(
            definition=chosen,
            meaning_candidates=[chosen],
            meaning_confidence=MeaningConfidence.MEDIUM,
        )

    ranked = rank_candidates(candidates, pool, expression, weights)
    return ResolvedMeaning(
        definition=ranked[0].definition,
        meaning_candidates=distinct_definitions(r.definition for r in ranked),
        meaning_confidence=confidence_for(ranked, thresholds),
    )

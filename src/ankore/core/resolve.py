# src/ankore/core/resolve.py
"""
Lookup resolution: raw payloads in, card data out.

Pure with respect to its inputs. Fetching happens elsewhere
(ankore.core.sources); a source that failed is passed in as None and
simply contributes nothing.
"""

import random
from typing import Any, Iterable

from ankore.core.errors import NoContextualSentence, NoDictionaryData
from ankore.core.extract import extract_candidates, merge_extractions
from ankore.core.lexicon import (
    DefinitionCandidate,
    MeaningConfidence,
    MeaningMode,
    ResolvedMeaning,
    WordData,
)
from ankore.core.matcher import contains_expression, tokenize_expression
from ankore.core.meaning import MAX_MEANING_CANDIDATES, distinct_definitions, resolve_meaning
from ankore.core.pool import build_sentence_pool
from ankore.core.text import normalize_sentence


def placeholder_definition(expression: str) -> str:
    return f'Definition not found for expression "{expression}".'


def _fallback_meaning(
    expression: str,
    related: list[DefinitionCandidate],
) -> ResolvedMeaning:
    """
    Multi-word expression without its own senses: keep the placeholder as
    the definition and offer related senses that mention the expression.
    """
    placeholder = placeholder_definition(expression)
    matches = [
        c.definition for c in related
        if contains_expression(c.definition, expression)
        or (c.example and contains_expression(c.example, expression))
    ]
    alternates = distinct_definitions([placeholder, *matches], MAX_MEANING_CANDIDATES)

    return ResolvedMeaning(
        definition=placeholder,
        meaning_candidates=alternates,
        meaning_confidence=MeaningConfidence.MEDIUM if matches else MeaningConfidence.LOW,
    )


def resolve(
    expression: str,
    payloads: Iterable[Any],
    sentence_sources: Iterable[Iterable[str] | None] = (),
    mode: MeaningMode | str = MeaningMode.NORMAL,
    rng: random.Random | None = None,
) -> WordData:
    """
    Resolve definition, phonetic and example sentence for an expression.

    Args:
        expression: word or multi-word expression
        payloads: raw dictionary payloads, None for a failed source
        sentence_sources: raw sentence lists in priority order; dictionary
            examples are appended after them
        mode: "normal" or "precise"
        rng: picks the representative sentence; caller-owned

    Raises:
        NoDictionaryData: single word with no usable dictionary senses
        NoContextualSentence: no usable example sentence at all
    """
    expression = normalize_sentence(expression)
    mode = MeaningMode(mode)
    multiword = len(tokenize_expression(expression)) > 1

    extraction = merge_extractions(
        extract_candidates(p, expression) for p in payloads if p is not None
    )

    if not extraction.candidates and not multiword:
        raise NoDictionaryData(expression)

    pool = build_sentence_pool([*sentence_sources, extraction.examples], expression)
    if not pool:
        raise NoContextualSentence(expression)

    meaning = resolve_meaning(extraction.candidates, pool, expression, mode)
    if meaning is None:
        meaning = _fallback_meaning(expression, extraction.related)

    rng = rng or random.Random()
    return WordData(
        expression=expression,
        definition=meaning.definition,
        phonetic=extraction.phonetic,
        sentence=rng.choice(pool),
        sentence_candidates=pool,
        meaning_candidates=meaning.meaning_candidates,
        meaning_confidence=meaning.meaning_confidence,
    )

# src/ankore/core/pool.py
"""
Sentence pool: the de-duplicated, filtered example sentences that may
illustrate an expression on a card.
"""

from typing import Iterable

from ankore.core.matcher import contains_expression
from ankore.core.text import normalize_sentence, unique_sentences


MIN_WORDS = 4
MIN_LENGTH = 20
MAX_LENGTH = 220


def is_contextual_sentence(sentence: str, expression: str) -> bool:
    normalized = normalize_sentence(sentence)
    word_count = len([w for w in normalized.split(" ") if w])

    return (
        word_count >= MIN_WORDS
        and MIN_LENGTH <= len(normalized) <= MAX_LENGTH
        and contains_expression(normalized, expression)
    )


def filter_contextual(sentences: Iterable, expression: str) -> list[str]:
    """Usable sentences only, normalized and unique. Non-strings are dropped."""
    usable = [
        s for s in sentences
        if isinstance(s, str) and is_contextual_sentence(s, expression)
    ]
    return unique_sentences(usable)


def build_sentence_pool(sources: Iterable[Iterable | None], expression: str) -> list[str]:
    """
    Merge sentence sources in priority order.

    Callers pass context sources first (Tatoeba, Quotable) and dictionary
    examples last; a missing source (None) contributes nothing.
    """
    merged = []
    for source in sources:
        if source is None or isinstance(source, (str, bytes, dict)):
            continue
        merged.extend(filter_contextual(source, expression))
    return unique_sentences(merged)

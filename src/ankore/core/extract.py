# src/ankore/core/extract.py
"""
Candidate extraction from dictionary payloads.

Walks entry → meanings (part-of-speech groups) → definitions → examples
and flattens it into DefinitionCandidates plus a phonetic string.
Anything that does not have the expected shape is skipped, so a broken
payload yields an empty extraction instead of an exception.
"""

from typing import Any, Iterable

from ankore.core.lexicon import DefinitionCandidate, DictionaryExtraction
from ankore.core.matcher import tokenize_expression
from ankore.core.pool import is_contextual_sentence
from ankore.core.text import normalize_sentence, unique_sentences


NO_PHONETIC = "N/A"


def _text(value: Any) -> str:
    if not isinstance(value, str):
        return ""
    return normalize_sentence(value)


def _list(value: Any) -> list:
    return value if isinstance(value, list) else []


def _entries(payload: Any) -> list[dict]:
    if isinstance(payload, dict):
        payload = [payload]
    return [e for e in _list(payload) if isinstance(e, dict)]


def _sense_examples(sense: dict) -> list[str]:
    examples = [_text(sense.get("example"))]
    examples.extend(_text(e) for e in _list(sense.get("examples")))
    return [e for e in examples if e]


def pick_phonetic(entries: Iterable[dict]) -> str:
    """Top-level phonetic field first, then any phonetics[].text, else N/A."""
    entries = list(entries)

    for entry in entries:
        phonetic = entry.get("phonetic")
        if isinstance(phonetic, str) and phonetic.strip():
            return phonetic.strip()

    for entry in entries:
        for item in _list(entry.get("phonetics")):
            if not isinstance(item, dict):
                continue
            text = item.get("text")
            if isinstance(text, str) and text.strip():
                return text.strip()

    return NO_PHONETIC


def _walk_senses(senses: Any, expression: str, examples: list[str]) -> list[DefinitionCandidate]:
    candidates = []
    for sense in _list(senses):
        if not isinstance(sense, dict):
            continue

        definition = _text(sense.get("definition"))
        if not definition:
            continue

        sense_examples = _sense_examples(sense)
        candidates.append(DefinitionCandidate(
            definition=definition,
            example=sense_examples[0] if sense_examples else None,
        ))
        examples.extend(e for e in sense_examples if is_contextual_sentence(e, expression))

    return candidates


def _expression_key(text: Any) -> str:
    return " ".join(tokenize_expression(text)) if isinstance(text, str) else ""


def extract_candidates(payload: Any, expression: str) -> DictionaryExtraction:
    """
    Flatten one raw dictionary payload.

    For multi-word expressions, senses of entries whose headword is a
    different word (e.g. "give" when asked for "give up") are kept apart
    as related candidates; expression-level definitions that name the
    expression exactly are treated like regular senses.
    """
    entries = _entries(payload)
    key = _expression_key(expression)
    multiword = len(key.split(" ")) > 1

    result = DictionaryExtraction(phonetic=pick_phonetic(entries))
    examples: list[str] = []

    for entry in entries:
        headword = _expression_key(entry.get("word"))
        is_related = multiword and bool(headword) and headword != key

        for meaning in _list(entry.get("meanings")):
            if not isinstance(meaning, dict):
                continue
            found = _walk_senses(meaning.get("definitions"), expression, examples)
            if is_related:
                result.related.extend(found)
            else:
                result.candidates.extend(found)

        if not multiword:
            continue

        for item in _list(entry.get("expressions")):
            if not isinstance(item, dict):
                continue
            text = item.get("expression", item.get("text"))
            if _expression_key(text) != key:
                continue
            result.candidates.extend(_walk_senses(item.get("definitions"), expression, examples))

    result.examples = unique_sentences(examples)
    return result


def merge_extractions(extractions: Iterable[DictionaryExtraction]) -> DictionaryExtraction:
    """Concatenate extractions in source order; first real phonetic wins."""
    merged = DictionaryExtraction()
    examples = []
    for ex in extractions:
        merged.candidates.extend(ex.candidates)
        merged.related.extend(ex.related)
        examples.extend(ex.examples)
        if merged.phonetic == NO_PHONETIC and ex.phonetic != NO_PHONETIC:
            merged.phonetic = ex.phonetic
    merged.examples = unique_sentences(examples)
    return merged

# src/ankore/core/text.py
"""
Text normalization primitives.

Whitespace collapsing, markup stripping/escaping and the
case-insensitive de-duplication used by every sentence list.
"""

import re
from typing import Iterable


_WHITESPACE_RE = re.compile(r"\s+")
_MARKUP_RE = re.compile(r"<[^>]*>")
_PATTERN_META_RE = re.compile(r"[.*+?^${}()|\[\]\\]")
_NUMERIC_ENTITY_RE = re.compile(r"&#(\d+);")

_MARKUP_ESCAPES = [
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
]


def normalize_sentence(sentence: str) -> str:
    """Collapse whitespace runs to a single space and trim the edges."""
    return _WHITESPACE_RE.sub(" ", sentence).strip()


def escape_for_pattern(value: str) -> str:
    return _PATTERN_META_RE.sub(lambda m: "\\" + m.group(0), value)


def strip_markup(value: str) -> str:
    return _MARKUP_RE.sub("", value)


def escape_for_markup(value) -> str:
    text = str(value)
    for raw, entity in _MARKUP_ESCAPES:
        text = text.replace(raw, entity)
    return text


def decode_entities(value: str) -> str:
    """Undo escape_for_markup, plus numeric &#NNN; entities."""
    text = value
    for raw, entity in reversed(_MARKUP_ESCAPES):
        text = text.replace(entity, raw)
    return _NUMERIC_ENTITY_RE.sub(lambda m: chr(int(m.group(1))), text)


def unique_sentences(sentences: Iterable[str | None]) -> list[str]:
    """
    Normalize and de-duplicate sentences case-insensitively.

    Keeps the first occurrence (in its normalized form) and drops
    empty or missing entries.
    """
    seen = set()
    output = []

    for raw in sentences:
        if not raw:
            continue

        sentence = normalize_sentence(raw)
        if not sentence:
            continue

        key = sentence.lower()
        if key in seen:
            continue

        seen.add(key)
        output.append(sentence)

    return output

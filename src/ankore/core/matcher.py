# src/ankore/core/matcher.py
"""
Expression matching.

Builds one case-insensitive pattern per expression:

  tokenize → classify (single / phrasal / literal) → emit pattern

"go away" matches "The pain goes away", "turn off" matches
"turn the lights off". contains_expression and highlight share the
same pattern so they never disagree.
"""

import re
from enum import Enum
from typing import Callable, Iterable

from ankore.core.text import escape_for_pattern, normalize_sentence


PHRASAL_PARTICLES = frozenset([
    "about",
    "across",
    "after",
    "along",
    "around",
    "away",
    "back",
    "down",
    "for",
    "in",
    "into",
    "off",
    "on",
    "out",
    "over",
    "through",
    "up",
])

IRREGULAR_VERB_FORMS: dict[str, list[str]] = {
    "be": ["am", "are", "is", "was", "were", "been", "being"],
    "come": ["comes", "came", "coming"],
    "do": ["does", "did", "done", "doing"],
    "get": ["gets", "got", "gotten", "getting"],
    "give": ["gives", "gave", "given", "giving"],
    "go": ["goes", "went", "gone", "going"],
    "have": ["has", "had", "having"],
    "make": ["makes", "made", "making"],
    "run": ["runs", "ran", "running"],
    "take": ["takes", "took", "taken", "taking"],
}

# Words allowed between a verb and its particle ("turn the lights off").
MAX_PARTICLE_GAP = 3

_CONSONANTS = set("bcdfghjklmnpqrstvwxyz")
_VOWELS = set("aeiou")
_NEVER_MATCHES = re.compile(r"(?!)")


class ExpressionKind(Enum):
    EMPTY = "empty"
    SINGLE = "single"
    PHRASAL = "phrasal"
    LITERAL = "literal"


def tokenize_expression(expression: str) -> list[str]:
    return [t for t in normalize_sentence(expression).lower().split(" ") if t]


def _ends_consonant_y(word: str) -> bool:
    return len(word) >= 2 and word[-1] == "y" and word[-2] not in _VOWELS


def _doubles_final_consonant(word: str) -> bool:
    # CVC heuristic: stop → stopping, but not fix → fixing or play → playing.
    if len(word) < 3:
        return False
    last, middle, first = word[-1], word[-2], word[-3]
    return (
        last in _CONSONANTS
        and last not in "wxy"
        and middle in _VOWELS
        and first in _CONSONANTS
    )


def build_verb_forms(verb: str) -> list[str]:
    """
    All surface forms matched for a base verb, base form first.

    Irregular forms come from IRREGULAR_VERB_FORMS; regular third person,
    past and -ing forms are always added on top of them.
    """
    base = verb.strip().lower()
    if not base:
        return []

    forms = [base]

    def add(form: str):
        if form not in forms:
            forms.append(form)

    for form in IRREGULAR_VERB_FORMS.get(base, []):
        add(form)

    # third person
    if base.endswith(("s", "sh", "ch", "x", "z", "o")):
        add(base + "es")
    elif _ends_consonant_y(base):
        add(base[:-1] + "ies")
    else:
        add(base + "s")

    # past
    if base.endswith("e"):
        add(base + "d")
    elif _ends_consonant_y(base):
        add(base[:-1] + "ied")
    else:
        add(base + "ed")

    # present participle
    if base.endswith("ie"):
        add(base[:-2] + "ying")
    elif base.endswith("e") and not base.endswith("ee"):
        add(base[:-1] + "ing")
    elif _doubles_final_consonant(base):
        add(base + base[-1] + "ing")
    else:
        add(base + "ing")

    return forms


def verb_form_table(verbs: Iterable[str]) -> dict[str, list[str]]:
    """Map each base verb to its generated form set."""
    return {v.strip().lower(): build_verb_forms(v) for v in verbs if v.strip()}


def classify_expression(tokens: list[str]) -> ExpressionKind:
    if not tokens:
        return ExpressionKind.EMPTY
    if len(tokens) == 1:
        return ExpressionKind.SINGLE
    if len(tokens) == 2 and tokens[1] in PHRASAL_PARTICLES:
        return ExpressionKind.PHRASAL
    return ExpressionKind.LITERAL


def build_expression_pattern(expression: str) -> re.Pattern:
    tokens = tokenize_expression(expression)
    kind = classify_expression(tokens)

    if kind is ExpressionKind.EMPTY:
        return _NEVER_MATCHES

    if kind is ExpressionKind.SINGLE:
        return re.compile(rf"\b{escape_for_pattern(tokens[0])}\b", re.IGNORECASE)

    first, rest = tokens[0], tokens[1:]
    alternatives = "|".join(escape_for_pattern(f) for f in build_verb_forms(first))

    if kind is ExpressionKind.PHRASAL:
        particle = escape_for_pattern(rest[0])
        return re.compile(
            rf"\b(?:{alternatives})\b(?:\s+\w+){{0,{MAX_PARTICLE_GAP}}}\s+\b{particle}\b",
            re.IGNORECASE,
        )

    tail = r"\s+".join(escape_for_pattern(t) for t in rest)
    return re.compile(rf"\b(?:{alternatives})\b\s+{tail}\b", re.IGNORECASE)


def contains_expression(sentence: str, expression: str) -> bool:
    return build_expression_pattern(expression).search(sentence) is not None


def _bold(match: str) -> str:
    return f"<b>{match}</b>"


def highlight(
    sentence: str,
    expression: str,
    wrap: Callable[[str], str] = _bold,
) -> str:
    """
    Wrap the first match of expression in sentence.

    Returns sentence unchanged when the expression does not occur.
    """
    pattern = build_expression_pattern(expression)
    return pattern.sub(lambda m: wrap(m.group(0)), sentence, count=1)

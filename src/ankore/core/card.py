# src/ankore/core/card.py
"""
Card composition and Anki TSV export.
"""

from dataclasses import dataclass
from datetime import date
from pathlib import Path

from ankore.core.errors import InvalidSentence
from ankore.core.matcher import contains_expression, highlight
from ankore.core.text import escape_for_markup


UTF8_BOM = "\ufeff"


@dataclass
class Card:
    front: str
    back: str
    sentence: str
    expression: str
    literal_translation: str | None = None

    def to_dict(self) -> dict:
        return {
            "front": self.front,
            "back": self.back,
            "sentence": self.sentence,
            "expression": self.expression,
            "literal_translation": self.literal_translation,
        }


def build_card(
    sentence: str,
    expression: str,
    definition: str,
    phonetic: str,
    literal_translation: str | None = None,
) -> Card:
    """
    Front: the sentence with the expression in bold.
    Back: meaning, phonetic and (optionally) the literal translation.
    """
    back_parts = [
        f"<small>Meaning:</small> {escape_for_markup(definition.strip())}",
        f"<small>Phonetic:</small> <b>{escape_for_markup(phonetic.strip())}</b>",
    ]
    translation = (literal_translation or "").strip() or None
    if translation:
        back_parts.append(f"<small>Literal (pt-BR):</small> {escape_for_markup(translation)}")

    return Card(
        front=highlight(sentence, expression),
        back="<br>".join(back_parts),
        sentence=sentence,
        expression=expression,
        literal_translation=translation,
    )


def validate_sentence(sentence: str, expression: str) -> str:
    """Check a user-supplied replacement sentence; returns it trimmed."""
    candidate = sentence.strip()
    if not candidate:
        raise InvalidSentence("The sentence cannot be empty.")
    if not contains_expression(candidate, expression):
        raise InvalidSentence(f'The sentence must contain "{expression}".')
    return candidate


def _sanitize_field(value: str) -> str:
    return value.replace("\r\n", "<br>").replace("\n", "<br>").replace("\t", " ").strip()


def build_import_file(cards: list[Card]) -> str:
    """Tab-separated front/back lines, BOM-prefixed for Anki's importer."""
    lines = [f"{_sanitize_field(c.front)}\t{_sanitize_field(c.back)}" for c in cards]
    return UTF8_BOM + "\n".join(lines) + "\n"


def default_export_name(today: date | None = None) -> str:
    today = today or date.today()
    return f"ankore-cards-{today:%Y-%m-%d}.tsv"


def write_export(cards: list[Card], directory: Path, name: str | None = None) -> Path:
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / (name or default_export_name())
    path.write_text(build_import_file(cards), encoding="utf-8")
    return path

"""
Card routes: /api/cards
"""

from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from ankore.core.card import Card, build_card, build_import_file, default_export_name, validate_sentence
from ankore.core.errors import InvalidSentence


router = APIRouter(prefix="/api/cards", tags=["cards"])


class CreateCardRequest(BaseModel):
    expression: str
    sentence: str
    definition: str
    phonetic: str = "N/A"
    literal_translation: str | None = None


class ExportCard(BaseModel):
    front: str
    back: str


class ExportRequest(BaseModel):
    cards: list[ExportCard]


@router.post("")
async def create_card(req: CreateCardRequest):
    """Build a card; the sentence must contain the expression."""
    try:
        sentence = validate_sentence(req.sentence, req.expression)
    except InvalidSentence as e:
        raise HTTPException(status_code=400, detail=str(e))

    card = build_card(sentence, req.expression, req.definition, req.phonetic, req.literal_translation)
    return card.to_dict()


@router.post("/export")
async def export_cards(req: ExportRequest):
    """Anki import file (TSV) for the given cards."""
    cards = [Card(front=c.front, back=c.back, sentence="", expression="") for c in req.cards]
    return PlainTextResponse(
        build_import_file(cards),
        media_type="text/tab-separated-values; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{default_export_name()}"'},
    )

"""
Lookup routes: /api/lookup, /api/match
"""

import random

import httpx
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, field_validator

from ankore.core.cache import LookupCache
from ankore.core.errors import NoContextualSentence, NoDictionaryData
from ankore.core.lexicon import MeaningMode
from ankore.core.matcher import contains_expression, highlight
from ankore.core.sources import lookup
from ankore.core.text import normalize_sentence
from ankore.server.deps import get_cache, get_http_client


router = APIRouter(prefix="/api", tags=["lookup"])


class LookupRequest(BaseModel):
    expression: str
    mode: MeaningMode = MeaningMode.NORMAL
    seed: int | None = None

    @field_validator("expression")
    @classmethod
    def expression_not_blank(cls, value: str) -> str:
        value = normalize_sentence(value)
        if not value:
            raise ValueError("expression must not be empty")
        return value


class MatchRequest(BaseModel):
    expression: str
    sentence: str


@router.post("/lookup")
async def lookup_expression(
    req: LookupRequest,
    http: httpx.AsyncClient = Depends(get_http_client),
    cache: LookupCache | None = Depends(get_cache),
):
    """Definition, phonetic and example sentences for an expression."""
    try:
        data = await lookup(
            req.expression,
            mode=req.mode,
            client=http,
            cache=cache,
            rng=random.Random(req.seed),
        )
    except (NoDictionaryData, NoContextualSentence) as e:
        raise HTTPException(status_code=404, detail=str(e))

    return data.to_dict()


@router.post("/match")
async def match_expression(req: MatchRequest):
    """Whether sentence contains expression, with the match in bold."""
    matches = contains_expression(req.sentence, req.expression)
    return {
        "matches": matches,
        "highlighted": highlight(req.sentence, req.expression),
    }

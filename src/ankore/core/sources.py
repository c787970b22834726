# src/ankore/core/sources.py
"""
Remote sources for a lookup.

- dictionary: dictionaryapi.dev entries (definitions, examples, phonetics)
- tatoeba:    example sentences
- quotable:   quotes used as example sentences
- mymemory:   literal pt-BR translation of the chosen sentence

All sources are fetched concurrently. A source that fails is logged and
contributes nothing; only resolve() decides whether a lookup fails.
"""

import asyncio
import logging
import random
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable
from urllib.parse import quote

import httpx
import redis

from ankore.core.cache import LookupCache
from ankore.core.errors import MalformedPayload, TranslationUnavailable
from ankore.core.lexicon import MeaningMode, WordData
from ankore.core.resolve import resolve
from ankore.core.text import decode_entities, normalize_sentence


logger = logging.getLogger(__name__)

DICTIONARY_URL = "https://api.dictionaryapi.dev/api/v2/entries/en/"
TATOEBA_URL = "https://tatoeba.org/en/api_v0/search"
QUOTABLE_URL = "https://api.quotable.io/search/quotes"
TRANSLATION_URL = "https://api.mymemory.translated.net/get"

# Order matters: earlier sources win when the sentence pool is built.
SENTENCE_SOURCES = ("tatoeba", "quotable")


@dataclass
class SourceResults:
    dictionary: Any | None = None
    sentences: list[list[str] | None] = field(default_factory=list)


def _results(source: str, data: Any) -> list:
    if not isinstance(data, dict) or not isinstance(data.get("results"), list):
        raise MalformedPayload(source, "expected an object with a results list")
    return data["results"]


async def fetch_dictionary(expression: str, client: httpx.AsyncClient) -> list:
    r = await client.get(DICTIONARY_URL + quote(expression))
    r.raise_for_status()
    data = r.json()
    if not isinstance(data, list):
        raise MalformedPayload("dictionary", "expected a list of entries")
    return data


async def fetch_tatoeba(expression: str, client: httpx.AsyncClient) -> list[str]:
    r = await client.get(
        TATOEBA_URL,
        params={"from": "eng", "query": expression, "sort": "relevance"},
    )
    r.raise_for_status()
    return [
        item["text"] for item in _results("tatoeba", r.json())
        if isinstance(item, dict) and isinstance(item.get("text"), str)
    ]


async def fetch_quotable(expression: str, client: httpx.AsyncClient) -> list[str]:
    r = await client.get(QUOTABLE_URL, params={"query": expression, "limit": 30})
    r.raise_for_status()
    return [
        item["content"] for item in _results("quotable", r.json())
        if isinstance(item, dict) and isinstance(item.get("content"), str)
    ]


FETCHERS: dict[str, Callable[[str, httpx.AsyncClient], Awaitable[Any]]] = {
    "dictionary": fetch_dictionary,
    "tatoeba": fetch_tatoeba,
    "quotable": fetch_quotable,
}


async def _fetch_source(
    source: str,
    expression: str,
    client: httpx.AsyncClient,
    cache: LookupCache | None,
) -> Any | None:
    if cache is not None:
        try:
            cached = cache.get(source, expression)
        except (redis.RedisError, ValueError) as e:
            logger.warning("cache read failed for %s %r: %s", source, expression, e)
            cached = None
        if cached is not None:
            return cached

    try:
        payload = await FETCHERS[source](expression, client)
    except (httpx.HTTPError, MalformedPayload, ValueError) as e:
        logger.warning("%s lookup failed for %r: %s", source, expression, e)
        return None

    if cache is not None:
        try:
            cache.set(source, expression, payload)
        except redis.RedisError as e:
            logger.warning("cache write failed for %s %r: %s", source, expression, e)
    return payload


async def fetch_all(
    expression: str,
    client: httpx.AsyncClient,
    cache: LookupCache | None = None,
) -> SourceResults:
    """Fetch the dictionary and every sentence source in parallel."""
    names = ["dictionary", *SENTENCE_SOURCES]
    payloads = await asyncio.gather(
        *(_fetch_source(name, expression, client, cache) for name in names)
    )
    return SourceResults(dictionary=payloads[0], sentences=list(payloads[1:]))


async def lookup(
    expression: str,
    mode: MeaningMode | str = MeaningMode.NORMAL,
    client: httpx.AsyncClient | None = None,
    cache: LookupCache | None = None,
    rng: random.Random | None = None,
    timeout: float = 10.0,
) -> WordData:
    """Fetch every source for expression and resolve it into card data."""
    expression = normalize_sentence(expression)

    if client is None:
        async with httpx.AsyncClient(timeout=timeout) as own_client:
            results = await fetch_all(expression, own_client, cache)
    else:
        results = await fetch_all(expression, client, cache)

    return resolve(expression, [results.dictionary], results.sentences, mode, rng)


async def translate_sentence(
    sentence: str,
    client: httpx.AsyncClient,
    langpair: str = "en|pt-BR",
) -> str:
    """Literal translation of one sentence (pt-BR by default)."""
    try:
        r = await client.get(TRANSLATION_URL, params={"q": sentence, "langpair": langpair})
    except httpx.HTTPError as e:
        raise TranslationUnavailable("Translation service unavailable.") from e

    if not r.is_success:
        raise TranslationUnavailable("Translation service unavailable.")

    try:
        data = r.json()
    except ValueError as e:
        raise TranslationUnavailable("Could not translate this sentence right now.") from e

    response_data = data.get("responseData") if isinstance(data, dict) else None
    translated = response_data.get("translatedText") if isinstance(response_data, dict) else None
    if not translated or not isinstance(translated, str):
        raise TranslationUnavailable("Could not translate this sentence right now.")

    return decode_entities(translated).strip()

"""
HTTP client for the ankore API.
"""

import httpx

BASE_URL = "http://localhost:8000/api"


def lookup(expression: str, mode: str = "normal", base_url: str = BASE_URL) -> dict:
    r = httpx.post(f"{base_url}/lookup", json={"expression": expression, "mode": mode}, timeout=60)
    r.raise_for_status()
    return r.json()


def match(expression: str, sentence: str, base_url: str = BASE_URL) -> dict:
    r = httpx.post(f"{base_url}/match", json={"expression": expression, "sentence": sentence})
    r.raise_for_status()
    return r.json()


def create_card(
    expression: str,
    sentence: str,
    definition: str,
    phonetic: str = "N/A",
    literal_translation: str | None = None,
    base_url: str = BASE_URL,
) -> dict:
    payload = {
        "expression": expression,
        "sentence": sentence,
        "definition": definition,
        "phonetic": phonetic,
    }
    if literal_translation:
        payload["literal_translation"] = literal_translation
    r = httpx.post(f"{base_url}/cards", json=payload)
    r.raise_for_status()
    return r.json()

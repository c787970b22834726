"""
Unit tests using FastAPI TestClient (no separate server needed).

Outbound HTTP goes through httpx.MockTransport; no Redis.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from ankore.server.deps import get_cache, get_http_client
from ankore.server.main import app


DICTIONARY = [{
    "word": "give up",
    "phonetic": "/ɡɪv ʌp/",
    "meanings": [{
        "definitions": [
            {"definition": "To do something."},
            {
                "definition": "To stop trying or to quit.",
                "example": "Never give up trying to learn new things.",
            },
        ],
    }],
}]


def handler(request: httpx.Request) -> httpx.Response:
    host = request.url.host
    query = request.url.params.get("query", "")
    if host == "api.dictionaryapi.dev":
        if request.url.path.endswith("/give up"):
            return httpx.Response(200, json=DICTIONARY)
        return httpx.Response(404, json={"title": "No Definitions Found"})
    if host == "tatoeba.org":
        if query == "give up":
            return httpx.Response(200, json={"results": [{"text": "She decided to give up smoking last year."}]})
        return httpx.Response(200, json={"results": []})
    return httpx.Response(200, json={"results": []})


async def mock_http_client():
    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        yield client


@pytest.fixture
def client():
    app.dependency_overrides[get_http_client] = mock_http_client
    app.dependency_overrides[get_cache] = lambda: None
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestRootUnit:
    def test_root(self, client):
        r = client.get("/")
        assert r.status_code == 200
        assert r.json()["name"] == "ankore API"


class TestLookupUnit:
    def test_lookup_precise(self, client):
        r = client.post("/api/lookup", json={"expression": "give up", "mode": "precise", "seed": 1})
        assert r.status_code == 200

        data = r.json()
        assert data["definition"] == "To stop trying or to quit."
        assert data["phonetic"] == "/ɡɪv ʌp/"
        assert data["meaning_confidence"] in ("medium", "high")
        assert data["sentence"] in data["sentence_candidates"]
        assert data["sentence_candidates"][0] == "She decided to give up smoking last year."

    def test_lookup_normal_by_default(self, client):
        r = client.post("/api/lookup", json={"expression": "give up"})
        assert r.json()["definition"] == "To do something."

    def test_lookup_no_dictionary(self, client):
        r = client.post("/api/lookup", json={"expression": "hello"})
        assert r.status_code == 404
        assert r.json()["detail"] == 'Could not fetch dictionary data for "hello".'

    def test_lookup_no_sentence(self, client):
        r = client.post("/api/lookup", json={"expression": "kick the bucket"})
        assert r.status_code == 404
        assert r.json()["detail"].startswith('No contextual sentence found for "kick the bucket".')

    def test_lookup_blank_expression(self, client):
        r = client.post("/api/lookup", json={"expression": "   "})
        assert r.status_code == 422

    def test_lookup_bad_mode(self, client):
        r = client.post("/api/lookup", json={"expression": "give up", "mode": "fast"})
        assert r.status_code == 422


class TestMatchUnit:
    def test_match(self, client):
        r = client.post("/api/match", json={
            "expression": "turn off",
            "sentence": "Please turn the lights off before leaving.",
        })
        assert r.json() == {
            "matches": True,
            "highlighted": "Please <b>turn the lights off</b> before leaving.",
        }

    def test_no_match(self, client):
        r = client.post("/api/match", json={"expression": "go away", "sentence": "Stay here with me."})
        assert r.json() == {"matches": False, "highlighted": "Stay here with me."}


class TestCardsUnit:
    def test_create_card(self, client):
        r = client.post("/api/cards", json={
            "expression": "give up",
            "sentence": "She gave up smoking.",
            "definition": "To quit.",
            "phonetic": "/ɡɪv ʌp/",
            "literal_translation": "Ela desistiu de fumar.",
        })
        assert r.status_code == 200

        card = r.json()
        assert card["front"] == "She <b>gave up</b> smoking."
        assert card["back"] == (
            "<small>Meaning:</small> To quit.<br>"
            "<small>Phonetic:</small> <b>/ɡɪv ʌp/</b><br>"
            "<small>Literal (pt-BR):</small> Ela desistiu de fumar."
        )

    def test_create_card_sentence_without_expression(self, client):
        r = client.post("/api/cards", json={
            "expression": "give up",
            "sentence": "She stopped smoking.",
            "definition": "To quit.",
        })
        assert r.status_code == 400
        assert r.json()["detail"] == 'The sentence must contain "give up".'

    def test_create_card_empty_sentence(self, client):
        r = client.post("/api/cards", json={"expression": "give up", "sentence": "  ", "definition": "To quit."})
        assert r.status_code == 400
        assert r.json()["detail"] == "The sentence cannot be empty."

    def test_export(self, client):
        r = client.post("/api/cards/export", json={"cards": [{"front": "a\tb", "back": "line\nbreak"}]})
        assert r.status_code == 200
        assert r.headers["content-type"].startswith("text/tab-separated-values")
        assert "attachment" in r.headers["content-disposition"]
        assert r.content.startswith(b"\xef\xbb\xbf")
        assert r.content.decode("utf-8-sig") == "a b\tline<br>break\n"

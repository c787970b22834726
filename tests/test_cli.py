"""CLI tests: argv in, console output and exit codes out. No network."""

import json
import sys

import pytest

from ankore.cli import client
from ankore.cli.commands import card as card_command
from ankore.cli.commands import lookup as lookup_command
from ankore.cli.main import main
from ankore.core.errors import NoDictionaryData


WORD_DATA = {
    "expression": "go away",
    "definition": "to leave",
    "phonetic": "N/A",
    "sentence": "The pain goes away after a while.",
    "sentence_candidates": ["The pain goes away after a while."],
    "meaning_candidates": ["to leave"],
    "meaning_confidence": "medium",
}


def run(monkeypatch, tmp_path, *argv):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "argv", ["ankore", *argv])
    main()


@pytest.fixture
def word_data(monkeypatch):
    calls = []

    def fake_fetch(expression, mode, settings, seed=None):
        calls.append((expression, mode, seed))
        return dict(WORD_DATA)

    monkeypatch.setattr(lookup_command, "fetch_word_data", fake_fetch)
    monkeypatch.setattr(card_command, "fetch_word_data", fake_fetch)
    return calls


# === match ===

def test_match(monkeypatch, tmp_path, capsys):
    run(monkeypatch, tmp_path, "match", "go away", "The pain goes away after a while.")
    assert "✓ The pain goes away after a while." in capsys.readouterr().out


def test_match_forms(monkeypatch, tmp_path, capsys):
    run(monkeypatch, tmp_path, "match", "--forms", "go away", "They went away.")
    assert "phrasal: go, goes, went, gone, going, goed" in capsys.readouterr().out


def test_no_match(monkeypatch, tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        run(monkeypatch, tmp_path, "match", "go away", "Stay here with me.")
    assert exc.value.code == 1
    assert "✗ No match" in capsys.readouterr().out


def test_match_remote(monkeypatch, tmp_path, capsys):
    seen = []

    def fake_match(expression, sentence, base_url):
        seen.append(base_url)
        return {"matches": True, "highlighted": f"<b>{sentence}</b>"}

    monkeypatch.setenv("ANKORE_API_URL", "http://api.test/api")
    monkeypatch.setattr(client, "match", fake_match)
    run(monkeypatch, tmp_path, "match", "--remote", "hello", "Well hello there.")

    assert seen == ["http://api.test/api"]
    assert "✓" in capsys.readouterr().out


# === lookup ===

def test_lookup_json(monkeypatch, tmp_path, capsys, word_data):
    run(monkeypatch, tmp_path, "lookup", "go away", "--json", "--mode", "precise", "--seed", "3")

    assert json.loads(capsys.readouterr().out) == WORD_DATA
    assert word_data == [("go away", "precise", 3)]


def test_lookup_mode_from_settings(monkeypatch, tmp_path, capsys, word_data):
    monkeypatch.setenv("ANKORE_MEANING_MODE", "precise")
    run(monkeypatch, tmp_path, "lookup", "go away")

    out = capsys.readouterr().out
    assert "Meaning: to leave" in out
    assert word_data == [("go away", "precise", None)]


def test_lookup_error(monkeypatch, tmp_path, capsys):
    def failing(expression, mode, settings, seed=None):
        raise NoDictionaryData(expression)

    monkeypatch.setattr(lookup_command, "fetch_word_data", failing)
    with pytest.raises(SystemExit) as exc:
        run(monkeypatch, tmp_path, "lookup", "hello")

    assert exc.value.code == 1
    assert 'Could not fetch dictionary data for "hello".' in capsys.readouterr().out


# === card ===

def test_card_with_own_sentence(monkeypatch, tmp_path, capsys, word_data):
    run(monkeypatch, tmp_path, "card", "go away", "--sentence", "Please go away now, I beg you.")
    assert "Please <b>go away</b> now" in capsys.readouterr().out


def test_card_rejects_sentence_without_expression(monkeypatch, tmp_path, capsys, word_data):
    with pytest.raises(SystemExit) as exc:
        run(monkeypatch, tmp_path, "card", "go away", "--sentence", "Stay here.")

    assert exc.value.code == 1
    assert 'The sentence must contain "go away".' in capsys.readouterr().out


def test_card_export(monkeypatch, tmp_path, word_data):
    out_dir = tmp_path / "out"
    run(monkeypatch, tmp_path, "card", "go away", "--export", str(out_dir))

    files = list(out_dir.glob("ankore-cards-*.tsv"))
    assert len(files) == 1
    assert files[0].read_text(encoding="utf-8-sig").startswith("The pain <b>goes away</b> after a while.\t")


def test_card_export_default_dir(monkeypatch, tmp_path, word_data):
    run(monkeypatch, tmp_path, "card", "go away", "--export")
    assert len(list((tmp_path / "session-output" / "exports").glob("*.tsv"))) == 1


def test_remote_card_with_translation(monkeypatch, tmp_path, capsys):
    created = []

    def fake_create(expression, sentence, definition, phonetic="N/A", literal_translation=None, base_url=None):
        created.append((sentence, literal_translation))
        return {
            "front": sentence,
            "back": definition,
            "sentence": sentence,
            "expression": expression,
            "literal_translation": literal_translation,
        }

    async def fake_translate(sentence, timeout):
        return "A dor passa depois de um tempo."

    monkeypatch.setattr(client, "lookup", lambda expression, mode, base_url: dict(WORD_DATA))
    monkeypatch.setattr(client, "create_card", fake_create)
    monkeypatch.setattr(card_command, "_translate", fake_translate)
    run(monkeypatch, tmp_path, "card", "go away", "--remote", "--translate")

    assert created == [("The pain goes away after a while.", "A dor passa depois de um tempo.")]

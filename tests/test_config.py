"""Tests for settings loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from ankore.core.config import Settings, load_settings
from ankore.core.lexicon import MeaningMode


def test_defaults():
    settings = load_settings(environ={})

    assert settings.redis_url is None
    assert settings.cache_ttl == 86400
    assert settings.http_timeout == 10.0
    assert settings.meaning_mode == MeaningMode.NORMAL
    assert settings.log_level == "WARNING"
    assert settings.api_url == "http://localhost:8000/api"
    assert settings.export_dir == Path("session-output/exports")


def test_environment_overrides():
    settings = load_settings(environ={
        "ANKORE_REDIS_URL": "redis://localhost:6379/0",
        "ANKORE_CACHE_TTL": "60",
        "ANKORE_MEANING_MODE": "precise",
        "ANKORE_EXPORT_DIR": "/tmp/cards",
        "ANKORE_LOG_LEVEL": "",
        "UNRELATED": "x",
    })

    assert settings.redis_url == "redis://localhost:6379/0"
    assert settings.cache_ttl == 60
    assert settings.meaning_mode == MeaningMode.PRECISE
    assert settings.export_dir == Path("/tmp/cards")
    assert settings.log_level == "WARNING"


def test_invalid_values():
    with pytest.raises(ValidationError):
        load_settings(environ={"ANKORE_CACHE_TTL": "0"})
    with pytest.raises(ValidationError):
        load_settings(environ={"ANKORE_MEANING_MODE": "fast"})


def test_dotenv_does_not_override(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("ANKORE_HTTP_TIMEOUT=3\nANKORE_API_URL=http://dotenv/api\n")
    monkeypatch.chdir(tmp_path)
    # set first so teardown removes what load_dotenv adds
    monkeypatch.setenv("ANKORE_HTTP_TIMEOUT", "1")
    monkeypatch.delenv("ANKORE_HTTP_TIMEOUT")
    monkeypatch.setenv("ANKORE_API_URL", "http://env/api")

    settings = load_settings()

    assert settings.http_timeout == 3.0
    assert settings.api_url == "http://env/api"


def test_settings_model():
    assert Settings(http_timeout=2).http_timeout == 2.0

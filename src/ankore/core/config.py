# src/ankore/core/config.py
"""
Settings from ANKORE_* environment variables (and a local .env).
"""

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

from ankore.core.lexicon import MeaningMode


ENV_PREFIX = "ANKORE_"


class Settings(BaseModel):
    redis_url: str | None = None  # unset: no lookup cache
    cache_ttl: int = Field(default=86400, gt=0)
    http_timeout: float = Field(default=10.0, gt=0)
    meaning_mode: MeaningMode = MeaningMode.NORMAL
    log_level: str = "WARNING"
    api_url: str = "http://localhost:8000/api"
    export_dir: Path = Path("session-output") / "exports"


def load_settings(environ: dict | None = None, use_dotenv: bool = True) -> Settings:
    """
    Build Settings from the environment.

    A .env file found from the working directory is loaded first; it never
    overrides variables that are already set.
    """
    if environ is None:
        if use_dotenv:
            dotenv_path = find_dotenv(usecwd=True)
            if dotenv_path:
                load_dotenv(dotenv_path, override=False)
        environ = os.environ

    values = {}
    for name in Settings.model_fields:
        raw = environ.get(ENV_PREFIX + name.upper())
        if raw is not None and raw != "":
            values[name] = raw

    return Settings(**values)

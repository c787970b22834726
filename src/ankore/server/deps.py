"""
Shared dependencies for routes.
"""

from typing import AsyncIterator

import httpx
from fastapi import Depends

from ankore.core.cache import LookupCache
from ankore.core.config import Settings, load_settings


def get_settings() -> Settings:
    return load_settings()


def get_cache(settings: Settings = Depends(get_settings)) -> LookupCache | None:
    if not settings.redis_url:
        return None
    return LookupCache.from_url(settings.redis_url, ttl=settings.cache_ttl)


async def get_http_client(settings: Settings = Depends(get_settings)) -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
        yield client

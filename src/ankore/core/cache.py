# src/ankore/core/cache.py
"""
Lookup cache for raw source payloads.

Maps (source, expression) to the JSON body that source returned:
  ("dictionary", "give up") → ankore:payload:dictionary:give up

Storage in Redis. The caller creates it and hands it to lookup();
nothing here is module-level state.
"""

import json
import logging
from typing import Any

import redis

from ankore.core.matcher import tokenize_expression


logger = logging.getLogger(__name__)


class LookupCache:
    def __init__(self, client: redis.Redis, prefix: str = "ankore", ttl: int = 86400):
        self.client = client
        self.prefix = prefix
        self.ttl = ttl

    @classmethod
    def from_url(cls, url: str, ttl: int = 86400) -> "LookupCache":
        return cls(redis.Redis.from_url(url), ttl=ttl)

    def _payload_key(self, source: str, expression: str) -> str:
        return f"{self.prefix}:payload:{source}:{' '.join(tokenize_expression(expression))}"

    def get(self, source: str, expression: str) -> Any | None:
        """Cached payload, or None on a miss."""
        data = self.client.get(self._payload_key(source, expression))
        if data is None:
            logger.debug("cache miss %s %r", source, expression)
            return None

        logger.debug("cache hit %s %r", source, expression)
        if isinstance(data, bytes):
            data = data.decode()
        return json.loads(data)

    def set(self, source: str, expression: str, payload: Any) -> None:
        self.client.setex(
            self._payload_key(source, expression),
            self.ttl,
            json.dumps(payload),
        )

    def clear(self) -> None:
        """Drop every cached payload under this prefix."""
        for key in self.client.scan_iter(f"{self.prefix}:payload:*"):
            self.client.delete(key)

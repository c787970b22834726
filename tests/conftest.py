import fnmatch

import pytest


class FakeRedis:
    """In-memory stand-in for the few redis.Redis calls LookupCache makes."""

    def __init__(self):
        self.data = {}
        self.ttls = {}

    def get(self, key):
        return self.data.get(key)

    def setex(self, key, ttl, value):
        self.data[key] = value.encode() if isinstance(value, str) else value
        self.ttls[key] = ttl

    def scan_iter(self, pattern):
        return [k for k in list(self.data) if fnmatch.fnmatchcase(k, pattern)]

    def delete(self, key):
        self.data.pop(key, None)
        self.ttls.pop(key, None)


@pytest.fixture
def fake_redis():
    return FakeRedis()

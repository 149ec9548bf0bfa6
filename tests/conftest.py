"""Pytest configuration and fixtures."""

import pytest
from typing import AsyncGenerator, Iterable, List

from shortener.database.cache import RedisCache
from shortener.database.memory import InMemoryURLStore
from shortener.service import URLShortenerService
from shortener.shortcode import ShortCodeGenerator
from shortener.common.logging_config import setup_logging


class ScriptedCodeGenerator(ShortCodeGenerator):
    """Generator returning a fixed sequence of codes, repeating the last one."""

    def __init__(self, codes: Iterable[str]):
        super().__init__()
        self.codes: List[str] = list(codes)
        self.calls = 0

    def generate(self) -> str:
        code = self.codes[min(self.calls, len(self.codes) - 1)]
        self.calls += 1
        return code


class FakeRedis:
    """Minimal async stand-in for a redis.asyncio client."""

    def __init__(self):
        self.data = {}
        self.closed = False

    async def get(self, key):
        return self.data.get(key)

    async def setex(self, key, ttl, value):
        self.data[key] = value

    async def delete(self, key):
        return 1 if self.data.pop(key, None) is not None else 0

    async def ping(self):
        return True

    async def aclose(self):
        self.closed = True


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def store(logger) -> InMemoryURLStore:
    """Create in-memory store."""
    return InMemoryURLStore(logger=logger)


@pytest.fixture
def short_code_generator():
    """Create short code generator."""
    return ShortCodeGenerator()


@pytest.fixture
def fake_cache(logger) -> RedisCache:
    """Redis cache wired to an in-process fake client."""
    cache = RedisCache(redis_url="redis://cache.test:6379/0", ttl_seconds=60, logger=logger)
    cache.client = FakeRedis()
    return cache


@pytest.fixture
async def service(store, short_code_generator, logger) -> AsyncGenerator[URLShortenerService, None]:
    """Create service instance."""
    service = URLShortenerService(
        store=store,
        short_code_generator=short_code_generator,
        logger=logger,
    )

    yield service

    await service.close()


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "http://stackoverflow.com/questions/123456",
    ]

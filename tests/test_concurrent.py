"""Tests that the server handles many concurrent requests correctly.

Uniqueness and counters are delegated to the store's atomic operations, so
concurrent creates must never share a code and concurrent resolves must all be
counted.
"""

import asyncio
import random

import pytest
import httpx

from shortener.config import Config
from shortener.errors import CodeSpaceExhausted
from shortener.service import URLShortenerService
from shortener.shortcode import ShortCodeGenerator
from shortener_web import create_app


class TinyCodeSpaceGenerator(ShortCodeGenerator):
    """Draws from four codes so concurrent creates collide often."""

    def __init__(self):
        super().__init__(rng=random.Random(7))

    def generate(self) -> str:
        return self._rng.choice(["aaaaaa", "bbbbbb", "cccccc", "dddddd"])


@pytest.fixture
def app(service, logger):
    """Create test FastAPI app (same as test_api)."""
    config = Config(store_backend="memory")
    return create_app(service_instance=service, config=config, logger=logger)


@pytest.fixture
async def client(app):
    """Create test client."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.mark.asyncio
class TestConcurrentRequests:
    """Prove the service holds its invariants under concurrency."""

    async def test_concurrent_shorten_requests(self, client):
        """Many concurrent POST /shorten; all succeed and short_codes are unique."""
        concurrency = 30
        urls = [f"https://example.com/page_{i}" for i in range(concurrency)]
        tasks = [client.post("/shorten", json={"url": url}) for url in urls]
        responses = await asyncio.gather(*tasks, return_exceptions=True)

        short_codes = []
        for i, r in enumerate(responses):
            if isinstance(r, Exception):
                pytest.fail(f"Request {i} raised: {r}")
            assert r.status_code == 201, f"Request {i}: status {r.status_code} body={r.text}"
            data = r.json()
            assert data["original_url"] == urls[i]
            short_codes.append(data["short_code"])

        assert len(short_codes) == len(set(short_codes)), "All short_codes must be unique under concurrency"

    async def test_concurrent_resolves_are_all_counted(self, client, app):
        """N concurrent GET /shorten/{code}; access_count ends at N."""
        create_resp = await client.post("/shorten", json={"url": "https://example.com/target"})
        short_code = create_resp.json()["short_code"]

        concurrency = 40
        tasks = [client.get(f"/shorten/{short_code}") for _ in range(concurrency)]
        responses = await asyncio.gather(*tasks)

        assert all(r.status_code == 200 for r in responses)

        await app.state.service.wait_for_pending_increments()
        stats = await client.get(f"/shorten/{short_code}/stats")
        assert stats.json()["access_count"] == concurrency


@pytest.mark.asyncio
async def test_colliding_creates_never_share_a_code(store, logger):
    """Concurrent creates over a four-code space: at most four succeed, all distinct."""
    service = URLShortenerService(
        store=store,
        short_code_generator=TinyCodeSpaceGenerator(),
        logger=logger,
        max_collision_retries=50,
    )

    results = await asyncio.gather(
        *(service.create_short_url(f"https://example.com/{i}") for i in range(8)),
        return_exceptions=True,
    )

    created = [r for r in results if not isinstance(r, Exception)]
    codes = [r.short_code for r in created]

    assert len(codes) == len(set(codes))
    assert len(created) == len(store) <= 4
    for r in results:
        if isinstance(r, Exception):
            assert isinstance(r, CodeSpaceExhausted)

"""Tests for the in-memory store."""

import pytest
from shortener.database.models import URLRecord
from shortener.errors import DuplicateKey, NotFound


def make_record(code="Ab3xY9", url="https://example.com"):
    return URLRecord(original_url=url, short_code=code)


@pytest.mark.asyncio
class TestInMemoryURLStore:
    """Test the store contract on the in-memory implementation."""

    async def test_insert_assigns_id(self, store):
        record_id = await store.insert(make_record())

        found = await store.find_by_code("Ab3xY9")
        assert record_id
        assert found.id == record_id
        assert found.original_url == "https://example.com"

    async def test_insert_duplicate_code(self, store):
        await store.insert(make_record())

        with pytest.raises(DuplicateKey):
            await store.insert(make_record(url="https://example.org"))

        assert (await store.find_by_code("Ab3xY9")).original_url == "https://example.com"

    async def test_find_missing(self, store):
        with pytest.raises(NotFound):
            await store.find_by_code("nope00")

    async def test_returned_records_are_copies(self, store):
        await store.insert(make_record())

        found = await store.find_by_code("Ab3xY9")
        found.original_url = "https://mutated.example"

        assert (await store.find_by_code("Ab3xY9")).original_url == "https://example.com"

    async def test_update_only_touches_url_and_timestamp(self, store):
        await store.insert(make_record())
        await store.increment_access_count("Ab3xY9")
        current = await store.find_by_code("Ab3xY9")

        stale = current.with_original_url("https://example.org")
        stale.access_count = 0
        await store.update(stale)

        found = await store.find_by_code("Ab3xY9")
        assert found.original_url == "https://example.org"
        assert found.updated_at == stale.updated_at
        assert found.access_count == 1
        assert found.id == current.id

    async def test_update_missing(self, store):
        with pytest.raises(NotFound):
            await store.update(make_record())

    async def test_delete(self, store):
        await store.insert(make_record())
        await store.delete("Ab3xY9")

        with pytest.raises(NotFound):
            await store.find_by_code("Ab3xY9")
        with pytest.raises(NotFound):
            await store.delete("Ab3xY9")

    async def test_increment(self, store):
        await store.insert(make_record())
        for _ in range(3):
            await store.increment_access_count("Ab3xY9")

        assert (await store.find_by_code("Ab3xY9")).access_count == 3

    async def test_increment_missing(self, store):
        with pytest.raises(NotFound):
            await store.increment_access_count("nope00")

    async def test_health_check(self, store):
        assert await store.health_check()

"""Business logic service for URL shortener."""

import asyncio
import logging
from typing import Awaitable, Dict, Optional, Set, TypeVar

from .shortcode import ShortCodeGenerator
from .database.base import URLStoreBase
from .database.cache import RedisCache
from .database.models import URLRecord, utcnow
from .common.validators import validate_url
from .errors import CodeSpaceExhausted, DuplicateKey, StoreUnavailable

T = TypeVar("T")


class URLShortenerService:
    """Service layer for the short URL lifecycle.

    Create, resolve, update, delete and stats. Uniqueness and counters rely
    on the store's atomic operations; the service keeps no domain state.
    """

    def __init__(
        self,
        store: URLStoreBase,
        short_code_generator: Optional[ShortCodeGenerator] = None,
        cache: Optional[RedisCache] = None,
        logger: Optional[logging.Logger] = None,
        max_collision_retries: int = 5,
        store_timeout_seconds: Optional[float] = 5.0,
    ):
        """Initialize URL shortener service.

        Args:
            store: Persistence backend
            short_code_generator: Optional short code generator
            cache: Optional read cache used by resolve
            logger: Optional logger
            max_collision_retries: Maximum insert attempts when codes collide
            store_timeout_seconds: Default bound on each store call (None for no bound)
        """
        if max_collision_retries < 1:
            raise ValueError("max_collision_retries must be at least 1")

        self.store = store
        self.generator = short_code_generator or ShortCodeGenerator()
        self.cache = cache
        self.logger = logger or logging.getLogger(__name__)
        self.max_collision_retries = max_collision_retries
        self.store_timeout_seconds = store_timeout_seconds

        # Background increments, referenced until done so they are not collected
        self._pending: Set[asyncio.Task] = set()

    async def create_short_url(
        self,
        original_url: str,
        timeout: Optional[float] = None,
    ) -> URLRecord:
        """Create a new short URL.

        Args:
            original_url: The original long URL
            timeout: Optional bound on each store call

        Returns:
            The created record

        Raises:
            ValidationError: If the URL is rejected (nothing is stored)
            CodeSpaceExhausted: If every generated code collided
            StoreUnavailable: If the store cannot be reached
        """
        original_url = validate_url(original_url)

        for attempt in range(1, self.max_collision_retries + 1):
            now = utcnow()
            record = URLRecord(
                original_url=original_url,
                short_code=self.generator.generate(),
                created_at=now,
                updated_at=now,
            )

            try:
                record.id = await self._call(self.store.insert(record), timeout)
            except DuplicateKey:
                self.logger.debug(
                    f"Short code collision on attempt {attempt}: {record.short_code}"
                )
                continue

            self.logger.info(f"Created short URL: {record.short_code} -> {original_url}")
            return record

        self.logger.error(
            f"Gave up generating a short code after {self.max_collision_retries} attempts"
        )
        raise CodeSpaceExhausted(self.max_collision_retries)

    async def resolve_short_url(
        self,
        short_code: str,
        timeout: Optional[float] = None,
    ) -> URLRecord:
        """Look up a short code and count the access.

        The increment runs in the background; the returned record is the one
        fetched and may not reflect it yet.

        Raises:
            NotFound: If the short code does not exist
        """
        record = None
        if self.cache:
            record = await self.cache.get_record(short_code)
            if record:
                self.logger.debug(f"Cache hit for {short_code}")

        if record is None:
            record = await self._call(self.store.find_by_code(short_code), timeout)
            if self.cache:
                await self.cache.set_record(record)

        self._schedule_increment(short_code, timeout)

        self.logger.debug(f"Resolved URL: {short_code} -> {record.original_url}")
        return record

    async def update_short_url(
        self,
        short_code: str,
        new_original_url: str,
        timeout: Optional[float] = None,
    ) -> URLRecord:
        """Point an existing short code at a new URL.

        Raises:
            ValidationError: If the new URL is rejected
            NotFound: If the short code does not exist
        """
        new_original_url = validate_url(new_original_url)

        current = await self._call(self.store.find_by_code(short_code), timeout)
        updated = current.with_original_url(new_original_url)

        await self._invalidate(short_code)
        try:
            await self._call(self.store.update(updated), timeout)
        finally:
            # A resolve running during the write may have re-cached the old record
            await self._invalidate(short_code)

        self.logger.info(f"Updated short URL: {short_code} -> {new_original_url}")
        return updated

    async def delete_short_url(
        self,
        short_code: str,
        timeout: Optional[float] = None,
    ) -> None:
        """Delete a short URL.

        Raises:
            NotFound: If the short code does not exist, including when it was
                already deleted
        """
        await self._invalidate(short_code)
        try:
            await self._call(self.store.delete(short_code), timeout)
        finally:
            await self._invalidate(short_code)
        self.logger.info(f"Deleted short URL: {short_code}")

    async def get_stats(
        self,
        short_code: str,
        timeout: Optional[float] = None,
    ) -> URLRecord:
        """Fetch a record without counting an access.

        Always reads the store so the access count is current.

        Raises:
            NotFound: If the short code does not exist
        """
        record = await self._call(self.store.find_by_code(short_code), timeout)
        self.logger.debug(f"Stats for {short_code}: access_count={record.access_count}")
        return record

    async def health_check(self) -> Dict[str, bool]:
        """Perform health check.

        Returns:
            Dictionary with health status
        """
        try:
            db_healthy = await self._call(self.store.health_check(), None)
        except StoreUnavailable:
            db_healthy = False

        cache_healthy = True
        if self.cache:
            cache_healthy = await self.cache.ping()

        return {
            "database": db_healthy,
            "cache": cache_healthy,
            "overall": db_healthy and cache_healthy,
        }

    async def wait_for_pending_increments(self) -> None:
        """Wait until every scheduled access-count increment has finished."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def close(self) -> None:
        """Finish pending work and close connections."""
        await self.wait_for_pending_increments()
        await self.store.close()
        if self.cache:
            await self.cache.close()

    async def _invalidate(self, short_code: str) -> None:
        if self.cache:
            await self.cache.delete(short_code)

    def _schedule_increment(self, short_code: str, timeout: Optional[float]) -> None:
        task = asyncio.create_task(self._increment_access_count(short_code, timeout))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _increment_access_count(self, short_code: str, timeout: Optional[float]) -> None:
        try:
            await self._call(self.store.increment_access_count(short_code), timeout)
        except Exception as e:
            self.logger.error(f"Error incrementing access count for {short_code}: {e}")

    async def _call(self, operation: Awaitable[T], timeout: Optional[float]) -> T:
        """Await a store call, bounded by ``timeout`` or the service default."""
        if timeout is None:
            timeout = self.store_timeout_seconds

        try:
            return await asyncio.wait_for(operation, timeout)
        except asyncio.TimeoutError:
            self.logger.error(f"Store call timed out after {timeout}s")
            raise StoreUnavailable(f"Store call timed out after {timeout}s") from None

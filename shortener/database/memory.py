"""In-process store for URL shortener.

Every operation finishes without awaiting, so on a single event loop each one
is atomic with respect to concurrent requests.
"""

import logging
import uuid
from dataclasses import replace
from typing import Dict, Optional

from .base import URLStoreBase
from .models import URLRecord
from ..errors import DuplicateKey, NotFound


class InMemoryURLStore(URLStoreBase):
    """Dictionary-backed store keyed by short code."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self._records: Dict[str, URLRecord] = {}

    async def insert(self, record: URLRecord) -> str:
        if record.short_code in self._records:
            raise DuplicateKey(record.short_code)

        record_id = uuid.uuid4().hex
        self._records[record.short_code] = replace(record, id=record_id)
        self.logger.debug(f"Inserted {record.short_code} with id {record_id}")
        return record_id

    async def find_by_code(self, short_code: str) -> URLRecord:
        try:
            return replace(self._records[short_code])
        except KeyError:
            raise NotFound(short_code) from None

    async def update(self, record: URLRecord) -> None:
        current = self._records.get(record.short_code)
        if current is None:
            raise NotFound(record.short_code)

        self._records[record.short_code] = replace(
            current,
            original_url=record.original_url,
            updated_at=record.updated_at,
        )

    async def delete(self, short_code: str) -> None:
        if self._records.pop(short_code, None) is None:
            raise NotFound(short_code)

    async def increment_access_count(self, short_code: str) -> None:
        current = self._records.get(short_code)
        if current is None:
            raise NotFound(short_code)

        current.access_count += 1

    async def health_check(self) -> bool:
        return True

    async def close(self) -> None:
        self.logger.debug(f"In-memory store closed with {len(self._records)} records")

    def __len__(self) -> int:
        return len(self._records)

"""Abstract base class for URL shortener store implementations."""

from abc import ABC, abstractmethod

from .models import URLRecord


class URLStoreBase(ABC):
    """Abstract base class for URL record persistence.

    Implementations must enforce short code uniqueness themselves (unique index
    or atomic insert-if-absent) and make ``increment_access_count`` atomic.
    Connection and transport failures are raised as ``StoreUnavailable``.
    """

    @abstractmethod
    async def insert(self, record: URLRecord) -> str:
        """Persist a new record.

        Args:
            record: Record to store (its ``id`` is ignored)

        Returns:
            The id assigned by the store

        Raises:
            DuplicateKey: If the short code is already taken
        """
        pass

    @abstractmethod
    async def find_by_code(self, short_code: str) -> URLRecord:
        """Fetch a record by short code.

        Raises:
            NotFound: If no record has this short code
        """
        pass

    @abstractmethod
    async def update(self, record: URLRecord) -> None:
        """Overwrite ``original_url`` and ``updated_at`` of an existing record.

        Raises:
            NotFound: If no record has the record's short code
        """
        pass

    @abstractmethod
    async def delete(self, short_code: str) -> None:
        """Remove a record.

        Raises:
            NotFound: If no record has this short code
        """
        pass

    @abstractmethod
    async def increment_access_count(self, short_code: str) -> None:
        """Atomically add one to a record's access count.

        Raises:
            NotFound: If no record has this short code
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the store is reachable."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release connections."""
        pass

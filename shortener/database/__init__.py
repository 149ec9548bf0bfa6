"""Storage layer for URL shortener."""

from .base import URLStoreBase
from .memory import InMemoryURLStore
from .postgres import PostgresURLStore
from .cache import RedisCache
from .models import URLRecord

__all__ = ["URLStoreBase", "InMemoryURLStore", "PostgresURLStore", "RedisCache", "URLRecord"]

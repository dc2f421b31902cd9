"""Storage layer for TinyLink."""

from .base import LinkStoreBase
from .models import Link
from .memory import MemoryLinkStore
from .postgres import PostgresLinkStore
from .redis_store import RedisLinkStore
from .factory import create_store

__all__ = [
    "LinkStoreBase",
    "Link",
    "MemoryLinkStore",
    "PostgresLinkStore",
    "RedisLinkStore",
    "create_store",
]

"""Build a link store from a connection URL."""

import logging
from typing import Optional
from urllib.parse import urlparse

from .base import LinkStoreBase
from .memory import MemoryLinkStore
from .postgres import PostgresLinkStore
from .redis_store import RedisLinkStore

POSTGRES_SCHEMES = {"postgres", "postgresql"}
REDIS_SCHEMES = {"redis", "rediss", "unix"}
MEMORY_SCHEMES = {"memory"}


def create_store(config, logger: Optional[logging.Logger] = None) -> LinkStoreBase:
    """Pick the store implementation from the scheme of ``config.database_url``.

    An unset URL selects PostgreSQL configured from the PG* settings.

    Args:
        config: Application configuration
        logger: Optional logger passed to the store

    Returns:
        Link store instance (not yet connected)

    Raises:
        ValueError: If the scheme is not supported
    """
    # No URL at all means PostgreSQL from the PG* settings
    scheme = urlparse(config.database_url).scheme.lower() if config.database_url else "postgresql"

    if scheme in POSTGRES_SCHEMES:
        return PostgresLinkStore(
            db_config=config.database_url,
            sslmode=config.pgsslmode,
            connect_kwargs=config.postgres_connect_kwargs,
            pool_min_size=config.pool_min_size,
            pool_max_size=config.pool_max_size,
            connection_timeout_seconds=config.store_timeout_seconds,
            create_tables=config.create_tables,
            logger=logger,
        )
    if scheme in REDIS_SCHEMES:
        return RedisLinkStore(
            db_config=config.database_url,
            prefix=config.redis_prefix,
            connection_timeout_seconds=config.store_timeout_seconds,
            logger=logger,
        )
    if scheme in MEMORY_SCHEMES:
        return MemoryLinkStore(db_config=config.database_url, logger=logger)

    raise ValueError(f"Unsupported database URL scheme: '{scheme}'")

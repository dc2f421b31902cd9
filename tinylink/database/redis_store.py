"""Redis implementation of the link store.

Each link is a hash at ``<prefix>:links:<code>``. A sorted set at
``<prefix>:links:by_created`` holds every code scored by the negated creation
timestamp, so an ascending range yields newest first with ties ordered by
code. Inserts, visits and deletes run as Lua scripts, which Redis executes
atomically.
"""

import logging
from typing import Optional, List
from datetime import datetime

import redis.asyncio as redis
from redis.exceptions import RedisError

from .base import LinkStoreBase
from .models import Link
from ..errors import CodeConflict, StoreUnavailable

STORE_ERRORS = (RedisError, OSError)

INSERT_SCRIPT = """
if redis.call('EXISTS', KEYS[1]) == 1 then
    return 0
end
redis.call('HSET', KEYS[1], 'code', ARGV[1], 'target', ARGV[2], 'clicks', 0,
           'created_at', ARGV[3], 'last_clicked', '')
redis.call('ZADD', KEYS[2], ARGV[4], ARGV[1])
return 1
"""

VISIT_SCRIPT = """
if redis.call('EXISTS', KEYS[1]) == 0 then
    return false
end
redis.call('HINCRBY', KEYS[1], 'clicks', 1)
redis.call('HSET', KEYS[1], 'last_clicked', ARGV[1])
return redis.call('HGET', KEYS[1], 'target')
"""

DELETE_SCRIPT = """
if redis.call('DEL', KEYS[1]) == 0 then
    return 0
end
redis.call('ZREM', KEYS[2], ARGV[1])
return 1
"""


class RedisLinkStore(LinkStoreBase):
    """Redis implementation of link store operations."""

    def __init__(
        self,
        db_config: str,
        prefix: str = "tinylink",
        connection_timeout_seconds: int = 30,
        logger: Optional[logging.Logger] = None,
        client: Optional[redis.Redis] = None,
    ):
        """Initialize Redis store.

        Args:
            db_config: Redis connection URL (e.g., redis://localhost:6379/0)
            prefix: Key namespace
            connection_timeout_seconds: Socket timeout in seconds
            logger: Optional logger instance
            client: Pre-built client (skips creating one from db_config)
        """
        super().__init__(db_config)
        self.prefix = prefix
        self.logger = logger or logging.getLogger(__name__)
        self.client = client or redis.from_url(
            db_config,
            encoding="utf-8",
            decode_responses=True,
            socket_timeout=connection_timeout_seconds,
            socket_connect_timeout=connection_timeout_seconds,
        )
        self._insert = self.client.register_script(INSERT_SCRIPT)
        self._visit = self.client.register_script(VISIT_SCRIPT)
        self._delete = self.client.register_script(DELETE_SCRIPT)

    def link_key(self, code: str) -> str:
        return f"{self.prefix}:links:{code}"

    @property
    def order_key(self) -> str:
        return f"{self.prefix}:links:by_created"

    def _unavailable(self, action: str, error: Exception) -> StoreUnavailable:
        self.logger.error(f"Error {action}: {error}")
        return StoreUnavailable(f"Store error while {action}")

    async def insert_link(self, code: str, target: str, created_at: datetime) -> Link:
        try:
            inserted = await self._insert(
                keys=[self.link_key(code), self.order_key],
                args=[code, target, created_at.isoformat(), -created_at.timestamp()],
            )
        except STORE_ERRORS as e:
            raise self._unavailable("inserting link", e)

        if not inserted:
            self.logger.warning(f"Code already exists: {code}")
            raise CodeConflict(code)
        return Link(code=code, target=target, created_at=created_at)

    async def code_exists(self, code: str) -> bool:
        try:
            return bool(await self.client.exists(self.link_key(code)))
        except STORE_ERRORS as e:
            raise self._unavailable("checking code existence", e)

    async def record_visit(self, code: str, visited_at: datetime) -> Optional[str]:
        try:
            return await self._visit(
                keys=[self.link_key(code)],
                args=[visited_at.isoformat()],
            )
        except STORE_ERRORS as e:
            raise self._unavailable("recording visit", e)

    async def get_link(self, code: str) -> Optional[Link]:
        try:
            data = await self.client.hgetall(self.link_key(code))
        except STORE_ERRORS as e:
            raise self._unavailable("getting link", e)
        return Link.from_row(data) if data else None

    async def list_links(self, limit: int, offset: int) -> List[Link]:
        try:
            codes = await self.client.zrange(self.order_key, offset, offset + limit - 1)
            if not codes:
                return []
            async with self.client.pipeline(transaction=False) as pipe:
                for code in codes:
                    pipe.hgetall(self.link_key(code))
                rows = await pipe.execute()
        except STORE_ERRORS as e:
            raise self._unavailable("listing links", e)

        # A link deleted between the two round trips comes back empty
        return [Link.from_row(row) for row in rows if row]

    async def delete_link(self, code: str) -> bool:
        try:
            deleted = await self._delete(
                keys=[self.link_key(code), self.order_key],
                args=[code],
            )
        except STORE_ERRORS as e:
            raise self._unavailable("deleting link", e)
        return bool(deleted)

    async def health_check(self) -> bool:
        try:
            await self.client.ping()
            return True
        except STORE_ERRORS as e:
            self.logger.error(f"Health check failed: {e}")
            return False

    async def close(self) -> None:
        await self.client.aclose()
        self.logger.info("Redis connection closed")

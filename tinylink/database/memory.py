"""In-process link store for local development and tests."""

import asyncio
import logging
from dataclasses import replace
from typing import Dict, List, Optional
from datetime import datetime

from .base import LinkStoreBase
from .models import Link
from ..errors import CodeConflict


class MemoryLinkStore(LinkStoreBase):
    """Dict-backed store. Data lives only as long as the process."""

    def __init__(self, db_config: str = "memory://", logger: Optional[logging.Logger] = None):
        super().__init__(db_config)
        self.logger = logger or logging.getLogger(__name__)
        self._links: Dict[str, Link] = {}
        self._lock = asyncio.Lock()

    async def insert_link(self, code: str, target: str, created_at: datetime) -> Link:
        async with self._lock:
            if code in self._links:
                raise CodeConflict(code)
            link = Link(code=code, target=target, created_at=created_at)
            self._links[code] = link
            return replace(link)

    async def code_exists(self, code: str) -> bool:
        return code in self._links

    async def record_visit(self, code: str, visited_at: datetime) -> Optional[str]:
        async with self._lock:
            link = self._links.get(code)
            if link is None:
                return None
            link.clicks += 1
            link.last_clicked = visited_at
            return link.target

    async def get_link(self, code: str) -> Optional[Link]:
        link = self._links.get(code)
        # Copies, so callers never mutate stored state
        return replace(link) if link else None

    async def list_links(self, limit: int, offset: int) -> List[Link]:
        ordered = sorted(self._links.values(), key=lambda link: link.code)
        ordered.sort(key=lambda link: link.created_at, reverse=True)
        return [replace(link) for link in ordered[offset:offset + limit]]

    async def delete_link(self, code: str) -> bool:
        async with self._lock:
            return self._links.pop(code, None) is not None

    async def health_check(self) -> bool:
        return True

    async def close(self) -> None:
        self._links.clear()

"""Abstract base class for link store implementations."""

from abc import ABC, abstractmethod
from typing import List, Optional
from datetime import datetime

from .models import Link


class LinkStoreBase(ABC):
    """Abstract base class for link store operations.

    Every implementation must enforce uniqueness of ``code`` itself and make
    ``record_visit`` a single atomic update. The registry's existence checks
    are an optimization only.
    """

    def __init__(self, db_config: Optional[str]):
        """Initialize store.

        Args:
            db_config: Store connection string (None when the store builds its own)
        """
        self.db_config = db_config

    @abstractmethod
    async def insert_link(self, code: str, target: str, created_at: datetime) -> Link:
        """Insert a new link with clicks=0 and no last click.

        Args:
            code: The short code
            target: The target URL
            created_at: Creation timestamp (aware UTC)

        Returns:
            The stored link

        Raises:
            CodeConflict: If the code already exists
            StoreUnavailable: On store failure
        """
        pass

    @abstractmethod
    async def code_exists(self, code: str) -> bool:
        """Check if a code already exists."""
        pass

    @abstractmethod
    async def record_visit(self, code: str, visited_at: datetime) -> Optional[str]:
        """Atomically increment clicks, set last_clicked and return the target.

        Args:
            code: The short code
            visited_at: Visit timestamp (aware UTC)

        Returns:
            The target URL, or None if no link has this code
        """
        pass

    @abstractmethod
    async def get_link(self, code: str) -> Optional[Link]:
        """Get a link by code, or None."""
        pass

    @abstractmethod
    async def list_links(self, limit: int, offset: int) -> List[Link]:
        """List links newest first, ties broken by code ascending.

        Args:
            limit: Maximum rows (already normalized by the caller)
            offset: Rows to skip (already normalized by the caller)
        """
        pass

    @abstractmethod
    async def delete_link(self, code: str) -> bool:
        """Hard delete a link.

        Returns:
            True if deleted, False if not found
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the store is reachable."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release store connections."""
        pass

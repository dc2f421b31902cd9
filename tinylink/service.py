"""Link registry: code assignment, visit recording and link administration."""

import logging
from typing import Any, Dict, List, Optional
from datetime import datetime, timezone

from .shortcode import ShortCodeGenerator
from .database.base import LinkStoreBase
from .database.models import Link
from .common.validators import is_valid_url, is_valid_short_code
from .common.pagination import normalize_pagination
from .errors import (
    CodeConflict,
    CodeGenerationExhausted,
    InvalidCode,
    InvalidTarget,
    NotFound,
)

DEFAULT_MAX_GENERATION_ATTEMPTS = 10


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class LinkRegistry:
    """Owns the mapping from short code to target URL plus usage metadata.

    The registry holds no locks of its own. Uniqueness of codes and atomicity
    of click counting are delegated to the store.
    """

    def __init__(
        self,
        store: LinkStoreBase,
        short_code_generator: Optional[ShortCodeGenerator] = None,
        logger: Optional[logging.Logger] = None,
        max_generation_attempts: int = DEFAULT_MAX_GENERATION_ATTEMPTS,
    ):
        """Initialize link registry.

        Args:
            store: Link store instance
            short_code_generator: Optional short code generator
            logger: Optional logger
            max_generation_attempts: Bound on auto-generated code attempts
        """
        self.store = store
        self.generator = short_code_generator or ShortCodeGenerator()
        self.logger = logger or logging.getLogger(__name__)
        self.max_generation_attempts = max_generation_attempts

    async def create(self, target: str, requested_code: Optional[str] = None) -> Link:
        """Create a new link.

        Args:
            target: Absolute http/https URL
            requested_code: Optional caller-chosen code

        Returns:
            The stored link with clicks=0 and no last click

        Raises:
            InvalidTarget: If the target is not a valid http/https URL
            InvalidCode: If the requested code breaks the code rule
            CodeConflict: If the requested code is taken
            CodeGenerationExhausted: If no free code was found
        """
        is_valid, error = is_valid_url(target)
        if not is_valid:
            raise InvalidTarget(error)

        if isinstance(requested_code, str):
            requested_code = requested_code.strip() or None

        if requested_code is not None:
            is_valid, error = is_valid_short_code(requested_code)
            if not is_valid:
                raise InvalidCode(error)

            if await self.store.code_exists(requested_code):
                raise CodeConflict(requested_code)

            # The store's unique constraint is the real guard; a concurrent
            # create that won the race surfaces here as CodeConflict
            link = await self.store.insert_link(requested_code, target, utcnow())
        else:
            link = await self._create_with_generated_code(target)

        self.logger.info(f"Created link: {link.code} -> {link.target}")
        return link

    async def _create_with_generated_code(self, target: str) -> Link:
        for attempt in range(1, self.max_generation_attempts + 1):
            code = self.generator.generate_random()

            if await self.store.code_exists(code):
                self.logger.debug(f"Generated code {code} already taken (attempt {attempt})")
                continue

            try:
                return await self.store.insert_link(code, target, utcnow())
            except CodeConflict:
                self.logger.debug(f"Lost insert race for {code} (attempt {attempt})")

        self.logger.error(
            f"Unable to generate a unique code after {self.max_generation_attempts} attempts"
        )
        raise CodeGenerationExhausted("failed to generate unique code, try again")

    async def resolve_and_record_visit(self, code: str) -> str:
        """Count one click and return the target.

        Raises:
            NotFound: If no link has this code
        """
        target = await self.store.record_visit(code, utcnow())
        if target is None:
            self.logger.warning(f"Code not found: {code}")
            raise NotFound(code)

        self.logger.debug(f"Visit recorded: {code} -> {target}")
        return target

    async def get_metadata(self, code: str) -> Link:
        """Read a link without touching its counters.

        Raises:
            NotFound: If no link has this code
        """
        link = await self.store.get_link(code)
        if link is None:
            raise NotFound(code)
        return link

    async def list(self, limit: Any = None, offset: Any = None) -> List[Link]:
        """List links newest first.

        Args:
            limit: Raw page size; defaults to 50, clamped to [1, 100]
            offset: Raw offset; defaults to 0, negatives become 0
        """
        limit, offset = normalize_pagination(limit, offset)
        return await self.store.list_links(limit, offset)

    async def delete(self, code: str) -> str:
        """Hard-delete a link.

        Returns:
            The deleted code

        Raises:
            NotFound: If no link has this code
        """
        if not await self.store.delete_link(code):
            raise NotFound(code)

        self.logger.info(f"Deleted link: {code}")
        return code

    async def health_check(self) -> Dict[str, bool]:
        """Perform health check."""
        db_healthy = await self.store.health_check()
        return {
            "database": db_healthy,
            "overall": db_healthy,
        }

    async def close(self) -> None:
        """Close store connections."""
        await self.store.close()

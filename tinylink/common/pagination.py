"""Pagination parameter normalization."""

from typing import Any, Optional, Tuple

DEFAULT_LIMIT = 50
MAX_LIMIT = 100


def _parse_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def normalize_pagination(limit: Any = None, offset: Any = None) -> Tuple[int, int]:
    """Normalize raw limit/offset input.

    ``limit`` defaults to 50 when absent or unparsable and is clamped to
    [1, 100]. ``offset`` defaults to 0 and negative values become 0.

    Returns:
        Tuple of (limit, offset)
    """
    parsed_limit = _parse_int(limit)
    if parsed_limit is None:
        parsed_limit = DEFAULT_LIMIT
    parsed_limit = max(1, min(MAX_LIMIT, parsed_limit))

    parsed_offset = _parse_int(offset)
    if parsed_offset is None or parsed_offset < 0:
        parsed_offset = 0

    return parsed_limit, parsed_offset

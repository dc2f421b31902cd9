"""Common utilities for TinyLink."""

from .validators import is_valid_url, is_valid_short_code
from .pagination import normalize_pagination
from .url_builder import build_short_url
from .logging_config import setup_logging, redact_store_url

__all__ = [
    "is_valid_url",
    "is_valid_short_code",
    "normalize_pagination",
    "build_short_url",
    "setup_logging",
    "redact_store_url",
]

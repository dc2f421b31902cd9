"""Validation utilities for TinyLink."""

from urllib.parse import urlparse
from typing import Tuple

from ..shortcode import CODE_RULE, ShortCodeGenerator

MAX_URL_LENGTH = 2048


def is_valid_url(url: str) -> Tuple[bool, str]:
    """Validate a target URL.

    Args:
        url: The URL to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str) or not url.strip():
        return False, "target is required"

    if len(url) > MAX_URL_LENGTH:
        return False, f"target is too long (max {MAX_URL_LENGTH} characters)"

    if any(c.isspace() for c in url):
        return False, "target must not contain whitespace"

    try:
        result = urlparse(url)
        # Accessing .port validates it and raises ValueError when out of range
        result.port
    except ValueError as e:
        return False, f"invalid target URL: {e}"

    if result.scheme not in ("http", "https"):
        return False, "target must use http or https"

    if not result.hostname:
        return False, "target must include a host"

    return True, ""


def is_valid_short_code(code: str) -> Tuple[bool, str]:
    """Validate a caller-supplied short code against the canonical rule.

    Args:
        code: The short code to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not code or not isinstance(code, str):
        return False, "code is required"

    if not ShortCodeGenerator.is_valid_format(code):
        return False, f"code must be {CODE_RULE}"

    return True, ""

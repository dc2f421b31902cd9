"""URL building utilities for TinyLink."""


def build_short_url(code: str, base_url: str) -> str:
    """Build the public short URL for a code.

    Args:
        code: The short code
        base_url: Base URL (e.g., https://tiny.link)

    Returns:
        Complete short URL
    """
    return f"{base_url.rstrip('/')}/{code}"

"""Core logic for TinyLink."""

from .shortcode import ShortCodeGenerator
from .service import LinkRegistry

__version__ = "1.0.0"

__all__ = ["ShortCodeGenerator", "LinkRegistry", "__version__"]

"""Short code generation and the canonical code rule."""

import re
import secrets
import string
from typing import Optional

# Case-sensitive, alphanumeric only, 6 to 8 characters. Applies to caller
# supplied codes and is always satisfied by generated ones.
CODE_MIN_LENGTH = 6
CODE_MAX_LENGTH = 8
CODE_PATTERN = re.compile(r"^[A-Za-z0-9]{6,8}$")
CODE_RULE = f"letters and digits only, {CODE_MIN_LENGTH}-{CODE_MAX_LENGTH} characters"


class ShortCodeGenerator:
    """Generate short codes for links."""

    # Base62 characters (alphanumeric, case-sensitive)
    BASE62_CHARS = string.ascii_letters + string.digits  # a-zA-Z0-9

    def __init__(self, default_length: int = 7):
        """Initialize short code generator.

        Args:
            default_length: Default length for generated codes

        Raises:
            ValueError: If the length would produce codes outside the code rule
        """
        if not CODE_MIN_LENGTH <= default_length <= CODE_MAX_LENGTH:
            raise ValueError(
                f"Code length must be between {CODE_MIN_LENGTH} and {CODE_MAX_LENGTH}"
            )
        self.default_length = default_length

    def generate_random(self, length: Optional[int] = None) -> str:
        """Draw each character uniformly from the 62-character alphabet.

        Args:
            length: Length of the code (uses default if not specified)

        Returns:
            Random short code
        """
        length = length or self.default_length
        return "".join(secrets.choice(self.BASE62_CHARS) for _ in range(length))

    @staticmethod
    def is_valid_format(code: str) -> bool:
        """Check if code matches the canonical code rule."""
        return isinstance(code, str) and CODE_PATTERN.fullmatch(code) is not None

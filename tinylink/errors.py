"""Error kinds raised by the link registry and its stores."""


class LinkRegistryError(Exception):
    """Base class for all link registry errors."""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class InvalidTarget(LinkRegistryError):
    """Target URL is missing, malformed, or not http/https."""


class InvalidCode(LinkRegistryError):
    """Requested short code does not match the code rule."""


class CodeConflict(LinkRegistryError):
    """A link with this code already exists."""

    def __init__(self, code: str):
        super().__init__(f"Code '{code}' already exists")
        self.code = code


class CodeGenerationExhausted(LinkRegistryError):
    """No free code was found within the attempt bound. Safe to retry."""


class NotFound(LinkRegistryError):
    """No link with this code."""

    def __init__(self, code: str):
        super().__init__(f"Code '{code}' not found")
        self.code = code


class StoreUnavailable(LinkRegistryError):
    """The backing store failed or could not be reached."""

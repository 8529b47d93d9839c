"""Custom exceptions for the publishing context."""

from typing import List, Optional


class EndpointNotFoundError(LookupError):
    """
    Exception raised when a lookup path matches no published endpoint.

    Attributes:
        path: Normalized path that was requested
        available_endpoints: Paths that do resolve ("/", "/about", ...)
        message: Error description
    """

    def __init__(
        self, path: str, available_endpoints: List[str], message: Optional[str] = None
    ):
        self.path = path
        self.available_endpoints = list(available_endpoints)
        self.message = message or f"No endpoint at {path}"

        parts = [self.message]
        if self.available_endpoints:
            parts.append(f"Available endpoints: {', '.join(self.available_endpoints)}")

        super().__init__("\n".join(parts))

"""Fetch failures.

These are raised by fetchers only. The extraction core never sees them and
never works on partially fetched content.
"""

from __future__ import annotations


class TransportError(Exception):
    """The document could not be retrieved.

    Attributes:
        source: URL or path that was requested.
        status_code: HTTP status when the server answered, else None.
    """

    def __init__(self, source: str, message: str, status_code: int | None = None) -> None:
        super().__init__(f"{source}: {message}")
        self.source = source
        self.status_code = status_code


class ResourceNotFound(TransportError):
    """The source does not exist (HTTP 404 or a missing file)."""


class DocumentTooLarge(TransportError):
    """The document exceeds the configured size limit."""

    def __init__(self, source: str, limit: int) -> None:
        super().__init__(source, f"document exceeds {limit} bytes")
        self.limit = limit

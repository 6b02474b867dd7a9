"""Fetcher Protocol.

This module defines the interface every document source must satisfy.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Fetcher(Protocol):
    """Protocol for document fetchers (HTTP, local file, test stubs)."""

    def fetch(self, source: str) -> bytes:
        """Return the full raw content of ``source``.

        Args:
            source: URL or path of the document.

        Returns:
            Document bytes.

        Raises:
            TransportError: If the document cannot be retrieved.
        """
        ...

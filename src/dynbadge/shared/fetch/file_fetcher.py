"""FileFetcher: read documents from the local filesystem (CLI use)."""

from __future__ import annotations

import logging
from pathlib import Path

from dynbadge.shared.fetch.errors import DocumentTooLarge, ResourceNotFound, TransportError

logger = logging.getLogger(__name__)


class FileFetcher:
    """Fetcher for local paths."""

    def __init__(self, max_bytes: int | None = None) -> None:
        self.max_bytes = max_bytes

    def fetch(self, source: str) -> bytes:
        path = Path(source).expanduser()
        if not path.is_file():
            raise ResourceNotFound(source, "file not found")
        if self.max_bytes is not None and path.stat().st_size > self.max_bytes:
            raise DocumentTooLarge(source, self.max_bytes)
        try:
            content = path.read_bytes()
        except OSError as e:
            raise TransportError(source, str(e)) from e
        logger.debug(f"[Fetch] read {path} ({len(content)} bytes)")
        return content

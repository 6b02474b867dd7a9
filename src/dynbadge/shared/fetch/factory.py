"""Fetcher factory: choose a fetcher for a source string."""

from __future__ import annotations

import logging

from dynbadge.shared.fetch.config import FetchConfig
from dynbadge.shared.fetch.file_fetcher import FileFetcher
from dynbadge.shared.fetch.http_fetcher import HttpFetcher
from dynbadge.shared.fetch.protocol import Fetcher

logger = logging.getLogger(__name__)


def is_remote(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def create_fetcher(source: str, config: FetchConfig | None = None) -> Fetcher:
    """Create a fetcher able to read ``source``.

    Returns:
        HttpFetcher for http(s) URLs, FileFetcher for anything else.
    """
    config = config or FetchConfig.from_env()
    if is_remote(source):
        return HttpFetcher(config)
    logger.debug(f"[Fetch] {source!r} is not a URL, reading from disk")
    return FileFetcher(max_bytes=config.max_bytes)

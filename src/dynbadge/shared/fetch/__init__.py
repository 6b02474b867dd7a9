"""Document fetching for dynbadge.

Usage:
    from dynbadge.shared.fetch import create_fetcher

    fetcher = create_fetcher(url)  # HttpFetcher or FileFetcher
    content = fetcher.fetch(url)
"""

from dynbadge.shared.fetch.config import FetchConfig
from dynbadge.shared.fetch.errors import DocumentTooLarge, ResourceNotFound, TransportError
from dynbadge.shared.fetch.factory import create_fetcher, is_remote
from dynbadge.shared.fetch.file_fetcher import FileFetcher
from dynbadge.shared.fetch.http_fetcher import HttpFetcher
from dynbadge.shared.fetch.protocol import Fetcher

__all__ = [
    # Factory
    "create_fetcher",
    "is_remote",
    # Protocol & implementations
    "Fetcher",
    "HttpFetcher",
    "FileFetcher",
    # Config
    "FetchConfig",
    # Errors
    "TransportError",
    "ResourceNotFound",
    "DocumentTooLarge",
]

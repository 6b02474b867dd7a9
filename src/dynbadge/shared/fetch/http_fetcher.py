"""HttpFetcher: retrieve documents over HTTP(S) with httpx.

The body is streamed so that oversized documents are rejected without
reading them fully into memory.
"""

from __future__ import annotations

import logging

import httpx

from dynbadge.shared.fetch.config import FetchConfig
from dynbadge.shared.fetch.errors import DocumentTooLarge, ResourceNotFound, TransportError

logger = logging.getLogger(__name__)


class HttpFetcher:
    """Fetcher for http:// and https:// URLs.

    A new client is opened per call, so instances can be shared freely
    between threads.
    """

    def __init__(
        self,
        config: FetchConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            config: Timeout, size limit and User-Agent; defaults from env.
            transport: Optional httpx transport (e.g. httpx.MockTransport).
        """
        self.config = config or FetchConfig.from_env()
        self._transport = transport

    def fetch(self, source: str) -> bytes:
        """Download ``source`` and return its body.

        Raises:
            ResourceNotFound: On HTTP 404.
            DocumentTooLarge: If the body exceeds ``config.max_bytes``.
            TransportError: On any other connection or HTTP error.
        """
        limit = self.config.max_bytes
        try:
            with httpx.Client(
                transport=self._transport,
                timeout=self.config.timeout,
                follow_redirects=True,
                headers={"User-Agent": self.config.user_agent},
            ) as client:
                with client.stream("GET", source) as response:
                    if response.status_code == 404:
                        raise ResourceNotFound(source, "resource not found", 404)
                    response.raise_for_status()

                    declared = response.headers.get("Content-Length")
                    if declared and declared.isdigit() and int(declared) > limit:
                        raise DocumentTooLarge(source, limit)

                    body = bytearray()
                    for chunk in response.iter_bytes():
                        body.extend(chunk)
                        if len(body) > limit:
                            raise DocumentTooLarge(source, limit)
        except httpx.TimeoutException as e:
            logger.warning(f"[Fetch] Timed out fetching {source}")
            raise TransportError(source, "request timed out") from e
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning(f"[Fetch] {source} returned {status}")
            raise TransportError(source, f"server returned {status}", status) from e
        except httpx.HTTPError as e:
            logger.warning(f"[Fetch] Failed to fetch {source}: {e}")
            raise TransportError(source, str(e) or type(e).__name__) from e

        logger.info(f"[Fetch] {source} ({len(body)} bytes)")
        return bytes(body)

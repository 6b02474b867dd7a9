"""Fetch configuration from environment variables.

Environment Variables:
    DYNBADGE_FETCH_TIMEOUT: Request timeout in seconds (default: 10)
    DYNBADGE_MAX_DOCUMENT_BYTES: Largest accepted document (default: 1 MiB)
    DYNBADGE_USER_AGENT: User-Agent header sent with requests
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
DEFAULT_MAX_BYTES = 1024 * 1024
DEFAULT_USER_AGENT = "dynbadge/0.1.0"


def _env_number(name: str, default, cast):
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning(f"[Config] Ignoring invalid {name}={raw!r}, using {default}")
        return default


@dataclass(frozen=True)
class FetchConfig:
    timeout: float = DEFAULT_TIMEOUT
    max_bytes: int = DEFAULT_MAX_BYTES
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls) -> FetchConfig:
        return cls(
            timeout=_env_number("DYNBADGE_FETCH_TIMEOUT", DEFAULT_TIMEOUT, float),
            max_bytes=_env_number("DYNBADGE_MAX_DOCUMENT_BYTES", DEFAULT_MAX_BYTES, int),
            user_agent=os.environ.get("DYNBADGE_USER_AGENT", DEFAULT_USER_AGENT),
        )

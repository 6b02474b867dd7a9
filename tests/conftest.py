"""Shared test fixtures."""
import pytest

from dynbadge.shared.fetch import ResourceNotFound, TransportError


class StubFetcher:
    """In-memory fetcher: serves fixed documents, fails for unknown URLs."""

    def __init__(self, documents: dict[str, bytes] | None = None):
        self.documents = documents or {}
        self.requested: list[str] = []

    def fetch(self, source: str) -> bytes:
        self.requested.append(source)
        if source.endswith("/missing"):
            raise ResourceNotFound(source, "resource not found", 404)
        if source not in self.documents:
            raise TransportError(source, "connection refused")
        return self.documents[source]


@pytest.fixture
def sample_text():
    return "Every month it serves 2.4 billion images"


@pytest.fixture
def stub_fetcher(sample_text):
    return StubFetcher({
        "https://example.com/README.md": sample_text.encode(),
        "https://example.com/version.txt": b"name: demo\nversion - 2.4\nlicense: MIT\n",
    })

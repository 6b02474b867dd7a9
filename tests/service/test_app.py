"""Tests for the badge HTTP service."""
import pytest
from fastapi.testclient import TestClient

from dynbadge.service.app import create_app

ROUTE = "/badge/dynamic/regex"
README = "https://example.com/README.md"


@pytest.fixture
def client(stub_fetcher):
    return TestClient(create_app(fetcher=stub_fetcher))


class TestDynamicRegex:
    def test_capture_group(self, client):
        r = client.get(ROUTE, params={"url": README, "search": "serves (.*?) billion", "replace": "$1"})
        assert r.status_code == 200
        assert r.json() == {
            "schemaVersion": 1,
            "label": "match",
            "message": "2.4",
            "color": "blue",
            "isError": False,
        }

    def test_full_match_without_replace(self, client):
        r = client.get(ROUTE, params={"url": README, "search": r"\d+\.\d+ billion"})
        assert r.json()["message"] == "2.4 billion"

    def test_no_match_fallback(self, client):
        r = client.get(ROUTE, params={"url": README, "search": "nonexistent", "noMatch": "n/a"})
        assert r.status_code == 200
        assert r.json()["message"] == "n/a"

    def test_no_match_default_empty(self, client):
        r = client.get(ROUTE, params={"url": README, "search": "nonexistent"})
        assert r.json()["message"] == ""

    def test_flags(self, client):
        r = client.get(ROUTE, params={
            "url": "https://example.com/version.txt",
            "search": r"^VERSION - (.*)$",
            "flags": "im",
            "replace": "v$1",
        })
        assert r.json()["message"] == "v2.4"

    def test_label_and_color_override(self, client):
        r = client.get(ROUTE, params={"url": README, "search": "billion", "label": "images", "color": "green"})
        data = r.json()
        assert data["label"] == "images"
        assert data["color"] == "green"

    def test_fetches_requested_url(self, client, stub_fetcher):
        client.get(ROUTE, params={"url": README, "search": "x"})
        assert stub_fetcher.requested == [README]


class TestErrors:
    def test_invalid_regex(self, client):
        r = client.get(ROUTE, params={"url": README, "search": "serves (.*? billion"})
        assert r.status_code == 400
        data = r.json()
        assert data["isError"] is True
        assert data["message"] == "Invalid re2 regex: missing ): serves (.*? billion"
        assert data["color"] == "red"

    def test_backreference_rejected(self, client):
        r = client.get(ROUTE, params={"url": README, "search": r"(s)\1"})
        assert r.status_code == 400

    def test_unknown_flag(self, client):
        r = client.get(ROUTE, params={"url": README, "search": "serves", "flags": "ix", "label": "v"})
        assert r.status_code == 400
        assert "'x'" in r.json()["message"]
        assert r.json()["label"] == "v"

    def test_not_found(self, client):
        r = client.get(ROUTE, params={"url": "https://example.com/missing", "search": "x"})
        assert r.status_code == 404
        assert r.json()["message"] == "resource not found"

    def test_unreachable(self, client):
        r = client.get(ROUTE, params={"url": "https://unreachable.example/", "search": "x"})
        assert r.status_code == 502
        assert r.json()["message"] == "inaccessible"

    def test_missing_search(self, client):
        r = client.get(ROUTE, params={"url": README})
        assert r.status_code == 422

    def test_empty_search(self, client):
        r = client.get(ROUTE, params={"url": README, "search": ""})
        assert r.status_code == 422

    def test_non_http_url(self, client, stub_fetcher):
        r = client.get(ROUTE, params={"url": "file:///etc/passwd", "search": "root"})
        assert r.status_code == 422
        assert stub_fetcher.requested == []

    def test_invalid_regex_with_flags(self, client):
        r = client.get(ROUTE, params={"url": README, "search": "serves (", "flags": "i"})
        assert r.status_code == 400
        assert r.json()["message"] == "Invalid re2 regex: missing ): serves ("

    @pytest.mark.parametrize("name", ["replace", "flags", "noMatch"])
    def test_empty_optional_parameter(self, client, stub_fetcher, name):
        r = client.get(ROUTE, params={"url": README, "search": "serves", name: ""})
        assert r.status_code == 422
        assert stub_fetcher.requested == []


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_openapi_documents_parameters(client):
    spec = client.get("/openapi.json").json()
    params = {p["name"] for p in spec["paths"][ROUTE]["get"]["parameters"]}
    assert {"url", "search", "replace", "flags", "noMatch"} <= params

"""Tests for the search pages."""

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.services.book_search import BookSearchService
from app.views.search import get_search_service


@pytest.fixture
def client():
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


def _use_connector(fake):
    app.dependency_overrides[get_search_service] = lambda: BookSearchService(fake)


class TestPages:
    """Static pages."""

    def test_index(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert "Find your next book" in resp.text

    def test_hello(self, client):
        resp = client.get("/hello")
        assert resp.status_code == 200
        assert "Hello from Andy&#39;s book store" in resp.text

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}


class TestSearchPage:
    """/search renders results or errors."""

    def test_empty_query_shows_index(self, client, connector):
        _use_connector(connector)
        resp = client.get("/search", params={"q": ""})
        assert resp.status_code == 200
        assert "Find your next book" in resp.text
        assert connector.requested == []

    def test_results(self, client, connector):
        _use_connector(connector)
        resp = client.get("/search", params={"q": "legacy code", "page": "4"})
        assert resp.status_code == 200
        assert "1441 results" in resp.text
        assert "Working Effectively with Legacy Code" in resp.text
        assert "Prentice Hall Professional" in resp.text
        assert connector.requested[0].endswith("?q=legacy+code&startIndex=4")

    def test_transport_failure(self, client, failing_connector):
        _use_connector(failing_connector)
        resp = client.get("/search", params={"q": "legacy code"})
        assert resp.status_code == 502
        assert "could not be reached" in resp.text

    def test_parse_failure(self, client, parse_failing_connector):
        _use_connector(parse_failing_connector)
        resp = client.get("/search", params={"q": "legacy code"})
        assert resp.status_code == 502
        assert "couldn&#39;t read" in resp.text
        assert "results for" not in resp.text
        assert len(parse_failing_connector.requested) == 1

    def test_dodgy_page_passed_through_as_no_offset(self, client, connector):
        _use_connector(connector)
        resp = client.get("/search", params={"q": "clean code", "page": "1_0"})
        assert resp.status_code == 200
        assert connector.requested[0].endswith("?q=clean+code")

"""Pytest fixtures for book search tests."""

import json
from pathlib import Path

import pytest

from app.config import settings
from app.services.book_search import BookSearchService
from app.services.errors import TransportError

FIXTURES = Path(__file__).parent / "fixtures"


class FakeConnector:
    """Stands in for HttpConnector: records requested URLs, returns a canned body."""

    def __init__(self, body: str = "", error: Exception | None = None):
        self.body = body
        self.error = error
        self.requested: list[str] = []

    async def get(self, url: str) -> str:
        self.requested.append(url)
        if self.error is not None:
            raise self.error
        return self.body

    async def aclose(self) -> None:
        pass


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Pin settings so a local .env can't change the URLs under test."""
    monkeypatch.setattr(settings, "google_books_url", "https://www.googleapis.com/books/v1/volumes")
    monkeypatch.setattr(settings, "google_api_key", "")


@pytest.fixture
def legacy_code_json():
    """Canned Google Books response for "legacy code": 10 items, 1441 total."""
    return (FIXTURES / "legacy_code.json").read_text(encoding="utf-8")


@pytest.fixture
def volume(legacy_code_json):
    return json.loads(legacy_code_json)["items"][0]


@pytest.fixture
def connector(legacy_code_json):
    return FakeConnector(body=legacy_code_json)


@pytest.fixture
def failing_connector():
    return FakeConnector(error=TransportError("connection refused"))


@pytest.fixture
def parse_failing_connector():
    """A well-formed response whose only item has no title."""
    return FakeConnector(body='{"totalItems": 1, "items": [{"volumeInfo": {"infoLink": "http://books.example/x"}}]}')


@pytest.fixture
def service(connector):
    return BookSearchService(connector)

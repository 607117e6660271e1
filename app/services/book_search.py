import logging

from app.schemas.search import SearchRequest, SearchResults
from app.services.http_connector import HttpConnector
from app.services.query_builder import build_search_url
from app.services.result_parser import parse_search_results

logger = logging.getLogger(__name__)


class BookSearchService:
    """Search Google Books and return normalized results."""

    def __init__(self, connector: HttpConnector):
        self.connector = connector

    async def search(self, query: str, page_token: str = "") -> SearchResults:
        """Run one search. TransportError and ParseError propagate to the caller."""
        url = build_search_url(query, page_token)
        logger.debug("Searching Google Books: %s", url)

        body = await self.connector.get(url)
        results = parse_search_results(body)

        logger.info(
            "Google Books returned %d of %d results for: %s",
            len(results.items), results.total_items, query,
        )
        return results

    async def search_request(self, request: SearchRequest) -> SearchResults:
        return await self.search(request.query, request.page_token)

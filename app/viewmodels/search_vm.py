import logging
from dataclasses import dataclass, field

from app.schemas.search import SearchRequest, SearchResult
from app.services.book_search import BookSearchService
from app.services.errors import SearchError, SearchErrorKind

logger = logging.getLogger(__name__)


@dataclass
class SearchViewModel:
    query: str = ""
    page: str = ""
    results: list[SearchResult] = field(default_factory=list)
    total_items: int = 0
    error: str = ""
    error_kind: SearchErrorKind | None = None

    @property
    def failed(self) -> bool:
        return self.error_kind is not None

    @classmethod
    async def search(
        cls,
        service: BookSearchService,
        request: SearchRequest,
    ) -> "SearchViewModel":
        query, page = request.query, request.page_token
        try:
            results = await service.search_request(request)
        except SearchError as e:
            logger.warning("Book search failed (%s) for %r: %s", e.kind.value, query, e)
            if e.kind is SearchErrorKind.TRANSPORT:
                message = "Google Books could not be reached. Please try again later."
            else:
                message = "Google Books sent back a response we couldn't read."
            return cls(query=query, page=page, error=message, error_kind=e.kind)

        return cls(
            query=query,
            page=page,
            results=list(results.items),
            total_items=results.total_items,
        )

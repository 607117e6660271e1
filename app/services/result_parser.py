import json
import logging
from typing import Any

from pydantic import ValidationError

from app.schemas.search import SearchResult, SearchResults
from app.services.errors import ParseError

logger = logging.getLogger(__name__)


def parse_search_results(body: str) -> SearchResults:
    """Parse a Google Books volumes response into SearchResults.

    Raises ParseError when the body isn't the expected shape or any item is
    missing its title or info link. Never returns a partial result.
    """
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, TypeError, RecursionError) as e:
        raise ParseError(f"Response is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ParseError("Response is not a JSON object")

    total_items = data.get("totalItems")
    # bool is an int subclass
    if not isinstance(total_items, int) or isinstance(total_items, bool):
        raise ParseError("Response has no integer totalItems")

    items = data.get("items")
    if items is None:
        items = []
    if not isinstance(items, list):
        raise ParseError("Response items is not an array")

    results = [_to_search_result(item, idx) for idx, item in enumerate(items)]
    logger.debug("Parsed %d of %d results", len(results), total_items)
    return SearchResults(total_items=total_items, items=results)


def _to_search_result(item: Any, idx: int) -> SearchResult:
    if not isinstance(item, dict) or not isinstance(item.get("volumeInfo"), dict):
        raise ParseError(f"Item {idx} has no volumeInfo object")
    try:
        return SearchResult.from_volume_info(item["volumeInfo"])
    except KeyError as e:
        raise ParseError(f"Item {idx} is missing required field {e.args[0]}") from e
    except ValidationError as e:
        raise ParseError(f"Item {idx} has an invalid field: {e}") from e

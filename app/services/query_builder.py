import re
from urllib.parse import quote_plus

import httpx

from app.config import settings

# An empty query is still sent, as an explicitly quoted empty string.
_EMPTY_QUERY = '""'

MAX_START_INDEX = 2**31 - 1

_START_INDEX_RE = re.compile(r"\+?[0-9]+", re.ASCII)


def parse_start_index(page_token: str | None) -> int:
    """Turn a page token into a result offset. Anything unusable is 0."""
    if not page_token:
        return 0
    token = page_token.strip()
    if not _START_INDEX_RE.fullmatch(token):
        return 0
    start = int(token)
    return start if start <= MAX_START_INDEX else 0


def encode_query(query: str) -> str:
    """Form encode a query: "+" for spaces, "*" left bare, "~" escaped."""
    return quote_plus(query, safe="*").replace("~", "%7E")


def build_search_url(
    query: str,
    page_token: str = "",
    base_url: str | None = None,
    api_key: str | None = None,
) -> str:
    """Build the Google Books volumes search URL for a free-text query.

    The query is form encoded ("+" for spaces, everything reserved
    percent-encoded). ``startIndex`` is only added for a positive numeric
    page token.
    """
    base_url = base_url or settings.google_books_url
    api_key = settings.google_api_key if api_key is None else api_key

    url = f"{base_url}?q={encode_query(query or _EMPTY_QUERY)}"
    if api_key:
        url += f"&key={quote_plus(api_key)}"

    start_index = parse_start_index(page_token)
    if start_index:
        url += f"&startIndex={start_index}"

    _check_url(url)
    return url


def _check_url(url: str) -> None:
    # A bad base_url is a configuration bug, not something a user can trigger.
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise ValueError(f"Invalid search URL {url}: {e}") from e
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise ValueError(f"Not an absolute http(s) URL: {url}")

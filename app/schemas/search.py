from typing import Any

from pydantic import BaseModel, Field


class SearchRequest(BaseModel):
    query: str = ""
    page_token: str = ""


class SearchResult(BaseModel):
    title: str = Field(min_length=1)
    author: str = ""
    publisher: str = ""
    thumbnail_url: str = ""
    detail_link: str = Field(min_length=1)

    model_config = {"frozen": True}

    @classmethod
    def from_volume_info(cls, volume_info: dict[str, Any]) -> "SearchResult":
        """Build a result from a Google Books ``volumeInfo`` object.

        ``title`` and ``infoLink`` are required and raise ``KeyError`` when
        missing; every other field falls back to an empty string.
        """
        image_links = volume_info.get("imageLinks")
        if not isinstance(image_links, dict):
            image_links = {}
        return cls(
            title=volume_info["title"],
            author=join_authors(volume_info.get("authors")),
            publisher=_optional_str(volume_info.get("publisher")),
            thumbnail_url=_optional_str(image_links.get("thumbnail")),
            detail_link=volume_info["infoLink"],
        )


class SearchResults(BaseModel):
    total_items: int = 0
    items: list[SearchResult] = Field(default_factory=list)

    model_config = {"frozen": True}


def join_authors(authors: Any) -> str:
    """Comma-join an ``authors`` array; anything that isn't a list of strings is ""."""
    if not isinstance(authors, list) or not authors:
        return ""
    if not all(isinstance(a, str) for a in authors):
        return ""
    return ", ".join(authors)


def _optional_str(value: Any) -> str:
    """Scalars become text the way JSON writes them; null and containers are ""."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return ""

import logging

import httpx

from app.config import settings
from app.services.errors import TransportError

logger = logging.getLogger(__name__)


class HttpConnector:
    """Fetches response bodies over HTTP. One shared client per app."""

    def __init__(self, client: httpx.AsyncClient | None = None, timeout: float | None = None):
        self.client = client or httpx.AsyncClient(timeout=timeout or settings.http_timeout)

    async def get(self, url: str) -> str:
        try:
            resp = await self.client.get(url)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(f"Upstream returned HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise TransportError(f"Request to upstream failed: {e}") from e
        return resp.text

    async def aclose(self) -> None:
        await self.client.aclose()

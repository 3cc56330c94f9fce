import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional
from dataclasses import dataclass

import httpx

from app.core.exceptions import ProviderError
from app.core.http_client import HttpClientManager

logger = logging.getLogger(__name__)

@dataclass
class SearchResult:
    provider: str
    id: str
    title: str
    artist: str
    url: str  # Song page holding the lyrics

class BaseProvider(ABC):
    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        # An explicit client is used as-is (tests inject a mocked transport)
        self._client = client

    @property
    @abstractmethod
    def provider_name(self) -> str:
        pass

    @property
    def client(self) -> httpx.AsyncClient:
        """Get shared HTTP client for all providers."""
        if self._client is not None:
            return self._client
        return HttpClientManager.get_client()

    async def _get(self, url: str, **kwargs: Any) -> httpx.Response:
        """
        GET a URL, turning transport failures and non-2xx answers into ProviderError.
        """
        try:
            response = await self.client.get(url, **kwargs)
        except httpx.HTTPError as e:
            logger.warning(f"{self.provider_name} request failed: {e!r}")
            raise ProviderError(self.provider_name, f"request failed: {e}") from e

        if response.is_error:
            logger.warning(f"{self.provider_name} returned HTTP {response.status_code} for {response.request.url.path}")
            raise ProviderError(
                self.provider_name,
                f"HTTP {response.status_code}",
                status_code=response.status_code
            )
        return response

    async def _get_json(self, url: str, **kwargs: Any) -> Any:
        response = await self._get(url, **kwargs)
        try:
            return response.json()
        except ValueError as e:
            raise ProviderError(self.provider_name, "invalid JSON response") from e

class LyricsProvider(BaseProvider):
    @abstractmethod
    async def search(self, query: str) -> List[SearchResult]:
        """Search for songs, best match first."""
        pass

    @abstractmethod
    async def get_lyric_content(self, url: str) -> str:
        """Download the raw lyrics text of a song."""
        pass

import logging
from typing import Any, Dict, Optional

import httpx

from app.core.config import settings
from app.core.exceptions import ProviderError
from app.services.providers.base import BaseProvider

logger = logging.getLogger(__name__)

class TMDBProvider(BaseProvider):
    """
    The Movie Database (TMDB) v3 client. Returns raw JSON payloads.
    """

    @property
    def provider_name(self) -> str:
        return "TMDB"

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None
    ):
        super().__init__(client)
        self.api_key = settings.tmdb_api_key if api_key is None else api_key
        self.base_url = (base_url or settings.tmdb_base_url).rstrip("/")
        if not self.api_key:
            logger.warning("TMDB_API_KEY not set. Movie lookups will fail.")

    def _params(self, **extra: Any) -> Dict[str, Any]:
        return {"api_key": self.api_key, **extra}

    async def search_movies(self, query: str, page: int = 1) -> Dict[str, Any]:
        logger.info(f"TMDB search '{query}' (page {page})")
        return await self._get_json(
            f"{self.base_url}/search/movie",
            params=self._params(query=query, page=page)
        )

    async def get_movie(self, movie_id: int) -> Optional[Dict[str, Any]]:
        """Movie detail record, or None if TMDB does not know the ID."""
        try:
            return await self._get_json(f"{self.base_url}/movie/{movie_id}", params=self._params())
        except ProviderError as e:
            if e.status_code == 404:
                return None
            raise

    async def trending(self) -> Dict[str, Any]:
        return await self._get_json(f"{self.base_url}/trending/movie/day", params=self._params())

import logging
from typing import Any, Dict, Iterable, List, Optional

import httpx
from bs4 import BeautifulSoup

from app.core.config import settings
from app.services.providers.base import LyricsProvider, SearchResult

logger = logging.getLogger(__name__)

class GeniusProvider(LyricsProvider):
    """
    Genius lyrics provider.
    Search uses the official API when an access token is configured,
    otherwise the public endpoint the genius.com website uses.
    Lyrics are scraped from the song page.
    """
    API_SEARCH_URL = "https://api.genius.com/search"
    PUBLIC_SEARCH_URL = "https://genius.com/api/search/song"
    LYRICS_CONTAINER_SELECTOR = 'div[data-lyrics-container="true"]'
    EXCLUDED_SELECTOR = '[data-exclude-from-selection="true"]'

    @property
    def provider_name(self) -> str:
        return "Genius"

    def __init__(self, client: Optional[httpx.AsyncClient] = None, access_token: Optional[str] = None):
        super().__init__(client)
        self.access_token = settings.genius_access_token if access_token is None else access_token
        self.headers = {
            "Referer": "https://genius.com/",
        }

    async def search(self, query: str) -> List[SearchResult]:
        if self.access_token:
            payload = await self._get_json(
                self.API_SEARCH_URL,
                params={"q": query},
                headers={**self.headers, "Authorization": f"Bearer {self.access_token}"}
            )
        else:
            payload = await self._get_json(
                self.PUBLIC_SEARCH_URL,
                params={"q": query, "per_page": 5},
                headers=self.headers
            )

        results = [
            result for result in
            (self._to_search_result(hit) for hit in self._iter_hits(payload))
            if result is not None
        ]
        logger.info(f"Genius search '{query}' returned {len(results)} songs")
        return results

    @staticmethod
    def _iter_hits(payload: Any) -> Iterable[Dict[str, Any]]:
        """
        Official API: response.hits[]
        Public API:   response.sections[].hits[]
        """
        if not isinstance(payload, dict):
            return []
        response = payload.get("response")
        if not isinstance(response, dict):
            return []

        hits = list(response.get("hits") or [])
        for section in response.get("sections") or []:
            if isinstance(section, dict):
                hits.extend(section.get("hits") or [])
        return [hit for hit in hits if isinstance(hit, dict)]

    def _to_search_result(self, hit: Dict[str, Any]) -> Optional[SearchResult]:
        if hit.get("type", "song") != "song":
            return None
        song = hit.get("result")
        if not isinstance(song, dict) or not song.get("url"):
            return None

        artist_data = song.get("primary_artist")
        artist = (artist_data.get("name") or "") if isinstance(artist_data, dict) else ""

        return SearchResult(
            provider=self.provider_name,
            id=str(song.get("id", "")),
            title=song.get("title") or "",
            artist=artist or song.get("artist_names") or "",
            url=song["url"]
        )

    async def get_lyric_content(self, url: str) -> str:
        response = await self._get(url, headers=self.headers)
        return self.parse_lyrics_page(response.text)

    @classmethod
    def parse_lyrics_page(cls, html: str) -> str:
        """
        Collect the text of every lyrics container on a song page.
        Returns an empty string when the page has none.
        """
        soup = BeautifulSoup(html, "html.parser")
        containers = soup.select(cls.LYRICS_CONTAINER_SELECTOR)
        if not containers:
            logger.warning("Genius page has no lyrics container")
            return ""

        parts: List[str] = []
        for container in containers:
            for excluded in container.select(cls.EXCLUDED_SELECTOR):
                excluded.decompose()
            for br in container.find_all("br"):
                br.replace_with("\n")
            parts.append(container.get_text())

        return "\n".join(parts)

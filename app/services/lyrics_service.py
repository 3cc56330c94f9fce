import asyncio
import logging
from typing import Optional

from app.core.cleaner import LyricsCleaner
from app.core.exceptions import ProviderError
from app.core.query import normalize
from app.schemas.models import LyricsResult
from app.services.cache_service import LyricsCache
from app.services.providers.base import LyricsProvider, SearchResult
from app.services.providers.genius import GeniusProvider
from app.services.result import LookupResult

logger = logging.getLogger(__name__)

class LyricsService:
    """
    High-level service to look up cleaned lyrics for a free-text query.
    Coordinators:
    - Search/Download -> via LyricsProvider (Genius)
    - Memoization -> via LyricsCache, keyed by normalized query
    - Cleaning -> via app.core.cleaner
    """
    SOURCE = "genius.com"
    MAX_FETCH_ATTEMPTS = 3

    def __init__(
        self,
        provider: Optional[LyricsProvider] = None,
        cache: Optional[LyricsCache[LyricsResult]] = None,
        retry_delay: float = 0.5
    ):
        self.provider = provider or GeniusProvider()
        self.cache = cache if cache is not None else LyricsCache()
        self.retry_delay = retry_delay

    async def fetch_lyrics(self, query: str) -> LookupResult[LyricsResult]:
        """
        Resolve a query to cleaned lyrics.

        Returns:
            found with a LyricsResult,
            not_found when nothing matched or the lyrics could not be downloaded,
            provider_error when the search itself failed.
        """
        key = normalize(query)
        if not key:
            return LookupResult.not_found("Lyrics not found")

        cached = self.cache.get(key)
        if cached is not None:
            logger.info(f"Cache Hit: {key}")
            return LookupResult.found(cached)

        logger.info(f"Cache Miss: {key}. Searching {self.provider.provider_name}.")

        try:
            matches = await self.provider.search(key)
        except ProviderError as e:
            logger.error(f"Lyrics search failed for '{key}': {e}")
            return LookupResult.provider_error(str(e))

        if not matches:
            logger.info(f"No songs matched '{key}'")
            return LookupResult.not_found("Lyrics not found")

        song = matches[0]
        raw = await self._download(song)
        if not raw:
            return LookupResult.not_found("Lyrics not found")

        result = LyricsResult(
            source=self.SOURCE,
            title=song.title,
            artist=song.artist,
            lyrics=LyricsCleaner.extract(raw)
        )
        self.cache.set(key, result)
        logger.info(f"Stored lyrics for '{key}': {song.artist} - {song.title}")
        return LookupResult.found(result)

    async def _download(self, song: SearchResult) -> Optional[str]:
        """
        Fetch the raw lyrics of the top match, with retries.
        Failure is reported as None (treated as "no result").
        """
        for attempt in range(self.MAX_FETCH_ATTEMPTS):
            try:
                return await self.provider.get_lyric_content(song.url)
            except ProviderError as e:
                logger.warning(
                    f"Failed to fetch lyrics for {song.title} ({song.url}): {e} "
                    f"(Attempt {attempt+1}/{self.MAX_FETCH_ATTEMPTS})"
                )

            # Backoff before retry
            if attempt < self.MAX_FETCH_ATTEMPTS - 1:
                await asyncio.sleep(self.retry_delay)

        logger.error(f"Given up fetching lyrics for {song.title} after {self.MAX_FETCH_ATTEMPTS} attempts.")
        return None

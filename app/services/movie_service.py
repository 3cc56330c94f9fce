import logging
from typing import Any, Dict, List, Optional

from app.core.exceptions import ProviderError
from app.schemas.models import Movie, MoviePage
from app.services.providers.tmdb import TMDBProvider
from app.services.result import LookupResult

logger = logging.getLogger(__name__)

POSTER_BASE_URL = "https://image.tmdb.org/t/p/w500"
BACKDROP_BASE_URL = "https://image.tmdb.org/t/p/w780"


def map_movie(record: Dict[str, Any]) -> Movie:
    """Remap a TMDB movie record to the public Movie shape."""
    poster_path = record.get("poster_path")
    backdrop_path = record.get("backdrop_path")
    return Movie(
        id=record["id"],
        title=record.get("title"),
        overview=record.get("overview"),
        release_date=record.get("release_date"),
        rating=record.get("vote_average"),
        votes=record.get("vote_count"),
        popularity=record.get("popularity"),
        language=record.get("original_language"),
        poster=f"{POSTER_BASE_URL}{poster_path}" if poster_path else None,
        backdrop=f"{BACKDROP_BASE_URL}{backdrop_path}" if backdrop_path else None,
    )


def _map_results(payload: Optional[Dict[str, Any]]) -> List[Movie]:
    if not isinstance(payload, dict):
        return []
    results = payload.get("results") or []
    return [map_movie(record) for record in results if isinstance(record, dict) and "id" in record]


class MovieService:
    """
    Movie lookups against TMDB. Provider failures come back as provider_error.
    """

    def __init__(self, provider: Optional[TMDBProvider] = None):
        self.provider = provider or TMDBProvider()

    async def find_movie(self, query: str) -> LookupResult[Movie]:
        """Best (first) search match for a title."""
        try:
            payload = await self.provider.search_movies(query)
        except ProviderError as e:
            logger.error(f"Movie search failed for '{query}': {e}")
            return LookupResult.provider_error(str(e))

        movies = _map_results(payload)
        if not movies:
            return LookupResult.not_found("Movie not found")
        return LookupResult.found(movies[0])

    async def search_movies(self, query: str, page: int = 1) -> LookupResult[MoviePage]:
        try:
            payload = await self.provider.search_movies(query, page=page)
        except ProviderError as e:
            logger.error(f"Movie search failed for '{query}' (page {page}): {e}")
            return LookupResult.provider_error(str(e))

        if not isinstance(payload, dict):
            return LookupResult.provider_error("TMDB: unexpected search payload")

        return LookupResult.found(MoviePage(
            page=payload.get("page", page),
            total_pages=payload.get("total_pages", 0),
            total_results=payload.get("total_results", 0),
            results=_map_results(payload),
        ))

    async def get_movie(self, movie_id: int) -> LookupResult[Movie]:
        try:
            record = await self.provider.get_movie(movie_id)
        except ProviderError as e:
            logger.error(f"Movie detail failed for {movie_id}: {e}")
            return LookupResult.provider_error(str(e))

        if not isinstance(record, dict) or "id" not in record:
            return LookupResult.not_found("Movie not found")
        return LookupResult.found(map_movie(record))

    async def trending(self) -> LookupResult[List[Movie]]:
        try:
            payload = await self.provider.trending()
        except ProviderError as e:
            logger.error(f"Trending movies failed: {e}")
            return LookupResult.provider_error(str(e))

        return LookupResult.found(_map_results(payload))

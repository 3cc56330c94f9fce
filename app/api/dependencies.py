from functools import lru_cache
from typing import TypeVar

from fastapi import HTTPException

from app.core.config import settings
from app.services.cache_service import LyricsCache
from app.services.lyrics_service import LyricsService
from app.services.movie_service import MovieService
from app.services.result import LookupResult, LookupStatus

T = TypeVar("T")

# Dependency Injection for Services
# One instance per process so the lyrics cache outlives single requests
@lru_cache
def get_lyrics_service() -> LyricsService:
    cache = LyricsCache(
        max_entries=settings.lyrics_cache_size,
        ttl_seconds=settings.lyrics_cache_ttl
    )
    return LyricsService(cache=cache)

@lru_cache
def get_movie_service() -> MovieService:
    return MovieService()

def unwrap(result: LookupResult[T]) -> T:
    """Return the found value or raise the matching HTTP error (404 / 502)."""
    if result.status is LookupStatus.FOUND:
        return result.value
    if result.status is LookupStatus.NOT_FOUND:
        raise HTTPException(status_code=404, detail=result.detail or "Not found")
    raise HTTPException(status_code=502, detail=result.detail or "Upstream provider error")

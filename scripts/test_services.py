import asyncio
from typing import Dict, List, Optional

from app.core.exceptions import ProviderError
from app.services.cache_service import LyricsCache
from app.services.lyrics_service import LyricsService
from app.services.movie_service import MovieService, map_movie
from app.services.providers.base import LyricsProvider, SearchResult
from app.services.result import LookupStatus

# --- Fakes ---

class FakeLyricsProvider(LyricsProvider):
    def __init__(self, results=None, pages=None, search_error=None, fetch_failures=0):
        super().__init__()
        self.results: List[SearchResult] = results or []
        self.pages: Dict[str, str] = pages or {}
        self.search_error = search_error
        self.fetch_failures = fetch_failures
        self.searches: List[str] = []
        self.fetches: List[str] = []

    @property
    def provider_name(self) -> str:
        return "Fake"

    async def search(self, query: str) -> List[SearchResult]:
        self.searches.append(query)
        if self.search_error:
            raise self.search_error
        return self.results

    async def get_lyric_content(self, url: str) -> str:
        self.fetches.append(url)
        if self.fetch_failures:
            self.fetch_failures -= 1
            raise ProviderError("Fake", "HTTP 500", status_code=500)
        return self.pages.get(url, "")


class FakeTMDBProvider:
    def __init__(self, search=None, movie=None, trending=None, error=None):
        self.search_payload = search
        self.movie_payload = movie
        self.trending_payload = trending
        self.error = error
        self.calls = []

    async def search_movies(self, query: str, page: int = 1):
        self.calls.append(("search", query, page))
        if self.error:
            raise self.error
        return self.search_payload

    async def get_movie(self, movie_id: int) -> Optional[dict]:
        self.calls.append(("movie", movie_id))
        if self.error:
            raise self.error
        return self.movie_payload

    async def trending(self):
        if self.error:
            raise self.error
        return self.trending_payload


HALO = SearchResult(provider="Fake", id="1", title="Halo", artist="Beyoncé", url="https://genius.com/Beyonce-halo-lyrics")
RAW_HALO = "12 Contributors\nHalo Lyrics\n[Verse 1]\nRemember those walls I built?\nRead More"

FIGHT_CLUB = {
    "id": 550,
    "title": "Fight Club",
    "overview": "A ticking-time-bomb insomniac...",
    "release_date": "1999-10-15",
    "vote_average": 8.4,
    "vote_count": 27000,
    "popularity": 61.4,
    "original_language": "en",
    "poster_path": "/pB8BM7pdSp6B6Ih7QZ4DrQ3PmJK.jpg",
    "backdrop_path": None,
}


def run(coro):
    return asyncio.run(coro)


def make_service(provider: FakeLyricsProvider, cache: Optional[LyricsCache] = None) -> LyricsService:
    return LyricsService(provider=provider, cache=cache if cache is not None else LyricsCache(), retry_delay=0)


# --- LyricsService ---

def test_lyrics_found_and_cleaned():
    provider = FakeLyricsProvider(results=[HALO], pages={HALO.url: RAW_HALO})
    result = run(make_service(provider).fetch_lyrics("Beyoncé!! Halo"))

    assert result.status is LookupStatus.FOUND
    assert result.value.source == "genius.com"
    assert result.value.title == "Halo"
    assert result.value.artist == "Beyoncé"
    assert result.value.lyrics == "[Verse 1]\n\nRemember those walls I built?"
    assert provider.searches == ["Beyoncé Halo"]


def test_lyrics_cached_under_normalized_query():
    provider = FakeLyricsProvider(results=[HALO], pages={HALO.url: RAW_HALO})
    cache = LyricsCache()
    service = make_service(provider, cache)

    first = run(service.fetch_lyrics("Beyoncé Halo"))
    second = run(service.fetch_lyrics("  Beyoncé, Halo!  "))

    assert second.value is first.value
    assert provider.searches == ["Beyoncé Halo"]
    assert cache.get("Beyoncé Halo") is first.value


def test_first_match_is_used():
    other = SearchResult(provider="Fake", id="2", title="Halo (Remix)", artist="Someone", url="https://genius.com/remix")
    provider = FakeLyricsProvider(results=[HALO, other], pages={HALO.url: RAW_HALO})
    run(make_service(provider).fetch_lyrics("Halo"))
    assert provider.fetches == [HALO.url]


def test_no_match_is_not_found():
    provider = FakeLyricsProvider(results=[])
    result = run(make_service(provider).fetch_lyrics("zzzz"))
    assert result.status is LookupStatus.NOT_FOUND
    assert result.detail == "Lyrics not found"


def test_empty_query_is_not_found_without_search():
    provider = FakeLyricsProvider(results=[HALO])
    result = run(make_service(provider).fetch_lyrics("?!"))
    assert result.status is LookupStatus.NOT_FOUND
    assert provider.searches == []


def test_search_failure_is_provider_error():
    provider = FakeLyricsProvider(search_error=ProviderError("Fake", "HTTP 503", status_code=503))
    cache = LyricsCache()
    result = run(make_service(provider, cache).fetch_lyrics("Halo"))

    assert result.status is LookupStatus.PROVIDER_ERROR
    assert "HTTP 503" in result.detail
    assert len(cache) == 0


def test_fetch_is_retried():
    provider = FakeLyricsProvider(results=[HALO], pages={HALO.url: RAW_HALO}, fetch_failures=2)
    result = run(make_service(provider).fetch_lyrics("Halo"))
    assert result.ok
    assert len(provider.fetches) == 3


def test_fetch_failure_is_not_found_and_not_cached():
    provider = FakeLyricsProvider(results=[HALO], fetch_failures=5)
    cache = LyricsCache()
    result = run(make_service(provider, cache).fetch_lyrics("Halo"))

    assert result.status is LookupStatus.NOT_FOUND
    assert len(provider.fetches) == LyricsService.MAX_FETCH_ATTEMPTS
    assert len(cache) == 0


def test_empty_lyrics_page_is_not_found():
    provider = FakeLyricsProvider(results=[HALO], pages={})
    result = run(make_service(provider).fetch_lyrics("Halo"))
    assert result.status is LookupStatus.NOT_FOUND


# --- Movie mapping ---

def test_map_movie_renames_fields_and_builds_image_urls():
    movie = map_movie(FIGHT_CLUB)
    assert movie.model_dump(by_alias=True) == {
        "id": 550,
        "title": "Fight Club",
        "overview": "A ticking-time-bomb insomniac...",
        "releaseDate": "1999-10-15",
        "rating": 8.4,
        "votes": 27000,
        "popularity": 61.4,
        "language": "en",
        "poster": "https://image.tmdb.org/t/p/w500/pB8BM7pdSp6B6Ih7QZ4DrQ3PmJK.jpg",
        "backdrop": None,
    }


def test_map_movie_backdrop_url():
    movie = map_movie({"id": 1, "backdrop_path": "/b.jpg"})
    assert movie.backdrop == "https://image.tmdb.org/t/p/w780/b.jpg"
    assert movie.poster is None


# --- MovieService ---

def test_find_movie_returns_first_result():
    provider = FakeTMDBProvider(search={"results": [FIGHT_CLUB, {"id": 2, "title": "Other"}]})
    result = run(MovieService(provider).find_movie("fight club"))
    assert result.ok
    assert result.value.title == "Fight Club"


def test_find_movie_without_results_is_not_found():
    provider = FakeTMDBProvider(search={"results": []})
    result = run(MovieService(provider).find_movie("nothing"))
    assert result.status is LookupStatus.NOT_FOUND
    assert result.detail == "Movie not found"


def test_search_movies_builds_page():
    provider = FakeTMDBProvider(search={"page": 3, "total_pages": 7, "total_results": 130, "results": [FIGHT_CLUB]})
    result = run(MovieService(provider).search_movies("fight", page=3))

    assert provider.calls == [("search", "fight", 3)]
    page = result.value
    assert (page.page, page.total_pages, page.total_results) == (3, 7, 130)
    assert [m.id for m in page.results] == [550]


def test_get_movie_missing_is_not_found():
    result = run(MovieService(FakeTMDBProvider(movie=None)).get_movie(1))
    assert result.status is LookupStatus.NOT_FOUND


def test_trending_maps_results():
    provider = FakeTMDBProvider(trending={"results": [FIGHT_CLUB]})
    result = run(MovieService(provider).trending())
    assert [m.title for m in result.value] == ["Fight Club"]


def test_movie_provider_failure_is_provider_error():
    service = MovieService(FakeTMDBProvider(error=ProviderError("TMDB", "HTTP 401", status_code=401)))
    for coro in (service.find_movie("x"), service.search_movies("x"), service.get_movie(1), service.trending()):
        assert run(coro).status is LookupStatus.PROVIDER_ERROR

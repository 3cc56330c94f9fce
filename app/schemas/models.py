from typing import List, Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

class LyricsResult(BaseModel):
    source: str = "genius.com"
    title: str
    artist: str
    lyrics: str

    # Memoized per query, never mutated after creation
    model_config = ConfigDict(frozen=True)

class Movie(BaseModel):
    id: int
    title: Optional[str] = None
    overview: Optional[str] = None
    release_date: Optional[str] = None
    rating: Optional[float] = None
    votes: Optional[int] = None
    popularity: Optional[float] = None
    language: Optional[str] = None
    poster: Optional[str] = None  # Full image URL (w500)
    backdrop: Optional[str] = None  # Full image URL (w780)

    # Served as camelCase (releaseDate) to match the public API
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class MoviePage(BaseModel):
    page: int = 1
    total_pages: int = 0
    total_results: int = 0
    results: List[Movie] = []

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

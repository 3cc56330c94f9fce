from typing import List
from fastapi import APIRouter, HTTPException, Depends, Query
from app.api.dependencies import get_movie_service, unwrap
from app.schemas.models import Movie, MoviePage
from app.services.movie_service import MovieService
import logging

router = APIRouter()
logger = logging.getLogger(__name__)

def _require_query(q: str) -> str:
    if not q.strip():
        raise HTTPException(status_code=400, detail="q is required")
    return q.strip()

@router.get("/movie", response_model=Movie, summary="Find the best matching movie")
async def find_movie(
    q: str = Query("", description="Movie title"),
    service: MovieService = Depends(get_movie_service)
):
    query = _require_query(q)
    logger.info(f"Received movie request for: {query}")
    return unwrap(await service.find_movie(query))

@router.get("/movies/search", response_model=MoviePage, summary="Search movies (paginated)")
async def search_movies(
    q: str = Query("", description="Movie title"),
    page: int = Query(1, ge=1, description="Result page"),
    service: MovieService = Depends(get_movie_service)
):
    query = _require_query(q)
    return unwrap(await service.search_movies(query, page=page))

@router.get("/movie/{movie_id}", response_model=Movie, summary="Movie detail by TMDB ID")
async def get_movie(
    movie_id: int,
    service: MovieService = Depends(get_movie_service)
):
    return unwrap(await service.get_movie(movie_id))

@router.get("/trending", response_model=List[Movie], summary="Trending movies today")
async def trending_movies(service: MovieService = Depends(get_movie_service)):
    return unwrap(await service.trending())

from fastapi import APIRouter, HTTPException, Depends, Query
from app.api.dependencies import get_lyrics_service, unwrap
from app.core.query import build_query
from app.schemas.models import LyricsResult
from app.services.lyrics_service import LyricsService
import logging

router = APIRouter()
logger = logging.getLogger(__name__)

@router.get("/lyrics", response_model=LyricsResult, summary="Find lyrics for a song")
async def find_lyrics(
    title: str = Query("", description="Song title"),
    artist: str = Query("", description="Artist name (optional)"),
    service: LyricsService = Depends(get_lyrics_service)
):
    """
    Searches Genius for the song and returns its cleaned lyrics.
    Results are memoized per normalized query.
    """
    if not title.strip():
        raise HTTPException(status_code=400, detail="title is required")

    query = build_query(artist.strip(), title.strip())
    logger.info(f"Received lyrics request for: {query}")

    result = await service.fetch_lyrics(query)
    return unwrap(result)

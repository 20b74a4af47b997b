"""Movie search and favorites endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from ..config import Config
from ..core.interfaces import IMovieService
from ..utils import ValidationError, parse_page
from .dependencies import get_config, get_movie_service
from .schemas import (
    FavoriteAdded,
    FavoriteAddedResponse,
    FavoriteRequest,
    FavoritesResponse,
    MessagePayload,
    MessageResponse,
    SearchResponse,
)

router = APIRouter(prefix="/movies", tags=["movies"])


def _parse_page_number(page: Optional[str]) -> int:
    page_number = parse_page(page)
    if page_number is None:
        raise ValidationError("Page must be a valid positive integer")
    return page_number


@router.get("/search", response_model=SearchResponse)
async def search_movies(
    q: Optional[str] = Query(None, description="Movie title to search for"),
    page: Optional[str] = Query(None, description="Result page, starting at 1"),
    service: IMovieService = Depends(get_movie_service),
) -> SearchResponse:
    """Search OMDb by title and flag movies that are already favorites."""
    if q is None or not q.strip():
        raise ValidationError("Search query is required and cannot be empty")

    page_number = _parse_page_number(page)
    result = await service.search_by_title(q.strip(), page_number)
    return SearchResponse(data=result)


@router.post(
    "/favorites", response_model=FavoriteAddedResponse, status_code=status.HTTP_201_CREATED
)
async def add_to_favorites(
    movie: FavoriteRequest,
    service: IMovieService = Depends(get_movie_service),
) -> FavoriteAddedResponse:
    """Add a movie to favorites."""
    added = await service.add_favorite(movie.to_movie())
    return FavoriteAddedResponse(data=FavoriteAdded(movie=added))


@router.delete("/favorites/{imdb_id}", response_model=MessageResponse)
async def remove_from_favorites(
    imdb_id: str,
    service: IMovieService = Depends(get_movie_service),
) -> MessageResponse:
    """Remove a movie from favorites by IMDb ID."""
    if not imdb_id.strip():
        raise ValidationError("imdbID is required")

    await service.remove_favorite(imdb_id.strip())
    return MessageResponse(data=MessagePayload(message="Movie removed from favorites"))


@router.get("/favorites/list", response_model=FavoritesResponse)
async def get_favorites(
    page: Optional[str] = Query(None, description="Page, starting at 1"),
    service: IMovieService = Depends(get_movie_service),
    config: Config = Depends(get_config),
) -> FavoritesResponse:
    """List favorites, one page at a time."""
    page_number = _parse_page_number(page)
    result = await service.list_favorites(page_number, config.favorites.page_size)
    return FavoritesResponse(data=result)

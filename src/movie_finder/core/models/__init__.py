"""Core data models."""

from .movie import FavoriteRecord, FavoritesPage, Movie, SearchPage, SearchResultMovie
from .omdb import OMDbMovie, OMDbSearchResponse

__all__ = [
    "Movie",
    "FavoriteRecord",
    "SearchResultMovie",
    "SearchPage",
    "FavoritesPage",
    "OMDbMovie",
    "OMDbSearchResponse",
]

"""Core service implementations."""

from .favorites_store import JsonFavoritesStore
from .movie_service import MovieService
from .omdb_service import OMDbService

__all__ = [
    "JsonFavoritesStore",
    "OMDbService",
    "MovieService",
]

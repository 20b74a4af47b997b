"""Core interfaces for dependency injection."""

from .favorites_store import IFavoritesStore
from .movie_service import IMovieService
from .omdb_service import IOMDbService

__all__ = [
    "IFavoritesStore",
    "IOMDbService",
    "IMovieService",
]

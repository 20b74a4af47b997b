"""Movie service implementation."""

import math
from typing import Set

from ...infrastructure.logging import LoggerMixin
from ...utils import (
    ConflictError,
    InternalError,
    MovieFinderError,
    NotFoundError,
    ValidationError,
    parse_year,
)
from ..interfaces import IFavoritesStore, IMovieService, IOMDbService
from ..models import FavoritesPage, Movie, OMDbMovie, SearchPage, SearchResultMovie


class MovieService(IMovieService, LoggerMixin):
    """Search and favorites on top of OMDb and the favorites store.

    Favorites are reloaded at the start of every operation; nothing is kept
    in memory between calls.
    """

    def __init__(self, favorites_store: IFavoritesStore, omdb_service: IOMDbService) -> None:
        """Initialize movie service.

        Args:
            favorites_store: Favorites persistence.
            omdb_service: Upstream movie database.
        """
        self._favorites_store = favorites_store
        self._omdb_service = omdb_service

    async def search_by_title(self, title: str, page: int = 1) -> SearchPage:
        """Search movies and flag the ones already in favorites.

        Args:
            title: Title to search for.
            page: Result page.

        Returns:
            Page of search results, empty when OMDb has nothing.
        """
        try:
            response = await self._omdb_service.search(title, page)

            if response.is_empty:
                return SearchPage(movies=[], count=0, total_results="0")

            favorites = await self._favorites_store.load()
            favorite_ids = {favorite.imdb_id for favorite in favorites}

            movies = [self._to_search_result(result, favorite_ids) for result in response.search]

            self.logger.info(f"Found {len(movies)} movies for {title!r} (page {page})")
            return SearchPage(
                movies=movies,
                count=len(movies),
                total_results=response.total_results or "0",
            )

        except MovieFinderError:
            raise
        except Exception as e:
            self.logger.exception(f"Movie search failed: {e}")
            raise InternalError("Failed to search movies") from e

    async def add_favorite(self, movie: Movie) -> Movie:
        """Add a movie to favorites.

        Args:
            movie: Movie to add.

        Returns:
            The added movie.
        """
        try:
            favorites = await self._favorites_store.load()

            if any(favorite.matches(movie.imdb_id) for favorite in favorites):
                raise ConflictError("Movie already in favorites")

            favorites.append(movie)
            await self._favorites_store.save(favorites)

            self.logger.info(f"Added {movie.imdb_id} ({movie.title}) to favorites")
            return movie

        except MovieFinderError:
            raise
        except Exception as e:
            self.logger.exception(f"Adding favorite failed: {e}")
            raise InternalError("Failed to add movie to favorites") from e

    async def remove_favorite(self, imdb_id: str) -> None:
        """Remove the first favorite with the given IMDb ID.

        Args:
            imdb_id: IMDb ID, compared case-insensitively.
        """
        try:
            favorites = await self._favorites_store.load()

            index = next(
                (i for i, favorite in enumerate(favorites) if favorite.matches(imdb_id)), None
            )
            if index is None:
                raise NotFoundError("Movie not found in favorites")

            removed = favorites.pop(index)
            await self._favorites_store.save(favorites)

            self.logger.info(f"Removed {removed.imdb_id} ({removed.title}) from favorites")

        except MovieFinderError:
            raise
        except Exception as e:
            self.logger.exception(f"Removing favorite failed: {e}")
            raise InternalError("Failed to remove movie from favorites") from e

    async def list_favorites(self, page: int = 1, page_size: int = 10) -> FavoritesPage:
        """Get one page of favorites.

        Args:
            page: Page number, starting at 1.
            page_size: Favorites per page.

        Returns:
            Page of favorites. There is always at least one page.
        """
        if page < 1:
            raise ValidationError("Page must be at least 1")
        if page_size < 1:
            raise ValidationError("Page size must be at least 1")

        try:
            favorites = await self._favorites_store.load()

            start = (page - 1) * page_size
            page_items = favorites[start : start + page_size]
            total_pages = max(1, math.ceil(len(favorites) / page_size))

            return FavoritesPage(
                favorites=page_items,
                count=len(page_items),
                total_results=str(len(favorites)),
                current_page=page,
                total_pages=total_pages,
            )

        except MovieFinderError:
            raise
        except Exception as e:
            self.logger.exception(f"Listing favorites failed: {e}")
            raise InternalError("Failed to get favorites") from e

    @staticmethod
    def _to_search_result(result: OMDbMovie, favorite_ids: Set[str]) -> SearchResultMovie:
        return SearchResultMovie(
            title=result.title,
            imdb_id=result.imdb_id,
            year=parse_year(result.year),
            poster=result.poster or None,
            is_favorite=result.imdb_id in favorite_ids,
        )

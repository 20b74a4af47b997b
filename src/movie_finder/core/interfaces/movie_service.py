"""Movie service interface."""

from abc import ABC, abstractmethod

from ..models import FavoritesPage, Movie, SearchPage


class IMovieService(ABC):
    """Interface for movie search and favorites management."""

    @abstractmethod
    async def search_by_title(self, title: str, page: int = 1) -> SearchPage:
        """Search movies and flag the ones already in favorites.

        Args:
            title: Title to search for.
            page: Result page, starting at 1.

        Returns:
            Page of search results.

        Raises:
            UpstreamTimeoutError: If the upstream does not answer in time.
            UpstreamFailureError: If the upstream request fails.
        """
        pass

    @abstractmethod
    async def add_favorite(self, movie: Movie) -> Movie:
        """Add a movie to favorites.

        Args:
            movie: Movie to add.

        Returns:
            The added movie.

        Raises:
            ConflictError: If a movie with the same IMDb ID is already a favorite.
            PersistenceError: If favorites cannot be saved.
        """
        pass

    @abstractmethod
    async def remove_favorite(self, imdb_id: str) -> None:
        """Remove a movie from favorites.

        Args:
            imdb_id: IMDb ID of the movie, compared case-insensitively.

        Raises:
            NotFoundError: If no favorite has this IMDb ID.
            PersistenceError: If favorites cannot be saved.
        """
        pass

    @abstractmethod
    async def list_favorites(self, page: int = 1, page_size: int = 10) -> FavoritesPage:
        """Get one page of favorites.

        Args:
            page: Page number, starting at 1.
            page_size: Favorites per page.

        Returns:
            Page of favorites.

        Raises:
            ValidationError: If page is lower than 1.
        """
        pass

"""Typed client for the movies HTTP API."""

from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from ..core.models import FavoritesPage, Movie, SearchPage
from ..infrastructure.logging import LoggerMixin
from ..utils import ApiClientError


class MovieApiClient(LoggerMixin):
    """Blocking client used by the Streamlit frontend."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialize API client.

        Args:
            base_url: Base URL of the movies API, e.g. ``http://localhost:3001/movies``.
            timeout: Request timeout in seconds.
            session: HTTP session to reuse. If None, a new one is created.
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()

    def search_movies(self, query: str, page: int = 1) -> SearchPage:
        """Search movies by title.

        Raises:
            ValueError: If the query is blank or the page is not a positive integer.
            ApiClientError: If the API call fails.
        """
        if not isinstance(query, str) or not query.strip():
            raise ValueError("Search query cannot be empty")
        self._check_page(page)

        payload = self._request("GET", "/search", params={"q": query.strip(), "page": page})
        return SearchPage.model_validate(payload["data"])

    def get_favorites(self, page: int = 1) -> FavoritesPage:
        """Get one page of favorites."""
        self._check_page(page)

        payload = self._request("GET", "/favorites/list", params={"page": page})
        return FavoritesPage.model_validate(payload["data"])

    def add_to_favorites(self, movie: Movie) -> None:
        """Add a movie to favorites.

        Only the stored fields are sent; the search-time favorite flag is not.
        """
        if not movie.imdb_id or not movie.title:
            raise ValueError("Invalid movie data")

        body = {
            "title": movie.title,
            "imdbID": movie.imdb_id,
            "year": movie.year,
            "poster": movie.poster,
        }
        self._request("POST", "/favorites", json=body)

    def remove_from_favorites(self, imdb_id: str) -> None:
        """Remove a movie from favorites."""
        if not isinstance(imdb_id, str) or not imdb_id.strip():
            raise ValueError("Invalid imdbID")

        self._request("DELETE", f"/favorites/{quote(imdb_id.strip(), safe='')}")

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> Dict[str, Any]:
        url = f"{self._base_url}{path}"
        try:
            response = self._session.request(method, url, timeout=self._timeout, **kwargs)
        except requests.RequestException as e:
            self.logger.error(f"{method} {url} failed: {e}")
            raise ApiClientError(f"Failed to reach movies API: {e}") from e

        return self._handle_response(response)

    @staticmethod
    def _handle_response(response: requests.Response) -> Dict[str, Any]:
        if not response.ok:
            message = None
            try:
                error_data = response.json()
                if isinstance(error_data, dict):
                    message = error_data.get("message")
            except ValueError:
                pass
            message = message or f"HTTP {response.status_code}: {response.reason}"
            raise ApiClientError(message, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise ApiClientError("Movies API returned an invalid response") from e

    @staticmethod
    def _check_page(page: int) -> None:
        if not isinstance(page, int) or isinstance(page, bool) or page < 1:
            raise ValueError("Page must be a positive integer")

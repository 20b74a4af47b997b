"""Streamlit frontend and its API client."""

from .api_client import MovieApiClient
from .query_cache import FAVORITES, SEARCH, QueryCache

__all__ = [
    "MovieApiClient",
    "QueryCache",
    "SEARCH",
    "FAVORITES",
]

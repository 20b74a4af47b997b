"""Utility functions and classes."""

from .exceptions import (
    ApiClientError,
    ConfigurationError,
    ConflictError,
    ErrorKind,
    InternalError,
    MovieFinderError,
    NotFoundError,
    PersistenceError,
    UpstreamFailureError,
    UpstreamTimeoutError,
    ValidationError,
)
from .text_utils import (
    NO_POSTER,
    has_poster,
    normalize_imdb_id,
    parse_page,
    parse_year,
    same_imdb_id,
)

__all__ = [
    "ErrorKind",
    "ApiClientError",
    "MovieFinderError",
    "ConfigurationError",
    "ValidationError",
    "ConflictError",
    "NotFoundError",
    "UpstreamTimeoutError",
    "UpstreamFailureError",
    "PersistenceError",
    "InternalError",
    "NO_POSTER",
    "has_poster",
    "normalize_imdb_id",
    "parse_page",
    "parse_year",
    "same_imdb_id",
]

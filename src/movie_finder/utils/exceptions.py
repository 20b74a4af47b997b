"""Custom exceptions for the application."""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Kinds of failure a request can end in."""

    VALIDATION = "validation"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    UPSTREAM_TIMEOUT = "upstream_timeout"
    UPSTREAM_FAILURE = "upstream_failure"
    PERSISTENCE_FAILURE = "persistence_failure"
    INTERNAL = "internal"


class MovieFinderError(Exception):
    """Base exception for all application errors."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(MovieFinderError):
    """Configuration-related errors."""

    pass


class ValidationError(MovieFinderError):
    """Invalid or missing input."""

    kind = ErrorKind.VALIDATION


class ConflictError(MovieFinderError):
    """Movie is already in favorites."""

    kind = ErrorKind.CONFLICT


class NotFoundError(MovieFinderError):
    """Movie is not in favorites."""

    kind = ErrorKind.NOT_FOUND


class UpstreamTimeoutError(MovieFinderError):
    """Upstream movie database did not answer in time."""

    kind = ErrorKind.UPSTREAM_TIMEOUT


class UpstreamFailureError(MovieFinderError):
    """Upstream movie database request failed."""

    kind = ErrorKind.UPSTREAM_FAILURE


class PersistenceError(MovieFinderError):
    """Favorites could not be written to disk."""

    kind = ErrorKind.PERSISTENCE_FAILURE


class InternalError(MovieFinderError):
    """Unexpected failure while handling a request."""

    kind = ErrorKind.INTERNAL


class ApiClientError(MovieFinderError):
    """Movies API call made by the frontend failed."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code

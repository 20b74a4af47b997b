"""Client-side query cache for the frontend."""

import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple, TypeVar

from tenacity import Retrying, retry_if_exception_type, stop_after_attempt

from ..infrastructure.logging import LoggerMixin
from ..utils import ApiClientError

T = TypeVar("T")

SEARCH = "search"
FAVORITES = "favorites"

# (resource, query, page)
CacheKey = Tuple[str, str, int]


@dataclass
class CacheEntry:
    """Cached query result."""

    value: Any
    fetched_at: float


class QueryCache(LoggerMixin):
    """Caches API query results for a freshness window.

    Entries are only ever dropped, never patched: after a mutation the
    affected resources are invalidated and fetched again on next use.
    """

    def __init__(
        self,
        ttl_seconds: float = 300,
        retry_attempts: int = 2,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize query cache.

        Args:
            ttl_seconds: How long an entry stays fresh.
            retry_attempts: Total attempts for a failing fetch.
            clock: Time source in seconds.
        """
        self._ttl = ttl_seconds
        self._retry_attempts = retry_attempts
        self._clock = clock
        self._entries: Dict[CacheKey, CacheEntry] = {}

    def get(self, key: CacheKey) -> Optional[Any]:
        """Return a fresh cached value, or None."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() - entry.fetched_at >= self._ttl:
            del self._entries[key]
            return None
        return entry.value

    def fetch(self, resource: str, query: str, page: int, loader: Callable[[], T]) -> T:
        """Return the cached value for a query, loading it when missing or stale.

        Args:
            resource: Resource name, e.g. ``search`` or ``favorites``.
            query: Query text; empty for resources without one.
            page: Page number.
            loader: Function that fetches the value from the API.

        Returns:
            Cached or freshly loaded value.

        Raises:
            ApiClientError: If the loader keeps failing.
        """
        key = (resource, query, page)
        cached = self.get(key)
        if cached is not None:
            return cached

        retrying = Retrying(
            stop=stop_after_attempt(self._retry_attempts),
            retry=retry_if_exception_type(ApiClientError),
            reraise=True,
        )
        value = retrying(loader)

        self._entries[key] = CacheEntry(value=value, fetched_at=self._clock())
        return value

    def invalidate(self, *resources: str) -> int:
        """Drop all entries of the given resources.

        Returns:
            Number of dropped entries.
        """
        stale = [key for key in self._entries if key[0] in resources]
        for key in stale:
            del self._entries[key]
        if stale:
            self.logger.debug(f"Invalidated {len(stale)} cached queries for {resources}")
        return len(stale)

    def invalidate_after_mutation(self) -> int:
        """Drop everything a favorites change can affect."""
        return self.invalidate(FAVORITES, SEARCH)

    def clear(self) -> None:
        """Drop all entries."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

"""OMDb service interface."""

from abc import ABC, abstractmethod

from ..models import OMDbSearchResponse


class IOMDbService(ABC):
    """Interface for the upstream movie database."""

    @abstractmethod
    async def search(self, title: str, page: int = 1) -> OMDbSearchResponse:
        """Search movies by title.

        Args:
            title: Title to search for.
            page: Upstream result page, starting at 1.

        Returns:
            Search response; empty when the upstream reports no results.

        Raises:
            UpstreamTimeoutError: If the upstream does not answer in time.
            UpstreamFailureError: If the request fails otherwise.
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release network resources."""
        pass

"""OMDb service implementation."""

import asyncio
from typing import Any, Dict, Optional

import aiohttp
from pydantic import ValidationError as ModelValidationError

from ...config.models import Config
from ...infrastructure.logging import LoggerMixin
from ...utils import UpstreamFailureError, UpstreamTimeoutError
from ..interfaces import IOMDbService
from ..models import OMDbSearchResponse


class OMDbService(IOMDbService, LoggerMixin):
    """OMDb service implementation."""

    def __init__(self, config: Config) -> None:
        """Initialize OMDb service.

        Args:
            config: Application configuration.
        """
        self._config = config
        self._omdb_config = config.omdb
        self._session: Optional[aiohttp.ClientSession] = None

    async def search(self, title: str, page: int = 1) -> OMDbSearchResponse:
        """Search movies by title.

        Args:
            title: Title to search for.
            page: Upstream result page.

        Returns:
            Search response; empty when OMDb reports no results or an error.

        Raises:
            UpstreamTimeoutError: If OMDb does not answer within the timeout.
            UpstreamFailureError: If the request fails otherwise.
        """
        params = {
            "apikey": self._omdb_config.api_key,
            "s": title,
            "type": "movie",
            "page": str(page),
        }

        try:
            data = await self._request(params)
        except asyncio.TimeoutError as e:
            error_msg = "Request timeout - OMDb API is taking too long to respond"
            self.logger.error(f"{error_msg} (query={title!r}, page={page})")
            raise UpstreamTimeoutError(error_msg) from e
        except (aiohttp.ClientError, ValueError) as e:
            self.logger.error(f"OMDb search failed for {title!r}: {e}")
            raise UpstreamFailureError("Failed to search movies - API error") from e

        if not isinstance(data, dict):
            self.logger.error(f"Unexpected OMDb response type: {type(data).__name__}")
            raise UpstreamFailureError("Failed to search movies - API error")

        # OMDb answers "no results" with Response "False" and an Error field
        if data.get("Response") == "False" or data.get("Error"):
            self.logger.debug(f"OMDb returned no results for {title!r}: {data.get('Error')}")
            return OMDbSearchResponse.empty()

        try:
            return OMDbSearchResponse.model_validate(data)
        except ModelValidationError as e:
            self.logger.error(f"Malformed OMDb response for {title!r}: {e}")
            raise UpstreamFailureError("Failed to search movies - API error") from e

    async def _request(self, params: Dict[str, str]) -> Any:
        """Send a request to OMDb and decode the JSON body.

        Args:
            params: Query parameters.

        Returns:
            Decoded response body.
        """
        async with self._get_session().get(self._omdb_config.base_url, params=params) as response:
            response.raise_for_status()
            return await response.json(content_type=None)

    def _get_session(self) -> aiohttp.ClientSession:
        """Get or create HTTP session.

        Returns:
            HTTP session.
        """
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self._omdb_config.timeout)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def close(self) -> None:
        """Close HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> "OMDbService":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

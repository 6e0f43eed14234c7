"""
Serper web search client used to fetch comparison results for records.
"""
import logging
from typing import List, Optional

import httpx
from pydantic import ValidationError

from content_validator.core.config import settings
from content_validator.core.error_handling import ProviderError
from content_validator.core.http_client import request_with_retry
from content_validator.models.search_models import (
    SerperSearchRequest,
    SerperSearchResponse,
    SearchResultItem,
)
from content_validator.services.clients.base_client import BaseSearchClient

logger = logging.getLogger(__name__)


class SerperSearchClient(BaseSearchClient):
    """Client for the Serper Google search API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize Serper client.

        Args:
            api_key: Serper API key (defaults to SERPER_API_KEY setting)
            api_url: Optional custom search endpoint
            timeout: Per-call timeout in seconds (defaults to SEARCH_TIMEOUT_SECONDS)
            transport: Optional httpx transport, used by tests
        """
        super().__init__(
            api_key=api_key if api_key is not None else settings.SERPER_API_KEY,
            endpoint=api_url or settings.SEARCH_API_URL,
            timeout=timeout or settings.SEARCH_TIMEOUT_SECONDS,
            transport=transport,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    @property
    def headers(self) -> dict:
        return {
            "X-API-KEY": self.api_key or "",
            "Content-Type": "application/json",
        }

    async def search(self, query: str, result_count: int) -> List[SearchResultItem]:
        """
        Search Serper and return organic results.

        Args:
            query: Search query string
            result_count: Number of organic results requested

        Returns:
            Organic results in rank order. An absent or empty `organic` list is a
            valid "no results" outcome and returns [].

        Raises:
            ProviderError: Missing API key, transport failure after retries,
                non-2xx status, or a body that is not a Serper response
        """
        if not self.is_configured:
            raise ProviderError("Serper API key not configured")

        request = SerperSearchRequest(q=query, num=result_count)

        client = self._client or self._create_client()
        should_close_client = self._client is None

        try:
            logger.debug(f"Searching Serper: q='{query}' num={result_count}")
            response = await request_with_retry(
                client,
                "POST",
                self.endpoint,
                headers=self.headers,
                json=request.model_dump(),
                timeout=self.timeout,
            )
        except httpx.HTTPError as e:
            raise ProviderError(f"Search request failed: {e!r}") from e
        finally:
            if should_close_client:
                await client.aclose()

        if not response.is_success:
            logger.warning(f"Serper returned status {response.status_code} for q='{query}'")
            raise ProviderError(
                f"Failed to validate with Serper API (status {response.status_code})"
            )

        try:
            payload = SerperSearchResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise ProviderError(f"Invalid response from Serper API: {e}") from e

        results = payload.results
        logger.debug(f"Serper returned {len(results)} organic results for q='{query}'")
        return results

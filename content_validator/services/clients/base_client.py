"""
Base client for web search APIs.

This module provides an abstract base class for search providers, establishing
the interface the validation pipeline depends on and the shared HTTP client
lifecycle.
"""
from abc import ABC, abstractmethod
from typing import List, Optional
import httpx
import logging

from content_validator.core.http_client import get_async_client
from content_validator.models.search_models import SearchResultItem

logger = logging.getLogger(__name__)


class BaseSearchClient(ABC):
    """Abstract base class for search clients.

    Provides common functionality for API clients including:
    - HTTP client management with connection pooling
    - Async context manager support
    - Health check interface

    Subclasses must implement:
    - is_configured: Whether credentials are present
    - search(): Run one query and return ranked results
    """

    def __init__(
        self,
        api_key: Optional[str],
        endpoint: str,
        timeout: float,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """Initialize the search client.

        Args:
            api_key: API key for authentication (may be missing; search then fails)
            endpoint: API endpoint URL
            timeout: Per-call timeout in seconds
            transport: Optional httpx transport (tests inject a MockTransport)
        """
        self.api_key = api_key
        self.endpoint = endpoint
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

        logger.info(f"Initialized {self.__class__.__name__} with timeout={timeout}s")

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """Whether the credentials needed for a search are present."""

    @abstractmethod
    async def search(self, query: str, result_count: int) -> List[SearchResultItem]:
        """Run a search and return ranked results.

        Args:
            query: Search query string
            result_count: Number of results requested

        Returns:
            Results in provider rank order; empty when nothing matched

        Raises:
            ProviderError: Missing credential, transport failure or non-success response
        """

    async def __aenter__(self):
        """Open a pooled HTTP client reused by every search in the block.

        Example:
            async with client:
                results = await client.search("python asyncio", 5)
        """
        self._client = self._create_client()
        logger.debug(f"{self.__class__.__name__} context manager entered")
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
        logger.debug(f"{self.__class__.__name__} context manager exited")

    async def close(self):
        """Close the HTTP client and release resources. Safe to call multiple times."""
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.debug(f"{self.__class__.__name__} HTTP client closed")

    def _create_client(self) -> httpx.AsyncClient:
        return get_async_client(timeout=self.timeout, transport=self._transport)

    async def health_check(self) -> bool:
        """Report whether the client can issue searches.

        Does not call the provider, so every health probe stays free of
        search quota.
        """
        return self.is_configured

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"endpoint={self.endpoint}, "
            f"timeout={self.timeout}s, "
            f"configured={self.is_configured}"
            ")"
        )

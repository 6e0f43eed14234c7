"""
Shared HTTP client utilities: configured AsyncClient and retry helper.
"""
from __future__ import annotations

import asyncio
import logging
import math
from typing import Any, Dict, Iterable, Optional

import httpx

from content_validator.core.config import settings
from content_validator.core.error_handling import request_id_var

logger = logging.getLogger(__name__)


def get_async_client(
    timeout: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """Create a configured AsyncClient with shared limits/timeouts."""
    return httpx.AsyncClient(
        timeout=timeout or settings.HTTP_CLIENT_TIMEOUT,
        limits=httpx.Limits(
            max_keepalive_connections=settings.HTTP_MAX_KEEPALIVE_CONNECTIONS,
            max_connections=settings.HTTP_MAX_CONNECTIONS,
        ),
        transport=transport,
    )


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    headers: Optional[Dict[str, str]] = None,
    json: Any = None,
    timeout: Optional[float] = None,
    retry_statuses: Iterable[int] | None = None,
    max_attempts: Optional[int] = None,
    backoff_seconds: Optional[float] = None,
) -> httpx.Response:
    """
    Perform an HTTP request with bounded retries and exponential backoff.

    - Honors Retry-After headers for 429/503 when present.
    - Retries connection errors (including timeouts) and configured status codes.
    - Returns the last response when a retryable status persists; raises the
      last httpx error when every attempt failed at the transport level.
    """
    attempts = max(1, max_attempts or settings.HTTP_RETRY_ATTEMPTS)
    statuses = tuple(retry_statuses or settings.HTTP_RETRY_STATUSES)
    backoff_base = settings.HTTP_RETRY_BACKOFF_SECONDS if backoff_seconds is None else backoff_seconds
    req_id = request_id_var.get()

    for attempt in range(1, attempts + 1):
        try:
            response = await client.request(
                method,
                url,
                headers=headers,
                json=json,
                timeout=timeout or settings.HTTP_CLIENT_TIMEOUT,
            )

            if response.status_code not in statuses:
                return response

            if attempt == attempts:
                return response

            retry_after = _get_retry_after_seconds(response)
            delay = retry_after or backoff_base * math.pow(2, attempt - 1)
            logger.warning(
                f"[{req_id}] Retryable status {response.status_code} on {method} {url} "
                f"attempt {attempt}/{attempts}, sleeping {delay:.2f}s"
            )
            await asyncio.sleep(delay)

        except httpx.HTTPError as exc:
            if attempt == attempts:
                logger.error(f"[{req_id}] HTTP error after {attempts} attempts: {exc!r}")
                raise
            delay = backoff_base * math.pow(2, attempt - 1)
            logger.warning(
                f"[{req_id}] HTTP error on attempt {attempt}/{attempts}: {exc!r}; sleeping {delay:.2f}s"
            )
            await asyncio.sleep(delay)

    raise RuntimeError("request_with_retry exhausted attempts")


def _get_retry_after_seconds(response: httpx.Response) -> Optional[float]:
    retry_after = response.headers.get("Retry-After")
    if not retry_after:
        return None
    try:
        return float(retry_after)
    except ValueError:
        return None

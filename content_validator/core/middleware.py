"""
HTTP middleware utilities.

Adds request ID propagation for structured logging and response headers.
"""
import logging
import time
import uuid
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from content_validator.core.error_handling import request_id_var

logger = logging.getLogger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Attach/propagate request IDs and log each request with its duration."""

    async def dispatch(self, request: Request, call_next: Callable):
        incoming = request.headers.get("X-Request-ID") or request.headers.get("X-Correlation-ID")
        request_id = incoming or str(uuid.uuid4())
        request_id_var.set(request_id)

        start_time = time.time()
        response = await call_next(request)
        elapsed_ms = (time.time() - start_time) * 1000

        logger.debug(
            f"{request.method} {request.url.path} -> {response.status_code} in {elapsed_ms:.0f}ms"
        )
        response.headers["X-Request-ID"] = request_id
        return response

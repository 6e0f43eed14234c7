"""
Error handling utilities for content validation operations.

This module provides custom exceptions and the route decorator that maps them
onto HTTP responses consistently across the application.
"""
import logging
import time
import uuid
from typing import Awaitable, Callable, TypeVar, ParamSpec
from functools import wraps
from contextvars import ContextVar

from fastapi import HTTPException

logger = logging.getLogger(__name__)

# Context variable for request ID tracking across async contexts
request_id_var: ContextVar[str] = ContextVar('request_id', default='')

# Type variables for generic function signatures
P = ParamSpec('P')
T = TypeVar('T')


# ============================================================================
# Custom Exceptions
# ============================================================================

class ContentValidatorError(Exception):
    """Base exception for content validation errors."""
    pass


class InputError(ContentValidatorError):
    """Uploaded CSV is malformed or empty. Aborts the whole import."""
    pass


class ProviderError(ContentValidatorError):
    """Search provider call failed: missing credential, transport failure or non-success status."""
    pass


class ClientConfigurationError(ContentValidatorError):
    """Service settings cannot produce a working validation pipeline."""
    pass


class RecordNotFoundError(ContentValidatorError):
    """No record (or no data at all) matches the request."""
    pass


# ============================================================================
# Error Handler Decorator
# ============================================================================

def _to_http_exception(exc: Exception, error_message: str, request_id: str, elapsed: float) -> HTTPException:
    """Map an exception from the taxonomy onto an HTTPException and log it."""
    headers = {"X-Request-ID": request_id}

    if isinstance(exc, InputError):
        logger.error(f"[{request_id}] {error_message} - Input error after {elapsed:.2f}s: {exc}")
        return HTTPException(status_code=400, detail=str(exc), headers=headers)
    if isinstance(exc, RecordNotFoundError):
        logger.warning(f"[{request_id}] {error_message} - Not found after {elapsed:.2f}s: {exc}")
        return HTTPException(status_code=404, detail=str(exc), headers=headers)
    if isinstance(exc, ClientConfigurationError):
        logger.error(f"[{request_id}] {error_message} - Configuration error after {elapsed:.2f}s: {exc}")
        return HTTPException(
            status_code=500,
            detail=f"Service configuration error: {str(exc)}",
            headers=headers
        )

    logger.exception(f"[{request_id}] {error_message} - Unexpected error after {elapsed:.2f}s: {exc}")
    return HTTPException(status_code=500, detail=f"{error_message}: {str(exc)}", headers=headers)


def handle_validation_errors(
    error_message: str = "Operation failed"
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]:
    """
    Decorator to handle errors in route handlers.

    Converts content validation errors to appropriate HTTP exceptions and logs
    them, with request tracking and timing.

    Args:
        error_message: Custom error message prefix

    Returns:
        Decorated coroutine function with error handling

    Example:
        @handle_validation_errors("Failed to import CSV")
        async def import_records(file: UploadFile):
            ...
    """
    def decorator(func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T]]:

        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            if not request_id_var.get():
                request_id_var.set(str(uuid.uuid4()))

            request_id = request_id_var.get()
            start_time = time.time()

            try:
                logger.info(f"[{request_id}] Starting {func.__name__}")
                result = await func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as e:
                elapsed = time.time() - start_time
                raise _to_http_exception(e, error_message, request_id, elapsed) from e

            elapsed = time.time() - start_time

            from content_validator.core.config import settings
            threshold_ms = settings.RESPONSE_TIME_WARNING_THRESHOLD_MS
            elapsed_ms = elapsed * 1000
            if elapsed_ms > threshold_ms:
                logger.warning(
                    f"[{request_id}] SLOW RESPONSE: {func.__name__} took {elapsed:.2f}s "
                    f"({elapsed_ms:.0f}ms > {threshold_ms}ms threshold)"
                )
            else:
                logger.info(f"[{request_id}] Completed {func.__name__} in {elapsed:.2f}s")

            return result

        return wrapper

    return decorator

"""
FastAPI exception handlers.

Render HTTP and request-validation errors as JSON bodies that carry the
request id, so clients can correlate failures with server logs.
"""
import logging

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from content_validator.core.error_handling import request_id_var

logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Return HTTPException details as JSON with the request id attached."""
    request_id = request_id_var.get()
    headers = dict(exc.headers or {})
    if request_id:
        headers.setdefault("X-Request-ID", request_id)

    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "request_id": request_id or None},
        headers=headers,
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Return request validation errors (bad query/body parameters) as 422 JSON."""
    request_id = request_id_var.get()
    logger.warning(f"[{request_id}] Request validation failed on {request.url.path}: {exc.errors()}")

    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_encoder(exc.errors()), "request_id": request_id or None},
        headers={"X-Request-ID": request_id} if request_id else None,
    )

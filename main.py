"""
FastAPI application for reviewing scraped web content.
Validates CSV records against Serper search results and classifies each one
as approved, rejected or pending for human review.
"""
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from content_validator import __version__
from content_validator.api.routes import health, records
from content_validator.core.logging import setup_logging
from content_validator.core.exceptions import http_exception_handler, validation_exception_handler
from content_validator.core.middleware import RequestIDMiddleware

# Configure logging
setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Scraped Content Validator",
    description="API for validating scraped content records against live search results",
    version=__version__
)

# Middleware
app.add_middleware(RequestIDMiddleware)

# Add exception handlers
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)

# Include routers
app.include_router(health.router)
app.include_router(records.router)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000, workers=1)

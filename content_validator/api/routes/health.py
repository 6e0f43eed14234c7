from fastapi import APIRouter

from content_validator import __version__
from content_validator.core.config import settings
from content_validator.services.review_store import get_review_store

router = APIRouter()


@router.get("/")
async def root():
    """Basic health check endpoint."""
    return {"message": "Scraped Content Validator API", "status": "healthy"}


@router.get("/health")
async def health_check():
    """
    Health check endpoint.

    Reports search provider configuration and the loaded working set. A
    missing search credential leaves the service usable (every record is
    marked pending), so it only degrades the status.
    """
    store = get_review_store()
    health_status = {
        "status": "healthy",
        "service": "Scraped Content Validator",
        "version": __version__,
        "search_configured": settings.search_configured,
        "search_api_url": settings.SEARCH_API_URL,
        "validation_concurrency": settings.VALIDATION_CONCURRENCY,
        "records_loaded": len(store),
        "records_file": store.file_name,
        "status_counts": await store.status_counts(),
    }

    if not settings.search_configured:
        health_status["status"] = "degraded"
        health_status["warning"] = "SERPER_API_KEY not configured; validations will stay pending"

    return health_status

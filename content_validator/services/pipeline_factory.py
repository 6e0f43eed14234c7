"""
Factory for the validation pipeline.

Centralizes wiring of the search client, validator and pipeline so routes and
scripts build them the same way.
"""
import logging
from typing import Optional

from content_validator.core.error_handling import ClientConfigurationError
from content_validator.services.clients.base_client import BaseSearchClient
from content_validator.services.search_client import SerperSearchClient
from content_validator.services.validation import ClassificationPolicy, RecordValidator, ValidationPipeline

logger = logging.getLogger(__name__)


def build_validation_pipeline(
    search_client: Optional[BaseSearchClient] = None,
    concurrency: Optional[int] = None
) -> ValidationPipeline:
    """
    Build a validation pipeline from settings.

    A new pipeline (and search client) is built per import run, so settings
    changes such as a newly provided SERPER_API_KEY apply to the next import.

    Args:
        search_client: Search client override (defaults to SerperSearchClient)
        concurrency: Worker count override (defaults to VALIDATION_CONCURRENCY)

    Returns:
        Configured ValidationPipeline

    Raises:
        ClientConfigurationError: Classification thresholds overlap
    """
    try:
        policy = ClassificationPolicy()
    except ValueError as e:
        raise ClientConfigurationError(str(e)) from e

    client = search_client or SerperSearchClient()
    if not client.is_configured:
        logger.warning("Search provider not configured; every record will be marked pending")
    return ValidationPipeline(RecordValidator(client, policy=policy), concurrency=concurrency)

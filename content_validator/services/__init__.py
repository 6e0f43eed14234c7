"""Services package for search, validation, CSV import/export and review state."""

from content_validator.services.search_client import SerperSearchClient
from content_validator.services.review_store import ReviewStore, get_review_store
from content_validator.services.pipeline_factory import build_validation_pipeline
from content_validator.services.validation import RecordValidator, ValidationPipeline, ValidationReport

__all__ = [
    'SerperSearchClient',
    'ReviewStore',
    'get_review_store',
    'build_validation_pipeline',
    'RecordValidator',
    'ValidationPipeline',
    'ValidationReport',
]

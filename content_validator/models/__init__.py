"""Data models for records, review state, search payloads and API validation."""

from .record_models import (
    ContentRecord,
    ContentValidation,
    ReviewState,
    ReviewStatus,
    ReviewedRecord,
    SearchValidation,
    OVERRIDE_STATUSES,
)
from .search_models import (
    SerperSearchRequest,
    SerperSearchResponse,
    SearchResultItem,
)
from .step_result import Ok, Err, FailureKind, StepResult
from .api_models import (
    ImportResponse,
    RecordListResponse,
    ReviewedRecordResponse,
    SearchValidationResponse,
)

__all__ = [
    "ContentRecord",
    "ContentValidation",
    "ReviewState",
    "ReviewStatus",
    "ReviewedRecord",
    "SearchValidation",
    "OVERRIDE_STATUSES",
    "SerperSearchRequest",
    "SerperSearchResponse",
    "SearchResultItem",
    "Ok",
    "Err",
    "FailureKind",
    "StepResult",
    "ImportResponse",
    "RecordListResponse",
    "ReviewedRecordResponse",
    "SearchValidationResponse",
]

"""
Pydantic models for API request and response structures.
"""
from pydantic import BaseModel, Field
from typing import List, Optional, Dict
from datetime import datetime

from content_validator.models.record_models import ReviewedRecord, ReviewStatus


class SearchValidationResponse(BaseModel):
    """Search comparison summary for a record."""

    is_valid: bool = Field(..., description="True when confidence is above the approval threshold")
    message: str = Field(..., description="Classification message with the confidence percentage")


class ReviewedRecordResponse(BaseModel):
    """A validated record with its review state."""

    id: str = Field(..., description="Row index + 1 of the record in the imported CSV")
    fields: Dict[str, str] = Field(..., description="Imported column values in CSV order")
    status: ReviewStatus = Field(..., description="pending, approved or rejected")
    confidence: float = Field(..., ge=0.0, le=1.0, description="Keyword match ratio against search results")
    message: str = Field(..., description="Explanation of the automated decision")
    issues: List[str] = Field(default_factory=list, description="Review notes; empty when approved")
    imported_at: datetime = Field(..., description="When the record was validated")
    search_validation: Optional[SearchValidationResponse] = None

    @classmethod
    def from_reviewed(cls, reviewed: ReviewedRecord) -> "ReviewedRecordResponse":
        review = reviewed.review
        search_validation = None
        if review.search_validation is not None:
            search_validation = SearchValidationResponse(
                is_valid=review.search_validation.is_valid,
                message=review.search_validation.message,
            )
        return cls(
            id=reviewed.record_id,
            fields=reviewed.record.to_row(),
            status=review.status,
            confidence=review.confidence,
            message=review.message,
            issues=list(review.issues),
            imported_at=review.imported_at,
            search_validation=search_validation,
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": "1",
                "fields": {
                    "url": "https://example.com/python-asyncio",
                    "title": "Python asyncio tutorial",
                    "content": "Learn how coroutines and event loops work in Python asyncio."
                },
                "status": "approved",
                "confidence": 0.72,
                "message": "Content verified and relevant",
                "issues": [],
                "imported_at": "2025-11-06T14:30:45Z",
                "search_validation": {
                    "is_valid": True,
                    "message": "Content verified and relevant (Confidence: 72%)"
                }
            }
        }
    }


class ImportResponse(BaseModel):
    """Response model for a CSV import."""

    file_name: str = Field(..., description="Original filename")
    record_count: int = Field(..., description="Number of non-blank records validated")
    headers: List[str] = Field(..., description="Imported column names in CSV order")
    status_counts: Dict[str, int] = Field(..., description="Record count per review status")
    records: List[ReviewedRecordResponse]


class RecordListResponse(BaseModel):
    """Response model for listing records."""

    status_filter: str = Field(..., description="Applied filter: all, pending, approved or rejected")
    file_name: Optional[str] = Field(None, description="Filename of the import that produced the working set")
    total: int
    headers: List[str]
    records: List[ReviewedRecordResponse]

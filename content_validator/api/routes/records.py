"""
Record review API endpoints.

Import a CSV of scraped records, list and inspect validated records, override
their status, and export them back to CSV.
"""
from enum import Enum
import logging

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import Response

from content_validator.core.constants import EXPORT_FILENAME
from content_validator.core.error_handling import InputError, RecordNotFoundError, handle_validation_errors
from content_validator.core.security import verify_api_key
from content_validator.models.api_models import ImportResponse, RecordListResponse, ReviewedRecordResponse
from content_validator.models.record_models import ReviewStatus
from content_validator.services import csv_codec
from content_validator.services.pipeline_factory import build_validation_pipeline
from content_validator.services.review_store import get_review_store

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/records", tags=["records"], dependencies=[Depends(verify_api_key)])


class StatusFilter(str, Enum):
    ALL = "all"
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    def as_status(self):
        return None if self is StatusFilter.ALL else ReviewStatus(self.value)


@router.post("/import", response_model=ImportResponse)
@handle_validation_errors("Failed to import CSV")
async def import_records(file: UploadFile = File(...)):
    """
    Import a CSV of scraped records and validate every non-blank row.

    The previous working set is replaced only when the import succeeds.

    Args:
        file: CSV file with a header row

    Returns:
        Imported headers, status counts and the reviewed records
    """
    parsed = await csv_codec.read_upload(file)
    records = parsed.to_records()

    pipeline = build_validation_pipeline()
    reviewed = await pipeline.run(records)

    if not reviewed:
        raise InputError("No valid data rows found in CSV")

    store = get_review_store()
    await store.replace_all(parsed.headers, reviewed, file_name=file.filename)

    logger.info(f"Imported {len(reviewed)} records from {file.filename}")
    return ImportResponse(
        file_name=file.filename,
        record_count=len(reviewed),
        headers=parsed.headers,
        status_counts=await store.status_counts(),
        records=[ReviewedRecordResponse.from_reviewed(item) for item in reviewed],
    )


@router.get("", response_model=RecordListResponse)
@handle_validation_errors("Failed to list records")
async def list_records(status: StatusFilter = StatusFilter.ALL):
    """List records in import order, optionally filtered by status."""
    store = get_review_store()
    records = await store.list(status.as_status())
    return RecordListResponse(
        status_filter=status.value,
        file_name=store.file_name,
        total=len(records),
        headers=store.headers,
        records=[ReviewedRecordResponse.from_reviewed(item) for item in records],
    )


@router.get("/export")
@handle_validation_errors("Failed to export records")
async def export_records(status: StatusFilter = StatusFilter.ALL, include_review: bool = False):
    """
    Export records (respecting the status filter) as a CSV download.

    Review fields are appended only when include_review is true.
    """
    store = get_review_store()
    records = await store.list(status.as_status())
    if not records:
        raise RecordNotFoundError("No data available to export.")

    content = csv_codec.export_csv(records, include_review=include_review)
    logger.info(f"Exporting {len(records)} records (filter={status.value}, include_review={include_review})")
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
    )


@router.get("/{record_id}", response_model=ReviewedRecordResponse)
@handle_validation_errors("Failed to get record")
async def get_record(record_id: str):
    """Get a single record with its review details."""
    item = await get_review_store().get(record_id)
    return ReviewedRecordResponse.from_reviewed(item)


@router.post("/{record_id}/approve", response_model=ReviewedRecordResponse)
@handle_validation_errors("Failed to approve record")
async def approve_record(record_id: str):
    """Mark a record approved. Overrides are always allowed and idempotent."""
    item = await get_review_store().set_status(record_id, ReviewStatus.APPROVED)
    return ReviewedRecordResponse.from_reviewed(item)


@router.post("/{record_id}/reject", response_model=ReviewedRecordResponse)
@handle_validation_errors("Failed to reject record")
async def reject_record(record_id: str):
    """Mark a record rejected. Overrides are always allowed and idempotent."""
    item = await get_review_store().set_status(record_id, ReviewStatus.REJECTED)
    return ReviewedRecordResponse.from_reviewed(item)

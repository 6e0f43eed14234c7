"""
In-memory store for the current working set of reviewed records.

One CSV import fills it; reviewer overrides and exports read and update it.
"""
import asyncio
import logging
from typing import Dict, List, Optional

from content_validator.core.error_handling import RecordNotFoundError
from content_validator.models.record_models import ReviewedRecord, ReviewStatus

logger = logging.getLogger(__name__)


class ReviewStore:
    """In-memory working set of reviewed records.

    The validation pipeline supplies whole batches through `replace_all`;
    reviewers change a record only through `set_status`.
    """

    def __init__(self):
        self._records: Dict[str, ReviewedRecord] = {}
        self._headers: List[str] = []
        self._file_name: Optional[str] = None
        self._lock = asyncio.Lock()

    async def replace_all(
        self,
        headers: List[str],
        records: List[ReviewedRecord],
        file_name: Optional[str] = None
    ) -> None:
        """Swap in a freshly imported batch, discarding the previous one."""
        async with self._lock:
            self._records = {item.record_id: item for item in records}
            self._headers = list(headers)
            self._file_name = file_name
        logger.info(f"Review store now holds {len(records)} records from {file_name or 'upload'}")

    async def list(self, status: Optional[ReviewStatus] = None) -> List[ReviewedRecord]:
        async with self._lock:
            return [
                item for item in self._records.values()
                if status is None or item.status == status
            ]

    async def get(self, record_id: str) -> ReviewedRecord:
        async with self._lock:
            try:
                return self._records[record_id]
            except KeyError:
                raise RecordNotFoundError(f"Record not found: {record_id}")

    async def set_status(self, record_id: str, status: ReviewStatus) -> ReviewedRecord:
        """Apply a reviewer decision; confidence, message and issues are untouched."""
        async with self._lock:
            item = self._records.get(record_id)
            if item is None:
                raise RecordNotFoundError(f"Record not found: {record_id}")
            previous = item.review.status
            item.review.override(status)
        logger.info(f"Record {record_id} status {previous.value} -> {item.review.status.value} (manual)")
        return item

    async def status_counts(self) -> Dict[str, int]:
        async with self._lock:
            counts = {status.value: 0 for status in ReviewStatus}
            for item in self._records.values():
                counts[item.status.value] += 1
            return counts

    @property
    def headers(self) -> List[str]:
        return list(self._headers)

    @property
    def file_name(self) -> Optional[str]:
        return self._file_name

    def __len__(self) -> int:
        return len(self._records)


# Singleton store instance
_review_store: Optional[ReviewStore] = None


def get_review_store() -> ReviewStore:
    """Get the process-wide review store."""
    global _review_store
    if _review_store is None:
        _review_store = ReviewStore()
    return _review_store

"""
Record and review-state models.

This module provides the data structures that flow through the validation
pipeline: imported rows, automated validation outcomes and the review state a
human can override.
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional

from content_validator.core.constants import KNOWN_FIELDS, TEXT_FIELDS


class ReviewStatus(str, Enum):
    """Tri-state review decision for a record."""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    def __str__(self) -> str:
        return self.value


# Statuses a reviewer may set by hand
OVERRIDE_STATUSES = (ReviewStatus.APPROVED, ReviewStatus.REJECTED)


@dataclass
class ContentRecord:
    """One imported CSV row: known text fields plus every other column."""

    row_index: int
    """Zero-based position among parsed data rows."""

    title: str = ""
    content: str = ""
    description: str = ""
    text: str = ""
    url: str = ""

    extra_fields: Dict[str, str] = field(default_factory=dict)
    """Columns other than the known fields, keyed by header name."""

    columns: List[str] = field(default_factory=list)
    """Column names of the row in CSV order."""

    @classmethod
    def from_row(cls, row_index: int, row: Dict[str, object]) -> "ContentRecord":
        """Build a record from a header->value mapping, stringifying values."""
        values = {key: "" if value is None else str(value) for key, value in row.items()}
        known = {name: values[name] for name in KNOWN_FIELDS if name in values}
        extra = {key: value for key, value in values.items() if key not in KNOWN_FIELDS}
        return cls(row_index=row_index, extra_fields=extra, columns=list(values.keys()), **known)

    @property
    def record_id(self) -> str:
        """Stable identifier: row index + 1."""
        return str(self.row_index + 1)

    @property
    def text_values(self) -> List[str]:
        """Non-empty text fields in query priority order."""
        return [getattr(self, name) for name in TEXT_FIELDS if getattr(self, name)]

    @property
    def is_blank(self) -> bool:
        """True when every cell of the row is empty or whitespace."""
        return not any(value.strip() for value in self.to_row().values())

    def to_row(self) -> Dict[str, str]:
        """Original key->value mapping in column order."""
        row = {}
        for column in self.columns:
            if column in KNOWN_FIELDS:
                row[column] = getattr(self, column)
            else:
                row[column] = self.extra_fields.get(column, "")
        return row


@dataclass(frozen=True)
class ContentValidation:
    """Outcome of validating one record against search results."""
    status: ReviewStatus
    message: str
    confidence: float


@dataclass
class SearchValidation:
    """Summary of the search comparison shown to reviewers."""
    is_valid: bool
    message: str


@dataclass
class ReviewState:
    """Review state attached to a record at validation time.

    Only `override()` mutates it afterwards, and only the status changes.
    """

    status: ReviewStatus
    confidence: float
    message: str
    issues: List[str] = field(default_factory=list)
    imported_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    search_validation: Optional[SearchValidation] = None

    def override(self, status: ReviewStatus) -> None:
        """Apply a human decision. Repeating the same decision is a no-op."""
        status = ReviewStatus(status)
        if status not in OVERRIDE_STATUSES:
            raise ValueError(
                f"Status must be one of: {', '.join(s.value for s in OVERRIDE_STATUSES)}"
            )
        self.status = status


@dataclass
class ReviewedRecord:
    """A record together with its review state."""
    record: ContentRecord
    review: ReviewState

    @property
    def record_id(self) -> str:
        return self.record.record_id

    @property
    def status(self) -> ReviewStatus:
        return self.review.status

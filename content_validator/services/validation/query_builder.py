"""
Search query and comparison text construction from record text fields.
"""
import logging
from typing import Optional

from content_validator.core.config import settings
from content_validator.models.record_models import ContentRecord

logger = logging.getLogger(__name__)


class QueryBuilder:
    """Derive search and comparison strings from a record's text fields."""

    def __init__(self, max_length: Optional[int] = None):
        """
        Args:
            max_length: Query length cap (defaults to QUERY_MAX_LENGTH setting)
        """
        self.max_length = max_length if max_length is not None else settings.QUERY_MAX_LENGTH

    def build_query(self, record: ContentRecord) -> str:
        """
        Build a bounded-length search query.

        Joins title, content, description and text (in that order, skipping
        empty ones) with single spaces, then keeps the first `max_length`
        characters.

        Args:
            record: Record to build the query for

        Returns:
            Query string, or "" when no text field has content. Callers treat
            "" as insufficient content, not as an error.
        """
        return " ".join(record.text_values)[:self.max_length]

    def build_comparison_text(self, record: ContentRecord) -> str:
        """Same join as build_query, untruncated and lowercased."""
        return " ".join(record.text_values).lower()

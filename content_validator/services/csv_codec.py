"""
CSV import and export for scraped content records.

Parsing and serialization go through pandas; every cell is treated as a
string so scraped values are never coerced to numbers or NaN.
"""
import csv
import io
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

import pandas as pd
from fastapi import UploadFile

from content_validator.core.config import settings
from content_validator.core.constants import (
    ACCEPTED_CSV_CONTENT_TYPES,
    ISSUE_SEPARATOR,
    REVIEW_EXPORT_FIELDS,
)
from content_validator.core.error_handling import InputError
from content_validator.models.record_models import ContentRecord, ReviewedRecord

logger = logging.getLogger(__name__)


@dataclass
class ParsedCsv:
    """Header and data rows of a CSV document."""
    headers: List[str]
    rows: List[Dict[str, str]]

    def to_records(self) -> List[ContentRecord]:
        return [ContentRecord.from_row(index, row) for index, row in enumerate(self.rows)]


def parse_csv(content: bytes) -> ParsedCsv:
    """
    Parse CSV bytes into a header list and string-valued rows.

    Header names are stripped of surrounding whitespace and blank lines are
    skipped. Rows whose cells are all empty are kept here; the validation
    pipeline drops them.

    Args:
        content: Raw CSV document (UTF-8, optional BOM)

    Returns:
        ParsedCsv

    Raises:
        InputError: Empty document, undecodable bytes, parser failure, or no data rows
    """
    if not content or not content.strip():
        raise InputError("No valid data found in CSV")

    try:
        df = pd.read_csv(
            io.BytesIO(content),
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            encoding="utf-8-sig",
        )
    except pd.errors.EmptyDataError:
        raise InputError("No valid data found in CSV")
    except (pd.errors.ParserError, UnicodeDecodeError, ValueError) as e:
        raise InputError(f"Error parsing CSV: {e}") from e

    df.columns = [str(column).strip() for column in df.columns]
    if df.columns.duplicated().any():
        duplicates = sorted(set(df.columns[df.columns.duplicated()]))
        raise InputError(f"Error parsing CSV: duplicate column names after trimming: {duplicates}")

    if df.empty:
        raise InputError("No valid data found in CSV")

    # Short rows leave missing cells as NaN
    df = df.fillna("")
    headers = list(df.columns)
    rows = df.to_dict(orient="records")
    logger.info(f"Parsed CSV with {len(rows)} rows and {len(headers)} columns")
    return ParsedCsv(headers=headers, rows=rows)


def _enforce_size_limit(size_bytes: int) -> None:
    max_bytes = settings.MAX_UPLOAD_MB * 1024 * 1024
    if size_bytes > max_bytes:
        raise InputError(
            f"CSV too large ({size_bytes / (1024 * 1024):.1f} MB); limit is {settings.MAX_UPLOAD_MB} MB"
        )


async def read_upload(file: UploadFile) -> ParsedCsv:
    """
    Validate and parse an uploaded CSV file.

    Raises:
        InputError: Not a CSV upload, too large, or unparseable
    """
    if not file.filename:
        raise InputError("No file selected")
    if not file.filename.lower().endswith(".csv") or file.content_type not in ACCEPTED_CSV_CONTENT_TYPES:
        raise InputError("Please upload a CSV file")

    content = await file.read()
    _enforce_size_limit(len(content))
    logger.info(f"Received CSV upload: {file.filename} ({len(content)} bytes)")
    return parse_csv(content)


def collect_headers(records: Iterable[ContentRecord]) -> List[str]:
    """Union of record columns in first-seen order."""
    headers: List[str] = []
    seen = set()
    for record in records:
        for column in record.columns:
            if column not in seen:
                seen.add(column)
                headers.append(column)
    return headers


def _review_columns(item: ReviewedRecord) -> Dict[str, str]:
    review = item.review
    return {
        "id": item.record_id,
        "status": review.status.value,
        "confidence": f"{review.confidence:.4f}",
        "message": review.message,
        "issues": ISSUE_SEPARATOR.join(review.issues),
        "imported_at": review.imported_at.isoformat(),
    }


def export_csv(
    records: List[ReviewedRecord],
    include_review: bool = False,
    headers: Optional[List[str]] = None
) -> str:
    """
    Serialize reviewed records to CSV text.

    Every cell is wrapped in double quotes; embedded double quotes are
    doubled. Review fields are appended after the imported columns only when
    `include_review` is set.

    Args:
        records: Records to export, in output order
        include_review: Append id/status/confidence/message/issues/imported_at
        headers: Column order override (defaults to the union of record columns)

    Returns:
        CSV document with a header row
    """
    columns = list(headers) if headers is not None else collect_headers(item.record for item in records)
    if include_review:
        columns += [name for name in REVIEW_EXPORT_FIELDS if name not in columns]

    rows = []
    for item in records:
        row = item.record.to_row()
        if include_review:
            row.update(_review_columns(item))
        rows.append(row)

    df = pd.DataFrame(rows, columns=columns, dtype=str).fillna("")
    return df.to_csv(index=False, quoting=csv.QUOTE_ALL, lineterminator="\n")

"""
Validation orchestration for scraped content records.

Coordinates query building, search, keyword extraction, relevance scoring and
classification, and turns each record into a ReviewState.
"""
import asyncio
import logging
import time
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Sequence

from content_validator.core.config import settings
from content_validator.core.constants import (
    ISSUE_PENDING_TEMPLATE,
    ISSUE_REJECTED_TEMPLATE,
    MESSAGE_INSUFFICIENT_CONTENT,
    MESSAGE_MISSING_CREDENTIALS,
    MESSAGE_NO_KEYWORDS,
    MESSAGE_NO_RESULTS,
    MESSAGE_VALIDATION_ERROR,
    SEARCH_VALIDATION_MESSAGE_TEMPLATE,
)
from content_validator.core.error_handling import ProviderError
from content_validator.models.record_models import (
    ContentRecord,
    ContentValidation,
    ReviewState,
    ReviewStatus,
    ReviewedRecord,
    SearchValidation,
)
from content_validator.models.search_models import SearchResultItem
from content_validator.models.step_result import Err, FailureKind, Ok, StepResult
from content_validator.services.clients.base_client import BaseSearchClient

from .classification_policy import ClassificationPolicy
from .keyword_extractor import KeywordExtractor
from .query_builder import QueryBuilder
from .relevance_scorer import RelevanceScorer

logger = logging.getLogger(__name__)


@dataclass
class ValidationReport:
    """Summary of one pipeline run."""
    total_rows: int
    validated_records: int
    skipped_blank_rows: int
    status_counts: Dict[str, int] = field(default_factory=dict)
    inconclusive_records: List[str] = field(default_factory=list)
    total_time: float = 0.0


class RecordValidator:
    """Validate a single record against live search results."""

    def __init__(
        self,
        search_client: BaseSearchClient,
        query_builder: Optional[QueryBuilder] = None,
        keyword_extractor: Optional[KeywordExtractor] = None,
        relevance_scorer: Optional[RelevanceScorer] = None,
        policy: Optional[ClassificationPolicy] = None,
        result_count: Optional[int] = None
    ):
        """
        Args:
            search_client: Search provider used for comparison results
            query_builder: Query construction (default QueryBuilder())
            keyword_extractor: Keyword extraction (default KeywordExtractor())
            relevance_scorer: Scoring (default RelevanceScorer())
            policy: Classification thresholds (default ClassificationPolicy())
            result_count: Search results requested per record (default SEARCH_RESULT_COUNT)
        """
        self.search_client = search_client
        self.query_builder = query_builder or QueryBuilder()
        self.keyword_extractor = keyword_extractor or KeywordExtractor()
        self.relevance_scorer = relevance_scorer or RelevanceScorer()
        self.policy = policy or ClassificationPolicy()
        self.result_count = settings.SEARCH_RESULT_COUNT if result_count is None else result_count

    # ============================================================================
    # PIPELINE STEPS
    # ============================================================================

    def _check_credentials(self) -> StepResult[None]:
        if not self.search_client.is_configured:
            return Err(FailureKind.MISSING_CREDENTIALS, MESSAGE_MISSING_CREDENTIALS)
        return Ok(None)

    def _build_query(self, record: ContentRecord) -> StepResult[str]:
        query = self.query_builder.build_query(record)
        if not query:
            return Err(FailureKind.INSUFFICIENT_CONTENT, MESSAGE_INSUFFICIENT_CONTENT)
        return Ok(query)

    async def _search(self, query: str) -> StepResult[List[SearchResultItem]]:
        try:
            results = await self.search_client.search(query, self.result_count)
        except ProviderError as e:
            return Err(FailureKind.PROVIDER_ERROR, MESSAGE_VALIDATION_ERROR.format(detail=e))
        if not results:
            return Err(FailureKind.NO_RESULTS, MESSAGE_NO_RESULTS)
        return Ok(results)

    def _extract_keywords(self, results: List[SearchResultItem]) -> StepResult[FrozenSet[str]]:
        keywords = self.keyword_extractor.extract(results)
        if not keywords:
            return Err(FailureKind.NO_KEYWORDS, MESSAGE_NO_KEYWORDS)
        return Ok(keywords)

    def _score(self, record: ContentRecord, keywords: FrozenSet[str]) -> float:
        comparison_text = self.query_builder.build_comparison_text(record)
        return self.relevance_scorer.score(keywords, comparison_text)

    # ============================================================================
    # VALIDATION
    # ============================================================================

    async def run_steps(self, record: ContentRecord) -> StepResult[float]:
        """
        Run the validation chain for one record.

        Returns:
            Ok(confidence) when the record could be scored, otherwise the Err
            of the first step that could not produce a value
        """
        credentials = self._check_credentials()
        if isinstance(credentials, Err):
            return credentials

        query = self._build_query(record)
        if isinstance(query, Err):
            return query

        results = await self._search(query.value)
        if isinstance(results, Err):
            return results

        keywords = self._extract_keywords(results.value)
        if isinstance(keywords, Err):
            return keywords

        return Ok(self._score(record, keywords.value))

    async def validate(self, record: ContentRecord) -> StepResult[ContentValidation]:
        """
        Validate a record.

        Never raises: unexpected failures are logged and returned as an
        Err(UNEXPECTED_ERROR, ...).

        Returns:
            Ok(ContentValidation) for a scored record, Err for an inconclusive one
        """
        try:
            outcome = await self.run_steps(record)
        except Exception as e:
            logger.exception(f"Unexpected error validating record {record.record_id}: {e}")
            return Err(FailureKind.UNEXPECTED_ERROR, MESSAGE_VALIDATION_ERROR.format(detail=e))

        if isinstance(outcome, Err):
            logger.info(
                f"Record {record.record_id} inconclusive ({outcome.kind.value}): {outcome.message}"
            )
            return outcome

        confidence = outcome.value
        classification = self.policy.classify(confidence)
        return Ok(ContentValidation(
            status=classification.status,
            message=classification.message,
            confidence=confidence,
        ))

    async def review(self, record: ContentRecord) -> ReviewState:
        """
        Build the ReviewState for a record, including its issues list.

        Inconclusive outcomes are pending with confidence 0; they are never
        rejected.
        """
        validation = await self.validate(record)

        if isinstance(validation, Err):
            percentage = 0
            state = ReviewState(
                status=ReviewStatus.PENDING,
                confidence=0.0,
                message=validation.message,
                issues=[ISSUE_PENDING_TEMPLATE.format(message=validation.message, percentage=percentage)],
            )
        else:
            result = validation.value
            classification = self.policy.classify(result.confidence)
            percentage = classification.percentage
            issues = []
            if classification.status == ReviewStatus.REJECTED:
                issues.append(ISSUE_REJECTED_TEMPLATE.format(message=result.message, percentage=percentage))
            elif classification.status == ReviewStatus.PENDING:
                issues.append(ISSUE_PENDING_TEMPLATE.format(message=result.message, percentage=percentage))
            state = ReviewState(
                status=classification.status,
                confidence=result.confidence,
                message=result.message,
                issues=issues,
            )

        state.search_validation = SearchValidation(
            is_valid=self.policy.is_valid(percentage),
            message=SEARCH_VALIDATION_MESSAGE_TEMPLATE.format(message=state.message, percentage=percentage),
        )

        logger.info(
            f"Record {record.record_id} reviewed as {state.status.value} ({percentage}%)",
            extra={"extra_fields": {
                "record_id": record.record_id,
                "status": state.status.value,
                "confidence": state.confidence,
                "failure_kind": validation.kind.value if isinstance(validation, Err) else None,
            }},
        )
        return state


class ValidationPipeline:
    """Validate a batch of imported records.

    Records are validated one at a time by default. With concurrency > 1 a
    bounded worker pool is used; output order always follows input order.
    """

    def __init__(self, validator: RecordValidator, concurrency: Optional[int] = None):
        self.validator = validator
        self.concurrency = max(1, concurrency or settings.VALIDATION_CONCURRENCY)
        self.last_report: Optional[ValidationReport] = None

    async def _review_all(self, records: Sequence[ContentRecord]) -> List[ReviewState]:
        if self.concurrency == 1:
            return [await self.validator.review(record) for record in records]

        semaphore = asyncio.Semaphore(self.concurrency)

        async def bound_review(record: ContentRecord) -> ReviewState:
            async with semaphore:
                return await self.validator.review(record)

        # gather preserves argument order regardless of completion order
        return list(await asyncio.gather(*(bound_review(record) for record in records)))

    async def run(self, records: Sequence[ContentRecord]) -> List[ReviewedRecord]:
        """
        Validate every non-blank record.

        Blank rows are dropped from the output. Per-record failures never abort
        the batch.

        Args:
            records: Imported records in CSV order

        Returns:
            Reviewed records in input order
        """
        start_time = time.time()
        to_validate = [record for record in records if not record.is_blank]
        skipped = len(records) - len(to_validate)

        logger.info(
            f"Validating {len(to_validate)} records "
            f"(skipped {skipped} blank rows, concurrency={self.concurrency})"
        )

        search_client = self.validator.search_client
        async with search_client:
            states = await self._review_all(to_validate)

        reviewed = [ReviewedRecord(record=record, review=state) for record, state in zip(to_validate, states)]

        counts = Counter(item.status.value for item in reviewed)
        report = ValidationReport(
            total_rows=len(records),
            validated_records=len(reviewed),
            skipped_blank_rows=skipped,
            status_counts={status.value: counts.get(status.value, 0) for status in ReviewStatus},
            inconclusive_records=[
                item.record_id for item in reviewed
                if item.review.confidence == 0.0 and item.status == ReviewStatus.PENDING
            ],
            total_time=time.time() - start_time,
        )
        self.last_report = report

        logger.info(
            f"Validation complete in {report.total_time:.2f}s: "
            f"approved={report.status_counts['approved']}, "
            f"pending={report.status_counts['pending']}, "
            f"rejected={report.status_counts['rejected']}, "
            f"inconclusive={len(report.inconclusive_records)}"
        )
        return reviewed

"""
Classification of a confidence score into a review status.
"""
import math
from dataclasses import dataclass
from typing import Optional

from content_validator.core.config import settings
from content_validator.core.constants import (
    MESSAGE_APPROVED,
    MESSAGE_NEEDS_REVIEW,
    MESSAGE_REJECTED,
)
from content_validator.models.record_models import ReviewStatus


@dataclass(frozen=True)
class ClassificationOutcome:
    """Status and explanation derived from a confidence score."""
    status: ReviewStatus
    message: str
    percentage: int


def to_percentage(confidence: float) -> int:
    """Confidence in [0, 1] as a whole percentage, rounding halves up (0.605 -> 61)."""
    return int(math.floor(confidence * 100 + 0.5))


class ClassificationPolicy:
    """Map a confidence score onto approved / pending / rejected.

    With the default thresholds the pending band is [50, 60] inclusive:
    61 is approved, 60 and 50 are pending, 49 is rejected.
    """

    def __init__(self, approve_above: Optional[int] = None, reject_below: Optional[int] = None):
        self.approve_above = settings.APPROVE_ABOVE_PERCENT if approve_above is None else approve_above
        self.reject_below = settings.REJECT_BELOW_PERCENT if reject_below is None else reject_below
        if self.reject_below > self.approve_above:
            raise ValueError(
                f"Reject threshold ({self.reject_below}) must not exceed "
                f"approve threshold ({self.approve_above})"
            )

    def classify_percentage(self, percentage: int) -> ClassificationOutcome:
        if percentage > self.approve_above:
            return ClassificationOutcome(ReviewStatus.APPROVED, MESSAGE_APPROVED, percentage)
        if percentage < self.reject_below:
            return ClassificationOutcome(ReviewStatus.REJECTED, MESSAGE_REJECTED, percentage)
        return ClassificationOutcome(ReviewStatus.PENDING, MESSAGE_NEEDS_REVIEW, percentage)

    def classify(self, confidence: float) -> ClassificationOutcome:
        """
        Classify a confidence score.

        Args:
            confidence: Score in [0, 1]

        Returns:
            ClassificationOutcome with status, message and rounded percentage
        """
        return self.classify_percentage(to_percentage(confidence))

    def is_valid(self, percentage: int) -> bool:
        """Whether a percentage clears the approval threshold."""
        return percentage > self.approve_above

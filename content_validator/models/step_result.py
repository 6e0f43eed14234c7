"""
Tagged results for validation pipeline steps.

Each step returns `Ok(value)` or `Err(kind, message)`; the pipeline threads
these instead of raising for expected, inconclusive outcomes.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class FailureKind(str, Enum):
    """Why a step could not produce a value."""
    MISSING_CREDENTIALS = "missing_credentials"
    INSUFFICIENT_CONTENT = "insufficient_content"
    PROVIDER_ERROR = "provider_error"
    NO_RESULTS = "no_results"
    NO_KEYWORDS = "no_keywords"
    UNEXPECTED_ERROR = "unexpected_error"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    kind: FailureKind
    message: str


StepResult = Union[Ok[T], Err]

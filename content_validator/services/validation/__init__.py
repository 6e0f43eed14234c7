"""
Validation package for scraped content review.

Each stage of the pipeline lives in its own module:
- query_builder.py: search query and comparison text from record fields
- keyword_extractor.py: significant keywords from search results
- relevance_scorer.py: keyword containment score
- classification_policy.py: confidence -> approved / pending / rejected
- validation_orchestrator.py: per-record validation and batch pipeline
"""
from .validation_orchestrator import RecordValidator, ValidationPipeline, ValidationReport
from .query_builder import QueryBuilder
from .keyword_extractor import KeywordExtractor
from .relevance_scorer import RelevanceScorer
from .classification_policy import ClassificationPolicy, ClassificationOutcome, to_percentage

__all__ = [
    'RecordValidator',
    'ValidationPipeline',
    'ValidationReport',
    'QueryBuilder',
    'KeywordExtractor',
    'RelevanceScorer',
    'ClassificationPolicy',
    'ClassificationOutcome',
    'to_percentage',
]

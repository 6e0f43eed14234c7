"""
Relevance scoring of record content against search keywords.
"""
import logging
from typing import AbstractSet

logger = logging.getLogger(__name__)


class RelevanceScorer:
    """Recall-style keyword containment score."""

    def score(self, keywords: AbstractSet[str], comparison_text: str) -> float:
        """
        Fraction of keywords found in the record's comparison text.

        Matching is substring containment, not token equality: a keyword inside
        a longer, unrelated word of the text still counts ("cats" matches
        "concatenate").

        Args:
            keywords: Lowercase keyword set from the search results
            comparison_text: Lowercased record text

        Returns:
            matched / len(keywords), or 0.0 for an empty keyword set
        """
        if not keywords:
            return 0.0

        matched = sum(1 for keyword in keywords if keyword in comparison_text)
        confidence = matched / len(keywords)

        logger.debug(f"Relevance: {matched}/{len(keywords)} keywords matched ({confidence:.2%})")
        return confidence

"""
Keyword extraction from search result titles and snippets.
"""
import re
import logging
from typing import FrozenSet, Iterable, List

from content_validator.core.constants import MIN_KEYWORD_LENGTH, STOP_WORDS
from content_validator.models.search_models import SearchResultItem

logger = logging.getLogger(__name__)

_NON_WORD_RUN = re.compile(r"\W+")


class KeywordExtractor:
    """Tokenize search results into a set of significant keywords."""

    def __init__(self, stop_words: Iterable[str] = STOP_WORDS, min_length: int = MIN_KEYWORD_LENGTH):
        self.stop_words = frozenset(stop_words)
        self.min_length = min_length

    def tokenize(self, text: str) -> List[str]:
        """
        Split text into significant lowercase tokens.

        Splits on runs of non-word characters and keeps tokens of at least
        `min_length` characters that are not stop-words.

        Args:
            text: Text to tokenize

        Returns:
            Tokens in order of appearance (may contain duplicates)
        """
        return [
            token for token in _NON_WORD_RUN.split(text.lower())
            if len(token) >= self.min_length and token not in self.stop_words
        ]

    def extract(self, results: Iterable[SearchResultItem]) -> FrozenSet[str]:
        """
        Build the keyword set for a search result set.

        Args:
            results: Search results; title and snippet are used when present

        Returns:
            Deduplicated lowercase keywords across all results. Empty when there
            are no results or every token was filtered out.
        """
        keywords = set()
        for result in results:
            text = " ".join(part for part in (result.title, result.snippet) if part)
            keywords.update(self.tokenize(text))

        logger.debug(f"Extracted {len(keywords)} keywords from search results")
        return frozenset(keywords)

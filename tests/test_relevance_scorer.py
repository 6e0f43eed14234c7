"""
Unit tests for relevance scoring.
"""
import unittest

from content_validator.services.validation import RelevanceScorer


class TestRelevanceScorer(unittest.TestCase):
    """Test cases for RelevanceScorer.score."""

    def setUp(self):
        self.scorer = RelevanceScorer()

    def test_single_matching_keyword(self):
        self.assertEqual(self.scorer.score({"quickly"}, "it moved quickly today"), 1.0)

    def test_empty_keyword_set_scores_zero(self):
        self.assertEqual(self.scorer.score(set(), "it moved quickly today"), 0.0)

    def test_ratio_of_matched_keywords(self):
        keywords = {"python", "asyncio", "event", "rust"}
        self.assertAlmostEqual(self.scorer.score(keywords, "python asyncio event loop"), 0.75)

    def test_substring_of_unrelated_word_counts(self):
        # "cats" is not a word of the text but is a substring of "concatenate"
        self.assertEqual(self.scorer.score({"cats"}, "concatenate strings"), 1.0)

    def test_no_match(self):
        self.assertEqual(self.scorer.score({"gardening", "tomatoes"}, "stock market report"), 0.0)


if __name__ == '__main__':
    unittest.main()

"""
Unit tests for search query construction.
"""
import unittest

from content_validator.models.record_models import ContentRecord
from content_validator.services.validation import QueryBuilder


def _record(**fields) -> ContentRecord:
    return ContentRecord.from_row(0, fields)


class TestBuildQuery(unittest.TestCase):
    """Test cases for QueryBuilder.build_query."""

    def setUp(self):
        self.builder = QueryBuilder(max_length=100)

    def test_title_and_content_joined_with_single_space(self):
        query = self.builder.build_query(_record(title="A", content="B" * 60))

        self.assertLessEqual(len(query), 100)
        self.assertTrue(query.startswith("A B"))
        self.assertEqual(query, "A " + "B" * 60)

    def test_truncated_to_max_length(self):
        query = self.builder.build_query(_record(title="A", content="B" * 200))

        self.assertEqual(len(query), 100)
        self.assertTrue(query.startswith("A BBB"))

    def test_fixed_field_priority_order(self):
        record = _record(text="four", description="three", content="two", title="one")
        self.assertEqual(self.builder.build_query(record), "one two three four")

    def test_empty_fields_are_skipped(self):
        record = _record(title="", content="body", description="", text="tail")
        self.assertEqual(self.builder.build_query(record), "body tail")

    def test_no_text_fields_gives_empty_query(self):
        self.assertEqual(self.builder.build_query(_record()), "")
        self.assertEqual(self.builder.build_query(_record(title="", content="", description="", text="")), "")

    def test_url_and_extra_columns_do_not_contribute(self):
        record = _record(url="https://example.com", author="Jane Doe")
        self.assertEqual(self.builder.build_query(record), "")

    def test_default_length_comes_from_settings(self):
        from content_validator.core.config import settings
        self.assertEqual(QueryBuilder().max_length, settings.QUERY_MAX_LENGTH)


class TestBuildComparisonText(unittest.TestCase):
    """Test cases for QueryBuilder.build_comparison_text."""

    def test_not_truncated_and_lowercased(self):
        builder = QueryBuilder(max_length=10)
        record = _record(title="Python Asyncio", content="X" * 150)

        text = builder.build_comparison_text(record)

        self.assertEqual(text, "python asyncio " + "x" * 150)


if __name__ == '__main__':
    unittest.main()

"""Scraped content validator: search-backed relevance review for CSV datasets."""

__version__ = "1.0.0"

"""
Search provider clients.

This package provides the base class shared by web search API clients.
"""
from .base_client import BaseSearchClient

__all__ = ["BaseSearchClient"]

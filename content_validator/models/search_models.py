"""
Pydantic models for the Serper search API.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class SerperSearchRequest(BaseModel):
    """Request body for a Serper web search."""

    q: str = Field(..., description="Search query")
    num: int = Field(default=5, ge=1, le=100, description="Number of organic results to return")


class SearchResultItem(BaseModel):
    """Single organic search result."""

    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None
    snippet: Optional[str] = None
    link: Optional[str] = None


class SerperSearchResponse(BaseModel):
    """Response body of a Serper web search. Only organic results are used."""

    model_config = ConfigDict(extra="ignore")

    organic: Optional[List[SearchResultItem]] = None

    @property
    def results(self) -> List[SearchResultItem]:
        """Organic results, empty when the provider returned none."""
        return self.organic or []

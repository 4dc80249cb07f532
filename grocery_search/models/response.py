"""Response models for the search engine and API endpoints."""

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from .catalog import SearchableItem
from .query import FilterCriteria

MatchType = Literal["exact", "synonym", "fuzzy", "partial"]


class SearchResult(BaseModel):
    """Individual search result."""

    item: SearchableItem = Field(..., description="The matched catalog item")
    score: float = Field(..., ge=0.0, le=1.0, description="Relevance score (0-1)")
    match_type: MatchType = Field(..., description="Type of match (exact, synonym, fuzzy, partial)")
    matched_terms: List[str] = Field(
        default_factory=list, description="Matched text, usable for highlighting"
    )
    original_query: str = Field(..., description="Query text that produced this result")


class SearchResponse(BaseModel):
    """Response for search queries."""

    query: str = Field(..., description="Original search query")
    execution_time_ms: float = Field(..., description="Query execution time in milliseconds")
    exact_match: bool = Field(..., description="Whether the top result is an exact match")
    total_results: int = Field(..., description="Total number of results")
    results: List[SearchResult] = Field(..., description="Search results")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")


class QueryResponse(BaseModel):
    """Response for filtered and sorted catalog queries."""

    items: List[SearchableItem] = Field(..., description="Matching items")
    total_count: int = Field(..., description="Number of matching items")
    applied_filters: List[FilterCriteria] = Field(..., description="Filters that were applied")
    execution_time_ms: float = Field(..., description="Query execution time in milliseconds")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")


class NormalizeResponse(BaseModel):
    """Normalized form and search variations of a text."""

    text: str = Field(..., description="Input text")
    normalized: str = Field(..., description="Fully normalized text")
    variations: List[str] = Field(..., description="Search variations of the text")


class SynonymStatsResponse(BaseModel):
    """Synonym index statistics."""

    total_terms: int = Field(..., description="Number of indexed terms")
    with_region_info: int = Field(..., description="Indexed terms carrying region metadata")


class ItemsUpdateResponse(BaseModel):
    """Response after replacing the catalog."""

    total_items: int = Field(..., description="Number of items now indexed")
    execution_time_ms: float = Field(..., description="Re-indexing time in milliseconds")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Check timestamp")
    dependencies: Dict[str, str] = Field(..., description="Dependency status")

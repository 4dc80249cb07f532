"""Request models for API endpoints."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from .catalog import SearchableItem
from .query import QueryOptions


class SearchRequest(BaseModel):
    """Request model for search queries."""

    query: str = Field(..., min_length=1, max_length=100, description="Search query")
    min_score: Optional[float] = Field(
        None, ge=0.0, le=1.0, description="Drop results scoring below this value"
    )
    max_results: Optional[int] = Field(
        None, ge=1, le=100, description="Maximum number of results to return"
    )

    @field_validator('query')
    @classmethod
    def validate_query(cls, v: str) -> str:
        """Reject blank queries."""
        if not v or not v.strip():
            raise ValueError("Query cannot be empty")
        return v


class QueryRequest(QueryOptions):
    """Request model for filtered catalog queries."""


class UpdateItemsRequest(BaseModel):
    """Request model for replacing the indexed catalog."""

    items: List[SearchableItem] = Field(..., description="Complete new item set")

    @field_validator('items')
    @classmethod
    def validate_unique_ids(cls, v: List[SearchableItem]) -> List[SearchableItem]:
        """Reject item sets with repeated ids."""
        seen = set()
        for item in v:
            if item.id in seen:
                raise ValueError(f"Duplicate item id: {item.id}")
            seen.add(item.id)
        return v

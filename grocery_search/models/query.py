"""Models for attribute filtering and sorting of catalog items."""

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, Field

from .catalog import SearchableItem


class FilterCriteria(BaseModel):
    """One filter to apply, dispatched to the filter registered under ``type``."""

    type: str = Field(..., description="Registered filter type, e.g. 'category'")
    value: Any = Field(None, description="Filter value (meaning depends on the filter)")
    field: Optional[str] = Field(None, description="Item field the filter looks at")
    min_value: Optional[float] = Field(None, description="Lower bound for range filters")
    max_value: Optional[float] = Field(None, description="Upper bound for range filters")


class QueryOptions(BaseModel):
    """Search term, filters and sort order for a catalog query."""

    search_term: Optional[str] = Field(None, description="Free-text search term")
    filters: List[FilterCriteria] = Field(default_factory=list, description="Filters, in order")
    sort_by: Optional[str] = Field(None, description="Item field to sort by")
    sort_order: Literal["asc", "desc"] = Field("asc", description="Sort direction")
    min_score: Optional[float] = Field(None, ge=0.0, le=1.0, description="Minimum search score")
    max_results: Optional[int] = Field(None, ge=1, description="Maximum number of search results")


class QueryResult(BaseModel):
    """Items left after search, filters and sorting."""

    items: List[SearchableItem] = Field(..., description="Resulting items")
    total_count: int = Field(..., description="Number of resulting items")
    applied_filters: List[FilterCriteria] = Field(..., description="Filters that were applied")

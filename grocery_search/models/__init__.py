"""Data models for grocery search."""

from .catalog import SearchableItem
from .query import FilterCriteria, QueryOptions, QueryResult
from .request import QueryRequest, SearchRequest, UpdateItemsRequest
from .response import (
    ErrorResponse,
    HealthResponse,
    ItemsUpdateResponse,
    NormalizeResponse,
    QueryResponse,
    SearchResponse,
    SearchResult,
    SynonymStatsResponse,
)
from .synonym import RegionInfo, SynonymEntry, SynonymMatch

__all__ = [
    "SearchableItem",
    "FilterCriteria",
    "QueryOptions",
    "QueryResult",
    "QueryRequest",
    "SearchRequest",
    "UpdateItemsRequest",
    "ErrorResponse",
    "HealthResponse",
    "ItemsUpdateResponse",
    "NormalizeResponse",
    "QueryResponse",
    "SearchResponse",
    "SearchResult",
    "SynonymStatsResponse",
    "RegionInfo",
    "SynonymEntry",
    "SynonymMatch",
]

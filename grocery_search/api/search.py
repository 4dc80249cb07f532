"""Search API endpoints."""

import time
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Path, Query

from ..config import get_settings
from ..engine_instance import normalizer, query_engine, search_engine
from ..models.request import QueryRequest, SearchRequest
from ..models.response import NormalizeResponse, QueryResponse, SearchResponse, SearchResult

router = APIRouter(prefix="/api/v1", tags=["search"])
settings = get_settings()


def _search_response(query: str, results: List[SearchResult], start_time: float) -> SearchResponse:
    return SearchResponse(
        query=query,
        execution_time_ms=(time.time() - start_time) * 1000,
        exact_match=bool(results) and results[0].match_type == "exact",
        total_results=len(results),
        results=results
    )


@router.get(
    "/search/{query}",
    response_model=SearchResponse,
    summary="Search the catalog",
    description="Search catalog items with exact, synonym, fuzzy and partial matching"
)
async def search_items(
    query: str = Path(..., description="The text to search for"),
    min_score: Optional[float] = Query(
        None,
        ge=0.0,
        le=1.0,
        description="Drop results scoring below this value"
    ),
    max_results: Optional[int] = Query(
        None,
        ge=1,
        le=100,
        description="Maximum number of results to return"
    )
) -> SearchResponse:
    """
    Search catalog items by free text.

    Tolerates typos, missing accents, casing and regional vocabulary.
    Returns ranked results with scores, match types and matched terms.
    """
    if len(query) > settings.max_query_length:
        raise HTTPException(
            status_code=400,
            detail=f"Query too long. Maximum length is {settings.max_query_length} characters"
        )

    try:
        start_time = time.time()
        results = search_engine.search(
            query,
            min_score=min_score,
            max_results=max_results or settings.max_results
        )
        return _search_response(query, results, start_time)

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Search failed: {str(e)}"
        )


@router.post(
    "/search",
    response_model=SearchResponse,
    summary="Search with request body",
    description="Search catalog items using a structured request body"
)
async def search_with_body(request: SearchRequest) -> SearchResponse:
    """Search catalog items using a JSON request body."""
    try:
        start_time = time.time()
        results = search_engine.search(
            request.query,
            min_score=request.min_score,
            max_results=request.max_results or settings.max_results
        )
        return _search_response(request.query, results, start_time)

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Search failed: {str(e)}"
        )


@router.post(
    "/query",
    response_model=QueryResponse,
    summary="Filtered catalog query",
    description="Search, filter and sort the catalog in one request"
)
async def query_items(request: QueryRequest) -> QueryResponse:
    """
    Run a catalog query.

    The search term (if any) ranks and narrows the catalog first, then the
    filters are applied in order, then the optional sort.
    """
    if request.search_term and len(request.search_term) > settings.max_query_length:
        raise HTTPException(
            status_code=400,
            detail=f"Query too long. Maximum length is {settings.max_query_length} characters"
        )

    try:
        start_time = time.time()
        result = query_engine.execute_query(search_engine.items, request)
        return QueryResponse(
            items=result.items,
            total_count=result.total_count,
            applied_filters=result.applied_filters,
            execution_time_ms=(time.time() - start_time) * 1000
        )

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Query failed: {str(e)}"
        )


@router.get(
    "/normalize/{text}",
    response_model=NormalizeResponse,
    summary="Normalize text",
    description="Show how a text is normalized and which variations are searched"
)
async def normalize_text(
    text: str = Path(..., description="Text to normalize")
) -> NormalizeResponse:
    """Get the normalized form and search variations of a text."""
    return NormalizeResponse(
        text=text,
        normalized=normalizer.normalize(text),
        variations=normalizer.create_search_variations(text)
    )

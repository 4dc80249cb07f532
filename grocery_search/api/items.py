"""Catalog management API endpoints."""

import time
from typing import List

from fastapi import APIRouter, HTTPException
import structlog

from ..engine_instance import search_engine
from ..models.catalog import SearchableItem
from ..models.request import UpdateItemsRequest
from ..models.response import ItemsUpdateResponse

router = APIRouter(prefix="/api/v1", tags=["items"])
logger = structlog.get_logger(__name__)


@router.get(
    "/items",
    response_model=List[SearchableItem],
    summary="List catalog items",
    description="Get every item currently indexed by the search engine"
)
async def list_items() -> List[SearchableItem]:
    """Get the current catalog snapshot."""
    return list(search_engine.items)


@router.put(
    "/items",
    response_model=ItemsUpdateResponse,
    summary="Replace catalog",
    description="Replace the indexed catalog with a new item set and rebuild the indexes"
)
async def replace_items(request: UpdateItemsRequest) -> ItemsUpdateResponse:
    """
    Replace the whole catalog.

    The engine indexes the new item set before swapping it in, so searches
    see either the old catalog or the new one.
    """
    try:
        start_time = time.time()
        search_engine.update_items(request.items)
        logger.info("Catalog replaced", total_items=len(request.items))

        return ItemsUpdateResponse(
            total_items=len(search_engine.items),
            execution_time_ms=(time.time() - start_time) * 1000
        )

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Catalog update failed: {str(e)}"
        )

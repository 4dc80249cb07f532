"""API endpoints for grocery search."""

from .search import router as search_router
from .synonyms import router as synonyms_router
from .items import router as items_router
from .health import router as health_router

__all__ = [
    "search_router",
    "synonyms_router",
    "items_router",
    "health_router",
]

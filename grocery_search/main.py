"""Main FastAPI application for Grocery Search."""

import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
import structlog

from .api import (
    health_router,
    items_router,
    search_router,
    synonyms_router,
)
from .catalog import SAMPLE_CATALOG, load_catalog, parse_catalog
from .config import get_settings
from .engine_instance import search_engine
from .logging_config import configure_logging
from .models.response import ErrorResponse

settings = get_settings()
configure_logging(settings.log_level, settings.log_format)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    logger.info("Starting Grocery Search service", version=settings.app_version)

    try:
        if not settings.catalog_path:
            raise FileNotFoundError("No catalog path configured")
        items = load_catalog(settings.catalog_path)
        search_engine.update_items(items)
        logger.info("Catalog loaded", path=settings.catalog_path, total_items=len(items))
    except FileNotFoundError:
        logger.warning("Catalog file not found, using sample catalog", path=settings.catalog_path)
        items = parse_catalog(SAMPLE_CATALOG)
        search_engine.update_items(items)
        logger.info("Sample catalog loaded", total_items=len(items))
    except Exception as e:
        logger.error("Failed to load catalog", error=str(e))
        raise

    yield

    # Shutdown
    logger.info("Shutting down Grocery Search service")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="Typo, accent and regional-vocabulary tolerant search over a grocery catalog",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

# Add middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(GZipMiddleware, minimum_size=1000)


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next) -> Response:
    """Log all HTTP requests."""
    start_time = time.time()

    logger.info(
        "Request started",
        method=request.method,
        url=str(request.url),
        client_ip=request.client.host if request.client else None
    )

    response = await call_next(request)

    process_time = time.time() - start_time
    logger.info(
        "Request completed",
        method=request.method,
        url=str(request.url),
        status_code=response.status_code,
        process_time_ms=round(process_time * 1000, 2)
    )

    return response


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle global exceptions."""
    logger.error(
        "Unhandled exception",
        method=request.method,
        url=str(request.url),
        error=str(exc),
        exc_info=True
    )

    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="Internal Server Error",
            message="An unexpected error occurred",
            details={"exception": str(exc)} if settings.debug else None
        ).model_dump(mode="json")
    )


# Include API routers
app.include_router(search_router)
app.include_router(synonyms_router)
app.include_router(items_router)
app.include_router(health_router)


@app.get("/", summary="Root endpoint", description="Get basic information about the API")
async def root() -> dict:
    """Root endpoint with basic API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Hybrid text search over a grocery catalog",
        "docs_url": "/docs",
        "health_url": "/api/v1/health",
        "status": "running"
    }


@app.get("/api", summary="API information", description="Get detailed API information")
async def api_info() -> dict:
    """Get detailed API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "endpoints": {
            "search": "/api/v1/search/{query}",
            "query": "/api/v1/query",
            "normalize": "/api/v1/normalize/{text}",
            "synonyms": "/api/v1/synonyms/{term}",
            "variations": "/api/v1/synonyms/{term}/variations",
            "items": "/api/v1/items",
            "health": "/api/v1/health"
        },
        "features": [
            "Exact matching on name and category",
            "Prefix matching",
            "Regional synonym resolution",
            "Typo-tolerant fuzzy matching",
            "Substring matching",
            "Accent and case insensitive search",
            "Attribute filters and sorting"
        ],
        "search": {
            "merge_policy": search_engine.merge_policy.value,
            "fuzzy_threshold": settings.fuzzy_threshold,
            "max_query_length": settings.max_query_length,
            "max_results": settings.max_results
        }
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "grocery_search.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=1 if settings.debug else settings.workers,
        log_level=settings.log_level.lower()
    )

"""Health check and monitoring API endpoints."""

import time
from datetime import datetime

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from ..config import get_settings
from ..engine_instance import search_engine, synonym_service
from ..models.response import HealthResponse

router = APIRouter(prefix="/api/v1", tags=["health"])
settings = get_settings()

# Track application start time
app_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of the search service"
)
async def health_check() -> HealthResponse:
    """
    Perform a health check on the search service.

    Exercises the search engine and the synonym index.
    """
    uptime = time.time() - app_start_time

    dependencies = {
        "search_engine": "healthy",
        "synonym_index": "healthy"
    }

    try:
        search_engine.search("test", max_results=1)
    except Exception:
        dependencies["search_engine"] = "unhealthy"

    try:
        if synonym_service.get_stats()["total_terms"] == 0:
            dependencies["synonym_index"] = "degraded"
    except Exception:
        dependencies["synonym_index"] = "unhealthy"

    if all(status == "healthy" for status in dependencies.values()):
        status = "healthy"
    elif any(status == "unhealthy" for status in dependencies.values()):
        status = "unhealthy"
    else:
        status = "degraded"

    return HealthResponse(
        status=status,
        version=settings.app_version,
        uptime=uptime,
        dependencies=dependencies
    )


@router.get(
    "/health/ready",
    summary="Readiness check",
    description="Check if the service is ready to accept requests"
)
async def readiness_check() -> JSONResponse:
    """Ready once the catalog holds at least one item."""
    total_items = len(search_engine.items)
    ready = total_items > 0

    return JSONResponse(
        status_code=200 if ready else 503,
        content={
            "status": "ready" if ready else "not_ready",
            "total_items": total_items,
            "timestamp": datetime.utcnow().isoformat()
        }
    )


@router.get(
    "/health/live",
    summary="Liveness check",
    description="Check if the service is alive and responding"
)
async def liveness_check() -> JSONResponse:
    """Check if the service process is responsive."""
    return JSONResponse(
        status_code=200,
        content={
            "status": "alive",
            "timestamp": datetime.utcnow().isoformat(),
            "uptime": time.time() - app_start_time
        }
    )


@router.get(
    "/status",
    summary="Service status",
    description="Get detailed status information about the service"
)
async def service_status() -> JSONResponse:
    """Get configuration, engine statistics and synonym index statistics."""
    try:
        config_info = {
            "merge_policy": search_engine.merge_policy.value,
            "fuzzy_threshold": settings.fuzzy_threshold,
            "max_results": settings.max_results,
            "max_query_length": settings.max_query_length,
            "debug": settings.debug
        }

        return JSONResponse(
            status_code=200,
            content={
                "service": {
                    "name": settings.app_name,
                    "version": settings.app_version,
                    "status": "running",
                    "uptime": time.time() - app_start_time,
                    "start_time": datetime.fromtimestamp(app_start_time).isoformat()
                },
                "configuration": config_info,
                "statistics": search_engine.get_stats(),
                "synonyms": synonym_service.get_stats(),
                "timestamp": datetime.utcnow().isoformat()
            }
        )

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to get service status: {str(e)}"
        )

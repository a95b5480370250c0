"""
Health check router for liveness and readiness checks.
"""
from fastapi import APIRouter, Depends, status

from blog_api.database.connections import get_store
from blog_api.database.store import JsonStore

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Basic health check",
)
async def health_check():
    """
    Basic health check endpoint.
    Returns 200 if the API is running.
    """
    return {"status": "healthy"}


@router.get(
    "/health/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness check with dependencies",
)
async def readiness_check(store: JsonStore = Depends(get_store)):
    """
    Readiness check that verifies the data file can be written.
    """
    checks = {
        "api": "healthy",
        "store": "unknown",
    }

    try:
        store.check()
        checks["store"] = "healthy"
    except OSError as e:
        checks["store"] = f"unhealthy: {str(e)}"

    all_healthy = all(v == "healthy" for v in checks.values())

    return {
        "status": "healthy" if all_healthy else "degraded",
        "checks": checks,
    }

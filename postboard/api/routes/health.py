"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 200 with store counts once the service is built

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from
      load balancer
"""

from fastapi import APIRouter, Depends, status

from postboard.api.dependencies import get_blog_service
from postboard.config import Settings, get_settings
from postboard.schemas.blog import StoreStats
from postboard.services.blog_service import BlogService

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check(settings: Settings = Depends(get_settings)):
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": settings.service_name,
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(blog: BlogService = Depends(get_blog_service)):
    """Readiness probe — includes in-memory store counts."""
    return {
        "status": "ready",
        "checks": {"stores": "healthy"},
        "stats": StoreStats(**blog.stats()).model_dump(),
    }

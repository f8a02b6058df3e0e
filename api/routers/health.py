"""
Health check router.

This router provides health check endpoints for monitoring and load balancers.
"""

import logging

from fastapi import APIRouter, Depends

from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Health"],
)


@router.get("/health")
def health():
    """
    Simple liveness endpoint for outcome-mapper-api.

    Returns:
        dict: Status indicator for health checks
    """
    return {"status": "ok"}


@router.get("/health/ready")
def ready(settings: Settings = Depends(get_settings)):
    """
    Readiness endpoint reporting whether the database is configured.

    Returns:
        dict: Status plus database configuration flag
    """
    database_configured = bool(settings.supabase_url and settings.supabase_key)
    if not database_configured:
        logger.warning("Readiness check: Supabase credentials not configured")
    return {
        "status": "ok" if database_configured else "degraded",
        "database_configured": database_configured,
        "environment": settings.environment,
    }

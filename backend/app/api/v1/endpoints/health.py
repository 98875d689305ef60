"""
Health check endpoint.
"""

from fastapi import APIRouter

from app.config import settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check():
    """Basic health check."""
    return {"status": "ok"}


@router.get("/health/detailed")
async def detailed_health():
    """Detailed health check with provider configuration status."""
    providers = settings.configured_providers()
    
    return {
        "status": "ok" if all(providers.values()) else "degraded",
        "providers_configured": providers
    }

from fastapi import APIRouter

from sahayak.core.config import get_settings

router = APIRouter(prefix="/api", tags=["health"])

VERSION = "1.0.0"


@router.get("/health")
async def health_check():
    """Liveness probe. Never touches the completion service."""
    settings = get_settings()
    return {
        "status": "healthy",
        "version": VERSION,
        "model": settings.active_model,
        "provider": settings.llm_provider,
    }

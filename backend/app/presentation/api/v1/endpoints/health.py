"""Health check endpoint — no dependencies, always available."""

from fastapi import APIRouter

from app.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Returns the health status and the upload limits the admin UI should apply."""
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "upload": {
            "maxSizeMb": settings.max_upload_size_mb,
            "extensions": settings.allowed_model_extensions,
        },
    }

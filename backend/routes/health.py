"""Health and readiness check routes."""

from fastapi import APIRouter, Depends

from config import Settings, get_settings
from services.cache import TTLCache, get_embed_cache

router = APIRouter()

SERVICE_NAME = "clean-player-api"


@router.get("/ready")
async def ready(settings: Settings = Depends(get_settings)) -> dict:
    """Lightweight readiness check — no external calls."""
    return {"status": "ok", "service": SERVICE_NAME, "commit": settings.git_sha}


@router.get("/health")
async def health(
    settings: Settings = Depends(get_settings),
    cache: TTLCache[str] = Depends(get_embed_cache),
) -> dict:
    """Readiness payload plus the number of stored cache entries."""
    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "commit": settings.git_sha,
        "cache_entries": len(cache),
    }

"""Player routes — wrap a third-party video URL in the clean player page.

GET /api/embed.js?url=...     → player for a query-string URL
GET /embed/{video_id}         → player for a path id (may be a full URL)
GET /api/source/{video_id}    → JSON pointers to the two player routes
"""

from urllib.parse import quote

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

from config import Settings, get_settings
from errors import MissingURLError, MissingVideoIdError
from services.cache import TTLCache, get_embed_cache
from services.embed_source import resolve_path_source, resolve_query_source
from services.player import render_player

router = APIRouter()


@router.get("/api/embed.js", response_class=HTMLResponse)
async def embed_by_query(
    url: str | None = Query(None),
    autoplay: str | None = Query(None),
    muted: str | None = Query(None),
    cache: TTLCache[str] = Depends(get_embed_cache),
    settings: Settings = Depends(get_settings),
) -> HTMLResponse:
    """Player page for ?url=, with optional autoplay=true / muted=true."""
    # Error page is served with 400, not 200
    if not url:
        raise MissingURLError()

    # Only the literal "true" switches a flag on
    autoplay_on = autoplay == "true"
    muted_on = muted == "true"

    src = resolve_query_source(
        cache,
        url,
        autoplay=autoplay_on,
        muted=muted_on,
        ttl_seconds=settings.embed_cache_ttl_seconds,
    )
    return HTMLResponse(render_player(src, autoplay=autoplay_on, muted=muted_on))


@router.get("/api/source/{video_id}")
async def source_info(video_id: str) -> dict:
    return {
        "success": True,
        "id": video_id,
        "embedUrl": f"/embed/{video_id}",
        "apiUrl": f"/api/embed.js?url={quote(video_id, safe='')}",
        "message": "Use embedUrl or apiUrl for video playback",
    }


@router.get("/embed/{video_id:path}", response_class=HTMLResponse)
async def embed_by_path(
    video_id: str,
    cache: TTLCache[str] = Depends(get_embed_cache),
    settings: Settings = Depends(get_settings),
) -> HTMLResponse:
    if not video_id:
        raise MissingVideoIdError()

    src = resolve_path_source(cache, video_id, ttl_seconds=settings.embed_cache_ttl_seconds)
    return HTMLResponse(render_player(src))

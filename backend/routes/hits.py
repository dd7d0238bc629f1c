"""Keepalive endpoint for uptime monitors."""

from fastapi import APIRouter, Depends, Request

from config import Settings, get_settings
from services.hits import HitCounter, get_hit_counter

router = APIRouter()


def _requester_ip(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


@router.get("/api/hits")
async def hits(
    request: Request,
    counter: HitCounter = Depends(get_hit_counter),
    settings: Settings = Depends(get_settings),
) -> dict:
    """Record an uptime-monitor hit and report the running totals."""
    total_hits, last_hit_time = counter.record()
    return {
        "status": "ok",
        "message": "Uptime hit recorded",
        "total_hits": total_hits,
        "last_hit_time": last_hit_time,
        "region": settings.region,
        "requester_ip": _requester_ip(request),
    }

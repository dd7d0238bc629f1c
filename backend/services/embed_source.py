"""Turn request input into the iframe src for the player page.

Both embed routes follow the same pattern: check the cache, normalize on a
miss, cache the normalized source for the configured TTL.
"""

import logging
import re
from urllib.parse import unquote

from services.cache import TTLCache

logger = logging.getLogger(__name__)

QUERY_KEY_PREFIX = "embed:query:"
PATH_KEY_PREFIX = "embed:"

# A "%" not followed by two hex digits
_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def query_cache_key(url: str) -> str:
    return f"{QUERY_KEY_PREFIX}{url}"


def path_cache_key(video_id: str) -> str:
    return f"{PATH_KEY_PREFIX}{video_id}"


def force_https(url: str) -> str:
    """Upgrade a leading http:// to https://."""
    if url.startswith("http://"):
        return "https://" + url[len("http://"):]
    return url


def decode_path_id(video_id: str) -> str:
    """Percent-decode a path id that carries an encoded URL.

    Any malformed escape (not two hex digits, or not valid UTF-8) leaves
    the whole id raw; nothing is half-decoded.
    """
    if "%" not in video_id:
        return video_id
    if _MALFORMED_ESCAPE.search(video_id):
        return video_id
    try:
        return unquote(video_id, errors="strict")
    except UnicodeDecodeError:
        return video_id


def with_playback_params(src: str, autoplay: bool = False, muted: bool = False) -> str:
    params = []
    if autoplay:
        params.append("autoplay=1")
    if muted:
        params.append("muted=1")
    if not params:
        return src
    separator = "&" if "?" in src else "?"
    return f"{src}{separator}{'&'.join(params)}"


def resolve_query_source(
    cache: TTLCache[str],
    url: str,
    autoplay: bool,
    muted: bool,
    ttl_seconds: float,
) -> str:
    """Source for /api/embed.js?url=...

    Only the normalized base URL is cached. Playback flags are applied per
    request so one cached entry serves every autoplay/muted combination.
    """
    key = query_cache_key(url)
    src = cache.get(key)
    if src is not None:
        logger.info("Serving cached player for %s", url)
    else:
        logger.info("Processing embed for %s", url)
        src = force_https(url)
        cache.set(key, src, ttl_seconds=ttl_seconds)
    return with_playback_params(src, autoplay=autoplay, muted=muted)


def resolve_path_source(cache: TTLCache[str], video_id: str, ttl_seconds: float) -> str:
    """Source for /embed/{video_id}."""
    key = path_cache_key(video_id)
    src = cache.get(key)
    if src is not None:
        logger.info("Serving cached player for %s", video_id)
        return src

    logger.info("Processing embed for %s", video_id)
    src = force_https(decode_path_id(video_id))
    cache.set(key, src, ttl_seconds=ttl_seconds)
    return src

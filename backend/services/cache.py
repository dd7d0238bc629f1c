"""Simple in-memory TTL cache for resolved embed sources. No Redis needed.

Note: Each uvicorn worker owns its own cache instance (one per app, created
in create_app). With --workers 2 a source may be resolved twice, once per
worker. That is fine at this scale.

Expired entries are only removed when their key is read again, so the store
grows without bound if keys are never reused.
"""

import threading
import time
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from fastapi import Request

V = TypeVar("V")

Clock = Callable[[], float]


@dataclass
class CacheEntry(Generic[V]):
    value: V
    expires_at: float


class TTLCache(Generic[V]):
    def __init__(self, clock: Clock = time.time):
        self._clock = clock
        self._store: dict[str, CacheEntry[V]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> V | None:
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return None
            if self._clock() > entry.expires_at:
                del self._store[key]
                return None
            return entry.value

    def set(self, key: str, value: V, ttl_seconds: float = 60) -> None:
        with self._lock:
            self._store[key] = CacheEntry(value, self._clock() + ttl_seconds)

    def keys(self) -> list[str]:
        """Stored keys, including expired entries nobody has read yet."""
        with self._lock:
            return list(self._store)

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)


def get_embed_cache(request: Request) -> TTLCache[str]:
    """FastAPI dependency returning the app's embed-source cache."""
    return request.app.state.embed_cache

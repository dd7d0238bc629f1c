"""Hit counter for the uptime-monitor keepalive endpoint."""

import threading
from datetime import datetime, timezone

from fastapi import Request


class HitCounter:
    def __init__(self):
        self.total_hits = 0
        self.last_hit_time: str | None = None
        self._lock = threading.Lock()

    def record(self) -> tuple[int, str]:
        """Count one hit and return (total_hits, last_hit_time)."""
        with self._lock:
            self.total_hits += 1
            self.last_hit_time = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
            return self.total_hits, self.last_hit_time


def get_hit_counter(request: Request) -> HitCounter:
    return request.app.state.hit_counter

"""Centralized configuration — all env vars in one place."""

import os

from fastapi import Request


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.cors_origins: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
        self.git_sha: str = os.getenv("GIT_SHA", "unknown")
        self.environment: str = os.getenv("ENVIRONMENT", "local")

        # Server
        self.host: str = os.getenv("HOST", "0.0.0.0")
        self.port_raw: str = os.getenv("PORT", "3000")
        self.region: str = os.getenv("REGION", "unknown")

        # How long a resolved embed source stays cached
        self.embed_cache_ttl_raw: str = os.getenv("EMBED_CACHE_TTL_SECONDS", "1800")

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def port(self) -> int:
        return _parse_number(self.port_raw, int, default=3000)

    @property
    def embed_cache_ttl_seconds(self) -> float:
        return _parse_number(self.embed_cache_ttl_raw, float, default=1800.0)

    def validate(self) -> list[str]:
        """Return list of problems with the configured env vars."""
        problems = []
        if not _is_positive(self.port_raw, int):
            problems.append(f"PORT={self.port_raw!r} is not a positive integer, using 3000")
        if not _is_positive(self.embed_cache_ttl_raw, float):
            problems.append(
                f"EMBED_CACHE_TTL_SECONDS={self.embed_cache_ttl_raw!r} is not a positive number, using 1800"
            )
        return problems


settings = Settings()


def _is_positive(raw: str, cast) -> bool:
    try:
        return cast(raw) > 0
    except ValueError:
        return False


def _parse_number(raw: str, cast, default):
    """Parse a positive number, falling back to ``default``."""
    return cast(raw) if _is_positive(raw, cast) else default


def get_settings(request: Request) -> Settings:
    """FastAPI dependency returning the settings the app was built with."""
    return request.app.state.settings

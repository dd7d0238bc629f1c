"""FastAPI application entry point for the clean player API."""

import logging
import sys
import time

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from config import Settings, settings as default_settings
from errors import is_player_path, register_error_handlers
from services.cache import Clock, TTLCache
from services.hits import HitCounter

# Structured logging: JSON for production, human-readable for local
if default_settings.is_production:
    logging.basicConfig(
        level=logging.INFO,
        format='{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}',
        stream=sys.stdout,
    )
else:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

logger = logging.getLogger(__name__)


def create_app(settings: Settings = default_settings, clock: Clock = time.time) -> FastAPI:
    app = FastAPI(title="Clean Player API", version="1.0.0")

    # Per-app state, handed to routes through dependencies
    app.state.settings = settings
    app.state.embed_cache = TTLCache[str](clock=clock)
    app.state.hit_counter = HitCounter()

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Security headers. Player pages exist to be framed, so no X-Frame-Options there.
    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        if not is_player_path(request.url.path):
            response.headers["X-Frame-Options"] = "DENY"
        if settings.is_production:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response

    # Centralized error handlers
    register_error_handlers(app)

    from routes.embed import router as embed_router
    from routes.health import router as health_router
    from routes.hits import router as hits_router
    from routes.home import router as home_router

    app.include_router(home_router)
    app.include_router(embed_router)
    app.include_router(hits_router)
    app.include_router(health_router)

    @app.on_event("startup")
    async def _validate_config() -> None:
        for problem in settings.validate():
            logger.warning("Config: %s", problem)

    return app


app = create_app()


if __name__ == "__main__":
    logger.info("Server running on http://localhost:%d", default_settings.port)
    uvicorn.run(app, host=default_settings.host, port=default_settings.port)

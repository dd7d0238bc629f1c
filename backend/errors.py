"""Custom exceptions and centralized FastAPI error handlers."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse

from services.player import render_error_page

logger = logging.getLogger(__name__)

# Routes that answer with a player page; errors there render HTML, not JSON.
PLAYER_PATH_PREFIXES = ("/embed/", "/api/embed.js")


class PlayerError(Exception):
    """Base exception with HTTP status code and error page title."""

    def __init__(self, message: str, status_code: int = 500, title: str = "Video Not Available"):
        super().__init__(message)
        self.status_code = status_code
        self.title = title


class MissingURLError(PlayerError):
    def __init__(self):
        super().__init__(
            "Please provide a video URL using the ?url= parameter",
            status_code=400,
            title="Missing URL Parameter",
        )


class MissingVideoIdError(PlayerError):
    def __init__(self):
        super().__init__(
            "Please provide a video id or URL after /embed/",
            status_code=400,
            title="Missing Video ID",
        )


class VideoUnavailableError(PlayerError):
    def __init__(self):
        super().__init__("This video is currently not available for streaming.", status_code=500)


def is_player_path(path: str) -> bool:
    return path.startswith(PLAYER_PATH_PREFIXES)


def register_error_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers on the FastAPI app."""

    @app.exception_handler(PlayerError)
    async def handle_player_error(_request: Request, exc: PlayerError):
        return HTMLResponse(render_error_page(exc.title, str(exc)), status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s: %s", request.url.path, exc)
        if is_player_path(request.url.path):
            unavailable = VideoUnavailableError()
            return HTMLResponse(
                render_error_page(unavailable.title, str(unavailable)),
                status_code=unavailable.status_code,
            )
        return JSONResponse(
            {"error": "Internal server error"},
            status_code=500,
        )

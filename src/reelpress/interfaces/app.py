"""FastAPI application factory (create_app)."""

from __future__ import annotations

import time
from collections.abc import Awaitable, Callable

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.responses import Response

from reelpress import __version__
from reelpress.infrastructure.config import AppConfig
from reelpress.interfaces.app_state import AppState
from reelpress.interfaces.composition import lifespan

log = structlog.get_logger(__name__)


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Invalid JSON body"
    loc = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    msg = first.get("msg", "invalid value")
    return f"{loc}: {msg}" if loc else msg


def create_app(config: AppConfig) -> FastAPI:
    """Create FastAPI app. Configuration only; resources are built in lifespan()."""
    app = FastAPI(
        title="Reelpress",
        description="Movie post scraper, link resolver and WordPress publisher",
        version=__version__,
        lifespan=lifespan,
    )

    app.state = AppState()
    app.state.config = config

    from reelpress.interfaces.api.links.router import router as links_router
    from reelpress.interfaces.api.movies.router import router as movies_router
    from reelpress.interfaces.api.settings.router import router as settings_router
    from reelpress.interfaces.api.wordpress.router import router as wordpress_router

    app.include_router(movies_router, prefix="/api")
    app.include_router(links_router, prefix="/api")
    app.include_router(settings_router, prefix="/api")
    app.include_router(wordpress_router, prefix="/api")

    @app.exception_handler(RequestValidationError)
    async def validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        message = _validation_message(exc)
        log.warning("request_rejected", path=request.url.path, error=message)
        return JSONResponse(status_code=400, content={"error": message})

    @app.get("/api/healthz")
    async def healthz() -> dict[str, str]:
        """Liveness probe."""
        return {"status": "ok", "version": __version__}

    @app.middleware("http")
    async def log_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ):
        start = time.perf_counter()
        try:
            response = await call_next(request)
            return response
        finally:
            duration_ms = (time.perf_counter() - start) * 1000.0
            status_code = getattr(locals().get("response", None), "status_code", 500)

            log.info(
                "http_request",
                method=request.method,
                path=request.url.path,
                query=str(request.url.query),
                status_code=status_code,
                duration_ms=round(duration_ms, 2),
                client_host=(request.client.host if request.client else None),
            )

    return app

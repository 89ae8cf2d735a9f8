"""FastAPI application factory.

Lifespan
--------
On startup the app configures logging and opens one :class:`CMSClient`
(shared across all requests via ``request.app.state.cms``).  On shutdown it
closes the client, unless the client was handed in by the caller.

Routers
-------
    /articles  CRUD over CMS articles
    /auth      login / register through the CMS user routes
    /health    liveness probe

``GET /`` serves the static article page; its assets live under ``/static``.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from cmsproxy.api.error_handlers import register_error_handlers
from cmsproxy.api.routers import articles as articles_router
from cmsproxy.api.routers import auth as auth_router
from cmsproxy.api.routers import health as health_router
from cmsproxy.cms.client import CMSClient
from cmsproxy.config import Settings, settings as default_settings
from cmsproxy.observability import setup_logging

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"


def create_app(
    settings: Optional[Settings] = None,
    cms_client: Optional[CMSClient] = None,
) -> FastAPI:
    """Return a fully-configured FastAPI application instance.

    Args:
        settings: Configuration to use; defaults to the process-wide settings.
        cms_client: Pre-built client.  When given, the app uses it as-is and
            leaves closing it to the caller.
    """
    cfg = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Open the CMS client on startup and close it on shutdown."""
        setup_logging(cfg.log_level, cfg.log_format)
        client = cms_client or CMSClient.from_settings(cfg)
        app.state.cms = client
        try:
            yield
        finally:
            if cms_client is None:
                client.close()

    app = FastAPI(
        title="CMS Article Proxy",
        description=(
            "REST interface for articles and user authentication, "
            "backed by a headless CMS."
        ),
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = cfg

    # Allow browser frontends on any origin (tighten for production).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(articles_router.router, prefix="/articles", tags=["articles"])
    app.include_router(auth_router.router, prefix="/auth", tags=["auth"])
    app.include_router(health_router.router, prefix="/health", tags=["health"])

    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    @app.get("/", include_in_schema=False)
    def index() -> FileResponse:
        return FileResponse(STATIC_DIR / "index.html")

    return app


# Module-level instance used by uvicorn:
#   uvicorn cmsproxy.api.app:app --reload
app = create_app()

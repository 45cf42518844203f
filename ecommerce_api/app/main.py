"""
Main entrypoint for the E-commerce API.

This module assembles the FastAPI application, sets up logging and
includes the versioned routers.  The ``create_app`` function builds
and configures the app, which is then instantiated at module import
time as ``app``, so it can be served directly::

    uvicorn ecommerce_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import get_store
from .core.logging_config import setup_logging


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Configures logging, mounts the v1 routes and registers the
    startup hook that prepares the document store.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    # v1 is mounted at the root: clients call /users, /products and
    # /orders directly.
    app.include_router(v1_router)

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file if needed and applies migrations.
        get_store().init()

    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        return "Welcome to the E-commerce API!"

    @app.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok"}

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()

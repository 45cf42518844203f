"""Entry point for the E-commerce API.

Serves the FastAPI application with Uvicorn.  Intended to be executed
from the project root, for example in Docker, where you only specify a
single Python file to run.

Host, port, database location and log level come from the environment
(``HOST``, ``PORT``, ``DATABASE_URL``, ``LOG_LEVEL``); see
``ecommerce_api/app/core/config.py`` for the full list.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from ecommerce_api.app.core.config import settings
from ecommerce_api.app.main import app


async def main() -> None:
    """Start the API server using Uvicorn."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        # Root logging is already set up by create_app().
        log_config=None,
    )
    server = Server(config)
    logging.getLogger(__name__).info("Server is running on port %s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass

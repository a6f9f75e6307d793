"""Entry point for the Service Registry API.

Launches the FastAPI application with Uvicorn on the address given by
the ``HOST`` and ``PORT`` environment variables (defaults
``127.0.0.1`` and ``3000``).  ``DATABASE_URL`` must point at a
PostgreSQL server; it may be placed in a ``.env`` file next to this
script.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from service_registry_api.app.core.config import settings
from service_registry_api.app.main import app

logger = logging.getLogger(__name__)


async def main() -> None:
    """Serve the API until interrupted.

    Exits with status 1 when the application fails to start, e.g. when
    the database is unreachable.
    """
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logger.info("Server running at http://%s:%s", settings.host, settings.port)
    await server.serve()
    if not server.started:
        raise SystemExit(1)


if __name__ == "__main__":
    asyncio.run(main())

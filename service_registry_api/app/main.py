"""
Main entrypoint for the Service Registry API.

This module assembles the FastAPI application, sets up logging and
includes the API router.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Run it with ``python run.py`` or with any ASGI server,
e.g.::

    uvicorn service_registry_api.app.main:app --port 3000

On startup the lifespan handler opens the PostgreSQL connection pool
and creates the ``services`` table if it is absent.  A failure at this
point (missing ``DATABASE_URL``, unreachable server) aborts startup.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.db import init_db, open_database
from .core.logging_config import setup_logging


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to build the application from.  Defaults to the
        module-level settings read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or default_settings

    # Initialise logging before anything else so that the startup
    # below can safely log messages.
    setup_logging(app_settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        db = open_database(app_settings)
        try:
            init_db(db)
        except Exception:
            db.close()
            raise
        app.state.db = db
        try:
            yield
        finally:
            db.close()

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.include_router(api_router)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()

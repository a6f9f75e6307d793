"""
FastAPI dependencies shared by the endpoint modules.

The connection pool lives on ``app.state.db`` (set by the application
lifespan).  Handlers receive a ``ServiceRegistry`` bound to it through
``Depends(get_registry)``; tests override this dependency.
"""

from fastapi import Request

from service_registry_api.app.core.db import Database
from service_registry_api.app.services.registry_service import ServiceRegistry


def get_db(request: Request) -> Database:
    return request.app.state.db


def get_registry(request: Request) -> ServiceRegistry:
    return ServiceRegistry(get_db(request))

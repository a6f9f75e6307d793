"""
Service record endpoints.

These routes expose list/create/delete over the ``services`` table.
Handlers are plain functions: FastAPI runs them in its thread pool, so
the blocking psycopg2 calls never stall the event loop.

Storage errors are translated as follows:

* a constraint violation on create (duplicate ``name`` or ``link``)
  becomes HTTP 400 carrying the database error text;
* a missing record on delete becomes HTTP 404;
* any other database failure, including a pool timeout, becomes
  HTTP 500.
"""

from typing import List

import psycopg2
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse

from service_registry_api.app.api.deps import get_registry
from service_registry_api.app.schemas.service import ServiceCreate, ServiceRead
from service_registry_api.app.services.registry_service import ServiceRegistry

router = APIRouter()


@router.get("", response_model=List[ServiceRead])
def list_services(registry: ServiceRegistry = Depends(get_registry)) -> List[ServiceRead]:
    """Return every service record.

    A database failure is reported as HTTP 500 rather than an empty
    list, so clients can tell an empty registry from a broken one.
    """
    try:
        return registry.list_services()
    except psycopg2.Error as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e


@router.post("", response_model=ServiceRead)
def create_service(
    service_in: ServiceCreate,
    registry: ServiceRegistry = Depends(get_registry),
) -> ServiceRead:
    """Create a service record and return it with its assigned id."""
    try:
        return registry.create_service(service_in)
    except psycopg2.IntegrityError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Failed to insert: {e}",
        ) from e
    except psycopg2.Error as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e


@router.delete("/{name}", response_class=PlainTextResponse)
def delete_service(name: str, registry: ServiceRegistry = Depends(get_registry)) -> str:
    """Delete the service record called ``name``."""
    try:
        deleted = registry.delete_service(name)
    except psycopg2.Error as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Service not found")
    return f"Deleted '{name}'"

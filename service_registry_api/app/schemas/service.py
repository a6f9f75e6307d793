"""
Pydantic schemas for service records.

A service record is a named link: a unique ``name`` pointing at a
unique ``link``.  The ``id`` is assigned by PostgreSQL on insert and
never changes afterwards.  There is no update schema because records
are only ever created, listed and deleted.
"""

from pydantic import BaseModel, Field


class ServiceCreate(BaseModel):
    """Schema for creating a new service record."""

    name: str = Field(..., description="Unique name of the service")
    link: str = Field(..., description="Unique link the service points to")


class ServiceRead(BaseModel):
    """Schema for reading a service record."""

    id: int
    name: str
    link: str

"""
Top‑level API router.

Aggregates the domain routers under their path prefixes.  The service
records are exposed at ``/services``.
"""

from fastapi import APIRouter

from .endpoints import services

router = APIRouter()

router.include_router(services.router, prefix="/services", tags=["services"])

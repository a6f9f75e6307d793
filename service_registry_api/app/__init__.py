"""
Application package initializer.

The application is split into a few small layers: ``core`` holds
configuration, logging and the PostgreSQL connection pool, ``schemas``
the Pydantic request/response models, ``services`` the SQL for the
``services`` table and ``api`` the HTTP routes that translate between
the two.
"""

from .main import app  # noqa: F401

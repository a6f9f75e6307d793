"""
Top‑level package for the Service Registry API.

This file makes ``service_registry_api`` a regular package so that
modules within ``app`` can be imported using fully qualified names
like ``service_registry_api.app.main`` from tests and from ``run.py``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []

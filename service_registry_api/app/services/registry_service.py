"""
Service layer for the ``services`` table.

``ServiceRegistry`` issues the three statements the API needs: a full
select, an insert returning the new row and a delete by name.  Each
operation borrows one connection from the ``Database`` handle, runs a
single statement and commits.  On any psycopg2 error the transaction
is rolled back, the failure is logged and the exception is re-raised
for the API layer to translate into an HTTP status.

All queries use parameterized statements.
"""

from __future__ import annotations

import logging
from typing import List

import psycopg2
from psycopg2.extras import RealDictCursor

from service_registry_api.app.core.db import Database
from service_registry_api.app.schemas.service import ServiceCreate, ServiceRead

logger = logging.getLogger(__name__)


class ServiceRegistry:
    """CRUD operations on service records."""

    def __init__(self, db: Database) -> None:
        self.db = db

    def list_services(self) -> List[ServiceRead]:
        """Return every stored record, in whatever order PostgreSQL yields."""
        with self.db.connection() as conn:
            try:
                with conn.cursor(cursor_factory=RealDictCursor) as cur:
                    cur.execute("SELECT id, name, link FROM services")
                    rows = cur.fetchall()
                conn.commit()
            except psycopg2.Error:
                self._rollback(conn)
                logger.exception("Failed to list services")
                raise
        return [ServiceRead(**row) for row in rows]

    def create_service(self, data: ServiceCreate) -> ServiceRead:
        """Insert a new record and return it with its assigned ``id``.

        Uniqueness of ``name`` and ``link`` is enforced by the table
        constraints; a collision surfaces as ``psycopg2.IntegrityError``.
        """
        with self.db.connection() as conn:
            try:
                with conn.cursor(cursor_factory=RealDictCursor) as cur:
                    cur.execute(
                        "INSERT INTO services (name, link) VALUES (%s, %s) RETURNING id, name, link",
                        (data.name, data.link),
                    )
                    row = cur.fetchone()
                conn.commit()
            except psycopg2.Error as e:
                self._rollback(conn)
                logger.error("Failed to insert service %r: %s", data.name, e)
                raise
        logger.info("Created service %s (%s)", row["id"], row["name"])
        return ServiceRead(**row)

    def delete_service(self, name: str) -> bool:
        """Delete the record called ``name``.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        """
        with self.db.connection() as conn:
            try:
                with conn.cursor() as cur:
                    cur.execute("DELETE FROM services WHERE name = %s", (name,))
                    affected = cur.rowcount
                conn.commit()
            except psycopg2.Error:
                self._rollback(conn)
                logger.exception("Failed to delete service %r", name)
                raise
        if affected:
            logger.info("Deleted service %r", name)
        return affected > 0

    @staticmethod
    def _rollback(conn) -> None:
        # A connection dropped by the server cannot be rolled back.
        if not conn.closed:
            conn.rollback()

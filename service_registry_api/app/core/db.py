"""
PostgreSQL integration: connection pool and table bootstrap.

This module provides the ``Database`` handle wrapping a psycopg2
``ThreadedConnectionPool``, a helper to open it from ``Settings``
(``open_database``) and the idempotent bootstrap run on application
start (``init_db``).

The pool is bounded.  psycopg2 raises ``PoolError`` immediately when
every connection is checked out, so ``Database`` guards the pool with
a semaphore of the same size: a request that cannot obtain a
connection waits until one is returned or ``timeout`` seconds elapse.

The handle is created by the application lifespan and stored on
``app.state``; nothing in this module keeps a global pool.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Iterator

from psycopg2 import pool
from psycopg2.extensions import connection as PgConnection

from .config import Settings

logger = logging.getLogger(__name__)


SERVICES_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS services (
    id SERIAL PRIMARY KEY,
    name TEXT UNIQUE NOT NULL,
    link TEXT UNIQUE NOT NULL
)
"""


class PoolTimeoutError(pool.PoolError):
    """Raised when no pooled connection became free in time."""


class Database:
    """Bounded pool of PostgreSQL connections shared across requests."""

    def __init__(self, dsn: str, min_conn: int = 1, max_conn: int = 5, timeout: float = 30.0) -> None:
        self.timeout = timeout
        self._pool = pool.ThreadedConnectionPool(min_conn, max_conn, dsn)
        self._slots = threading.BoundedSemaphore(max_conn)
        logger.info("Database connection pool opened (max %s connections)", max_conn)

    @contextmanager
    def connection(self) -> Iterator[PgConnection]:
        """Borrow a connection for the duration of the ``with`` block.

        The connection is always handed back to the pool, even when the
        block raises.  Transaction handling (commit/rollback) is left to
        the caller.
        """
        if not self._slots.acquire(timeout=self.timeout):
            raise PoolTimeoutError(
                f"timed out after {self.timeout}s waiting for a database connection"
            )
        try:
            conn = self._pool.getconn()
        except Exception:
            self._slots.release()
            raise
        try:
            yield conn
        finally:
            self._pool.putconn(conn)
            self._slots.release()

    def close(self) -> None:
        """Close every connection in the pool."""
        self._pool.closeall()
        logger.info("Database connection pool closed")


def open_database(settings: Settings) -> Database:
    """Open the connection pool described by ``settings``.

    Raises ``RuntimeError`` when ``DATABASE_URL`` is not configured and
    lets ``psycopg2.OperationalError`` propagate when the server cannot
    be reached.
    """
    if not settings.database_url:
        raise RuntimeError("DATABASE_URL is not set")
    return Database(
        settings.database_url,
        min_conn=settings.db_pool_min,
        max_conn=settings.db_pool_max,
        timeout=settings.db_pool_timeout,
    )


def init_db(db: Database) -> None:
    """Create the ``services`` table if it does not exist yet."""
    with db.connection() as conn:
        try:
            with conn.cursor() as cur:
                cur.execute(SERVICES_TABLE_SQL)
            conn.commit()
        except Exception:
            if not conn.closed:
                conn.rollback()
            logger.exception("Failed to create the services table")
            raise
    logger.info("Services table is ready")

import logging
from typing import Optional
import psycopg2
from fastapi import Request
from psycopg2 import pool as pg_pool

from app.database.connection import PostgresConnection
from app.database.history_queries import (
    create_history_table,
    get_last_input,
    upsert_last_input,
)

logger = logging.getLogger(__name__)


class StorageError(RuntimeError):
    pass


class HistoryStore:
    """
    Last rendered diagram per email, backed by a Postgres connection pool.

    Each call borrows a connection for a single statement. Any psycopg2
    failure (pool exhausted, connection lost, statement rejected) comes out
    as a StorageError.
    """

    def __init__(self, connection_pool: pg_pool.AbstractConnectionPool):
        self.pool = connection_pool

    def ensure_schema(self) -> None:
        try:
            with PostgresConnection(self.pool) as conn:
                create_history_table(conn)
        except psycopg2.Error as e:
            raise StorageError(f"Failed to create history table: {e}") from e
        logger.info("History table ready")

    def get_last_input(self, email: str) -> Optional[str]:
        try:
            with PostgresConnection(self.pool) as conn:
                return get_last_input(conn, email)
        except psycopg2.Error as e:
            raise StorageError(f"Failed to read history for {email}: {e}") from e

    def upsert(self, email: str, markup: str) -> None:
        try:
            with PostgresConnection(self.pool) as conn:
                upsert_last_input(conn, email, markup)
        except psycopg2.Error as e:
            raise StorageError(f"Failed to save history for {email}: {e}") from e
        logger.info(f"Saved last input for {email}")

    def close(self) -> None:
        self.pool.closeall()
        logger.info("Postgres pool closed")


def get_history_store(request: Request) -> HistoryStore:
    """ FastAPI dependency: the store created at startup. """
    return request.app.state.history_store

import logging
import os
from psycopg2 import pool as pg_pool
from psycopg2.extensions import connection as PGConnection

logger = logging.getLogger(__name__)


def build_dsn() -> str:
    """ Build a libpq DSN from the DB_* environment variables. """
    host = os.getenv("DB_HOST", "localhost")
    port = int(os.getenv("DB_PORT", "5432"))
    name = os.getenv("DB_NAME", "network_diagram")
    user = os.getenv("DB_USER", "postgres")
    password = os.getenv("DB_PASSWORD")
    sslmode = os.getenv("DB_SSLMODE")

    dsn = f"host={host} port={port} dbname={name} user={user}"
    if password:
        dsn += f" password={password}"
    if sslmode:
        dsn += f" sslmode={sslmode}"
    return dsn


def create_pool() -> pg_pool.ThreadedConnectionPool:
    minconn = int(os.getenv("DB_POOL_MIN", "1"))
    maxconn = int(os.getenv("DB_POOL_MAX", "10"))
    connection_pool = pg_pool.ThreadedConnectionPool(minconn, maxconn, dsn=build_dsn())
    logger.info(f"Postgres pool ready (min={minconn}, max={maxconn})")
    return connection_pool


class PostgresConnection:
    """
    Borrow one connection from the pool for the duration of a ``with`` block.

    The connection always goes back to the pool on exit. If the block raised,
    the open transaction is rolled back first so nothing half-written is
    committed by the next borrower.
    """

    def __init__(self, connection_pool: pg_pool.AbstractConnectionPool):
        self.pool = connection_pool
        self.conn = None

    def __enter__(self) -> PGConnection:
        self.conn = self.pool.getconn()
        return self.conn

    def __exit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type and not self.conn.closed:
                self.conn.rollback()
        finally:
            self.pool.putconn(self.conn)
            self.conn = None
        return False

from typing import Optional
from psycopg2.extras import DictCursor
from psycopg2.extensions import connection as PGConnection


def create_history_table(conn: PGConnection) -> None:
    query = """
    CREATE TABLE IF NOT EXISTS history (
        email TEXT NOT NULL PRIMARY KEY,
        last_input TEXT
    );
    """
    with conn.cursor() as cursor:
        cursor.execute(query)
        conn.commit()


def get_last_input(conn: PGConnection, email: str) -> Optional[str]:
    """
    Fetch the last rendered diagram saved for an email.
    Returns None when the email has no record.
    """
    query = "SELECT last_input FROM history WHERE email = %s;"
    with conn.cursor(cursor_factory=DictCursor) as cursor:
        cursor.execute(query, (email,))
        result = cursor.fetchone()
        return result["last_input"] if result else None


def upsert_last_input(conn: PGConnection, email: str, last_input: str) -> None:
    query = """
    INSERT INTO history (email, last_input)
    VALUES (%s, %s)
    ON CONFLICT (email) DO UPDATE SET
        last_input = EXCLUDED.last_input;
    """
    with conn.cursor() as cursor:
        cursor.execute(query, (email, last_input))
        conn.commit()

"""
Create the history table used by the network diagram service.

- Connects with the same DB_* variables as the service.
- Runs CREATE TABLE IF NOT EXISTS, so it is safe to run repeatedly.

Env:
  DB_HOST, DB_PORT, DB_NAME, DB_USER, DB_PASSWORD, DB_SSLMODE (optional)

Usage:
  python -m scripts.init_db --yes
"""
import argparse
import os
import sys
import textwrap
import psycopg2
from dotenv import load_dotenv

from app.database.connection import build_dsn
from app.database.history_queries import create_history_table


def check_env():
    missing = [k for k in ("DB_NAME", "DB_USER", "DB_PASSWORD") if not os.getenv(k)]
    if missing:
        print(f"Missing env vars: {', '.join(missing)}", file=sys.stderr)
        sys.exit(2)


def main():
    parser = argparse.ArgumentParser(description="Initialize the history table.")
    parser.add_argument("--env-file", default=".env",
                        help="Optional .env file to load before connecting.")
    parser.add_argument("--yes", action="store_true",
                        help="Run without interactive confirmation.")
    args = parser.parse_args()

    load_dotenv(dotenv_path=args.env_file)
    check_env()

    if not args.yes:
        print(textwrap.dedent(f"""
            This will connect to Postgres database '{os.getenv("DB_NAME")}'
            on {os.getenv("DB_HOST", "localhost")}:{os.getenv("DB_PORT", "5432")}
            and create the 'history' table if it does not exist.

            Continue? [y/N]
        """).strip())
        ans = input("> ").strip().lower()
        if ans not in ("y", "yes"):
            print("Aborted.")
            sys.exit(0)

    try:
        conn = psycopg2.connect(build_dsn())
    except psycopg2.Error as e:
        print(f"[ERR] Could not connect: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        create_history_table(conn)
        print("Done. History table is ready.")
    except psycopg2.Error as e:
        print(f"[ERR] {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        conn.close()


if __name__ == "__main__":
    main()

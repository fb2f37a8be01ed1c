"""
PostgreSQL access for the rating tables.

RatingRepository is the only caller. Tests pin every query to one
connection with set_connection_override() so each test can roll back.
"""

from contextlib import contextmanager
from typing import Any

import psycopg
from psycopg.rows import dict_row

from creditrank.config import config

_connection_override: psycopg.Connection | None = None


def set_connection_override(conn: psycopg.Connection) -> None:
    """Route all queries through conn until clear_connection_override()."""
    global _connection_override
    _connection_override = conn


def clear_connection_override() -> None:
    global _connection_override
    _connection_override = None


@contextmanager
def get_connection():
    """
    Yield a connection to config.database_url.

    A fresh connection is committed on success, rolled back on error and
    always closed. An override connection is yielded as-is; its owner
    decides when to commit or roll back.
    """
    if _connection_override is not None:
        yield _connection_override
        return

    conn = psycopg.connect(config.database_url)
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


@contextmanager
def get_cursor():
    """Cursor yielding rows as dicts."""
    with get_connection() as conn:
        with conn.cursor(row_factory=dict_row) as cur:
            yield cur


def execute(query: str, params: tuple = None) -> int:
    """Run a statement and return the number of rows it touched."""
    with get_cursor() as cur:
        cur.execute(query, params)
        return cur.rowcount


def fetch_one(query: str, params: tuple = None) -> dict[str, Any] | None:
    """First row of a query as a dict, or None."""
    with get_cursor() as cur:
        cur.execute(query, params)
        return cur.fetchone()


def fetch_all(query: str, params: tuple = None) -> list[dict[str, Any]]:
    """All rows of a query as dicts; empty list when nothing matches."""
    with get_cursor() as cur:
        cur.execute(query, params)
        return cur.fetchall()

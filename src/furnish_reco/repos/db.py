from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

import psycopg2

from furnish_reco.core.errors import DbError


def connect(*, database_url: str) -> Any:
    try:
        return psycopg2.connect(database_url)
    except psycopg2.OperationalError as exc:
        raise DbError(f"database connection failed: {exc}") from exc


@contextmanager
def db_connection(*, database_url: str) -> Iterator[Any]:
    conn = connect(database_url=database_url)
    try:
        yield conn
    finally:
        conn.close()


@contextmanager
def transaction(conn: Any) -> Iterator[Any]:
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise

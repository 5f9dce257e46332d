"""Cursor helpers shared by the MySQL stores."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional, Sequence, TypeVar

from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

T = TypeVar("T")


@contextmanager
def db_cursor(conn_factory: DatabaseConnection) -> Iterator[Any]:
    """One connection per unit of work; commit on success, rollback on any error."""
    conn = conn_factory.connect()
    cur = conn.cursor(dictionary=True)
    try:
        yield cur
        conn.commit()
    except Exception:
        logger.debug("Rolling back MySQL transaction", exc_info=True)
        conn.rollback()
        raise
    finally:
        cur.close()
        conn.close()


def fetch_one(cur, mapper: Callable[[dict], T]) -> Optional[T]:
    row = cur.fetchone()
    return mapper(row) if row else None


def fetch_all(cur, mapper: Callable[[dict], T]) -> list[T]:
    return [mapper(row) for row in cur.fetchall() or []]


def replace_table(cur, table: str, columns: Sequence[str], rows: Sequence[tuple]) -> int:
    """Swap the whole content of ``table`` inside the caller's transaction."""
    cur.execute(f"DELETE FROM {table}")
    if rows:
        placeholders = ",".join(["%s"] * len(columns))
        cur.executemany(f"INSERT INTO {table}({', '.join(columns)}) VALUES({placeholders})", list(rows))
    logger.info("Replaced %s with %d rows", table, len(rows))
    return len(rows)

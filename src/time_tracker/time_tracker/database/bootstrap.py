"""Create the database and apply ``database/schema.sql`` for the MySQL store."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from .connection import DBConfig, DatabaseConnection

logger = logging.getLogger(__name__)

# The schema file names its own database; the configured one wins.
_DB_SELECTION = re.compile(r"(?im)^\s*(CREATE\s+DATABASE|USE)\b[^;]*;\s*$")
_LINE_COMMENT = re.compile(r"(?m)^\s*--.*$")
# ';' outside single-quoted literals
_STATEMENT_END = re.compile(r";(?=(?:[^']*'[^']*')*[^']*$)")


def split_schema(sql: str) -> list[str]:
    """Statements of a schema script, without comments and database selection."""
    sql = _LINE_COMMENT.sub("", _DB_SELECTION.sub("", sql))
    return [stmt.strip() for stmt in _STATEMENT_END.split(sql) if stmt.strip()]


def ensure_database_exists(db_config: dict) -> str:
    target = DBConfig.from_dict(db_config)
    conn = DatabaseConnection(target).connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()
    return target.database


def apply_schema(db_config: dict, *, schema_path: str | Path) -> int:
    """Run every statement of the schema file; returns how many were executed."""
    database = ensure_database_exists(db_config)
    statements = split_schema(Path(schema_path).read_text(encoding="utf-8"))

    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        for stmt in statements:
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("Applied %d schema statements to %s", len(statements), database)
    return len(statements)


def list_tables(db_config: dict) -> list[str]:
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return sorted(row[0] for row in cur.fetchall())
    finally:
        conn.close()

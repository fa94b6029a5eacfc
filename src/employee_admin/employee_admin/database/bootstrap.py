from __future__ import annotations

import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Iterable

from werkzeug.security import generate_password_hash

from ..core.enums import Role
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


def _strip_create_db_and_use(sql: str) -> str:
    # schema.sql must work whatever database name is configured.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def iter_sql_statements(sql: str) -> Iterable[str]:
    """Split a SQL script on ``;`` outside of quoted strings."""
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def ensure_database_exists(conn_factory: DatabaseConnection) -> None:
    conn = conn_factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{conn_factory.config.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(conn_factory: DatabaseConnection, *, schema_path: str | Path) -> None:
    ensure_database_exists(conn_factory)
    sql = _strip_create_db_and_use(Path(schema_path).read_text(encoding="utf-8"))

    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        for stmt in iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("schema applied to %s", conn_factory.config.describe())


def ensure_admin_user(conn_factory: DatabaseConnection, *, code: str, name: str, password: str) -> bool:
    """Insert the bootstrap administrator unless the code is already taken.

    Returns True when a row was inserted.
    """
    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        cur.execute("SELECT 1 FROM employees WHERE code=%s", (code,))
        if cur.fetchone():
            return False

        now = datetime.now()
        cur.execute(
            """
            INSERT INTO employees (code, name, role, password, delete_flg, created_at, updated_at)
            VALUES (%s, %s, %s, %s, 0, %s, %s)
            """,
            (code, name, Role.ADMIN.value, generate_password_hash(password), now, now),
        )
        conn.commit()
    finally:
        conn.close()
    logger.info("bootstrap administrator %s created", code)
    return True


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()

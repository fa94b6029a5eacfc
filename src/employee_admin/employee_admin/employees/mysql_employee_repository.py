from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from mysql.connector import errorcode
from mysql.connector.errors import IntegrityError

from ..core.enums import Role
from ..core.exceptions import DuplicateKeyError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

_COLUMNS = "code, name, role, password, delete_flg, deleted_by, created_at, updated_at"


def _to_employee(row: dict) -> Employee:
    return Employee(
        code=row["code"],
        name=row["name"],
        role=Role(row["role"]),
        password=row["password"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        delete_flg=bool(row.get("delete_flg", False)),
        deleted_by=row.get("deleted_by"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_active(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE delete_flg=0 ORDER BY code")
            return [_to_employee(r) for r in fetchall(cur)]

    def get_active_by_code(self, code: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE code=%s AND delete_flg=0", (code,))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def insert(self, employee: Employee) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    f"""
                    INSERT INTO employees({_COLUMNS})
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        employee.code,
                        employee.name,
                        employee.role.value,
                        employee.password,
                        int(employee.delete_flg),
                        employee.deleted_by,
                        employee.created_at,
                        employee.updated_at,
                    ),
                )
        except IntegrityError as e:
            if e.errno == errorcode.ER_DUP_ENTRY:
                logger.warning("duplicate employee code rejected by storage: %s", employee.code)
                raise DuplicateKeyError(employee.code) from e
            raise

    def update(self, employee: Employee) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET name=%s, role=%s, password=%s, updated_at=%s
                WHERE code=%s AND delete_flg=0
                """,
                (employee.name, employee.role.value, employee.password, employee.updated_at, employee.code),
            )
            return cur.rowcount > 0

    def soft_delete(self, code: str, *, deleted_by: str, deleted_at: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET delete_flg=1, deleted_by=%s, updated_at=%s
                WHERE code=%s AND delete_flg=0
                """,
                (deleted_by, deleted_at, code),
            )
            return cur.rowcount > 0

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .auth.service import AuthService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository

    auth_service: AuthService
    employee_service: EmployeeService


def build_container_for(employees_repo: EmployeeRepository, *, conn: Optional[DatabaseConnection] = None) -> Container:
    return Container(
        conn=conn,
        employees_repo=employees_repo,
        auth_service=AuthService(employees_repo),
        employee_service=EmployeeService(employees_repo),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return build_container_for(MySQLEmployeeRepository(conn), conn=conn)

from __future__ import annotations

import os
from dataclasses import replace
from datetime import datetime
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

os.environ.setdefault("APP_ENV", "testing")

from employee_admin import create_app
from employee_admin.container import build_container_for
from employee_admin.core.enums import Role
from employee_admin.core.exceptions import DuplicateKeyError
from employee_admin.employees.model import Employee
from employee_admin.employees.service import EmployeeService

FIXED_NOW = datetime(2026, 2, 2, 9, 0, 0)


def make_employee(
    code: str,
    *,
    name: str = "Taro",
    role: Role = Role.GENERAL,
    password: str = "password1",
    delete_flg: bool = False,
) -> Employee:
    return Employee(
        code=code,
        name=name,
        role=role,
        password=generate_password_hash(password),
        created_at=datetime(2026, 1, 1, 10, 0, 0),
        updated_at=datetime(2026, 1, 1, 10, 0, 0),
        delete_flg=delete_flg,
    )


class InMemoryEmployees:
    """Mirrors the MySQL table: codes stay taken after a soft delete."""

    def __init__(self, *employees: Employee):
        self.rows: dict[str, Employee] = {e.code: e for e in employees}

    def list_active(self):
        return sorted((e for e in self.rows.values() if not e.delete_flg), key=lambda e: e.code)

    def get_active_by_code(self, code: str) -> Optional[Employee]:
        e = self.rows.get(code)
        return e if e and not e.delete_flg else None

    def insert(self, employee: Employee) -> None:
        if employee.code in self.rows:
            raise DuplicateKeyError(employee.code)
        self.rows[employee.code] = employee

    def update(self, employee: Employee) -> bool:
        if not self.get_active_by_code(employee.code):
            return False
        self.rows[employee.code] = employee
        return True

    def soft_delete(self, code: str, *, deleted_by: str, deleted_at: datetime) -> bool:
        e = self.get_active_by_code(code)
        if not e:
            return False
        self.rows[code] = replace(e, delete_flg=True, deleted_by=deleted_by, updated_at=deleted_at)
        return True


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def repo() -> InMemoryEmployees:
    return InMemoryEmployees(
        make_employee("admin", name="Admin", role=Role.ADMIN, password="admin1234"),
        make_employee("E001", name="Suzuki"),
    )


@pytest.fixture
def service(repo, fixed_now) -> EmployeeService:
    return EmployeeService(repo, clock=lambda: fixed_now)


@pytest.fixture
def app(repo):
    app = create_app(container=build_container_for(repo))
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client):
    with client.session_transaction() as sess:
        sess["code"] = "admin"
        sess["name"] = "Admin"
        sess["role"] = Role.ADMIN.value
    return client

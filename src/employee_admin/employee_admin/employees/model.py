from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    ``password`` always holds the stored hash, never the plain text.
    """

    code: str
    name: str
    role: Role
    password: str
    created_at: datetime
    updated_at: datetime
    delete_flg: bool = False
    deleted_by: Optional[str] = None


@dataclass
class EmployeeDraft:
    """Values submitted from the create/edit forms, kept as typed by the user."""

    code: str = ""
    name: str = ""
    role: str = Role.GENERAL.value
    password: str = ""

    @classmethod
    def from_employee(cls, employee: Employee) -> "EmployeeDraft":
        # The stored hash is never sent back to the browser.
        return cls(code=employee.code, name=employee.name, role=employee.role.value, password="")

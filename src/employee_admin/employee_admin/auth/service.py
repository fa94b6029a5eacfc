from __future__ import annotations

import logging

from werkzeug.security import check_password_hash

from ..core.exceptions import AuthenticationError
from ..employees.repository import EmployeeRepository
from .model import UserDetail

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: authenticate an employee (login)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def authenticate(self, code: str, password: str) -> UserDetail:
        employee = self._employees.get_active_by_code(code)
        if not employee:
            raise AuthenticationError("Incorrect employee code or password")

        try:
            ok = check_password_hash(employee.password, password)
        except ValueError:
            # placeholder or corrupted hashes
            ok = False

        if not ok:
            logger.info("failed login for %s", code)
            raise AuthenticationError("Incorrect employee code or password")

        return UserDetail(code=employee.code, name=employee.name, role=employee.role)

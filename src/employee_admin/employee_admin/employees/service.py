from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, Optional, Sequence

from werkzeug.security import generate_password_hash

from ..auth.model import UserDetail
from ..common.datetime_utils import now_local
from ..common.validators import is_half_width_alnum, is_length_between
from ..core.enums import Role
from ..core.errors import ErrorKind
from .model import Employee, EmployeeDraft
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 16


class EmployeeService:
    """Use case: manage employees (admin).

    Write operations return ``None`` on success or the ``ErrorKind`` that
    explains the rejection. ``save`` lets ``DuplicateKeyError`` from the
    repository propagate: a code held by a soft-deleted row passes the
    duplicate check here but is still rejected by the storage.
    """

    def __init__(self, employees: EmployeeRepository, *, clock: Callable[[], datetime] = now_local):
        self._employees = employees
        self._clock = clock

    def find_all(self) -> Sequence[Employee]:
        return self._employees.list_active()

    def find_by_code(self, code: str) -> Optional[Employee]:
        return self._employees.get_active_by_code(code)

    def save(self, draft: EmployeeDraft) -> Optional[ErrorKind]:
        result = self._check_password(draft.password)
        if result:
            return result

        if self._employees.get_active_by_code(draft.code):
            return ErrorKind.DUPLICATE_ERROR

        now = self._clock()
        self._employees.insert(
            Employee(
                code=draft.code,
                name=draft.name,
                role=Role(draft.role),
                password=generate_password_hash(draft.password),
                created_at=now,
                updated_at=now,
            )
        )
        logger.info("employee %s registered", draft.code)
        return None

    def update(self, draft: EmployeeDraft) -> Optional[ErrorKind]:
        """Update name/role, and the password unless it was left blank."""
        current = self._employees.get_active_by_code(draft.code)
        if current is None:
            return ErrorKind.NOT_FOUND_ERROR

        password = current.password
        if draft.password != "":
            result = self._check_password(draft.password)
            if result:
                return result
            password = generate_password_hash(draft.password)

        updated = replace(
            current,
            name=draft.name,
            role=Role(draft.role),
            password=password,
            updated_at=self._clock(),
        )
        if not self._employees.update(updated):
            return ErrorKind.NOT_FOUND_ERROR

        logger.info("employee %s updated", draft.code)
        return None

    def delete(self, code: str, actor: UserDetail) -> Optional[ErrorKind]:
        if code == actor.code:
            return ErrorKind.LOGINCHECK_ERROR

        if self._employees.get_active_by_code(code) is None:
            return ErrorKind.NOT_FOUND_ERROR

        if not self._employees.soft_delete(code, deleted_by=actor.code, deleted_at=self._clock()):
            return ErrorKind.NOT_FOUND_ERROR

        logger.info("employee %s deleted by %s", code, actor.code)
        return None

    @staticmethod
    def _check_password(password: str) -> Optional[ErrorKind]:
        if not is_half_width_alnum(password):
            return ErrorKind.HALFSIZE_ERROR
        if not is_length_between(password, PASSWORD_MIN_LENGTH, PASSWORD_MAX_LENGTH):
            return ErrorKind.RANGECHECK_ERROR
        return None

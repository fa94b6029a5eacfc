from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Only ``insert`` may raise ``DuplicateKeyError``. Every ``*_active`` read
    ignores soft-deleted rows.
    """

    def list_active(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_active_by_code(self, code: str) -> Optional[Employee]:
        raise NotImplementedError

    def insert(self, employee: Employee) -> None:
        raise NotImplementedError

    def update(self, employee: Employee) -> bool:
        raise NotImplementedError

    def soft_delete(self, code: str, *, deleted_by: str, deleted_at: datetime) -> bool:
        raise NotImplementedError

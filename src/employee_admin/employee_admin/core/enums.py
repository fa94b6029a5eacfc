from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account role used for authorization on the admin screens."""

    GENERAL = "GENERAL"
    ADMIN = "ADMIN"

    @property
    def label(self) -> str:
        return _ROLE_LABELS[self]


_ROLE_LABELS = {
    Role.GENERAL: "General",
    Role.ADMIN: "Administrator",
}

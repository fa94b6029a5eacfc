from __future__ import annotations

from typing import Mapping, Optional

from ..common.validators import check_max_length, check_required
from ..core.enums import Role
from .model import EmployeeDraft

CODE_MAX_LENGTH = 10
NAME_MAX_LENGTH = 20


def draft_from_form(form: Mapping[str, str], *, code: Optional[str] = None) -> EmployeeDraft:
    """Bind submitted form fields; ``code`` overrides the form value (edit screen)."""
    return EmployeeDraft(
        code=code if code is not None else form.get("code", ""),
        name=form.get("name", ""),
        role=form.get("role", ""),
        password=form.get("password", ""),
    )


def validate_employee(draft: EmployeeDraft) -> dict[str, str]:
    """Field-level checks. Returns ``{field: message}``; empty means valid.

    The password is not checked here: blank is only rejected on create and
    the character/length rules are applied by the service.
    """
    errors: dict[str, str] = {}

    msg = check_required(draft.code) or check_max_length(draft.code, CODE_MAX_LENGTH)
    if msg:
        errors["code"] = msg

    msg = check_required(draft.name) or check_max_length(draft.name, NAME_MAX_LENGTH)
    if msg:
        errors["name"] = msg

    try:
        Role(draft.role)
    except ValueError:
        errors["role"] = "Please select a valid role"

    return errors

"""Business error kinds reported back to the screens.

A service returns one of these (or ``None`` on success) instead of raising
for expected failures. Each kind maps to the form field it belongs to and a
message shown inline next to that field.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    BLANK_ERROR = "BLANK_ERROR"
    HALFSIZE_ERROR = "HALFSIZE_ERROR"
    RANGECHECK_ERROR = "RANGECHECK_ERROR"
    DUPLICATE_ERROR = "DUPLICATE_ERROR"
    DUPLICATE_EXCEPTION_ERROR = "DUPLICATE_EXCEPTION_ERROR"
    LOGINCHECK_ERROR = "LOGINCHECK_ERROR"
    NOT_FOUND_ERROR = "NOT_FOUND_ERROR"


_MESSAGES: dict[ErrorKind, tuple[str, str]] = {
    ErrorKind.BLANK_ERROR: ("password", "Please enter a value"),
    ErrorKind.HALFSIZE_ERROR: ("password", "Password must contain only half-width letters and digits"),
    ErrorKind.RANGECHECK_ERROR: ("password", "Password must be between 8 and 16 characters"),
    ErrorKind.DUPLICATE_ERROR: ("code", "This employee code is already registered"),
    ErrorKind.DUPLICATE_EXCEPTION_ERROR: ("code", "This employee code is already registered"),
    ErrorKind.LOGINCHECK_ERROR: ("delete", "You cannot delete the employee you are logged in as"),
    ErrorKind.NOT_FOUND_ERROR: ("record", "The employee does not exist or has already been deleted"),
}


def is_error(kind: Optional[ErrorKind]) -> bool:
    return kind in _MESSAGES


def error_name(kind: ErrorKind) -> str:
    return _MESSAGES[kind][0]


def error_value(kind: ErrorKind) -> str:
    return _MESSAGES[kind][1]


def as_field_error(kind: ErrorKind) -> dict[str, str]:
    """Shape a kind the same way form validation reports errors."""
    return {error_name(kind): error_value(kind)}

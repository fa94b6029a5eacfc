from __future__ import annotations

import re
from typing import Optional

_HALF_WIDTH_ALNUM = re.compile(r"[A-Za-z0-9]+")


def check_required(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return "Please enter a value"
    return None


def check_max_length(value: Optional[str], max_len: int) -> Optional[str]:
    if value is not None and len(value) > max_len:
        return f"Please enter at most {max_len} characters"
    return None


def is_half_width_alnum(value: str) -> bool:
    return bool(_HALF_WIDTH_ALNUM.fullmatch(value))


def is_length_between(value: str, min_len: int, max_len: int) -> bool:
    return min_len <= len(value) <= max_len

from __future__ import annotations

import math
from typing import Any, Optional

from ..core.exceptions import ValidationError


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def require_digits(value: str, length: int, message: str) -> str:
    if len(value) != length or not (value.isascii() and value.isdigit()):
        raise ValidationError(message)
    return value


def coerce_float(value: Any) -> Optional[float]:
    """Best-effort float conversion; returns None for blanks and junk."""

    if is_blank(value) or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def coerce_int(value: Any) -> Optional[int]:
    if is_blank(value):
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        return None

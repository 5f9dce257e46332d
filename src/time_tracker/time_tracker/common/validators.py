from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError
from .datetime_utils import is_iso_date


def require_non_empty(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_iso_date(value: Any, field_name: str) -> str:
    if not is_iso_date(value):
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date")
    return value


def require_non_negative_int(value: Any, field_name: str) -> int:
    if value is None or value == "":
        return 0
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise ValidationError(f"{field_name} must be an integer")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer") from None
    if number < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return number

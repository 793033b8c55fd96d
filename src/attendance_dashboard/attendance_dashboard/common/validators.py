from __future__ import annotations

import math
from datetime import date
from typing import Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date, parse_month, today_utc


def require_text(value, field_name: str) -> str:
    # JSON bodies may carry numbers, lists or null where text is expected.
    if value is None:
        raise ValidationError(f"{field_name} is required")
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    return value


def require_non_empty(value: Optional[str], field_name: str) -> str:
    value = require_text(value, field_name).strip()
    if not value:
        raise ValidationError(f"{field_name} is required")
    return value


def require_min_length(value: Optional[str], field_name: str, min_len: int) -> str:
    if len(require_text(value, field_name)) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_non_negative_number(value, field_name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f"{field_name} must be a number")
    if not math.isfinite(number):
        raise ValidationError(f"{field_name} must be a finite number")
    if number < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return number


def require_positive_int(value, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f"{field_name} is invalid")
    if number <= 0:
        raise ValidationError(f"{field_name} is invalid")
    return number


def require_iso_date(value: Optional[str], field_name: str) -> date:
    value = require_non_empty(value, field_name)
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date")


def require_month(value: Optional[str]) -> date:
    """First day of the YYYY-MM month given, or of the current UTC month when empty."""
    if value is None or value == "":
        return today_utc().replace(day=1)
    if not isinstance(value, str):
        raise ValidationError("Month must be in YYYY-MM format")
    try:
        return parse_month(value.strip())
    except ValueError:
        raise ValidationError("Month must be in YYYY-MM format")

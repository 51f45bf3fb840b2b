from __future__ import annotations

from datetime import date

from ..core.exceptions import InvalidDateRange, ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def require_date_order(start: date, end: date) -> None:
    if end < start:
        raise InvalidDateRange(f"end {end.isoformat()} is before start {start.isoformat()}")


def require_positive(value: int, field_name: str) -> int:
    value = int(value)
    if value <= 0:
        raise ValidationError(f"{field_name} must be positive")
    return value

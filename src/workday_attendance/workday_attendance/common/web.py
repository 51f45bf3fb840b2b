"""Flask helpers shared by controllers: identity guards and JSON shaping.

Identity (`employee_id`, `role`) is bound into the session by the
authentication layer before any of these routes run.
"""

from __future__ import annotations

import dataclasses
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from functools import wraps
from typing import Any

from flask import jsonify, session

from ..core.enums import Role
from ..core.exceptions import (
    AlreadyCheckedIn,
    AlreadyCheckedOut,
    DomainError,
    EmployeeNotFound,
    EmptyExportRange,
    InvalidDateRange,
    InvalidTimeOrdering,
    NotCheckedIn,
    NotFoundError,
)

ERROR_MESSAGES: dict[type, str] = {
    AlreadyCheckedIn: "Already checked in today",
    NotCheckedIn: "You have not checked in today",
    AlreadyCheckedOut: "Already checked out",
    InvalidTimeOrdering: "Check-out must be after check-in",
    InvalidDateRange: "Invalid date or month",
    EmployeeNotFound: "Employee with given ID not found",
    EmptyExportRange: "No attendance records for given filters",
}


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "employee_id" not in session:
            return jsonify({"message": "Not authenticated"}), 401
        return view(*args, **kwargs)

    return wrapper


def manager_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "employee_id" not in session:
            return jsonify({"message": "Not authenticated"}), 401
        if session.get("role") != Role.MANAGER.value:
            return jsonify({"message": "Forbidden"}), 403
        return view(*args, **kwargs)

    return wrapper


def current_employee_id() -> int:
    return int(session["employee_id"])


def error_response(exc: DomainError):
    message = ERROR_MESSAGES.get(type(exc), "Request could not be processed")
    if isinstance(exc, NotFoundError):
        return jsonify({"message": message}), 404
    return jsonify({"message": message}), 400


def to_jsonable(value: Any) -> Any:
    """Convert dataclasses/dates/decimals/enums into JSON-friendly values."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_jsonable(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, dict):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, Enum):
        return value.value
    return value

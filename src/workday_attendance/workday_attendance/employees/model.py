from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee on the roster.

    Note: plain data object (no DB access code). Attendance records reference
    employees by id; profile edits happen outside this package.
    """

    employee_id: int
    name: str
    employee_code: str
    department: Optional[str]
    role: Role = Role.EMPLOYEE

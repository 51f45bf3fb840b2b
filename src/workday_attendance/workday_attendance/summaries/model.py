from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class MonthlySummary:
    month: str
    present_days: int = 0
    late_days: int = 0
    half_days: int = 0
    absent_days: int = 0
    total_hours: Decimal = Decimal("0.00")

    @property
    def days_considered(self) -> int:
        return self.present_days + self.late_days + self.half_days + self.absent_days


@dataclass(frozen=True)
class EmployeeRef:
    employee_id: int
    name: str
    employee_code: str
    department: Optional[str]


@dataclass(frozen=True)
class LateEntry:
    employee: EmployeeRef
    check_in_time: Optional[datetime]
    status: AttendanceStatus


@dataclass(frozen=True)
class DepartmentStats:
    department: str
    total_employees: int
    present: int
    late: int
    absent: int


@dataclass(frozen=True)
class DailySnapshot:
    """Derived, non-persisted aggregate over one organizational day."""

    date: date
    total_employees: int
    present: int
    absent: int
    late_count: int
    late_employees: list[LateEntry] = field(default_factory=list)
    absent_employees: list[EmployeeRef] = field(default_factory=list)
    department_stats: list[DepartmentStats] = field(default_factory=list)


@dataclass(frozen=True)
class TrendDay:
    date: date
    present: int
    late: int
    absent: int


@dataclass(frozen=True)
class WeeklyTrend:
    total_employees: int
    days: list[TrendDay]

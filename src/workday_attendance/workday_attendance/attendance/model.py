from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Union

from ..core.enums import AttendanceStatus
from ..employees.model import Employee


@dataclass(frozen=True)
class CheckedIn:
    """Attendance record after check-in, before checkout.

    `is_late` mirrors the column default (False); it is None only on legacy
    rows that predate the column.
    """

    attendance_id: int
    employee_id: int
    work_date: date
    check_in_time: datetime
    is_late: Optional[bool] = False

    @property
    def check_out_time(self) -> Optional[datetime]:
        return None

    @property
    def total_hours(self) -> Optional[Decimal]:
        return None

    @property
    def status(self) -> Optional[AttendanceStatus]:
        return None


@dataclass(frozen=True)
class Completed:
    """Attendance record after checkout. Never mutated again."""

    attendance_id: int
    employee_id: int
    work_date: date
    check_in_time: datetime
    check_out_time: datetime
    total_hours: Decimal
    status: AttendanceStatus
    is_late: Optional[bool]


AttendanceRecord = Union[CheckedIn, Completed]


@dataclass(frozen=True)
class CheckoutResult:
    """Fields derived at checkout; callers persist them."""

    total_hours: Decimal
    is_late: bool
    status: AttendanceStatus


@dataclass(frozen=True)
class AttendanceReportRow:
    """Read-model: a record joined with its employee for listings/exports.

    `employee` is None when the employee row no longer exists.
    """

    record: AttendanceRecord
    employee: Optional[Employee]

    @property
    def employee_id(self) -> int:
        return self.record.employee_id


@dataclass(frozen=True)
class AttendanceQuery:
    """Filter for range queries; bounds are inclusive calendar days."""

    day_start: date
    day_end: date
    employee_id: Optional[int] = None
    department: Optional[str] = None
    status: Optional[AttendanceStatus] = None
    limit: Optional[int] = None


@dataclass(frozen=True)
class CalendarDay:
    status: AttendanceStatus
    check_in_time: Optional[datetime]
    check_out_time: Optional[datetime]
    total_hours: Optional[Decimal]

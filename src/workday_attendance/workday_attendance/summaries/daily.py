from __future__ import annotations

from datetime import date, time
from typing import Iterable, Sequence

from ..attendance.classifier import has_activity, is_record_late
from ..attendance.model import AttendanceReportRow
from ..core.constants import OFFICE_START_TIME, UNKNOWN_DEPARTMENT
from ..core.enums import AttendanceStatus
from ..employees.model import Employee
from .model import DailySnapshot, DepartmentStats, EmployeeRef, LateEntry


def _ref(employee: Employee) -> EmployeeRef:
    return EmployeeRef(
        employee_id=employee.employee_id,
        name=employee.name,
        employee_code=employee.employee_code,
        department=employee.department,
    )


def _department(employee: Employee) -> str:
    return employee.department or UNKNOWN_DEPARTMENT


def snapshot_day(
    day: date,
    roster: Sequence[Employee],
    rows: Iterable[AttendanceReportRow],
    *,
    office_start: time = OFFICE_START_TIME,
) -> DailySnapshot:
    """Partition the roster into present/absent/late for one day.

    Rows for employees outside the roster still count toward the headline
    present/late totals but never toward department stats or the absent list.
    """

    roster_by_id = {emp.employee_id: emp for emp in roster}
    day_rows = [r for r in rows if r.record.work_date == day]

    active_rows = [r for r in day_rows if has_activity(r.record)]
    present = len(active_rows)
    absent = max(len(roster) - present, 0)

    late_rows = [r for r in active_rows if is_record_late(r.record, day, office_start=office_start)]
    late_employees = [
        LateEntry(
            employee=_ref(r.employee),
            check_in_time=r.record.check_in_time,
            status=r.record.status or AttendanceStatus.LATE,
        )
        for r in late_rows
        if r.employee is not None
    ]

    seen_ids = {r.employee_id for r in day_rows}
    absent_employees = [_ref(emp) for emp in roster if emp.employee_id not in seen_ids]

    # Departments come from the roster, in roster order.
    dept_totals: dict[str, int] = {}
    for emp in roster:
        dept = _department(emp)
        dept_totals[dept] = dept_totals.get(dept, 0) + 1

    dept_present: dict[str, int] = {}
    dept_late: dict[str, int] = {}
    late_ids = {id(r) for r in late_rows}
    for r in active_rows:
        emp = roster_by_id.get(r.employee_id)
        if emp is None:
            continue
        dept = _department(emp)
        dept_present[dept] = dept_present.get(dept, 0) + 1
        if id(r) in late_ids:
            dept_late[dept] = dept_late.get(dept, 0) + 1

    department_stats = [
        DepartmentStats(
            department=dept,
            total_employees=total,
            present=dept_present.get(dept, 0),
            late=dept_late.get(dept, 0),
            absent=max(total - dept_present.get(dept, 0), 0),
        )
        for dept, total in dept_totals.items()
    ]

    return DailySnapshot(
        date=day,
        total_employees=len(roster),
        present=present,
        absent=absent,
        late_count=len(late_rows),
        late_employees=late_employees,
        absent_employees=absent_employees,
        department_stats=department_stats,
    )

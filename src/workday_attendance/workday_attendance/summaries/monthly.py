from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Iterable

from ..attendance.classifier import effective_status
from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import day_key, format_month_token, iter_days, month_range
from ..core.enums import AttendanceStatus
from .model import MonthlySummary

_COUNTERS = {
    AttendanceStatus.PRESENT: "present_days",
    AttendanceStatus.LATE: "late_days",
    AttendanceStatus.HALF_DAY: "half_days",
    AttendanceStatus.ABSENT: "absent_days",
}


def summarize_month(
    employee_id: int,
    year: int,
    month: int,
    records: Iterable[AttendanceRecord],
    as_of: date,
) -> MonthlySummary:
    """Fold one employee's records for a month into day counts and hours.

    Days in `first .. min(as_of, last)` without any record count as absent,
    so an in-progress month never counts future days.
    """

    start, end = month_range(year, month)
    first_day, last_day = start.date(), end.date()

    counts = {name: 0 for name in _COUNTERS.values()}
    total_hours = Decimal("0")
    days_with_record: set[date] = set()

    for rec in records:
        key = day_key(rec.work_date)
        if rec.employee_id != employee_id or not first_day <= key <= last_day:
            continue
        if key in days_with_record:
            continue
        days_with_record.add(key)

        if rec.total_hours is not None:
            total_hours += Decimal(rec.total_hours)
        counts[_COUNTERS[effective_status(rec)]] += 1

    scan_end = min(day_key(as_of), last_day)
    for day in iter_days(first_day, scan_end):
        if day not in days_with_record:
            counts["absent_days"] += 1

    return MonthlySummary(
        month=format_month_token(year, month),
        total_hours=total_hours.quantize(Decimal("0.01")),
        **counts,
    )

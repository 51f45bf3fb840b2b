from __future__ import annotations

import csv
import io
from typing import Iterable

from ..attendance.classifier import effective_status
from ..attendance.model import AttendanceReportRow

CSV_HEADERS = [
    "Date",
    "Employee Name",
    "Employee ID",
    "Department",
    "Check In",
    "Check Out",
    "Total Hours",
    "Status",
]


def _row_values(row: AttendanceReportRow) -> list[str]:
    rec = row.record
    emp = row.employee
    return [
        rec.work_date.isoformat(),
        emp.name if emp else "",
        emp.employee_code if emp else "",
        (emp.department or "") if emp else "",
        rec.check_in_time.strftime("%H:%M:%S") if rec.check_in_time else "",
        rec.check_out_time.strftime("%H:%M:%S") if rec.check_out_time else "",
        f"{rec.total_hours:.2f}" if rec.total_hours is not None else "",
        effective_status(rec).value,
    ]


def render_attendance_csv(rows: Iterable[AttendanceReportRow]) -> str:
    out = io.StringIO()
    writer = csv.writer(out, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for row in rows:
        writer.writerow(_row_values(row))
    return out.getvalue()

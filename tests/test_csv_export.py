import csv
import io
from datetime import date

from src.workday_attendance.workday_attendance.attendance.model import AttendanceReportRow
from src.workday_attendance.workday_attendance.core.enums import AttendanceStatus
from src.workday_attendance.workday_attendance.reports.csv_export import CSV_HEADERS, render_attendance_csv
from tests.fakes import checked_in, completed, make_employee


def test_csv_contains_joined_employee_fields_and_quotes():
    emp = make_employee(1, 'Ann "AJ" Lee', "IT")
    rows = [
        AttendanceReportRow(
            record=completed(1, date(2026, 2, 9), (9, 0), (17, 30), AttendanceStatus.PRESENT, hours="8.50"),
            employee=emp,
        ),
        AttendanceReportRow(record=checked_in(9, date(2026, 2, 10), (9, 5)), employee=None),
    ]

    text = render_attendance_csv(rows)
    parsed = list(csv.reader(io.StringIO(text)))

    assert parsed[0] == CSV_HEADERS
    assert parsed[1] == ["2026-02-09", 'Ann "AJ" Lee', "EMP001", "IT", "09:00:00", "17:30:00", "8.50", "Present"]
    assert parsed[2] == ["2026-02-10", "", "", "", "09:05:00", "", "", "Present"]
    assert '"Ann ""AJ"" Lee"' in text

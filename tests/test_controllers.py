from __future__ import annotations

from datetime import date, datetime

import pytest

from src.workday_attendance.workday_attendance.container import build_services
from src.workday_attendance.workday_attendance.core.enums import AttendanceStatus
from src.workday_attendance.workday_attendance.main import create_app
from tests.fakes import completed


class MutableClock:
    def __init__(self, instant: datetime):
        self.instant = instant

    def now(self) -> datetime:
        return self.instant


@pytest.fixture
def app_clock():
    return MutableClock(datetime(2026, 2, 10, 9, 0))


@pytest.fixture
def client(monkeypatch, attendance_repo, employees_repo, app_clock):
    monkeypatch.setenv("APP_ENV", "testing")
    container = build_services(attendance_repo=attendance_repo, employees_repo=employees_repo, clock=app_clock)
    app = create_app(container)
    return app.test_client()


def login(client, employee_id: int, role: str = "employee") -> None:
    with client.session_transaction() as sess:
        sess["employee_id"] = employee_id
        sess["role"] = role


def test_requires_bound_identity(client):
    assert client.post("/api/attendance/checkin").status_code == 401


def test_checkin_checkout_flow(client, app_clock):
    login(client, 1)

    res = client.post("/api/attendance/checkin")
    assert res.status_code == 200
    assert res.get_json()["attendance"]["display_status"] == "Present"
    assert res.get_json()["attendance"]["status"] is None

    again = client.post("/api/attendance/checkin")
    assert again.status_code == 400
    assert again.get_json()["message"] == "Already checked in today"

    app_clock.instant = datetime(2026, 2, 10, 18, 0)
    out = client.post("/api/attendance/checkout")
    body = out.get_json()
    assert out.status_code == 200
    assert body["total_hours"] == 9.0
    assert body["status"] == "Present"
    assert body["is_late"] is False

    twice = client.post("/api/attendance/checkout")
    assert twice.status_code == 400
    assert twice.get_json()["message"] == "Already checked out"

    today = client.get("/api/attendance/today").get_json()
    assert today["check_out_time"] == "2026-02-10T18:00:00"


def test_checkout_without_checkin_message(client):
    login(client, 2)

    res = client.post("/api/attendance/checkout")

    assert res.status_code == 400
    assert res.get_json()["message"] == "You have not checked in today"


def test_today_is_empty_object_before_checkin(client):
    login(client, 3)

    assert client.get("/api/attendance/today").get_json() == {}


def test_my_summary_and_bad_month(client, attendance_repo):
    attendance_repo.add(completed(1, date(2026, 2, 9), (10, 0), (18, 0), AttendanceStatus.LATE, hours="8.00", is_late=True))
    login(client, 1)

    body = client.get("/api/attendance/my-summary").get_json()
    assert body["month"] == "2026-02"
    assert body["late_days"] == 1
    assert body["absent_days"] == 9
    assert body["days_considered"] == 10
    assert body["total_hours"] == 8.0

    bad = client.get("/api/attendance/my-summary?month=2026-13")
    assert bad.status_code == 400


def test_month_calendar_endpoint(client, attendance_repo):
    attendance_repo.add(completed(1, date(2026, 2, 9), (9, 0), (17, 0), AttendanceStatus.PRESENT, hours="8.00"))
    login(client, 1)

    body = client.get("/api/attendance/month?month=2026-02").get_json()

    assert body == {
        "2026-02-09": {
            "status": "Present",
            "check_in_time": "2026-02-09T09:00:00",
            "check_out_time": "2026-02-09T17:00:00",
            "total_hours": 8.0,
        }
    }


def test_manager_routes_reject_employees(client):
    login(client, 1, "employee")

    for url in (
        "/api/attendance/all",
        "/api/attendance/export?startDate=2026-02-01&endDate=2026-02-10",
        "/api/dashboard/manager/summary",
        "/api/dashboard/manager/weekly",
        "/api/users/employees",
    ):
        assert client.get(url).status_code == 403


def test_manager_summary_and_weekly(client, attendance_repo):
    attendance_repo.add(completed(2, date(2026, 2, 10), (9, 45), (10, 30), AttendanceStatus.HALF_DAY, hours="0.75", is_late=True))
    login(client, 99, "manager")

    summary = client.get("/api/dashboard/manager/summary").get_json()
    assert summary["total_employees"] == 3
    assert summary["present"] == 1
    assert summary["absent"] == 2
    assert summary["late_count"] == 1
    assert summary["late_employees"][0]["employee"]["employee_code"] == "EMP002"
    assert summary["late_employees"][0]["status"] == "Half Day"

    weekly = client.get("/api/dashboard/manager/weekly").get_json()
    assert weekly["total_employees"] == 3
    assert len(weekly["days"]) == 7
    assert weekly["days"][-1] == {"date": "2026-02-10", "present": 1, "late": 1, "absent": 2}


def test_manager_listing_and_employee_roster(client, attendance_repo):
    attendance_repo.add(completed(1, date(2026, 2, 9), (9, 0), (17, 0), AttendanceStatus.PRESENT, hours="8.00"))
    attendance_repo.add(completed(2, date(2026, 2, 9), (10, 0), (18, 0), AttendanceStatus.LATE, hours="8.00", is_late=True))
    login(client, 99, "manager")

    rows = client.get("/api/attendance/all?status=Late").get_json()
    assert [r["employee"]["name"] for r in rows] == ["Bob"]

    assert client.get("/api/attendance/all?employeeId=UNKNOWN").get_json() == []
    assert client.get("/api/attendance/all?startDate=2026-02-10&endDate=2026-02-01").status_code == 400
    assert client.get("/api/attendance/all?status=Sleeping").status_code == 400

    roster = client.get("/api/users/employees").get_json()
    assert [e["name"] for e in roster] == ["Alice", "Bob", "Chen"]


def test_export_csv_and_errors(client, attendance_repo):
    login(client, 99, "manager")

    assert client.get("/api/attendance/export").status_code == 400
    empty = client.get("/api/attendance/export?startDate=2026-02-01&endDate=2026-02-10")
    assert empty.status_code == 404
    assert empty.get_json()["message"] == "No attendance records for given filters"
    missing = client.get("/api/attendance/export?startDate=2026-02-01&endDate=2026-02-10&employeeId=NOPE")
    assert missing.status_code == 404
    assert missing.get_json()["message"] == "Employee with given ID not found"

    attendance_repo.add(completed(1, date(2026, 2, 9), (9, 0), (17, 0), AttendanceStatus.PRESENT, hours="8.00"))
    res = client.get("/api/attendance/export?startDate=2026-02-01&endDate=2026-02-10&employeeId=EMP001")

    assert res.status_code == 200
    assert res.mimetype == "text/csv"
    assert 'filename="attendance_EMP001_2026-02-01_to_2026-02-10.csv"' in res.headers["Content-Disposition"]
    text = res.data.decode("utf-8-sig")
    assert text.splitlines()[1].startswith('"2026-02-09","Alice","EMP001","IT"')

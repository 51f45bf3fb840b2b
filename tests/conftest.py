from __future__ import annotations

from datetime import datetime

import pytest

from src.workday_attendance.workday_attendance.common.datetime_utils import FixedClock

from tests.fakes import InMemoryAttendance, InMemoryEmployees, make_employee


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 10, 9, 0, 0)


@pytest.fixture
def clock(fixed_now) -> FixedClock:
    return FixedClock(fixed_now)


@pytest.fixture
def employees_repo() -> InMemoryEmployees:
    return InMemoryEmployees(
        [
            make_employee(1, "Alice", "IT"),
            make_employee(2, "Bob", "HR"),
            make_employee(3, "Chen", "IT"),
        ]
    )


@pytest.fixture
def attendance_repo(employees_repo) -> InMemoryAttendance:
    return InMemoryAttendance(employees_repo)

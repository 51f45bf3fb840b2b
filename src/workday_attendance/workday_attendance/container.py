from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from decimal import Decimal
from typing import Optional

from .attendance.factory import AttendanceStrategyFactory
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import Clock, SystemClock
from .core.constants import HALF_DAY_HOURS, OFFICE_START_TIME
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .summaries.service import SummaryService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository

    employee_service: EmployeeService
    attendance_service: AttendanceService
    summary_service: SummaryService


def build_services(
    *,
    attendance_repo: AttendanceRepository,
    employees_repo: EmployeeRepository,
    clock: Clock | None = None,
    office_start: time = OFFICE_START_TIME,
    half_day_hours: Decimal | int = HALF_DAY_HOURS,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    clock = clock or SystemClock()
    return Container(
        conn=conn,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        employee_service=EmployeeService(employees_repo),
        attendance_service=AttendanceService(
            attendance_repo,
            employees_repo,
            clock=clock,
            office_start=office_start,
            strategy_factory=AttendanceStrategyFactory(half_day_hours=Decimal(str(half_day_hours))),
        ),
        summary_service=SummaryService(attendance_repo, employees_repo, clock=clock, office_start=office_start),
    )


def build_container(
    *,
    db_config: dict,
    office_start: time = OFFICE_START_TIME,
    half_day_hours: Decimal | int = HALF_DAY_HOURS,
    clock: Clock | None = None,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return build_services(
        attendance_repo=MySQLAttendanceRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        clock=clock,
        office_start=office_start,
        half_day_hours=half_day_hours,
        conn=conn,
    )

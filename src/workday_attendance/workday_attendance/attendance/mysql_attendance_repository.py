from __future__ import annotations

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Optional, Sequence

from ..core.enums import AttendanceStatus, Role
from ..core.exceptions import AlreadyCheckedIn, AlreadyCheckedOut, NotCheckedIn
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from ..employees.model import Employee
from .classifier import infer_completed_status, worked_hours
from .model import AttendanceQuery, AttendanceRecord, AttendanceReportRow, CheckedIn, CheckoutResult, Completed
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

_RECORD_COLUMNS = "ar.attendance_id, ar.employee_id, ar.work_date, ar.check_in_time, ar.check_out_time, ar.total_hours, ar.status, ar.is_late"


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    is_late = r.get("is_late")
    is_late = None if is_late is None else bool(is_late)

    if r.get("check_out_time") is None:
        return CheckedIn(
            attendance_id=int(r["attendance_id"]),
            employee_id=int(r["employee_id"]),
            work_date=r["work_date"],
            check_in_time=r["check_in_time"],
            is_late=is_late,
        )
    total_hours = None if r.get("total_hours") is None else Decimal(str(r["total_hours"]))
    if r.get("status"):
        status = AttendanceStatus(r["status"])
    else:
        status = infer_completed_status(r["check_in_time"], r["check_out_time"], total_hours, is_late)
        logger.warning(
            "Checked-out row without status: attendance_id=%s inferred=%s", r["attendance_id"], status.value
        )
    if total_hours is None:
        total_hours = worked_hours(r["check_in_time"], r["check_out_time"])

    return Completed(
        attendance_id=int(r["attendance_id"]),
        employee_id=int(r["employee_id"]),
        work_date=r["work_date"],
        check_in_time=r["check_in_time"],
        check_out_time=r["check_out_time"],
        total_hours=total_hours,
        status=status,
        is_late=is_late,
    )


def _to_employee(r: Dict[str, Any]) -> Optional[Employee]:
    if r.get("e_employee_id") is None:
        return None
    return Employee(
        employee_id=int(r["e_employee_id"]),
        name=r["e_name"],
        employee_code=r["e_employee_code"],
        department=r.get("e_department"),
        role=Role(r["e_role"]),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_record(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_RECORD_COLUMNS}
                FROM attendance_records ar
                WHERE ar.employee_id=%s AND ar.work_date=%s
                """,
                (int(employee_id), work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def upsert_checkin(self, *, employee_id: int, work_date: date, check_in_time: datetime) -> CheckedIn:
        # The unique key (employee_id, work_date) makes concurrent check-ins converge.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT IGNORE INTO attendance_records(employee_id, work_date, check_in_time, is_late)
                VALUES(%s,%s,%s,0)
                """,
                (int(employee_id), work_date, check_in_time),
            )
            if cur.rowcount == 0:
                raise AlreadyCheckedIn(f"employee {employee_id} already checked in on {work_date.isoformat()}")
            return CheckedIn(
                attendance_id=int(cur.lastrowid),
                employee_id=int(employee_id),
                work_date=work_date,
                check_in_time=check_in_time,
                is_late=False,
            )

    def save_checkout(self, record: CheckedIn, *, check_out_time: datetime, result: CheckoutResult) -> Completed:
        if not isinstance(record, CheckedIn):
            raise AlreadyCheckedOut(f"record {record.attendance_id} is already completed")

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_records
                SET check_out_time=%s, total_hours=%s, status=%s, is_late=%s
                WHERE attendance_id=%s AND check_in_time IS NOT NULL AND check_out_time IS NULL
                """,
                (check_out_time, result.total_hours, result.status.value, int(result.is_late), record.attendance_id),
            )
            if cur.rowcount == 0:
                cur.execute(
                    "SELECT check_out_time FROM attendance_records WHERE attendance_id=%s",
                    (record.attendance_id,),
                )
                current = fetchone(cur)
                if current is None:
                    raise NotCheckedIn(f"record {record.attendance_id} does not exist")
                logger.warning("Lost checkout race for attendance_id=%s", record.attendance_id)
                raise AlreadyCheckedOut(f"record {record.attendance_id} is already completed")

        return Completed(
            attendance_id=record.attendance_id,
            employee_id=record.employee_id,
            work_date=record.work_date,
            check_in_time=record.check_in_time,
            check_out_time=check_out_time,
            total_hours=result.total_hours,
            status=result.status,
            is_late=result.is_late,
        )

    def query_range(self, query: AttendanceQuery) -> Sequence[AttendanceReportRow]:
        clauses = ["ar.work_date BETWEEN %s AND %s"]
        params: list[object] = [query.day_start, query.day_end]

        if query.employee_id is not None:
            clauses.append("ar.employee_id=%s")
            params.append(int(query.employee_id))
        if query.department is not None:
            clauses.append("e.department=%s AND e.role=%s")
            params.extend([query.department, Role.EMPLOYEE.value])
        if query.status is not None:
            clauses.append("ar.status=%s")
            params.append(query.status.value)

        where = " AND ".join(clauses)
        limit = ""
        if query.limit is not None:
            limit = "LIMIT %s"
            params.append(int(query.limit))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT
                    {_RECORD_COLUMNS},
                    e.employee_id AS e_employee_id, e.name AS e_name,
                    e.employee_code AS e_employee_code, e.department AS e_department,
                    e.role AS e_role
                FROM attendance_records ar
                LEFT JOIN employees e ON e.employee_id = ar.employee_id
                WHERE {where}
                ORDER BY ar.work_date DESC, ar.employee_id ASC
                {limit}
                """,
                tuple(params),
            )
            return [AttendanceReportRow(record=_to_record(r), employee=_to_employee(r)) for r in fetchall(cur)]

    def get_recent_for_employee(self, employee_id: int, limit: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_RECORD_COLUMNS}
                FROM attendance_records ar
                WHERE ar.employee_id=%s
                ORDER BY ar.work_date DESC
                LIMIT %s
                """,
                (int(employee_id), int(limit)),
            )
            return [_to_record(r) for r in fetchall(cur)]

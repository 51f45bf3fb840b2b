from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, time
from decimal import Decimal
from typing import Optional, Sequence

from ..common.datetime_utils import (
    Clock,
    SystemClock,
    month_range,
    office_cutoff,
    parse_month_token,
)
from ..common.validators import require_date_order, require_positive
from ..core.constants import DEFAULT_HISTORY_LIMIT, DEFAULT_LISTING_LIMIT, HALF_DAY_HOURS, OFFICE_START_TIME
from ..core.enums import AttendanceStatus
from ..core.exceptions import (
    AlreadyCheckedIn,
    AlreadyCheckedOut,
    EmployeeNotFound,
    EmptyExportRange,
    InvalidDateRange,
    NotCheckedIn,
)
from ..employees.repository import EmployeeRepository
from ..employees.service import EmployeeService
from .classifier import classify_checkout, effective_status
from .factory import AttendanceStrategyFactory
from .model import AttendanceQuery, AttendanceRecord, AttendanceReportRow, CalendarDay, CheckedIn, Completed
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

LISTING_EPOCH = date(1970, 1, 1)


@dataclass(frozen=True)
class ExportData:
    rows: Sequence[AttendanceReportRow]
    filename: str


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        clock: Clock | None = None,
        office_start: time = OFFICE_START_TIME,
        half_day_hours: Decimal | int = HALF_DAY_HOURS,
        strategy_factory: AttendanceStrategyFactory | None = None,
    ):
        self._attendance = attendance
        self._employees = EmployeeService(employees)
        self._clock = clock or SystemClock()
        self._office_start = office_start
        self._factory = strategy_factory or AttendanceStrategyFactory(half_day_hours=Decimal(str(half_day_hours)))

    def check_in(self, employee_id: int) -> CheckedIn:
        now = self._clock.now()
        today = now.date()

        self._employees.get_by_id(employee_id)

        if self._attendance.find_record(employee_id, today):
            logger.warning("Duplicate check-in rejected: employee_id=%s date=%s", employee_id, today)
            raise AlreadyCheckedIn(f"employee {employee_id} already checked in on {today.isoformat()}")

        record = self._attendance.upsert_checkin(employee_id=employee_id, work_date=today, check_in_time=now)
        logger.info("Check-in: employee_id=%s at %s", employee_id, now.isoformat())
        return record

    def check_out(self, employee_id: int) -> Completed:
        now = self._clock.now()
        today = now.date()

        record = self._attendance.find_record(employee_id, today)
        if record is None or record.check_in_time is None:
            raise NotCheckedIn(f"employee {employee_id} has not checked in on {today.isoformat()}")
        if isinstance(record, Completed):
            raise AlreadyCheckedOut(f"employee {employee_id} already checked out on {today.isoformat()}")

        result = classify_checkout(
            record.check_in_time,
            now,
            office_cutoff(record.work_date, self._office_start),
            factory=self._factory,
        )
        completed = self._attendance.save_checkout(record, check_out_time=now, result=result)
        logger.info(
            "Checkout: employee_id=%s hours=%s status=%s late=%s",
            employee_id,
            result.total_hours,
            result.status.value,
            result.is_late,
        )
        return completed

    def get_today_record(self, employee_id: int) -> Optional[AttendanceRecord]:
        return self._attendance.find_record(employee_id, self._clock.now().date())

    def get_history(self, employee_id: int, *, limit: int = DEFAULT_HISTORY_LIMIT) -> Sequence[AttendanceRecord]:
        return self._attendance.get_recent_for_employee(employee_id, require_positive(limit, "limit"))

    def get_month_calendar(self, employee_id: int, month_token: str | None = None) -> dict[str, CalendarDay]:
        """Per-day view of one month keyed by ISO date; days without a record are omitted."""

        year, month = self._resolve_month(month_token)
        start, end = month_range(year, month)
        rows = self._attendance.query_range(
            AttendanceQuery(day_start=start.date(), day_end=end.date(), employee_id=employee_id)
        )

        out: dict[str, CalendarDay] = {}
        for row in rows:
            rec = row.record
            out[rec.work_date.isoformat()] = CalendarDay(
                status=effective_status(rec),
                check_in_time=rec.check_in_time,
                check_out_time=rec.check_out_time,
                total_hours=rec.total_hours,
            )
        return out

    def list_records(
        self,
        *,
        start: date | None = None,
        end: date | None = None,
        employee_code: str | None = None,
        department: str | None = None,
        status: AttendanceStatus | None = None,
        limit: int = DEFAULT_LISTING_LIMIT,
    ) -> Sequence[AttendanceReportRow]:
        """Manager listing. An unknown employee code yields no rows rather than an error."""

        start = start or LISTING_EPOCH
        end = end or self._clock.now().date()
        require_date_order(start, end)

        employee_id = None
        if employee_code:
            try:
                employee_id = self._employees.get_by_code(employee_code).employee_id
            except EmployeeNotFound:
                return []

        return self._attendance.query_range(
            AttendanceQuery(
                day_start=start,
                day_end=end,
                employee_id=employee_id,
                department=department or None,
                status=status,
                limit=require_positive(limit, "limit"),
            )
        )

    def export_rows(self, *, start: date | None, end: date | None, employee_code: str | None = None) -> ExportData:
        if start is None or end is None:
            raise InvalidDateRange("start and end are required for export")
        require_date_order(start, end)

        employee_id = None
        if employee_code:
            employee_id = self._employees.get_by_code(employee_code).employee_id

        rows = self._attendance.query_range(AttendanceQuery(day_start=start, day_end=end, employee_id=employee_id))
        if not rows:
            raise EmptyExportRange(f"no records between {start.isoformat()} and {end.isoformat()}")

        span = f"{start.isoformat()}_to_{end.isoformat()}"
        filename = f"attendance_{employee_code}_{span}.csv" if employee_code else f"attendance_{span}.csv"
        logger.info("Export: %d rows (%s)", len(rows), filename)
        return ExportData(rows=rows, filename=filename)

    def _resolve_month(self, month_token: str | None) -> tuple[int, int]:
        if month_token:
            return parse_month_token(month_token)
        today = self._clock.now().date()
        return today.year, today.month

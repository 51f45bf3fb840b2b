from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date, time

from ..attendance.model import AttendanceQuery, AttendanceReportRow
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import Clock, SystemClock, month_range, parse_month_token
from ..core.constants import OFFICE_START_TIME, WEEKLY_TREND_DAYS
from ..employees.repository import EmployeeRepository
from .daily import snapshot_day
from .model import DailySnapshot, MonthlySummary, WeeklyTrend
from .monthly import summarize_month
from .weekly import trend_window, weekly_trend

logger = logging.getLogger(__name__)


class SummaryService:
    """Read-only use cases: personal month summary, manager day and week views.

    Every call recomputes from the store; nothing is cached.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        clock: Clock | None = None,
        office_start: time = OFFICE_START_TIME,
    ):
        self._attendance = attendance
        self._employees = employees
        self._clock = clock or SystemClock()
        self._office_start = office_start

    def monthly_summary(self, employee_id: int, month_token: str | None = None) -> MonthlySummary:
        today = self._clock.now().date()
        if month_token:
            year, month = parse_month_token(month_token)
        else:
            year, month = today.year, today.month

        start, end = month_range(year, month)
        rows = self._attendance.query_range(
            AttendanceQuery(day_start=start.date(), day_end=end.date(), employee_id=employee_id)
        )
        return summarize_month(employee_id, year, month, [r.record for r in rows], today)

    def daily_snapshot(self, day: date | None = None) -> DailySnapshot:
        day = day or self._clock.now().date()
        roster = self._employees.list_employees()
        rows = self._attendance.query_range(AttendanceQuery(day_start=day, day_end=day))
        snap = snapshot_day(day, roster, rows, office_start=self._office_start)
        logger.debug("Daily snapshot %s: present=%s absent=%s late=%s", day, snap.present, snap.absent, snap.late_count)
        return snap

    def weekly_trend(self, *, days: int = WEEKLY_TREND_DAYS) -> WeeklyTrend:
        today = self._clock.now().date()
        roster = self._employees.list_employees()
        window = trend_window(today, days)

        rows = self._attendance.query_range(AttendanceQuery(day_start=window[0], day_end=window[-1]))
        rows_by_day: dict[date, list[AttendanceReportRow]] = defaultdict(list)
        for row in rows:
            rows_by_day[row.record.work_date].append(row)

        return weekly_trend(today, roster, rows_by_day, days=days, office_start=self._office_start)

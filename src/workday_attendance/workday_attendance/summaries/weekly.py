from __future__ import annotations

from datetime import date, time, timedelta
from typing import Mapping, Sequence

from ..attendance.model import AttendanceReportRow
from ..common.datetime_utils import day_key
from ..core.constants import OFFICE_START_TIME, WEEKLY_TREND_DAYS
from ..employees.model import Employee
from .daily import snapshot_day
from .model import TrendDay, WeeklyTrend


def trend_window(today: date, days: int = WEEKLY_TREND_DAYS) -> list[date]:
    """Trailing window ending at today, oldest first."""
    today = day_key(today)
    return [today - timedelta(days=offset) for offset in range(days - 1, -1, -1)]


def weekly_trend(
    today: date,
    roster: Sequence[Employee],
    rows_by_day: Mapping[date, Sequence[AttendanceReportRow]],
    *,
    days: int = WEEKLY_TREND_DAYS,
    office_start: time = OFFICE_START_TIME,
) -> WeeklyTrend:
    # Roster size is taken once so every day shares the same denominator.
    out: list[TrendDay] = []
    for day in trend_window(today, days):
        snap = snapshot_day(day, roster, rows_by_day.get(day, ()), office_start=office_start)
        out.append(TrendDay(date=day, present=snap.present, late=snap.late_count, absent=snap.absent))
    return WeeklyTrend(total_employees=len(roster), days=out)

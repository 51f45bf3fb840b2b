from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Iterator, Protocol, Union

from ..core.constants import OFFICE_START_TIME
from ..core.exceptions import InvalidDateRange

_MONTH_TOKEN = re.compile(r"^(\d{4})-(\d{2})$")


class Clock(Protocol):
    def now(self) -> datetime:
        raise NotImplementedError


class SystemClock:
    """Local wall clock."""

    def now(self) -> datetime:
        return datetime.now()


@dataclass(frozen=True)
class FixedClock:
    """Clock pinned to one instant (tests, replays)."""

    instant: datetime

    def now(self) -> datetime:
        return self.instant


def day_key(instant: Union[datetime, date]) -> date:
    """Local calendar day of an instant; dates pass through unchanged."""
    if isinstance(instant, datetime):
        return instant.date()
    return instant


def month_range(year: int, month: int) -> tuple[datetime, datetime]:
    """First instant and last instant (23:59:59.999) of a month."""
    if not 1 <= int(month) <= 12:
        raise InvalidDateRange(f"month out of range: {month!r}")
    last_day = calendar.monthrange(int(year), int(month))[1]
    start = datetime(int(year), int(month), 1)
    end = datetime(int(year), int(month), last_day, 23, 59, 59, 999000)
    return start, end


def office_cutoff(day: date, start: time = OFFICE_START_TIME) -> datetime:
    """Lateness cutoff anchored to the given calendar day."""
    return datetime.combine(day_key(day), start)


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every calendar day from start to end inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(str(value).strip(), "%Y-%m-%d").date()
    except ValueError as exc:
        raise InvalidDateRange(f"invalid date: {value!r}") from exc


def parse_month_token(value: str) -> tuple[int, int]:
    """Parse YYYY-MM into (year, month)."""
    match = _MONTH_TOKEN.match(str(value).strip())
    if not match:
        raise InvalidDateRange(f"invalid month token: {value!r}")
    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        raise InvalidDateRange(f"invalid month token: {value!r}")
    return year, month


def format_month_token(year: int, month: int) -> str:
    return f"{int(year):04d}-{int(month):02d}"


def parse_office_start(value: str) -> time:
    """Parse HH:MM used by the OFFICE_START setting."""
    return datetime.strptime(str(value).strip(), "%H:%M").time()

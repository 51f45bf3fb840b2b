"""Checkout classification and the canonical read-side status helpers.

Every place that shows a status (today view, history, calendar, summaries)
goes through `effective_status` so the "Present so far" inference lives in
exactly one function.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from ..common.datetime_utils import office_cutoff
from ..core.constants import OFFICE_START_TIME
from ..core.enums import AttendanceStatus
from ..core.exceptions import InvalidTimeOrdering, NotCheckedIn
from .factory import AttendanceStrategyFactory
from .model import AttendanceRecord, CheckoutResult

_HOURS_QUANTUM = Decimal("0.01")
_MICROSECONDS_PER_HOUR = Decimal(3_600_000_000)


def worked_hours(check_in: datetime, check_out: datetime) -> Decimal:
    """Elapsed hours rounded to 2 places, half away from zero."""
    micros = (check_out - check_in) // timedelta(microseconds=1)
    return (Decimal(micros) / _MICROSECONDS_PER_HOUR).quantize(_HOURS_QUANTUM, rounding=ROUND_HALF_UP)


def classify_checkout(
    check_in: Optional[datetime],
    check_out: datetime,
    cutoff: datetime,
    *,
    factory: Optional[AttendanceStrategyFactory] = None,
) -> CheckoutResult:
    if check_in is None:
        raise NotCheckedIn("checkout requested before check-in")
    if check_out <= check_in:
        raise InvalidTimeOrdering(
            f"check-out {check_out.isoformat()} is not after check-in {check_in.isoformat()}"
        )

    total_hours = worked_hours(check_in, check_out)
    is_late = check_in > cutoff

    status = decide_status(total_hours, is_late, factory=factory)
    return CheckoutResult(total_hours=total_hours, is_late=is_late, status=status)


def decide_status(
    total_hours: Decimal, is_late: bool, *, factory: Optional[AttendanceStrategyFactory] = None
) -> AttendanceStatus:
    strategy = (factory or AttendanceStrategyFactory()).for_checkout(total_hours=total_hours, is_late=is_late)
    return strategy.decide_checkout(total_hours=total_hours, is_late=is_late).status


def infer_completed_status(
    check_in: datetime,
    check_out: datetime,
    total_hours: Optional[Decimal],
    is_late: Optional[bool],
    *,
    office_start: time = OFFICE_START_TIME,
) -> AttendanceStatus:
    """Status for a checked-out row that was stored without one."""
    hours = total_hours if total_hours is not None else worked_hours(check_in, check_out)
    if is_late is None:
        is_late = check_in > office_cutoff(check_in.date(), office_start)
    return decide_status(hours, bool(is_late))


def effective_status(record: Optional[AttendanceRecord]) -> AttendanceStatus:
    if record is None:
        return AttendanceStatus.ABSENT
    if record.status is not None:
        return record.status
    if record.check_in_time is not None:
        return AttendanceStatus.PRESENT
    return AttendanceStatus.ABSENT


def has_activity(record: AttendanceRecord) -> bool:
    return record.check_in_time is not None or record.status is not None


def is_record_late(record: AttendanceRecord, day: date, *, office_start: time = OFFICE_START_TIME) -> bool:
    if record.is_late is not None:
        return bool(record.is_late)
    # Legacy rows without is_late: compare against the day's cutoff.
    if record.check_in_time is None:
        return False
    return record.check_in_time > office_cutoff(day, office_start)

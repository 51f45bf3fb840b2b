from datetime import date, datetime, timedelta
from decimal import Decimal

import pytest

from src.workday_attendance.workday_attendance.attendance.classifier import (
    classify_checkout,
    effective_status,
    has_activity,
    is_record_late,
    worked_hours,
)
from src.workday_attendance.workday_attendance.core.enums import AttendanceStatus
from src.workday_attendance.workday_attendance.core.exceptions import InvalidTimeOrdering, NotCheckedIn
from tests.fakes import checked_in, completed

DAY = date(2026, 2, 10)
CUTOFF = datetime(2026, 2, 10, 9, 30)


def at(hour: int, minute: int = 0, second: int = 0) -> datetime:
    return datetime(2026, 2, 10, hour, minute, second)


def test_short_day_is_half_day_even_when_on_time():
    result = classify_checkout(at(8), at(9), CUTOFF)
    assert result.total_hours == Decimal("1.00")
    assert result.is_late is False
    assert result.status == AttendanceStatus.HALF_DAY


def test_late_full_day():
    result = classify_checkout(at(10), at(18), CUTOFF)
    assert result.total_hours == Decimal("8.00")
    assert result.is_late is True
    assert result.status == AttendanceStatus.LATE


def test_on_time_full_day_is_present():
    result = classify_checkout(at(9), at(17), CUTOFF)
    assert result.total_hours == Decimal("8.00")
    assert result.is_late is False
    assert result.status == AttendanceStatus.PRESENT


def test_half_day_wins_over_lateness():
    result = classify_checkout(at(11), at(14), CUTOFF)
    assert result.is_late is True
    assert result.status == AttendanceStatus.HALF_DAY


def test_exactly_at_cutoff_is_not_late():
    result = classify_checkout(CUTOFF, at(18), CUTOFF)
    assert result.is_late is False
    assert result.status == AttendanceStatus.PRESENT


def test_exactly_four_hours_is_not_half_day():
    assert classify_checkout(at(9), at(13), CUTOFF).status == AttendanceStatus.PRESENT


@pytest.mark.parametrize("check_out", [at(9), at(8, 59)])
def test_checkout_not_after_checkin_is_rejected(check_out):
    with pytest.raises(InvalidTimeOrdering):
        classify_checkout(at(9), check_out, CUTOFF)


def test_checkout_without_checkin_is_rejected():
    with pytest.raises(NotCheckedIn):
        classify_checkout(None, at(17), CUTOFF)


def test_hours_round_half_away_from_zero():
    # 18 seconds = 0.005 h
    assert worked_hours(at(9), at(9, 0, 18)) == Decimal("0.01")
    # 8h 20m = 8.3333... h
    assert worked_hours(at(9), at(17, 20)) == Decimal("8.33")
    assert worked_hours(at(9), at(9) + timedelta(minutes=45)) == Decimal("0.75")


def test_classification_is_pure():
    first = classify_checkout(at(9, 45), at(17, 10), CUTOFF)
    second = classify_checkout(at(9, 45), at(17, 10), CUTOFF)
    assert first == second
    assert first.total_hours == Decimal("7.42")


def test_effective_status_is_present_so_far_after_checkin():
    assert effective_status(checked_in(1, DAY, (9, 0))) == AttendanceStatus.PRESENT
    assert effective_status(None) == AttendanceStatus.ABSENT
    done = completed(1, DAY, (10, 0), (18, 0), AttendanceStatus.LATE, hours="8.00", is_late=True)
    assert effective_status(done) == AttendanceStatus.LATE
    assert has_activity(done)


def test_is_record_late_uses_stored_flag_and_legacy_fallback():
    assert is_record_late(checked_in(1, DAY, (10, 0), is_late=False), DAY) is False
    assert is_record_late(checked_in(1, DAY, (10, 0), is_late=None), DAY) is True
    assert is_record_late(checked_in(1, DAY, (9, 30), is_late=None), DAY) is False

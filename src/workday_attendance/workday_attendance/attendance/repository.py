from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import AttendanceQuery, AttendanceRecord, AttendanceReportRow, CheckedIn, CheckoutResult, Completed


class AttendanceRepository(Protocol):
    """Daily record store.

    Implementations enforce one record per (employee_id, work_date) atomically
    and let exactly one concurrent checkout win.
    """

    def find_record(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def upsert_checkin(self, *, employee_id: int, work_date: date, check_in_time: datetime) -> CheckedIn:
        """Create the day's record; raises AlreadyCheckedIn if one exists."""

        raise NotImplementedError

    def save_checkout(self, record: CheckedIn, *, check_out_time: datetime, result: CheckoutResult) -> Completed:
        """Complete the record; raises AlreadyCheckedOut if another checkout won."""

        raise NotImplementedError

    def query_range(self, query: AttendanceQuery) -> Sequence[AttendanceReportRow]:
        """Rows joined with employees, newest day first."""

        raise NotImplementedError

    def get_recent_for_employee(self, employee_id: int, limit: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

from __future__ import annotations

from decimal import Decimal

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class NormalStrategy(AttendanceStrategy):
    """On-time check-in, full day."""

    def decide_checkout(self, *, total_hours: Decimal, is_late: bool) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.PRESENT)

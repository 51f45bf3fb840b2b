from __future__ import annotations

from decimal import Decimal

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class LateStrategy(AttendanceStrategy):
    """Full day, checked in after the cutoff."""

    def decide_checkout(self, *, total_hours: Decimal, is_late: bool) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.LATE)

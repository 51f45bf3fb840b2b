from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ..core.constants import HALF_DAY_HOURS
from .strategies.base import AttendanceStrategy
from .strategies.half_day_strategy import HalfDayStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.normal_strategy import NormalStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose the checkout strategy.

    Precedence: half day, then late, then present.
    """

    half_day_hours: Decimal = Decimal(HALF_DAY_HOURS)

    def for_checkout(self, *, total_hours: Decimal, is_late: bool) -> AttendanceStrategy:
        if total_hours < Decimal(str(self.half_day_hours)):
            return HalfDayStrategy()
        if is_late:
            return LateStrategy()
        return NormalStrategy()

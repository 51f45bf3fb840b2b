from decimal import Decimal

from src.workday_attendance.workday_attendance.attendance.factory import AttendanceStrategyFactory
from src.workday_attendance.workday_attendance.attendance.strategies.half_day_strategy import HalfDayStrategy
from src.workday_attendance.workday_attendance.attendance.strategies.late_strategy import LateStrategy
from src.workday_attendance.workday_attendance.attendance.strategies.normal_strategy import NormalStrategy


def test_factory_short_day_picks_half_day_even_if_late():
    factory = AttendanceStrategyFactory()
    strategy = factory.for_checkout(total_hours=Decimal("3.99"), is_late=True)

    assert isinstance(strategy, HalfDayStrategy)


def test_factory_full_day_late():
    factory = AttendanceStrategyFactory()
    strategy = factory.for_checkout(total_hours=Decimal("4.00"), is_late=True)

    assert isinstance(strategy, LateStrategy)


def test_factory_full_day_on_time():
    factory = AttendanceStrategyFactory()
    strategy = factory.for_checkout(total_hours=Decimal("8.00"), is_late=False)

    assert isinstance(strategy, NormalStrategy)


def test_factory_honours_configured_threshold():
    factory = AttendanceStrategyFactory(half_day_hours=Decimal("5"))
    strategy = factory.for_checkout(total_hours=Decimal("4.50"), is_late=False)

    assert isinstance(strategy, HalfDayStrategy)

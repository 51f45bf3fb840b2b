"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the rules live in services and aggregators.
"""

import importlib

from config import get_settings_module

from src.workday_attendance.workday_attendance.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    trend = container.summary_service.weekly_trend()
    print(f"employees={trend.total_employees}")
    for day in trend.days:
        print(day.date.isoformat(), f"present={day.present}", f"late={day.late}", f"absent={day.absent}")


if __name__ == "__main__":
    main()

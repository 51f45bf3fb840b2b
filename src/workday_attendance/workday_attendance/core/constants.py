"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

OFFICE_START_TIME = time(9, 30)
HALF_DAY_HOURS = 4

DEFAULT_HISTORY_LIMIT = 30
DEFAULT_LISTING_LIMIT = 50
WEEKLY_TREND_DAYS = 7

UNKNOWN_DEPARTMENT = "Unknown"

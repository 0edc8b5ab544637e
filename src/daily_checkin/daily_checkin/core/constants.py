"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

DEFAULT_WINDOW_START = time(7, 0, 0)
DEFAULT_WINDOW_END = time(8, 30, 0)

# Monday=0 ... Sunday=6 (datetime.weekday()).
WEEKEND_DAYS = frozenset({5, 6})

DATE_FORMAT = "%Y-%m-%d"
MISSING_CODE = "N/A"

MIN_PASSWORD_LENGTH = 6

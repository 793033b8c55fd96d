"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

HOURS_PER_PRESENT_DAY = 8
HOURS_PER_HALF_DAY = 4

DEFAULT_CONNECT_TIMEOUT_SECONDS = 10
DEFAULT_STREAK_LOOKBACK_DAYS = 366

MISSING_LABEL = "N/A"
AVATAR_URL_TEMPLATE = "https://api.dicebear.com/7.x/avataaars/svg?seed={seed}"

ISO_DATE_FORMAT = "%Y-%m-%d"
MONTH_FORMAT = "%Y-%m"

"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_DAY = 24 * 60
DEFAULT_BUFFER_MINUTES = 60
DEFAULT_REPORT_WINDOW_DAYS = 30
DEFAULT_REPORT_WORKERS = 4
DEFAULT_LOG_LIMIT = 200
PRESENCE_RATE_UNAVAILABLE = "N/A"

"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"

UNKNOWN_DURATION = "--:--"

# Keys used by the shift object (timeEntry) on the wire, in lookup priority order.
TIME_ENTRY_KEYS = ("startTime", "endTime", "lunchStartTime", "lunchEndTime")

DAY_TYPE_WILDCARD = "ALL"

DEFAULT_REPORT_DAYS = 30
DEFAULT_RECENT_LIMIT = 5

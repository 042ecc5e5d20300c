"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_ABSENCE_THRESHOLD = 3
DEFAULT_TOP_ABSENTEES_LIMIT = 5
DEFAULT_RECENT_ACTIVITY_LIMIT = 5
MIN_PASSWORD_LENGTH = 4

UNKNOWN_LABEL = "Unknown"

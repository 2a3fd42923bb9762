"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_GRACE_MINUTES = 0
DEFAULT_LEAVE_BALANCE = 12
BREAK_INCREMENT_MINUTES = 15
LATE_ARRIVALS_WINDOW_DAYS = 7

MINUTES_PER_DAY = 24 * 60
LEAVE_ID_PREFIX = "L-"
LEAVE_ID_WIDTH = 3

TASK_TYPES = ("Design", "CAD", "RFI", "Review", "Admin")

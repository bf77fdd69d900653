"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

LATE_CUTOFF = time(9, 30)
HALF_DAY_HOURS = 4.0

NOTES_MIN_LENGTH = 10
NOTES_MAX_LENGTH = 1000

SYNTHETIC_ID_PREFIX = "absent-"

SUMMARY_HEADER = "Tasks worked on today:"

DEFAULT_HOLIDAY_DESCRIPTION = "Holiday"
DEFAULT_WORKING_DESCRIPTION = "Working day"

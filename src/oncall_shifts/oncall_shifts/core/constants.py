"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR

TIME_SEPARATOR = ":"

SHIFT_TIMES_KEY = "shift_times"

"""Utility constants for rowrange.

Cell timestamps are integers counting microseconds since the Unix epoch.
These constants express common durations in that unit.
"""

# Time unit constants (all values in microseconds)
MICROSECOND = 1
MILLISECOND = 1_000
SECOND = 1_000_000
MINUTE = 60_000_000
HOUR = 3_600_000_000
DAY = 86_400_000_000
WEEK = 604_800_000_000

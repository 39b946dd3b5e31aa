"""Utility constants for datecalc.

Time unit constants represent durations in minutes, the granularity the
engine uses for every fixed-size unit. Months have no fixed size and are
handled as a calendar-field operation instead.
"""

# Time unit constants (all values in minutes)
MINUTE = 1
HOUR = 60
DAY = 1440
WEEK = 10080

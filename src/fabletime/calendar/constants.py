"""Defines the fixed sizes of the 12×28 calendar."""

from __future__ import annotations

DAYS_PER_WEEK: int = 7
"""``int``: number of days in a week."""

DAYS_PER_MONTH: int = 28
"""``int``: number of days in every month."""

MONTHS_PER_YEAR: int = 12
"""``int``: number of months in a year."""

DAYS_PER_YEAR: int = DAYS_PER_MONTH * MONTHS_PER_YEAR
"""``int``: number of days in a year."""

HOURS_PER_DAY: int = 24
"""``int``: number of hours in a day."""

SECONDS_PER_MINUTE: int = 60
"""``int``: number of seconds in a minute, regardless of the minutes-per-hour ratio."""

MILLISECONDS_PER_SECOND: int = 1000
"""``int``: number of milliseconds in a second."""

REAL_MINUTES_PER_HOUR: int = 60
"""``int``: minutes-per-hour ratio at which one calendar second is one duration second."""

MAX_MINUTES_PER_HOUR: int = 60
"""``int``: largest allowed minutes-per-hour ratio."""

SECONDS_PER_HOUR: int = 3600
"""``int``: duration seconds in one hour."""

SECONDS_PER_DAY: int = SECONDS_PER_HOUR * HOURS_PER_DAY
"""``int``: duration seconds in one day."""

SECONDS_PER_MONTH: int = SECONDS_PER_DAY * DAYS_PER_MONTH
"""``int``: duration seconds in one month."""

SECONDS_PER_YEAR: int = SECONDS_PER_MONTH * MONTHS_PER_YEAR
"""``int``: duration seconds in one year."""

"""Contains the calendar time value type and the duration arithmetic built on it.

The calendar has 12 months of exactly 28 days each, so every month starts on the same
weekday. The number of minutes in an hour is configurable; see :mod:`.timestamp` for how
values are rescaled between different ratios.
"""

from __future__ import annotations

# Local Imports
from .clock import CalendarClock
from .duration import (
    Duration,
    addTime,
    durationToTime,
    getInterval,
    isAfter,
    isBefore,
    isEqual,
    subtractTime,
    timeToDuration,
)
from .timestamp import (
    INVALID_TIME,
    Time,
    getDayOfWeek,
    getDayOfYear,
    getTime,
    isTimeValid,
    normalizeTime,
    stringToTime,
    timeToString,
)

__all__ = [
    "INVALID_TIME",
    "CalendarClock",
    "Duration",
    "Time",
    "addTime",
    "durationToTime",
    "getDayOfWeek",
    "getDayOfYear",
    "getInterval",
    "getTime",
    "isAfter",
    "isBefore",
    "isEqual",
    "isTimeValid",
    "normalizeTime",
    "stringToTime",
    "subtractTime",
    "timeToDuration",
    "timeToString",
]

"""Configure importable things that aren't pytest fixtures."""

from __future__ import annotations

# fabletime Imports
from fabletime.calendar.timestamp import Time

# Common calendar times
TEST_TIME: Time = Time(1372, 6, 1, 14, 5, 9, 42, 60)
"""A normalized afternoon on the first day of the sixth month."""

TEST_TIME_STRING: str = "1372-06-01 14:05:09:042"
"""Text form of :data:`.TEST_TIME`."""

GERMAN_MONTHS: tuple[str, ...] = (
    "Januar",
    "Februar",
    "März",
    "April",
    "Mai",
    "Juni",
    "Juli",
    "August",
    "September",
    "Oktober",
    "November",
    "Dezember",
)

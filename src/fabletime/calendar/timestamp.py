"""Defines the :class:`.Time` calendar value type and its normalization algorithm.

A :class:`.Time` is a plain bundle of calendar fields. Arithmetic on the fields is allowed to
push them out of range; :func:`.normalizeTime` then carries and borrows between units until
every field is back inside its domain.

.. code-block:: python

    t = normalizeTime(Time(year=1372, month=13, day=1))
    assert (t.year, t.month) == (1373, 1)

    t = normalizeTime(Time(year=1372, month=0, day=1))
    assert (t.year, t.month) == (1371, 12)

The minutes-per-hour ratio lets the same value be expressed at a different sub-hour density.
Re-expressing a value collapses its minutes, seconds and milliseconds into one count, scales
it by ``target / old``, and redistributes the result before normalizing.
"""

from __future__ import annotations

# Standard Library Imports
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

# Third Party Imports
from numpy import floor

# Local Imports
from ..common.behavioral_config import BehavioralConfig
from .constants import (
    DAYS_PER_MONTH,
    DAYS_PER_WEEK,
    HOURS_PER_DAY,
    MAX_MINUTES_PER_HOUR,
    MILLISECONDS_PER_SECOND,
    MONTHS_PER_YEAR,
    SECONDS_PER_MINUTE,
)

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from typing import Final


@dataclass(frozen=True)
class Time:
    """Calendar time value, also used as the decomposed form of a duration."""

    year: int = 0
    """``int``: year, ``0`` through the configured maximum year."""

    month: int = 1
    """``int``: month of the year, 1-based."""

    day: int = 1
    """``int``: day of the month, 1-based."""

    hour: int = 0
    """``int``: hour of the day, 0-based."""

    minute: int = 0
    """``int``: minute of the hour, ``0`` through ``minutes_per_hour - 1``."""

    second: int = 0
    """``int``: second of the minute."""

    millisecond: int = 0
    """``int``: millisecond of the second."""

    minutes_per_hour: int = 0
    """``int``: sub-hour density of this value. ``0`` means the configured default ratio."""

    valid: bool = field(default=True, repr=False)
    """``bool``: ``False`` only for the :data:`.INVALID_TIME` sentinel."""

    def __str__(self) -> str:
        """Return the fixed round-trip text form, see :func:`.timeToString`."""
        return timeToString(self)


INVALID_TIME: Final[Time] = Time(0, 0, 0, 0, 0, 0, 0, 0, valid=False)
""":class:`.Time`: canonical all-zero sentinel returned when a value cannot be normalized."""

TIME_STRING_DELIMITERS: Final[tuple[str, ...]] = ("-", "-", " ", ":", ":", ":")
"""``tuple``: delimiters that follow each field of the ``YYYY-MM-DD HH:MM:SS:mmm`` text form."""

_TIME_FIELDS: Final[tuple[str, ...]] = (
    "year",
    "month",
    "day",
    "hour",
    "minute",
    "second",
    "millisecond",
)

_DIGITS: Final[str] = "0123456789"


def getDefaultMinutesPerHour() -> int:
    """Return the process-wide default minutes-per-hour ratio."""
    return BehavioralConfig.getConfig().calendar.MinutesPerHour


def isTimeValid(time: Time) -> bool:
    """Return whether `time` is a real calendar value rather than the invalid sentinel."""
    return time.valid


def getTime(
    year: int = 0,
    month: int = 1,
    day: int = 1,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
    minutes_per_hour: int = 0,
) -> Time:
    """Build a normalized :class:`.Time` from possibly out-of-range fields.

    Returns:
        :class:`.Time`: normalized value, or :data:`.INVALID_TIME`.
    """
    return normalizeTime(
        Time(year, month, day, hour, minute, second, millisecond, minutes_per_hour),
    )


def normalizeUnit(value: int, size: int, minimum: int) -> tuple[int, int]:
    """Bring a single unit into the domain ``[minimum, minimum + size - 1]``.

    The value is shifted so its domain starts at zero, then floor division splits off the carry.
    Negative values therefore borrow from the next unit, and for a 1-based domain a zero
    remainder lands on the domain maximum (month ``0`` becomes month ``12`` with a carry of ``-1``).

    Args:
        value (``int``): current unit value, possibly out of range.
        size (``int``): number of distinct values in the unit's domain.
        minimum (``int``): smallest value in the domain, ``0`` or ``1``.

    Returns:
        ``tuple``: carry into the next larger unit, and the in-domain value.
    """
    carry, remainder = divmod(value - minimum, size)
    return carry, remainder + minimum


def roundHalfUp(value: float) -> int:
    """Round `value` to the nearest integer, halves toward positive infinity (``-2.5`` gives ``-2``)."""
    return int(floor(value + 0.5))


def _rescale(time: Time, target_minutes_per_hour: int) -> Time:
    """Re-express the sub-hour fields of `time` at a different minutes-per-hour ratio."""
    sub_hour = (
        time.minute * SECONDS_PER_MINUTE + time.second
    ) * MILLISECONDS_PER_SECOND + time.millisecond
    scaled = roundHalfUp(sub_hour * target_minutes_per_hour / time.minutes_per_hour)

    minute, remainder = divmod(scaled, SECONDS_PER_MINUTE * MILLISECONDS_PER_SECOND)
    second, millisecond = divmod(remainder, MILLISECONDS_PER_SECOND)
    return replace(
        time,
        minute=minute,
        second=second,
        millisecond=millisecond,
        minutes_per_hour=target_minutes_per_hour,
    )


def normalizeTime(time: Time, target_minutes_per_hour: int = 0) -> Time:
    """Carry and borrow between the fields of `time` until each one is within range.

    Args:
        time (:class:`.Time`): value to normalize.
        target_minutes_per_hour (``int``, optional): ratio to re-express the value at. Defaults
            to ``0``, which keeps the value's own ratio.

    Returns:
        :class:`.Time`: normalized value, or :data:`.INVALID_TIME` when the year ends up negative
        or beyond the configured maximum. This function never raises.
    """
    if not time.valid:
        return INVALID_TIME

    minutes_per_hour = int(time.minutes_per_hour)
    if minutes_per_hour <= 0:
        minutes_per_hour = getDefaultMinutesPerHour()

    fields = {name: int(getattr(time, name)) for name in _TIME_FIELDS}
    time = Time(**fields, minutes_per_hour=min(minutes_per_hour, MAX_MINUTES_PER_HOUR))

    target_minutes_per_hour = min(int(target_minutes_per_hour), MAX_MINUTES_PER_HOUR)
    if target_minutes_per_hour > 0 and target_minutes_per_hour != time.minutes_per_hour:
        time = _rescale(time, target_minutes_per_hour)

    # (field, unit size, domain minimum), smallest unit first; each carries into the next
    unit_table = (
        ("millisecond", MILLISECONDS_PER_SECOND, 0),
        ("second", SECONDS_PER_MINUTE, 0),
        ("minute", time.minutes_per_hour, 0),
        ("hour", HOURS_PER_DAY, 0),
        ("day", DAYS_PER_MONTH, 1),
        ("month", MONTHS_PER_YEAR, 1),
    )

    values = {name: getattr(time, name) for name in _TIME_FIELDS}
    carry = 0
    for name, size, minimum in unit_table:
        carry, values[name] = normalizeUnit(values[name] + carry, size, minimum)
    values["year"] += carry

    if not 0 <= values["year"] <= BehavioralConfig.getConfig().calendar.MaxYear:
        return INVALID_TIME

    return Time(**values, minutes_per_hour=time.minutes_per_hour)


def getDayOfYear(time: Time) -> int:
    """Return the day-of-year ordinal of `time`, ``month * 28 + day``.

    The count runs from ``29`` on the first day of the year to ``364`` on the last, so it always
    fits the three digit default width of ``%j``.
    """
    return time.month * DAYS_PER_MONTH + time.day


def getDayOfWeek(time: Time) -> int:
    """Return the 0-based weekday of `time`.

    Every month holds exactly four weeks, so the first of each month is weekday ``0``.
    """
    return (time.day - 1) % DAYS_PER_WEEK


def timeToString(time: Time) -> str:
    """Return `time` in the fixed ``YYYY-MM-DD HH:MM:SS:mmm`` text form."""
    return (
        f"{time.year:04d}-{time.month:02d}-{time.day:02d} "
        f"{time.hour:02d}:{time.minute:02d}:{time.second:02d}:{time.millisecond:03d}"
    )


def stringToTime(time_string: str, minutes_per_hour: int = 0) -> Time:
    """Parse the ``YYYY-MM-DD HH:MM:SS:mmm`` text form back into a :class:`.Time`.

    Each field is a run of digits followed by the delimiter expected after that field. Input
    that stops early (``"1372-06"``) yields a partial value whose remaining fields keep their
    defaults. The result is not normalized.

    Args:
        time_string (``str``): text to parse.
        minutes_per_hour (``int``, optional): ratio of the parsed value. Defaults to ``0``, which
            uses the configured default ratio.

    Returns:
        :class:`.Time`: the parsed value, or :data:`.INVALID_TIME` if a delimiter is unexpected,
        a field has no digits, trailing text follows the milliseconds, or nothing was parsed.
    """
    if minutes_per_hour <= 0:
        minutes_per_hour = getDefaultMinutesPerHour()

    values: dict[str, int] = {}
    position = 0
    length = len(time_string)
    for index, name in enumerate(_TIME_FIELDS):
        start = position
        while position < length and time_string[position] in _DIGITS:
            position += 1

        if position == start:
            # Empty digit run: either the input is exhausted or the text is malformed
            if position >= length and values:
                break
            return INVALID_TIME

        values[name] = int(time_string[start:position])
        if position >= length:
            break

        if index >= len(TIME_STRING_DELIMITERS):
            return INVALID_TIME
        if time_string[position] != TIME_STRING_DELIMITERS[index]:
            return INVALID_TIME
        position += 1

    return Time(**values, minutes_per_hour=minutes_per_hour)

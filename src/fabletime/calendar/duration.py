"""Defines the :class:`.Duration` type and arithmetic between calendar times and durations.

Durations are measured in calendar seconds with fixed ratios: an hour is 3600 seconds, a day
24 hours, a month 28 days and a year 12 months. Sub-hour fields of a :class:`.Time` that uses a
different minutes-per-hour ratio are scaled so that a full hour is always 3600 seconds.

Subclassing `float` keeps a duration usable anywhere a number is, while the sign of the span
travels with the value instead of alongside it.
"""

from __future__ import annotations

# Standard Library Imports
from dataclasses import replace

# Local Imports
from .constants import (
    MILLISECONDS_PER_SECOND,
    REAL_MINUTES_PER_HOUR,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    SECONDS_PER_MONTH,
    SECONDS_PER_YEAR,
)
from .timestamp import (
    INVALID_TIME,
    Time,
    getDefaultMinutesPerHour,
    normalizeTime,
    roundHalfUp,
)

EQUALITY_TOLERANCE: float = 0.5 / MILLISECONDS_PER_SECOND
"""``float``: intervals smaller than half a millisecond compare as equal."""

_MS_PER_HOUR: int = SECONDS_PER_HOUR * MILLISECONDS_PER_SECOND


class Duration(float):
    """Signed span of calendar seconds."""

    @property
    def negative(self) -> bool:
        """``bool``: whether this duration points backwards in time."""
        return self < 0.0

    def decompose(self) -> tuple[bool, Time]:
        """Split this duration into its sign and its magnitude in calendar fields.

        Returns:
            ``tuple``: ``(negative, magnitude)``, see :func:`.durationToTime`.
        """
        return self.negative, durationToTime(self)

    @classmethod
    def fromTime(cls, time: Time, negative: bool = False) -> Duration:
        """Factory to build a duration from a decomposed magnitude, see :func:`.timeToDuration`."""
        return timeToDuration(time, negative=negative)

    def __neg__(self) -> Duration:
        """Flip the direction of this duration."""
        return Duration(-float(self))

    def __repr__(self) -> str:
        """."""
        return f"Duration({float(self)!r})"


def _weightedMilliseconds(time: Time) -> float:
    """Return the calendar milliseconds represented by the fields of `time`."""
    minutes_per_hour = time.minutes_per_hour
    if minutes_per_hour <= 0:
        minutes_per_hour = getDefaultMinutesPerHour()

    whole_hours = (
        time.year * SECONDS_PER_YEAR
        + time.month * SECONDS_PER_MONTH
        + time.day * SECONDS_PER_DAY
        + time.hour * SECONDS_PER_HOUR
    ) * MILLISECONDS_PER_SECOND
    sub_hour = (
        time.minute * SECONDS_PER_MINUTE + time.second
    ) * MILLISECONDS_PER_SECOND + time.millisecond

    if minutes_per_hour == REAL_MINUTES_PER_HOUR:
        return float(whole_hours + sub_hour)
    return whole_hours + sub_hour * REAL_MINUTES_PER_HOUR / minutes_per_hour


def durationToTime(seconds: float) -> Time:
    """Decompose the magnitude of `seconds` into calendar fields.

    The fields hold plain counts: a duration of one day is ``Time(year=0, month=0, day=1)``.
    The result always uses a 60 minutes-per-hour ratio so minutes and seconds read literally.

    Args:
        seconds (``float``): duration to decompose; its sign is dropped.

    Returns:
        :class:`.Time`: magnitude of the duration, to the nearest millisecond.
    """
    remainder = roundHalfUp(abs(float(seconds)) * MILLISECONDS_PER_SECOND)

    counts = []
    for unit_seconds in (
        SECONDS_PER_YEAR,
        SECONDS_PER_MONTH,
        SECONDS_PER_DAY,
        SECONDS_PER_HOUR,
        SECONDS_PER_MINUTE,
        1,
    ):
        count, remainder = divmod(remainder, unit_seconds * MILLISECONDS_PER_SECOND)
        counts.append(count)

    return Time(*counts, remainder, minutes_per_hour=REAL_MINUTES_PER_HOUR)


def timeToDuration(time: Time, negative: bool = False) -> Duration:
    """Convert a decomposed magnitude back into a :class:`.Duration`.

    Args:
        time (:class:`.Time`): field counts, as produced by :func:`.durationToTime`.
        negative (``bool``, optional): direction of the duration. Defaults to ``False``.

    Returns:
        :class:`.Duration`: signed span in calendar seconds.
    """
    seconds = _weightedMilliseconds(time) / MILLISECONDS_PER_SECOND
    return Duration(-seconds if negative else seconds)


def getInterval(start: Time, end: Time, normalize: bool = True) -> Duration:
    """Return the signed span of calendar seconds from `start` to `end`.

    Args:
        start (:class:`.Time`): beginning of the interval.
        end (:class:`.Time`): end of the interval.
        normalize (``bool``, optional): whether to re-normalize both operands to the configured
            minutes-per-hour ratio first. Defaults to ``True``.

    Returns:
        :class:`.Duration`: positive when `end` is later than `start`.
    """
    if normalize:
        default_ratio = getDefaultMinutesPerHour()
        start = normalizeTime(start, default_ratio)
        end = normalizeTime(end, default_ratio)

    span = _weightedMilliseconds(end) - _weightedMilliseconds(start)
    return Duration(span / MILLISECONDS_PER_SECOND)


def isAfter(time: Time, other: Time, normalize: bool = True) -> bool:
    """Return whether `time` is later than `other`; ``False`` if either is invalid."""
    if not (time.valid and other.valid):
        return False
    return getInterval(other, time, normalize=normalize) >= EQUALITY_TOLERANCE


def isBefore(time: Time, other: Time, normalize: bool = True) -> bool:
    """Return whether `time` is earlier than `other`; ``False`` if either is invalid."""
    if not (time.valid and other.valid):
        return False
    return getInterval(time, other, normalize=normalize) >= EQUALITY_TOLERANCE


def isEqual(time: Time, other: Time, normalize: bool = True) -> bool:
    """Return whether `time` and `other` are the same instant; ``False`` if either is invalid."""
    if not (time.valid and other.valid):
        return False
    return abs(getInterval(time, other, normalize=normalize)) < EQUALITY_TOLERANCE


def addTime(time: Time, seconds: float) -> Time:
    """Move `time` by a signed number of calendar seconds.

    Whole hours are added to the hour field directly. The sub-hour remainder is scaled to the
    minutes-per-hour ratio of `time` before being added as milliseconds, and the result is then
    normalized.

    The result is rounded to a whole millisecond at the ratio of `time`. Below 60 minutes per hour
    one such millisecond spans ``60 / minutes_per_hour`` real milliseconds, so
    ``getInterval(time, addTime(time, s))`` matches `s` only to within that step.

    Args:
        time (:class:`.Time`): starting calendar time.
        seconds (``float``): signed duration to add.

    Returns:
        :class:`.Time`: normalized result, or :data:`.INVALID_TIME` if `time` is invalid or
        the result leaves the supported year range.
    """
    if not time.valid:
        return INVALID_TIME

    time = normalizeTime(time)
    delta = roundHalfUp(float(seconds) * MILLISECONDS_PER_SECOND)
    hours, sub_hour = divmod(delta, _MS_PER_HOUR)
    scaled = roundHalfUp(sub_hour * time.minutes_per_hour / REAL_MINUTES_PER_HOUR)

    return normalizeTime(
        replace(time, hour=time.hour + hours, millisecond=time.millisecond + scaled),
    )


def subtractTime(time: Time, seconds: float) -> Time:
    """Move `time` backwards by a number of calendar seconds, see :func:`.addTime`."""
    return addTime(time, -float(seconds))

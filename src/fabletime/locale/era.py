"""Defines the :class:`.Era` record and the functions that resolve eras for a calendar time.

An era names a sub-range of the calendar that starts at a given time and runs until the next
era of the same locale begins. Years inside an era are counted from its start, shifted by the
era's offset:

.. code-block:: python

    dale_reckoning = defineEra("DR", Time(year=1, month=1, day=1), offset=1)
    locale = addEra(locale, dale_reckoning)

    era = getEra(locale, Time(year=1372, month=6, day=1))
    assert getEraYear(era, 1372) == 1372
"""

from __future__ import annotations

# Standard Library Imports
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

# Local Imports
from ..calendar.duration import EQUALITY_TOLERANCE, getInterval
from ..calendar.timestamp import Time, isTimeValid, normalizeTime, stringToTime
from ..common.exceptions import LocaleError

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from typing import Final

    # Local Imports
    from .locale import Locale


ERA_KEY_PREFIX: Final[str] = "Era"
"""``str``: prefix of locale keys that only apply while an era is active."""

ERA_YEAR_FORMAT_KEY: Final[str] = "EraYearFormat"
"""``str``: key of the template that renders a year within an era."""

DEFAULT_ERA_YEAR_FORMAT: Final[str] = "%Ey %EC"
"""``str``: template used for ``%EY`` when neither the era nor the locale define one."""


@dataclass(frozen=True)
class Era:
    """Named calendar sub-range with its own year numbering."""

    name: str
    """``str``: display name of the era, rendered by ``%EC``."""

    start: Time
    """:class:`.Time`: first instant of the era."""

    offset: int = 0
    """``int``: era year of the first year of the era."""

    year_format: str = ""
    """``str``: template rendered by ``%EY``, ``""`` to use the locale's ``EraYearFormat``."""

    formats: dict[str, str] = field(default_factory=dict, hash=False)
    """``dict``: era-specific overrides for locale format templates, keyed like the locale."""

    def getString(self, key: str) -> str:
        """Return the era's own value for `key`, or ``""`` if it does not override it."""
        if key == ERA_YEAR_FORMAT_KEY:
            return self.year_format
        return self.formats.get(key, "")

    def makeDictionary(self) -> dict:
        """Return a JSON-friendly dictionary representation of this era."""
        return {
            "name": self.name,
            "start": str(self.start),
            "minutes_per_hour": self.start.minutes_per_hour,
            "offset": self.offset,
            "year_format": self.year_format,
            "formats": dict(self.formats),
        }

    @classmethod
    def fromDictionary(cls, era_dict: dict) -> Era:
        """Factory to rebuild an era from :meth:`.makeDictionary` output."""
        start = stringToTime(era_dict["start"], era_dict.get("minutes_per_hour", 0))
        return defineEra(
            era_dict["name"],
            start,
            offset=era_dict.get("offset", 0),
            year_format=era_dict.get("year_format", ""),
            formats=era_dict.get("formats"),
        )


def defineEra(
    name: str,
    start: Time,
    offset: int = 0,
    year_format: str = "",
    formats: dict[str, str] | None = None,
) -> Era:
    """Create an :class:`.Era` starting at `start`.

    Args:
        name (``str``): display name of the era.
        start (:class:`.Time`): first instant of the era; it is normalized here.
        offset (``int``, optional): era year of the era's first year. Defaults to ``0``.
        year_format (``str``, optional): template rendered by ``%EY``. Defaults to ``""``, which
            defers to the locale's ``EraYearFormat`` and then :data:`.DEFAULT_ERA_YEAR_FORMAT`.
        formats (``dict``, optional): era-specific overrides of locale format templates.

    Raises:
        LocaleError: if `start` is not a valid calendar time.

    Returns:
        :class:`.Era`: the new era; add it to a locale with :func:`.addEra`.
    """
    start = normalizeTime(start)
    if not isTimeValid(start):
        raise LocaleError(f"Era {name!r} must start at a valid calendar time")
    return Era(name, start, int(offset), year_format, dict(formats or {}))


def addEra(locale: Locale, era: Era) -> Locale:
    """Return a copy of `locale` with `era` appended to its era list."""
    return locale.addEra(era)


def getEra(locale: Locale, time: Time) -> Era | None:
    """Return the era of `locale` that `time` falls in.

    The winner is the era with the latest start that is not after `time`; an era starting
    exactly at `time` is returned immediately.

    Args:
        locale (:class:`.Locale`): locale whose eras are searched.
        time (:class:`.Time`): calendar time to look up.

    Returns:
        :class:`.Era` | ``None``: ``None`` if the locale has no eras, `time` is invalid, or
        `time` precedes every era.
    """
    if not isTimeValid(time):
        return None

    current: Era | None = None
    current_gap = 0.0
    for era in locale.eras:
        gap = getInterval(era.start, time)
        if abs(gap) < EQUALITY_TOLERANCE:
            return era

        if gap > 0.0 and (current is None or gap < current_gap):
            current, current_gap = era, gap

    return current


def getEraYear(era: Era, year: int) -> int:
    """Return `year` counted in the year numbering of `era`."""
    return year - era.start.year + era.offset


def getEraString(era: Era | None, locale: Locale, key: str) -> str:
    """Return the template or name stored under `key`, preferring the era over the locale.

    Era-flavored keys (``EraDateFormat`` etc.) that neither the era nor the locale define fall
    back to the locale's plain key (``DateFormat``).

    Args:
        era (:class:`.Era` | ``None``): active era, if any.
        locale (:class:`.Locale`): locale to read from.
        key (``str``): locale key to look up.

    Returns:
        ``str``: the resolved value, ``""`` if nothing defines it.
    """
    if era is not None and (value := era.getString(key)):
        return value

    if value := locale.getString(key):
        return value

    if key.startswith(ERA_KEY_PREFIX):
        return locale.getString(key[len(ERA_KEY_PREFIX) :])

    return ""

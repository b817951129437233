"""Defines the :class:`.Locale` class, a named bundle of display configuration."""

from __future__ import annotations

# Standard Library Imports
import json
from typing import TYPE_CHECKING

# Local Imports
from ..common.behavioral_config import BehavioralConfig
from ..common.exceptions import LocaleError
from ..common.utilities import getListItem, joinList, splitList
from .era import Era

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Iterable, Mapping
    from typing import Final


LIST_KEYS: Final[tuple[str, ...]] = (
    "DayNames",
    "DayAbbreviations",
    "MonthNames",
    "MonthAbbreviations",
    "AMPM",
    "OrdinalSuffixes",
)
"""``tuple``: keys holding ordered string lists."""

FORMAT_KEYS: Final[tuple[str, ...]] = (
    "DateTimeFormat",
    "DateFormat",
    "TimeFormat",
    "TimeAMPMFormat",
)
"""``tuple``: keys holding the default format templates."""

ERA_FORMAT_KEYS: Final[tuple[str, ...]] = (
    "EraDateTimeFormat",
    "EraDateFormat",
    "EraTimeFormat",
    "EraTimeAMPMFormat",
    "EraYearFormat",
)
"""``tuple``: optional keys holding era-flavored format templates."""


class Locale:
    """Named bundle of names, format templates, ordinal suffixes and eras.

    Locales are immutable: every setter returns a modified copy and leaves the original
    untouched, so a locale read by the formatter can never change underneath it.
    """

    def __init__(
        self,
        name: str,
        strings: Mapping[str, str] | None = None,
        lists: Mapping[str, Iterable[str]] | None = None,
        eras: Iterable[Era] = (),
    ) -> None:
        """Construct a `Locale` object.

        Args:
            name (``str``): name the locale is stored under.
            strings (``dict``, optional): format templates and other single-string values.
            lists (``dict``, optional): ordered string lists, see :data:`.LIST_KEYS`.
            eras (``iterable``, optional): ordered :class:`.Era` records.
        """
        self._name = name
        self._strings: dict[str, str] = dict(strings or {})
        self._lists: dict[str, tuple[str, ...]] = {
            key: tuple(values) for key, values in (lists or {}).items()
        }
        self._eras: tuple[Era, ...] = tuple(eras)

    @classmethod
    def fromDefaults(cls, name: str) -> Locale:
        """Factory to create a locale initialized from the ``[locale]`` config section.

        Args:
            name (``str``): name of the new locale.

        Returns:
            :class:`.Locale`: properly constructed, unsaved locale
        """
        config = BehavioralConfig.getConfig().locale
        strings = {key: getattr(config, key) for key in FORMAT_KEYS}
        lists = {key: getattr(config, key) for key in LIST_KEYS}
        return cls(name, strings=strings, lists=lists)

    @property
    def name(self) -> str:
        """``str``: name the locale is stored under."""
        return self._name

    @property
    def eras(self) -> tuple[Era, ...]:
        """``tuple``: ordered eras of this locale."""
        return self._eras

    def getString(self, key: str, default: str = "") -> str:
        """Return the single-string value stored under `key`."""
        return self._strings.get(key, default)

    def getList(self, key: str) -> tuple[str, ...]:
        """Return the ordered string list stored under `key`, empty if absent."""
        return self._lists.get(key, ())

    def getListItem(self, key: str, index: int) -> str:
        """Return item `index` of list `key`, wrapping the index around the list length."""
        return getListItem(self.getList(key), index)

    def _copy(self, **kwargs) -> Locale:
        attributes = {
            "name": self._name,
            "strings": self._strings,
            "lists": self._lists,
            "eras": self._eras,
        }
        attributes.update(kwargs)
        return Locale(**attributes)

    def rename(self, name: str) -> Locale:
        """Return a copy of this locale under a different name."""
        return self._copy(name=name)

    def setString(self, key: str, value: str) -> Locale:
        """Return a copy of this locale with `key` set to `value`."""
        if key in LIST_KEYS:
            raise LocaleError(f"Locale key {key!r} holds a list, use setList()")
        return self._copy(strings={**self._strings, key: value})

    def deleteString(self, key: str) -> Locale:
        """Return a copy of this locale without the single-string value `key`."""
        strings = dict(self._strings)
        strings.pop(key, None)
        return self._copy(strings=strings)

    def setList(self, key: str, values: str | Iterable[str]) -> Locale:
        """Return a copy of this locale with list `key` replaced.

        Args:
            key (``str``): list key, see :data:`.LIST_KEYS`.
            values (``str`` | ``iterable``): the new items, or a single comma-delimited string.

        Returns:
            :class:`.Locale`: modified copy
        """
        if isinstance(values, str):
            values = splitList(values)
        return self._copy(lists={**self._lists, key: tuple(values)})

    def setEras(self, eras: Iterable[Era]) -> Locale:
        """Return a copy of this locale with its era list replaced."""
        return self._copy(eras=tuple(eras))

    def addEra(self, era: Era) -> Locale:
        """Return a copy of this locale with `era` appended to its era list."""
        return self._copy(eras=(*self._eras, era))

    def toJSON(self) -> str:
        """Serialize this locale, lists stored as delimited strings.

        Returns:
            ``str``: JSON representation, see :meth:`.fromJSON`.
        """
        return json.dumps(
            {
                "strings": self._strings,
                "lists": {key: joinList(values) for key, values in self._lists.items()},
                "eras": [era.makeDictionary() for era in self._eras],
            },
            sort_keys=True,
        )

    @classmethod
    def fromJSON(cls, name: str, json_string: str) -> Locale:
        """Factory to rebuild a locale from :meth:`.toJSON` output.

        Raises:
            LocaleError: if `json_string` is not a serialized locale.
        """
        try:
            locale_dict = json.loads(json_string)
            return cls(
                name,
                strings=locale_dict.get("strings"),
                lists={key: splitList(value) for key, value in locale_dict["lists"].items()},
                eras=[Era.fromDictionary(era) for era in locale_dict.get("eras", [])],
            )
        except (ValueError, KeyError, TypeError, AttributeError) as err:
            raise LocaleError(f"Stored locale {name!r} is malformed") from err

    def __eq__(self, other) -> bool:
        """Locales are equal when every name, list, template and era matches."""
        if not isinstance(other, Locale):
            return NotImplemented
        return (
            self._name == other._name
            and self._strings == other._strings
            and self._lists == other._lists
            and self._eras == other._eras
        )

    __hash__ = None

    def __repr__(self) -> str:
        """."""
        return f"Locale(name={self._name!r}, eras={[era.name for era in self._eras]})"

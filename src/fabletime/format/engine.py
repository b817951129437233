"""Defines the :class:`.FormatEngine` class, which renders calendar times as text.

Rendering happens in two phases. While walking the parsed format, each conversion's value is
appended to a list and its place in the output is taken by a positional placeholder. Once the
walk is complete a single interpolation pass substitutes the collected values into the
placeholders. Composite conversions (``%c``, ``%F``, ``%EY`` ...) are expanded by parsing their
template and walking the resulting nodes in place.

.. code-block:: python

    engine = FormatEngine(registry)
    engine.formatTime(Time(1372, 6, 1), "%Y-%m-%d")       # '1372-06-01'
    engine.formatTime(Time(1372, 6, 1), "the %Od of %B")  # 'the 1st of June'
"""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Local Imports
from ..calendar.timestamp import getDayOfWeek, getDayOfYear
from ..common.behavioral_config import BehavioralConfig
from ..common.logger import fabletimeLogError, fabletimeLogWarning
from ..locale.era import (
    DEFAULT_ERA_YEAR_FORMAT,
    ERA_KEY_PREFIX,
    ERA_YEAR_FORMAT_KEY,
    getEra,
    getEraString,
    getEraYear,
)
from ..locale.registry import getLocaleRegistry
from .parser import Conversion, Literal, parseFormat
from .rendering import renderNumber, renderOrdinal, renderString
from .specifiers import (
    ERA_FLAG,
    ERA_YEAR_WIDTH,
    FIXED_ALIASES,
    LITERAL_SPECIFIERS,
    LOCALE_ALIASES,
    NUMERIC_WIDTHS,
    ORDINAL_FLAG,
    SPACE_PADDED,
    UPPERCASE_FLAG,
)

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Iterable

    # Local Imports
    from ..calendar.timestamp import Time
    from ..locale.era import Era
    from ..locale.locale import Locale
    from ..locale.registry import LocaleRegistry
    from .parser import Node


_NO_ERA = object()


class _FormatContext:
    """State of a single :meth:`.FormatEngine.formatTime` call."""

    def __init__(self, time: Time, locale: Locale, format_string: str) -> None:
        self.time = time
        self.locale = locale
        self.format_string = format_string
        self.template: list[str] = []
        self.values: list[str] = []
        self._era = _NO_ERA

    @property
    def era(self) -> Era | None:
        """Era of the formatted time, resolved on first use."""
        if self._era is _NO_ERA:
            self._era = getEra(self.locale, self.time)
        return self._era

    def addLiteral(self, text: str, uppercase: bool) -> None:
        if uppercase:
            text = text.upper()
        self.template.append(text.replace("{", "{{").replace("}", "}}"))

    def addValue(self, value: str, uppercase: bool) -> None:
        if uppercase:
            value = value.upper()
        self.template.append(f"{{{len(self.values)}}}")
        self.values.append(value)

    def interpolate(self) -> str:
        return "".join(self.template).format(*self.values)


class FormatEngine:
    """Renders :class:`.Time` values with strftime-like format strings."""

    def __init__(
        self,
        registry: LocaleRegistry | None = None,
        max_alias_depth: int | None = None,
    ) -> None:
        """Construct a `FormatEngine` object.

        Args:
            registry (:class:`.LocaleRegistry`, optional): where locales are read from. Defaults
                to the process-wide registry.
            max_alias_depth (``int``, optional): how deeply composite conversions may nest.
                Defaults to the configured ``format.MaxAliasDepth``.
        """
        self.registry = registry if registry is not None else getLocaleRegistry()
        if max_alias_depth is None:
            max_alias_depth = BehavioralConfig.getConfig().format.MaxAliasDepth
        self.max_alias_depth = max_alias_depth

    def formatTime(self, time: Time, format_string: str, locale_name: str | None = None) -> str:
        """Render `time` according to `format_string`.

        Unknown conversions, and composite conversions nested deeper than
        :attr:`.max_alias_depth` (a locale template that refers to itself), are logged and copied
        to the output as written. They never stop the rest of the string from being rendered.

        Args:
            time (:class:`.Time`): calendar time to render. It is not normalized first.
            format_string (``str``): strftime-like template.
            locale_name (``str``, optional): locale to render with. Defaults to the registry's
                default locale.

        Returns:
            ``str``: the rendered text.
        """
        locale = self.registry.getLocale(locale_name)
        context = _FormatContext(time, locale, format_string)
        self._render(parseFormat(format_string), context, depth=0, uppercase=False)
        return context.interpolate()

    def _render(
        self,
        nodes: Iterable[Node],
        context: _FormatContext,
        depth: int,
        uppercase: bool,
    ) -> None:
        for node in nodes:
            if isinstance(node, Literal):
                context.addLiteral(node.text, uppercase)
                continue

            template = self._getTemplate(node, context)
            if template is not None:
                self._expand(node, template, context, depth, uppercase)
                continue

            value = self._getValue(node, context)
            if value is None:
                fabletimeLogError(
                    f"InvalidFormatSpecifier: {node.text!r} in format {context.format_string!r}",
                )
                context.addLiteral(node.text, uppercase=False)
            else:
                context.addValue(value, uppercase)

    def _expand(
        self,
        node: Conversion,
        template: str,
        context: _FormatContext,
        depth: int,
        uppercase: bool,
    ) -> None:
        """Render the template of a composite conversion in place of `node`."""
        if depth >= self.max_alias_depth:
            fabletimeLogError(
                f"InvalidFormatSpecifier: {node.text!r} nests more than {self.max_alias_depth} "
                f"templates deep in locale {context.locale.name!r}",
            )
            context.addLiteral(node.text, uppercase=False)
            return

        if not template:
            fabletimeLogWarning(
                f"Conversion {node.text!r} has no template in locale {context.locale.name!r}",
            )

        self._render(
            parseFormat(template),
            context,
            depth=depth + 1,
            uppercase=uppercase or node.hasFlag(UPPERCASE_FLAG),
        )

    def _getTemplate(self, node: Conversion, context: _FormatContext) -> str | None:
        """Return the template a composite conversion expands to, ``None`` for other conversions."""
        specifier = node.specifier
        if specifier in FIXED_ALIASES:
            return FIXED_ALIASES[specifier]

        if specifier in LOCALE_ALIASES:
            key = LOCALE_ALIASES[specifier]
            if node.hasFlag(ERA_FLAG):
                return getEraString(context.era, context.locale, ERA_KEY_PREFIX + key)
            return context.locale.getString(key)

        if specifier == "Y" and node.hasFlag(ERA_FLAG) and context.era is not None:
            template = getEraString(context.era, context.locale, ERA_YEAR_FORMAT_KEY)
            return template or DEFAULT_ERA_YEAR_FORMAT

        return None

    def _getValue(self, node: Conversion, context: _FormatContext) -> str | None:
        """Return the rendered value of a direct conversion, ``None`` if it is unknown."""
        specifier = node.specifier
        if specifier in LITERAL_SPECIFIERS:
            return LITERAL_SPECIFIERS[specifier]

        era = context.era if node.hasFlag(ERA_FLAG) else None
        if specifier == "C" and era is not None:
            return renderString(era.name, node.flags, node.width)

        text = self._getString(specifier, context)
        if text is not None:
            return renderString(text, node.flags, node.width)

        if specifier == "y" and era is not None:
            number, default_width = getEraYear(era, context.time.year), ERA_YEAR_WIDTH
        elif specifier in NUMERIC_WIDTHS:
            number = self._getNumber(specifier, context.time)
            default_width = NUMERIC_WIDTHS[specifier]
        else:
            return None

        if node.hasFlag(ORDINAL_FLAG):
            ordinal = renderOrdinal(number, node.flags, context.locale.getList("OrdinalSuffixes"))
            return renderString(ordinal, node.flags, node.width)

        return renderNumber(
            number,
            node.flags,
            width=node.width,
            default_width=default_width,
            space_padded=specifier in SPACE_PADDED,
        )

    @staticmethod
    def _getString(specifier: str, context: _FormatContext) -> str | None:
        """Return the locale string for a string specifier, ``None`` for other specifiers."""
        time, locale = context.time, context.locale
        if specifier == "a":
            return locale.getListItem("DayAbbreviations", getDayOfWeek(time))
        if specifier == "A":
            return locale.getListItem("DayNames", getDayOfWeek(time))
        if specifier in ("b", "h"):
            return locale.getListItem("MonthAbbreviations", time.month - 1)
        if specifier == "B":
            return locale.getListItem("MonthNames", time.month - 1)
        if specifier in ("p", "P"):
            marker = locale.getListItem("AMPM", int(time.hour % 24 >= 12))
            return marker.lower() if specifier == "P" else marker
        return None

    @staticmethod
    def _getNumber(specifier: str, time: Time) -> int:  # noqa: PLR0911
        """Return the integer value of a numeric specifier."""
        if specifier in ("d", "e"):
            return time.day
        if specifier in ("H", "k"):
            return time.hour
        if specifier in ("I", "l"):
            return time.hour % 12 or 12
        if specifier == "m":
            return time.month
        if specifier == "M":
            return time.minute
        if specifier == "S":
            return time.second
        if specifier == "f":
            return time.millisecond
        if specifier == "j":
            return getDayOfYear(time)
        if specifier == "u":
            return getDayOfWeek(time) + 1
        if specifier == "w":
            return getDayOfWeek(time)
        if specifier == "C":
            return time.year // 100
        if specifier == "y":
            return time.year % 100
        return time.year


def formatTime(
    time: Time,
    format_string: str,
    locale_name: str | None = None,
    registry: LocaleRegistry | None = None,
) -> str:
    """Render `time` with a one-off :class:`.FormatEngine`, see :meth:`.FormatEngine.formatTime`."""
    return FormatEngine(registry).formatTime(time, format_string, locale_name)

"""Turns computed field values into text according to a conversion's flags and width."""

from __future__ import annotations

# Local Imports
from ..common.utilities import getListItem
from .specifiers import (
    NO_PAD_FLAG,
    SIGN_FLAG,
    SPACE_PAD_FLAG,
    THOUSANDS_FLAG,
    UPPERCASE_FLAG,
    ZERO_PAD_FLAG,
)


def _digits(value: int, flags: frozenset[str]) -> str:
    """Return the unsigned digits of `value`, grouped by thousands if requested."""
    if THOUSANDS_FLAG in flags:
        return f"{abs(value):,}"
    return str(abs(value))


def _sign(value: int, flags: frozenset[str]) -> str:
    if value < 0:
        return "-"
    return "+" if SIGN_FLAG in flags else ""


def renderNumber(
    value: int,
    flags: frozenset[str],
    width: int | None = None,
    default_width: int = 1,
    space_padded: bool = False,
) -> str:
    """Render an integer field.

    Padding flags take precedence in the order ``-`` (none), ``_`` (spaces), ``0`` (zeros).
    Without any of them the specifier's own padding character is used. Zero padding goes
    between the sign and the digits; space padding goes before the sign.

    Args:
        value (``int``): field value.
        flags (``frozenset``): conversion flags.
        width (``int``, optional): explicit width, overriding `default_width`.
        default_width (``int``, optional): the specifier's default width. Defaults to ``1``.
        space_padded (``bool``, optional): whether the specifier pads with spaces by default.

    Returns:
        ``str``: the rendered number.
    """
    digits = _digits(value, flags)
    sign = _sign(value, flags)
    if NO_PAD_FLAG in flags:
        return sign + digits

    width = default_width if width is None else width
    if SPACE_PAD_FLAG in flags or (space_padded and ZERO_PAD_FLAG not in flags):
        return (sign + digits).rjust(width)

    return sign + digits.rjust(width, "0")


def getOrdinalSuffix(value: int, suffixes: tuple[str, ...]) -> str:
    """Return the ordinal suffix of `value`.

    The last two digits index into `suffixes`, so a list of at least 14 entries can give 11, 12
    and 13 their own suffix. When the list is too short for that, the last digit is used.

    Args:
        value (``int``): number to find a suffix for.
        suffixes (``tuple``): locale ordinal suffixes, index ``0`` first.

    Returns:
        ``str``: the suffix, ``""`` if the locale defines none.
    """
    number = abs(value)
    index = number % 100
    if index >= len(suffixes):
        index = number % 10
    return getListItem(suffixes, index)


def renderOrdinal(value: int, flags: frozenset[str], suffixes: tuple[str, ...]) -> str:
    """Render an integer field as an ordinal such as ``1st`` or ``22nd``."""
    return _sign(value, flags) + _digits(value, flags) + getOrdinalSuffix(value, suffixes)


def renderString(text: str, flags: frozenset[str], width: int | None = None) -> str:
    """Render a string field; only ``^`` and an explicit width (space padded) apply."""
    if UPPERCASE_FLAG in flags:
        text = text.upper()
    if width:
        text = text.rjust(width)
    return text

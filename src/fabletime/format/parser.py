"""Parses format strings into literal and conversion nodes.

A conversion is a ``%`` followed by any number of flag characters, an optional decimal width,
and one specifier character::

    %[flags][width]specifier

Parsing never fails. A conversion whose specifier is unknown, or a ``%`` at the very end of the
string, still becomes a :class:`.Conversion` node carrying the original text, and the formatter
decides what to do with it.
"""

from __future__ import annotations

# Standard Library Imports
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Union

# Local Imports
from .specifiers import FLAGS, SPECIFIERS

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from typing import Final


CONVERSION_START: Final[str] = "%"
"""``str``: character that introduces a conversion."""

_DIGITS: Final[str] = "0123456789"


@dataclass(frozen=True)
class Literal:
    """Text copied to the output unchanged."""

    text: str
    """``str``: the literal text."""


@dataclass(frozen=True)
class Conversion:
    """A single ``%`` conversion."""

    specifier: str
    """``str``: conversion character, ``""`` when the format string ended first."""

    flags: frozenset[str]
    """``frozenset``: flag characters given before the width, see :data:`.FLAGS`."""

    width: int | None
    """``int`` | ``None``: explicit field width, if one was given."""

    text: str
    """``str``: the conversion exactly as written in the format string."""

    def hasFlag(self, flag: str) -> bool:
        """Return whether `flag` was given for this conversion."""
        return flag in self.flags

    @property
    def known(self) -> bool:
        """``bool``: whether the specifier is one the formatter understands."""
        return self.specifier in SPECIFIERS


Node = Union[Literal, Conversion]
"""Type of the nodes produced by :func:`.parseFormat`."""


def _scanConversion(format_string: str, start: int) -> tuple[Conversion, int]:
    """Scan the conversion whose ``%`` sits at `start`; returns it and the index after it."""
    position = start + 1
    length = len(format_string)

    flags = set()
    while position < length and format_string[position] in FLAGS:
        flags.add(format_string[position])
        position += 1

    width_start = position
    while position < length and format_string[position] in _DIGITS:
        position += 1
    width = int(format_string[width_start:position]) if position > width_start else None

    specifier = ""
    if position < length:
        specifier = format_string[position]
        position += 1

    conversion = Conversion(
        specifier=specifier,
        flags=frozenset(flags),
        width=width,
        text=format_string[start:position],
    )
    return conversion, position


@lru_cache(maxsize=256)
def parseFormat(format_string: str) -> tuple[Node, ...]:
    """Split `format_string` into literal text and conversions, in order.

    Args:
        format_string (``str``): strftime-like template.

    Returns:
        ``tuple``: :class:`.Literal` and :class:`.Conversion` nodes. Adjacent literal text is
        merged into a single node.
    """
    nodes: list[Node] = []
    position = 0
    while position < len(format_string):
        start = format_string.find(CONVERSION_START, position)
        if start < 0:
            nodes.append(Literal(format_string[position:]))
            break

        if start > position:
            nodes.append(Literal(format_string[position:start]))

        conversion, position = _scanConversion(format_string, start)
        nodes.append(conversion)

    return tuple(nodes)

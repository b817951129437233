"""Tables describing every flag and conversion specifier the formatter understands."""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from typing import Final


ERA_FLAG: Final[str] = "E"
ORDINAL_FLAG: Final[str] = "O"
UPPERCASE_FLAG: Final[str] = "^"
THOUSANDS_FLAG: Final[str] = ","
SIGN_FLAG: Final[str] = "+"
NO_PAD_FLAG: Final[str] = "-"
SPACE_PAD_FLAG: Final[str] = "_"
ZERO_PAD_FLAG: Final[str] = "0"

FLAGS: Final[frozenset[str]] = frozenset(
    (
        ERA_FLAG,
        ORDINAL_FLAG,
        UPPERCASE_FLAG,
        THOUSANDS_FLAG,
        SIGN_FLAG,
        NO_PAD_FLAG,
        SPACE_PAD_FLAG,
        ZERO_PAD_FLAG,
    ),
)
"""``frozenset``: characters accepted between ``%`` and the width."""

NUMERIC_WIDTHS: Final[dict[str, int]] = {
    "C": 2,
    "d": 2,
    "e": 2,
    "f": 3,
    "H": 2,
    "I": 2,
    "j": 3,
    "k": 2,
    "l": 2,
    "m": 2,
    "M": 2,
    "S": 2,
    "u": 1,
    "w": 1,
    "y": 2,
    "Y": 4,
}
"""``dict``: default padded width of each numeric specifier."""

ERA_YEAR_WIDTH: Final[int] = 1
"""``int``: default padded width of ``%Ey``."""

SPACE_PADDED: Final[frozenset[str]] = frozenset("ekl")
"""``frozenset``: numeric specifiers padded with spaces rather than zeros by default."""

STRING_SPECIFIERS: Final[frozenset[str]] = frozenset("aAbBhpP")
"""``frozenset``: specifiers that render a locale string."""

LITERAL_SPECIFIERS: Final[dict[str, str]] = {
    "%": "%",
    "n": "\n",
    "t": "\t",
}
"""``dict``: specifiers that render fixed text."""

LOCALE_ALIASES: Final[dict[str, str]] = {
    "c": "DateTimeFormat",
    "x": "DateFormat",
    "X": "TimeFormat",
    "r": "TimeAMPMFormat",
}
"""``dict``: composite specifiers expanded from a locale template."""

FIXED_ALIASES: Final[dict[str, str]] = {
    "D": "%m/%d/%y",
    "F": "%Y-%m-%d",
    "R": "%H:%M",
    "T": "%H:%M:%S",
}
"""``dict``: composite specifiers with a fixed template."""

SPECIFIERS: Final[frozenset[str]] = (
    frozenset(NUMERIC_WIDTHS)
    | STRING_SPECIFIERS
    | frozenset(LITERAL_SPECIFIERS)
    | frozenset(LOCALE_ALIASES)
    | frozenset(FIXED_ALIASES)
)
"""``frozenset``: every specifier the formatter understands."""

"""Renders calendar times as text with a strftime-like mini-language.

Supported conversions, with their flags ``E`` (era), ``O`` (ordinal), ``^`` (uppercase),
``,`` (thousands), ``+`` (sign), ``-`` (no padding), ``_`` (space padding) and ``0`` (zero
padding), are listed in :mod:`.specifiers`.
"""

from __future__ import annotations

# Local Imports
from .engine import FormatEngine, formatTime
from .parser import Conversion, Literal, parseFormat

__all__ = [
    "Conversion",
    "FormatEngine",
    "Literal",
    "formatTime",
    "parseFormat",
]

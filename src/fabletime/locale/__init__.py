"""Contains locales, the named bundles of display configuration, and their eras."""

from __future__ import annotations

# Local Imports
from .era import Era, addEra, defineEra, getEra, getEraString, getEraYear
from .locale import Locale
from .registry import (
    LocaleRegistry,
    deleteLocale,
    getLocale,
    getLocaleRegistry,
    hasLocale,
    setLocale,
    setLocaleRegistry,
)

__all__ = [
    "Era",
    "Locale",
    "LocaleRegistry",
    "addEra",
    "defineEra",
    "deleteLocale",
    "getEra",
    "getEraString",
    "getEraYear",
    "getLocale",
    "getLocaleRegistry",
    "hasLocale",
    "setLocale",
    "setLocaleRegistry",
]

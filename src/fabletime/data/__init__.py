"""Defines the database models and classes for persistent named storage."""

from __future__ import annotations

# Local Imports
from .named_store import NamedStore
from .named_value import NamedValue

__all__ = [
    "NamedStore",
    "NamedValue",
]

"""Defines the :class:`.NamedValue` data table class."""

from __future__ import annotations

# Third Party Imports
from sqlalchemy import Column, String, Text

# Local Imports
from .table_base import Base, _DataMixin


class NamedValue(Base, _DataMixin):
    """Key/value table; every row belongs to the name prefix that wrote it."""

    __tablename__ = "named_values"

    prefix = Column(String, primary_key=True)
    """``str``: scope the value was stored under."""

    name = Column(String, primary_key=True)
    """``str``: key of the value within its prefix."""

    value = Column(Text, nullable=False)
    """``str``: serialized value."""

    MUTABLE_COLUMN_NAMES = (
        "prefix",
        "name",
        "value",
    )

"""Defines the declarative base for data tables."""

from __future__ import annotations

# Third Party Imports
from sqlalchemy.orm import declarative_base

# Base declarative class used by SQLAlchemy to track ORM's
Base = declarative_base()


class _DataMixin:
    """Base class for objects that get stored via SQLAlchemy."""

    MUTABLE_COLUMN_NAMES = ()
    """tuple: Tuple of mutable column names."""

    def __repr__(self):
        """Define how :class:`.DataMixin` objects are represented as a ``str`` object."""
        fields = ", ".join(
            f"{field}={getattr(self, field)!r}" for field in self.MUTABLE_COLUMN_NAMES
        )
        return f"{self.__class__.__name__}({fields})"

    def makeDictionary(self) -> dict:
        """Return a dictionary representation of this :class:`.DataMixin` object.

        Returns:
            dict: Dictionary representation of this :class:`.DataMixin` object.
        """
        return {field: getattr(self, field) for field in self.MUTABLE_COLUMN_NAMES}

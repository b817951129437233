"""Contains the configuration, logging and helper functions shared by the other packages."""

from __future__ import annotations

# Standard Library Imports
from datetime import datetime

LOG_STAMP_FORMAT: str = "%Y-%m-%dT%H-%M-%S-%f"
"""``str``: wall-clock format used to name log files."""


def pathSafeTime(dt: datetime | None = None) -> str:
    """Return a stamp of `dt` that can be used in file names on every platform.

    Args:
        dt (``datetime``, optional): wall-clock time to stamp. Defaults to now.

    Returns:
        ``str``: stamp without colons, spaces or dots.
    """
    if dt is None:
        dt = datetime.now()
    return dt.strftime(LOG_STAMP_FORMAT)

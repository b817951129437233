"""Defines the :class:`.Logger` class and the ``fabletime`` one-liner logging helpers.

Each :class:`.Logger` writes either to ``stdout`` or to a size-rotated file, depending on the
``[logging] OutputLocation`` setting. Log files are named after the logger and the wall-clock time
it was created, see :func:`.getLogFileName`.

The one-liners (:func:`.fabletimeLogError` etc.) always log to the ``fabletime`` logger, so they
can be used before, or without, any :class:`.Logger` being constructed.
"""

from __future__ import annotations

# Standard Library Imports
import logging
import sys
from logging.handlers import RotatingFileHandler
from os import makedirs
from os.path import join
from typing import TYPE_CHECKING

# Local Imports
from . import pathSafeTime
from .behavioral_config import BehavioralConfig

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from datetime import datetime
    from typing import Final

    # Local Imports
    from .behavioral_config import SubConfig


PACKAGE_LOGGER_NAME: Final[str] = "fabletime"
"""``str``: logger the one-liner helpers write to."""

STDOUT_LOCATION: Final[str] = "stdout"
"""``str``: ``OutputLocation`` value that sends records to standard output."""


def getLogFileName(name: str, dt: datetime | None = None) -> str:
    """Return the file name used by a :class:`.Logger` called `name` created at `dt`.

    Args:
        name (``str``): logger name.
        dt (``datetime``, optional): creation time. Defaults to now.

    Returns:
        ``str``: ``<name>_<stamp>.log``, with a stamp that is safe in file names.
    """
    return f"{name}_{pathSafeTime(dt)}.log"


def _makeHandler(name: str, location: str, config: SubConfig) -> tuple[logging.Handler, str]:
    """Return a new handler for `location` and the file it writes to (``"stdout"`` if none)."""
    if location == STDOUT_LOCATION:
        return logging.StreamHandler(sys.stdout), STDOUT_LOCATION

    makedirs(location, exist_ok=True)
    filename = join(location, getLogFileName(name))
    handler = RotatingFileHandler(
        filename,
        maxBytes=config.MaxFileSize,
        backupCount=config.MaxFileCount,
    )
    return handler, filename


class Logger:
    """Wraps a standard library logger with the handler and format from the ``[logging]`` config.

    Attribute access falls through to the wrapped :class:`logging.Logger`, so a :class:`.Logger`
    is used exactly like one (``logger.info(...)``).
    """

    LOG_FORMAT: str = "%(asctime)s - %(module)s - %(levelname)s - %(message)s"
    """``str``: record layout shared by every handler this class attaches."""

    def __init__(
        self,
        name: str,
        level: int | None = None,
        path: str | None = None,
        allow_multiple_handlers: bool | None = None,
    ) -> None:
        """Configure the logger called `name`.

        Arguments left as ``None`` are read from the ``[logging]`` config section.

        Args:
            name (``str``): name of the wrapped standard library logger.
            level (``int``, optional): lowest level that is published.
            path (``str``, optional): directory to write log files to, or ``"stdout"``.
            allow_multiple_handlers (``bool``, optional): whether to attach another handler when
                the named logger already has one.
        """
        config = BehavioralConfig.getConfig().logging
        if level is None:
            level = config.Level
        if path is None:
            path = config.OutputLocation
        if allow_multiple_handlers is None:
            allow_multiple_handlers = config.AllowMultipleHandlers

        self.logger = logging.getLogger(name)
        self.filename: str | None = None

        # Named loggers are process-wide; later instances reuse the first one's handler
        if self.logger.handlers and not allow_multiple_handlers:
            return

        handler, self.filename = _makeHandler(name, path, config)
        handler.setFormatter(logging.Formatter(self.LOG_FORMAT))
        self.logger.setLevel(level)
        self.logger.addHandler(handler)

    def __getattr__(self, name):
        """Forward logging calls to the wrapped standard library logger."""
        return getattr(self.logger, name)


def fabletimeLogError(message: str):
    """Log an ERROR message to the ``fabletime`` logger."""
    logging.getLogger(PACKAGE_LOGGER_NAME).error(message)


def fabletimeLogWarning(message: str):
    """Log a WARNING message to the ``fabletime`` logger."""
    logging.getLogger(PACKAGE_LOGGER_NAME).warning(message)


def fabletimeLogInfo(message: str):
    """Log an INFO message to the ``fabletime`` logger."""
    logging.getLogger(PACKAGE_LOGGER_NAME).info(message)


def fabletimeLogDebug(message: str):
    """Log a DEBUG message to the ``fabletime`` logger."""
    logging.getLogger(PACKAGE_LOGGER_NAME).debug(message)

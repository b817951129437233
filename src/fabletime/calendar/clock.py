"""Defines the :class:`.CalendarClock` class to track the current calendar time."""

from __future__ import annotations

# Standard Library Imports
import logging

# Local Imports
from .duration import Duration, addTime, getInterval
from .timestamp import Time, isTimeValid, normalizeTime


class CalendarClock:
    """Holds the host's current calendar time and steps it forward.

    Invalid times are rejected rather than stored, so the clock always reads a real value.
    """

    def __init__(self, start: Time | None = None, dt_step: float = 1.0) -> None:
        """Construct a `CalendarClock` object.

        Args:
            start (:class:`.Time`, optional): initial calendar time. Defaults to the first
                instant of year ``0``.
            dt_step (``float``, optional): default step used by :meth:`.ticToc`, in seconds.
        """
        self.logger = logging.getLogger("fabletime")
        self.dt_step = Duration(dt_step)
        self._start = Time()
        self._time = Time()
        self.setCurrentTime(start if start is not None else Time())
        self._start = self._time

    def getCurrentTime(self) -> Time:
        """Return the current calendar time."""
        return self._time

    def setCurrentTime(self, time: Time) -> None:
        """Set the current calendar time.

        Args:
            time (:class:`.Time`): new current time; it is normalized before being stored.

        Raises:
            ValueError: if `time` does not normalize into a valid calendar time.
        """
        normalized = normalizeTime(time)
        if not isTimeValid(normalized):
            self.logger.error(f"Refusing to set clock to an invalid time: {time!r}")
            raise ValueError(f"Invalid calendar time: {time!r}")
        self._time = normalized

    def ticToc(self, dt: float | None = None) -> Time:
        r"""Advance the clock.

        Args:
            dt (``float``, optional): :math:`\Delta t` to step forward by, in seconds. Defaults to
                ``None``, which then uses :attr:`~.CalendarClock.dt_step`.

        Returns:
            :class:`.Time`: the new current time.
        """
        step = self.dt_step if dt is None else dt
        self.setCurrentTime(addTime(self._time, step))
        return self._time

    @property
    def elapsed(self) -> Duration:
        """:class:`.Duration`: time elapsed since the clock was created."""
        return getInterval(self._start, self._time)

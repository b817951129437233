"""Define the command line interface for the fabletime formatter."""

from __future__ import annotations

# Standard Library Imports
import argparse

# Local Imports
from ..calendar.timestamp import isTimeValid, stringToTime
from .logger import fabletimeLogError


def timeChecker(time_string, minutes_per_hour=0):
    """Checks for valid calendar times passed to the CLI.

    Args:
        time_string (``str``): time given to the CLI, as ``YYYY-MM-DD HH:MM:SS:mmm``.
        minutes_per_hour (``int``, optional): ratio the time is expressed at. Defaults to ``0``.

    Raises:
        ValueError: if the text is not a calendar time

    Returns:
        :class:`.Time`: the parsed, not yet normalized time
    """
    time = stringToTime(time_string, minutes_per_hour)
    if not isTimeValid(time):
        fabletimeLogError("Bad calendar time given to CLI")
        raise ValueError(time_string)
    return time


def getCommandLineParser():
    """Create parser for command line arguments.

    Returns:
        ``argparse.ArgumentParser``: valid parser object
    """
    parser = argparse.ArgumentParser(description="fabletime Command Line Interface")
    locale_group = parser.add_argument_group("Locale Options")

    parser.add_argument(
        "format_string",
        metavar="FORMAT",
        type=str,
        help="strftime-like format string, e.g. '%%Y-%%m-%%d'",
    )

    parser.add_argument(
        "-t",
        "--time",
        dest="time",
        metavar="TIME",
        default="0000-01-01 00:00:00:000",
        type=str,
        help="Calendar time to format, as 'YYYY-MM-DD HH:MM:SS:mmm'. DEFAULT: year 0",
    )

    parser.add_argument(
        "-m",
        "--minutes-per-hour",
        dest="minutes_per_hour",
        metavar="MINUTES",
        default=0,
        type=int,
        help="Minutes per hour of TIME. DEFAULT: configured ratio",
    )

    parser.add_argument(
        "-c",
        "--config",
        dest="config_path",
        metavar="CONFIG_FILE",
        default=None,
        type=str,
        help="Path to a behavioral config file",
    )

    locale_group.add_argument(
        "-l",
        "--locale",
        dest="locale_name",
        metavar="LOCALE",
        default=None,
        type=str,
        help="Name of the locale to format with. DEFAULT: the default locale",
    )

    return parser

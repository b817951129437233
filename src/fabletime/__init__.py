"""Main Module Documentation.

A calendar of 12 months × 28 days with a configurable minutes-per-hour ratio, duration
arithmetic over it, and a locale-aware strftime-like formatter. The top-level module also
serves as the command line entry point that formats a single calendar time.
"""

from __future__ import annotations

__version__ = "1.0.0"


def runFabletime(
    format_string: str,
    time_string: str = "0000-01-01 00:00:00:000",
    locale_name: str | None = None,
    minutes_per_hour: int = 0,
    config_path: str | None = None,
) -> str:
    """Format a single calendar time given in its text form.

    Args:
        format_string (``str``): strftime-like format string.
        time_string (``str``, optional): time as ``YYYY-MM-DD HH:MM:SS:mmm``. Defaults to the
            first instant of year ``0``.
        locale_name (``str``, optional): locale to format with. Defaults to the default locale.
        minutes_per_hour (``int``, optional): ratio the time is expressed at. Defaults to ``0``,
            the configured ratio.
        config_path (``str``, optional): behavioral config file to load before formatting.

    Raises:
        ValueError: if `time_string` is not a calendar time.

    Returns:
        ``str``: the formatted time.
    """
    # Local Imports
    from .calendar.timestamp import normalizeTime
    from .common.behavioral_config import BehavioralConfig
    from .common.cli import timeChecker
    from .format import formatTime

    if config_path:
        BehavioralConfig(config_file_path=config_path)

    time = normalizeTime(timeChecker(time_string, minutes_per_hour))
    return formatTime(time, format_string, locale_name)


def main() -> None:
    """fabletime main entry point.

    This is the function that the :command:`fabletime` command points to. See :mod:`.cli` for
    details on what command line options are available.
    """
    # Local Imports
    from .common.cli import getCommandLineParser

    parser = getCommandLineParser()
    cli_args = parser.parse_args()

    try:
        output = runFabletime(
            cli_args.format_string,
            time_string=cli_args.time,
            locale_name=cli_args.locale_name,
            minutes_per_hour=cli_args.minutes_per_hour,
            config_path=cli_args.config_path,
        )
    except ValueError:
        parser.error(f"invalid calendar time: {cli_args.time!r}")

    print(output)  # noqa: T201

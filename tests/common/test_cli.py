from __future__ import annotations

# Standard Library Imports
import sys
from typing import TYPE_CHECKING

# Third Party Imports
import pytest

# fabletime Imports
from fabletime import main, runFabletime
from fabletime.calendar.timestamp import Time
from fabletime.common import cli

# Local Imports
from .. import TEST_TIME, TEST_TIME_STRING

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from pathlib import Path

    # fabletime Imports
    from fabletime.locale.registry import LocaleRegistry


def validateArgs(args):
    """Wrap `parser.parseargs()` to catch `SystemExit` for easier unit testing."""
    try:
        parser = cli.getCommandLineParser()
        parser.parse_args(args)
        return True
    except SystemExit:
        return False


def testFormatString():
    """Test that the format string is required."""
    assert validateArgs(["%Y-%m-%d"]) is True
    assert validateArgs([]) is False


def testTimeOption():
    """Test the calendar time options."""
    assert validateArgs(["%F", "-t", TEST_TIME_STRING]) is True
    assert validateArgs(["%F", "--time", "1372-06-01"]) is True


def testMinutesPerHour():
    """Test that minutes per hour must be an integer."""
    assert validateArgs(["%F", "-m", "30"]) is True
    assert validateArgs(["%F", "--minutes-per-hour", "30"]) is True
    assert validateArgs(["%F", "-m", "half"]) is False


def testDefaults():
    """Test default option values."""
    args = cli.getCommandLineParser().parse_args(["%F"])
    assert args.format_string == "%F"
    assert args.time == "0000-01-01 00:00:00:000"
    assert args.minutes_per_hour == 0
    assert args.locale_name is None
    assert args.config_path is None


def testTimeChecker():
    """Test validation of calendar times given on the command line."""
    assert cli.timeChecker(TEST_TIME_STRING) == TEST_TIME
    assert cli.timeChecker("1372-06-01", 30) == Time(1372, 6, 1, minutes_per_hour=30)
    with pytest.raises(ValueError, match="1372/06/01"):
        cli.timeChecker("1372/06/01")


def testRunFabletime(registry: LocaleRegistry):
    """Test formatting a calendar time given in text form."""
    assert runFabletime("%d %B %Y", "1372-06-01") == "01 June 1372"
    assert runFabletime("%H:%M", "1372-06-01 10:15", minutes_per_hour=30) == "10:15"
    # Out of range fields are normalized first
    assert runFabletime("%F", "1372-13-01") == "1373-01-01"
    with pytest.raises(ValueError, match="noon"):
        runFabletime("%F", "noon")


def testRunFabletimeConfig(registry: LocaleRegistry, tmp_path: Path):
    """Test that a config file given to the entry point is loaded before formatting."""
    config_path = tmp_path / "cli.config"
    config_path.write_text("[locale]\nDateFormat = %d.%m.%Y\n", encoding="utf-8")
    assert runFabletime("%x", "1372-06-01", config_path=str(config_path)) == "01.06.1372"


def testMain(
    registry: LocaleRegistry,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture,
):
    """Test the console entry point."""
    monkeypatch.setattr(sys, "argv", ["fabletime", "%A, %Od of %B %Y", "-t", "1372-06-02"])
    main()
    assert capsys.readouterr().out.splitlines()[-1] == "Tuesday, 2nd of June 1372"


def testMainBadTime(registry: LocaleRegistry, monkeypatch: pytest.MonkeyPatch):
    """Test that the console entry point rejects malformed times."""
    monkeypatch.setattr(sys, "argv", ["fabletime", "%F", "-t", "1372/06/01"])
    with pytest.raises(SystemExit) as exit_info:
        main()
    assert exit_info.value.code == 2

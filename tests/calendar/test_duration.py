from __future__ import annotations

# Third Party Imports
import pytest
from numpy import isclose

# fabletime Imports
from fabletime.calendar.constants import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MONTH,
    SECONDS_PER_YEAR,
)
from fabletime.calendar.duration import (
    Duration,
    addTime,
    durationToTime,
    getInterval,
    isAfter,
    isBefore,
    isEqual,
    subtractTime,
    timeToDuration,
)
from fabletime.calendar.timestamp import INVALID_TIME, Time, normalizeTime

# Local Imports
from .. import TEST_TIME

pytestmark = pytest.mark.calendar


def testUnitSizes():
    """Test the fixed ratios between calendar units."""
    assert SECONDS_PER_HOUR == 3600
    assert SECONDS_PER_DAY == 24 * 3600
    assert SECONDS_PER_MONTH == 28 * SECONDS_PER_DAY
    assert SECONDS_PER_YEAR == 12 * SECONDS_PER_MONTH


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [
        (0.0, Time(0, 0, 0, 0, 0, 0, 0, 60)),
        (1.5, Time(0, 0, 0, 0, 0, 1, 500, 60)),
        (90.5, Time(0, 0, 0, 0, 1, 30, 500, 60)),
        (SECONDS_PER_DAY, Time(0, 0, 1, 0, 0, 0, 0, 60)),
        (SECONDS_PER_MONTH + SECONDS_PER_HOUR, Time(0, 1, 0, 1, 0, 0, 0, 60)),
        (SECONDS_PER_YEAR * 3 + 61, Time(3, 0, 0, 0, 1, 1, 0, 60)),
    ],
)
def testDurationToTime(seconds: float, expected: Time):
    """Test decomposing durations into calendar field counts."""
    assert durationToTime(seconds) == expected
    assert durationToTime(-seconds) == expected


@pytest.mark.parametrize("seconds", [0.001, 59.999, 86400.0, 123456.789, SECONDS_PER_YEAR + 0.5])
def testDecomposeRoundTrip(seconds: float):
    """Test that decomposing then recombining a duration keeps its value and sign."""
    for signed in (seconds, -seconds):
        negative, magnitude = Duration(signed).decompose()
        assert negative is (signed < 0)
        assert isclose(timeToDuration(magnitude, negative), signed, rtol=0, atol=1e-6)
        assert isclose(Duration.fromTime(magnitude, negative), signed, rtol=0, atol=1e-6)


def testTimeToDurationShortHours():
    """Test that sub-hour fields are weighted by the time's own ratio."""
    half_hour = Time(0, 0, 0, 0, 15, 0, 0, 30)
    assert timeToDuration(half_hour) == 1800.0
    assert timeToDuration(Time(0, 0, 0, 2, 0, 0, 0, 30)) == 7200.0


def testDuration():
    """Test the signed duration type."""
    span = Duration(-90.5)
    assert span.negative
    assert not Duration(0.0).negative
    assert isinstance(-span, Duration)
    assert -span == 90.5
    assert not (-span).negative
    assert span + 0.5 == -90.0
    assert repr(span) == "Duration(-90.5)"


def testGetInterval():
    """Test the signed span between calendar times."""
    start = Time(1372, 6, 1)
    end = Time(1372, 6, 2)
    assert getInterval(start, end) == SECONDS_PER_DAY
    assert getInterval(end, start) == -SECONDS_PER_DAY
    assert getInterval(end, start).negative
    assert isinstance(getInterval(start, end), Duration)
    assert getInterval(TEST_TIME, TEST_TIME) == 0.0


def testGetIntervalAcrossUnits():
    """Test spans that cross month and year boundaries."""
    assert getInterval(Time(1372, 6, 28), Time(1372, 7, 1)) == SECONDS_PER_DAY
    assert getInterval(Time(1372, 12, 28, 23), Time(1373, 1, 1)) == SECONDS_PER_HOUR
    assert getInterval(Time(1372, 1, 1), Time(1373, 1, 1)) == SECONDS_PER_YEAR


def testGetIntervalUnnormalized():
    """Test that loose fields are normalized before measuring."""
    assert getInterval(Time(1372, 13, 1), Time(1373, 1, 1)) == 0.0
    assert getInterval(Time(1372, 6, 1, 0, 90), Time(1372, 6, 1, 1, 30)) == 0.0


@pytest.mark.parametrize("normalize", [True, False])
def testGetIntervalShortHours(normalize: bool):
    """Test that a sub-hour field counts the same share of an hour at any ratio."""
    start = Time(1372, 1, 1, 0, 0, 0, 0, 30)
    end = Time(1372, 1, 1, 0, 15, 0, 0, 30)
    assert getInterval(start, end, normalize=normalize) == 1800.0

    real = Time(1372, 1, 1, 0, 30, 0, 0, 60)
    assert getInterval(end, real, normalize=normalize) == 0.0


def testComparisons():
    """Test ordering calendar times."""
    earlier = Time(1372, 6, 1, 12)
    later = Time(1372, 6, 1, 12, 0, 0, 1)
    assert isAfter(later, earlier)
    assert not isAfter(earlier, later)
    assert isBefore(earlier, later)
    assert not isBefore(later, earlier)
    assert not isEqual(earlier, later)

    assert isEqual(earlier, earlier)
    assert not isAfter(earlier, earlier)
    assert not isBefore(earlier, earlier)


def testComparisonsAcrossRatios():
    """Test that equal instants compare equal regardless of representation."""
    assert isEqual(Time(1372, 1, 1, 1), Time(1372, 1, 1, 0, 60))
    assert isEqual(Time(1372, 1, 1, 0, 15, 0, 0, 30), Time(1372, 1, 1, 0, 30, 0, 0, 60))
    assert isEqual(Time(1372, 13, 1), Time(1373, 1, 1))


def testComparisonsInvalid():
    """Test that comparisons with the invalid time are always false."""
    for time in (TEST_TIME, INVALID_TIME):
        assert not isAfter(time, INVALID_TIME)
        assert not isBefore(time, INVALID_TIME)
        assert not isEqual(time, INVALID_TIME)
        assert not isAfter(INVALID_TIME, time)
        assert not isBefore(INVALID_TIME, time)
        assert not isEqual(INVALID_TIME, time)


@pytest.mark.parametrize(
    ("time", "seconds", "expected"),
    [
        (Time(1372, 6, 1), 1.0, Time(1372, 6, 1, 0, 0, 1, 0, 60)),
        (Time(1372, 12, 28, 23, 59, 59), 1.0, Time(1373, 1, 1, 0, 0, 0, 0, 60)),
        (Time(1372, 1, 1), -1.0, Time(1371, 12, 28, 23, 59, 59, 0, 60)),
        (Time(1372, 1, 1), 0.25, Time(1372, 1, 1, 0, 0, 0, 250, 60)),
        (Time(1372, 1, 1), SECONDS_PER_MONTH * 12, Time(1373, 1, 1, 0, 0, 0, 0, 60)),
        (Time(1372, 1, 1), -SECONDS_PER_DAY * 1.5, Time(1371, 12, 27, 12, 0, 0, 0, 60)),
    ],
)
def testAddTime(time: Time, seconds: float, expected: Time):
    """Test moving calendar times by signed durations."""
    assert addTime(time, seconds) == expected


def testAddTimeShortHours():
    """Test that sub-hour remainders are scaled to the time's ratio."""
    time = Time(1372, 1, 1, 0, 0, 0, 0, 30)
    assert addTime(time, 1800.0) == Time(1372, 1, 1, 0, 15, 0, 0, 30)
    assert addTime(time, 3600.0) == Time(1372, 1, 1, 1, 0, 0, 0, 30)
    assert addTime(time, 5400.0) == Time(1372, 1, 1, 1, 15, 0, 0, 30)
    assert addTime(time, -1800.0) == Time(1371, 12, 28, 23, 15, 0, 0, 30)


def testAddTimeInvalid():
    """Test that the invalid time cannot be moved, and that leaving the year range fails."""
    assert addTime(INVALID_TIME, 1.0) is INVALID_TIME
    assert addTime(Time(0, 1, 1), -1.0) is INVALID_TIME
    assert addTime(Time(32000, 12, 28, 23, 59, 59), 1.0) is INVALID_TIME


@pytest.mark.parametrize("seconds", [0.001, 1.0, 3599.999, 86400.0, 12345.678, SECONDS_PER_YEAR])
def testAddThenInterval(seconds: float):
    """Test that the interval to a moved time is the duration it was moved by."""
    for signed in (seconds, -seconds):
        moved = addTime(TEST_TIME, signed)
        assert isclose(getInterval(TEST_TIME, moved), signed, rtol=0, atol=1e-6)


@pytest.mark.parametrize("seconds", [0.5, 1.0, 59.9, 3599.999, 12345.678, SECONDS_PER_DAY])
def testAddThenIntervalShortHours(seconds: float):
    """Test that moving a time with short hours is exact to one of its own milliseconds."""
    time = normalizeTime(Time(1372, 6, 1, 14, 3, 20, 500, 7))
    resolution = 60 / 7 / 1000
    for signed in (seconds, -seconds):
        moved = addTime(time, signed)
        assert moved.minutes_per_hour == 7
        assert isclose(getInterval(time, moved), signed, rtol=0, atol=resolution)


def testSubtractTime():
    """Test moving calendar times backwards."""
    assert subtractTime(Time(1372, 1, 2), SECONDS_PER_DAY) == normalizeTime(Time(1372, 1, 1))
    assert subtractTime(TEST_TIME, -1.0) == addTime(TEST_TIME, 1.0)
    assert subtractTime(addTime(TEST_TIME, 4321.5), 4321.5) == TEST_TIME

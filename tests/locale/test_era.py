from __future__ import annotations

# Third Party Imports
import pytest

# fabletime Imports
from fabletime.calendar.timestamp import INVALID_TIME, Time
from fabletime.common.exceptions import LocaleError
from fabletime.locale.era import (
    ERA_YEAR_FORMAT_KEY,
    Era,
    addEra,
    defineEra,
    getEra,
    getEraString,
    getEraYear,
)
from fabletime.locale.locale import Locale

pytestmark = pytest.mark.locale


@pytest.fixture(name="first_age")
def getFirstAge() -> Era:
    """Return an era starting in year one."""
    return defineEra("First Age", Time(1, 1, 1), offset=1)


@pytest.fixture(name="second_age")
def getSecondAge() -> Era:
    """Return an era starting mid-year, with its own templates."""
    return defineEra(
        "Second Age",
        Time(1000, 6, 15, 12),
        formats={"EraDateFormat": "%Ey/%m/%d"},
        year_format="%EC %Ey",
    )


@pytest.fixture(name="locale")
def getEraLocale(first_age: Era, second_age: Era) -> Locale:
    """Return a locale holding both eras, latest first."""
    return Locale.fromDefaults("en").setEras([second_age, first_age])


def testDefineEra():
    """Test that era starts are normalized."""
    era = defineEra("Loose", Time(10, 13, 1))
    assert era.start == Time(11, 1, 1, minutes_per_hour=60)
    assert era.offset == 0
    assert era.year_format == ""
    assert era.formats == {}


def testDefineEraInvalid():
    """Test that eras can't start at an invalid time."""
    with pytest.raises(LocaleError):
        defineEra("Never", INVALID_TIME)
    with pytest.raises(LocaleError):
        defineEra("Before", Time(-10, 1, 1))


def testAddEra(first_age: Era):
    """Test appending an era to a locale copy."""
    locale = Locale.fromDefaults("en")
    changed = addEra(locale, first_age)
    assert changed.eras == (first_age,)
    assert locale.eras == ()


@pytest.mark.parametrize(
    ("time", "expected"),
    [
        (Time(1, 1, 1), "First Age"),
        (Time(1, 1, 1, 0, 0, 0, 1), "First Age"),
        (Time(999, 12, 28), "First Age"),
        (Time(1000, 6, 15, 11, 59, 59, 999), "First Age"),
        (Time(1000, 6, 15, 12), "Second Age"),
        (Time(1372, 6, 1), "Second Age"),
    ],
)
def testGetEra(locale: Locale, time: Time, expected: str):
    """Test that the latest era starting at or before a time is chosen."""
    assert getEra(locale, time).name == expected


def testGetEraNone(locale: Locale):
    """Test times that belong to no era."""
    assert getEra(locale, Time(0, 12, 28)) is None
    assert getEra(locale, INVALID_TIME) is None
    assert getEra(Locale.fromDefaults("en"), Time(1372, 6, 1)) is None


def testGetEraOrder(first_age: Era, second_age: Era):
    """Test that the era list order doesn't matter."""
    forward = Locale.fromDefaults("en").setEras([first_age, second_age])
    backward = Locale.fromDefaults("en").setEras([second_age, first_age])
    for year in (1, 500, 1000, 1372):
        time = Time(year, 12, 1)
        assert getEra(forward, time) == getEra(backward, time)


def testGetEraYear(first_age: Era, second_age: Era):
    """Test counting years from the start of an era."""
    assert getEraYear(first_age, 1) == 1
    assert getEraYear(first_age, 1372) == 1372
    assert getEraYear(second_age, 1000) == 0
    assert getEraYear(second_age, 1372) == 372


def testGetEraString(locale: Locale, first_age: Era, second_age: Era):
    """Test resolving templates from the era, then the locale, then the plain key."""
    # Era override
    assert getEraString(second_age, locale, "EraDateFormat") == "%Ey/%m/%d"
    assert getEraString(second_age, locale, ERA_YEAR_FORMAT_KEY) == "%EC %Ey"
    # Plain locale key
    assert getEraString(first_age, locale, "EraDateFormat") == "%m/%d/%y"
    assert getEraString(None, locale, "EraTimeFormat") == "%H:%M:%S"
    # Locale era key
    changed = locale.setString("EraDateFormat", "%Ey")
    assert getEraString(first_age, changed, "EraDateFormat") == "%Ey"
    assert getEraString(second_age, changed, "EraDateFormat") == "%Ey/%m/%d"
    # Locale era year template only applies to eras without their own
    changed = locale.setString(ERA_YEAR_FORMAT_KEY, "%Ey (%EC)")
    assert getEraString(first_age, locale, ERA_YEAR_FORMAT_KEY) == ""
    assert getEraString(first_age, changed, ERA_YEAR_FORMAT_KEY) == "%Ey (%EC)"
    assert getEraString(second_age, changed, ERA_YEAR_FORMAT_KEY) == "%EC %Ey"
    # Nothing defines it
    assert getEraString(None, locale, "EraMissing") == ""
    assert getEraString(first_age, locale, "Missing") == ""


def testEraDictionary(second_age: Era):
    """Test rebuilding an era from its dictionary form."""
    assert Era.fromDictionary(second_age.makeDictionary()) == second_age


def testEraShortHours():
    """Test that era starts keep their own minutes-per-hour ratio."""
    era = defineEra("Short", Time(10, 1, 1, 0, 15, minutes_per_hour=30))
    assert era.start.minutes_per_hour == 30
    assert Era.fromDictionary(era.makeDictionary()) == era

# tests/test_solar.py

import math
import pytest
from datetime import date

from ganita.core.errors import DateParseError, DomainError, InputValidationError
from ganita.core.types import ObserverData, SunData
from ganita.formulas import solar


# ---------------------------------------------------------------
# Equation of time
# ---------------------------------------------------------------

def test_eot_at_epoch_day():
    # day 81 gives B = 0, so E is the cosine coefficient alone
    assert solar.equation_of_time(date(2023, 3, 22)) == 7.53
    # leap years are not corrected: day 81 is March 21 there
    assert solar.equation_of_time(date(2024, 3, 21)) == 7.53
    assert solar.equation_of_time("2023-03-22") == 7.53


def test_eot_uses_local_calendar_date():
    assert solar.equation_of_time("2023-03-22T23:30:00-05:00") == 7.53


def test_eot_known_values():
    assert solar.equation_of_time(date(2023, 1, 1)) == pytest.approx(3.7054, abs=1e-3)
    # mean minus apparent: strongly negative in early November
    assert solar.equation_of_time(date(2023, 11, 3)) == pytest.approx(-16.381, abs=1e-2)


def test_eot_parse_error():
    with pytest.raises(DateParseError):
        solar.equation_of_time("2023-02-30")


# ---------------------------------------------------------------
# Sunrise
# ---------------------------------------------------------------

EQUINOX = date(2023, 3, 22)  # EoT = 7.53 exactly


def test_sunrise_literal_equator():
    """
    At the equator with zero declination the hour angle is 90°51' in radians,
    and the literal form subtracts it from 12 and adds EoT in minutes.
    """
    obs = ObserverData(latitude=0.0, date=EQUINOX)
    t = solar.sunrise_time(obs, SunData(declination=0.0))
    assert t == pytest.approx(17.9443683746, abs=1e-9)


def test_sunrise_corrected_equator():
    obs = ObserverData(latitude=0.0, date=EQUINOX)
    t = solar.sunrise_time(obs, SunData(declination=0.0), corrected=True)
    # 12 - 90.85/15 h + 7.53/60 h
    assert t == pytest.approx(12.0 - 90.85 / 15.0 + 7.53 / 60.0, abs=1e-9)
    assert t == pytest.approx(6.0688333333, abs=1e-9)


def test_sunrise_literal_grouping_regression():
    lat = math.radians(40.0)
    decl = math.radians(20.0)
    obs = ObserverData(latitude=lat, date=EQUINOX)

    cos_z = math.cos(math.radians(90.85))
    num = cos_z - math.sin(lat) * math.sin(decl)

    literal = solar.sunrise_time(obs, SunData(declination=decl))
    expected = 12.0 - math.acos((num / math.cos(lat)) * math.cos(decl)) + 7.53
    assert literal == pytest.approx(expected, abs=1e-12)

    corrected = solar.sunrise_time(obs, SunData(declination=decl), corrected=True)
    expected_c = 12.0 - math.degrees(math.acos(num / (math.cos(lat) * math.cos(decl)))) / 15.0 + 7.53 / 60.0
    assert corrected == pytest.approx(expected_c, abs=1e-12)

    # 40N in late spring: sunrise well before 6 local mean time
    assert 4.0 < corrected < 5.5


def test_sunrise_accepts_date_string():
    obs = ObserverData(latitude=0.0, date="2023-03-22")
    assert solar.sunrise_time(obs, SunData(0.0)) == pytest.approx(17.9443683746, abs=1e-9)


def test_sunrise_at_pole_is_domain_error():
    obs = ObserverData(latitude=math.pi / 2, date=EQUINOX)
    with pytest.raises(DomainError):
        solar.sunrise_time(obs, SunData(declination=0.1))


@pytest.mark.parametrize("corrected", [False, True])
def test_sunrise_polar_day_is_domain_error(corrected):
    obs = ObserverData(latitude=math.radians(80.0), date=date(2023, 6, 21))
    with pytest.raises(DomainError):
        solar.sunrise_time(obs, SunData(declination=math.radians(23.0)), corrected=corrected)


def test_sunrise_literal_zenith_in_radians():
    # 90°51' converted before the cosine; feeding 90.85 to cos as radians
    # would give 12 - 2.8854 + 7.53 = 16.645 h instead
    obs = ObserverData(latitude=0.0, date=EQUINOX)
    t = solar.sunrise_time(obs, SunData(0.0))
    assert t == pytest.approx(12.0 - math.acos(math.cos(math.radians(90.85))) + 7.53, abs=1e-12)
    assert t != pytest.approx(12.0 - math.acos(math.cos(90.85)) + 7.53, abs=1e-3)


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
@pytest.mark.parametrize("corrected", [False, True])
def test_sunrise_rejects_non_finite_angles(bad, corrected):
    with pytest.raises(InputValidationError):
        solar.sunrise_time(ObserverData(latitude=bad, date=EQUINOX), SunData(0.1), corrected=corrected)
    with pytest.raises(InputValidationError):
        solar.sunrise_time(ObserverData(latitude=0.3, date=EQUINOX), SunData(bad), corrected=corrected)

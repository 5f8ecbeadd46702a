# reference/solar.py

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from typing import Literal

from ..core.angles import wrap_deg, wrap180
from ..core.time import DateLike, date_to_jdn, parse_date
from ..core.types import SunData
from ..formulas.sidereal import centuries_since_j2000


@dataclass(frozen=True)
class SolarMean:
    """Meeus-style geometric mean longitude L0 and mean anomaly M (degrees)."""
    L0_deg: float
    M_deg: float


@dataclass(frozen=True)
class SolarCoordinates:
    """True and apparent solar longitude (degrees) and node of the Moon used for nutation."""
    L_true_deg: float
    L_app_deg: float
    Omega_deg: float


def solar_mean_elements(T: float) -> SolarMean:
    T2 = T * T
    L0 = 280.46646 + 36000.76983 * T + 0.0003032 * T2
    M = 357.52911 + 35999.05029 * T - 0.0001537 * T2
    return SolarMean(L0_deg=wrap_deg(L0), M_deg=wrap_deg(M))


def mean_obliquity_deg(T: float, model: Literal["iau2000", "iau1980"] = "iau2000") -> float:
    """
    Mean obliquity of the ecliptic (degrees).

    - 'iau2000':
        eps = 84381.406" - 46.836769"T - 0.0001831"T^2 + 0.00200340"T^3
              - 0.000000576"T^4 - 0.0000000434"T^5
    - 'iau1980':
        eps = 23°26'21.448" - 46.8150"T - 0.00059"T^2 + 0.001813"T^3
    """
    if model == "iau2000":
        T2 = T * T
        T3 = T2 * T
        T4 = T2 * T2
        T5 = T4 * T
        eps_arcsec = (
            84381.406
            - 46.836769 * T
            - 0.0001831 * T2
            + 0.00200340 * T3
            - 0.000000576 * T4
            - 0.0000000434 * T5
        )
        return eps_arcsec / 3600.0

    if model == "iau1980":
        eps0 = 23.0 + 26.0 / 60.0 + 21.448 / 3600.0
        return eps0 - (46.8150 * T + 0.00059 * (T * T) - 0.001813 * (T * T * T)) / 3600.0

    raise ValueError("model must be one of: iau2000, iau1980")


def solar_longitude(jd: float) -> SolarCoordinates:
    """
    True and apparent solar longitude by the truncated equation of centre
    (accurate to ~0.01 deg). UT is used for TT; ΔT is far below that error.
    """
    T = centuries_since_j2000(jd)
    sm = solar_mean_elements(T)
    M_rad = math.radians(sm.M_deg)

    C_sun = (
        (1.914602 - 0.004817 * T - 0.000014 * T * T) * math.sin(M_rad)
        + (0.019993 - 0.000101 * T) * math.sin(2.0 * M_rad)
        + 0.000289 * math.sin(3.0 * M_rad)
    )
    L_true = wrap_deg(sm.L0_deg + C_sun)

    Omega = wrap_deg(125.04452 - 1934.136261 * T)
    L_app = wrap_deg(L_true - 0.00569 - 0.00478 * math.sin(math.radians(Omega)))

    return SolarCoordinates(L_true_deg=L_true, L_app_deg=L_app, Omega_deg=Omega)


def solar_declination_deg(jd: float, eps_model: Literal["iau2000", "iau1980"] = "iau2000") -> float:
    """Apparent declination of the Sun, obliquity corrected for the leading nutation term."""
    coords = solar_longitude(jd)
    eps = mean_obliquity_deg(centuries_since_j2000(jd), model=eps_model)
    eps_app = eps + 0.00256 * math.cos(math.radians(coords.Omega_deg))

    sin_delta = math.sin(math.radians(eps_app)) * math.sin(math.radians(coords.L_app_deg))
    return math.degrees(math.asin(sin_delta))


def equation_of_time_minutes(jd: float, eps_model: Literal["iau2000", "iau1980"] = "iau2000") -> float:
    """
    Equation of time in minutes, apparent minus mean solar time
    (positive in early November). Note the almanac approximation in
    ganita.formulas.solar has the opposite sign.
    """
    T = centuries_since_j2000(jd)
    sm = solar_mean_elements(T)
    eps_rad = math.radians(mean_obliquity_deg(T, model=eps_model))
    L_app_rad = math.radians(solar_longitude(jd).L_app_deg)

    # Right ascension, atan2 keeps the quadrant
    y = math.cos(eps_rad) * math.sin(L_app_rad)
    x = math.cos(L_app_rad)
    alpha_deg = wrap_deg(math.degrees(math.atan2(y, x)))

    return 4.0 * wrap180(sm.L0_deg - alpha_deg)


def jd_at_noon(d: date) -> float:
    """JD of 12h UT on a civil date."""
    return float(date_to_jdn(d))


def sun_data_for(value: DateLike) -> SunData:
    """Solar declination (radians) at 12h UT of a date, for feeding sunrise_time."""
    jd = jd_at_noon(parse_date(value))
    return SunData(declination=math.radians(solar_declination_deg(jd)))

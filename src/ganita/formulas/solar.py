"""
ganita.formulas.solar
---------------------
Equation of time and sunrise by the almanac approximations.

Both formulas work from the calendar day alone (no Julian centuries, no
ephemeris). The sign convention of `equation_of_time` is mean minus apparent
solar time, so local mean time of an apparent-time event is obtained by
adding it.
"""

from __future__ import annotations

import logging
import math

from ..core.angles import dms_value, require_finite
from ..core.errors import DomainError
from ..core.time import DateLike, day_of_year, parse_date
from ..core.types import ObserverData, SunData
from .constants import EOT_COEFFS, EOT_EPOCH_DAY, SUNRISE_ZENITH

log = logging.getLogger(__name__)

_ZERO_TOL = 1e-12


def equation_of_time(value: DateLike) -> float:
    """
    Equation of time in minutes for a calendar date.

      B = 2π (d − 81) / 365
      E = 7.53 cos B + 1.5 sin B − 9.87 sin 2B

    d is the 1-based day of the year as printed on the date. Leap years are
    not corrected for; the 365-day cycle is part of the approximation.
    """
    d = day_of_year(parse_date(value))
    a, b, c = EOT_COEFFS
    B = 2.0 * math.pi * (d - EOT_EPOCH_DAY) / 365.0
    return a * math.cos(B) + b * math.sin(B) - c * math.sin(2.0 * B)


def _acos_checked(x: float, what: str) -> float:
    if not -1.0 <= x <= 1.0:
        raise DomainError(f"{what}: acos argument {x:.6f} outside [-1, 1] (sun does not rise or set)")
    return math.acos(x)


def sunrise_time(observer: ObserverData, sun: SunData, *, corrected: bool = False) -> float:
    """
    Approximate local sunrise time in decimal hours (not wrapped to [0,24)).

    Literal form (default), grouped exactly as the almanac formula is written:

      H = acos( ((cos z − sin φ sin δ) / cos φ) · cos δ )
      t = 12 − H + E

    with H left in radians and E in minutes. The zenith z = 90°51' is
    converted to radians before the cosine (cos z ≈ -0.0148). The almanac
    source fed the decimal degrees 90.85 straight to cos, reading them as
    radians (cos ≈ -0.967); that variant gives about 16.645 h at the equator
    on day 81 where this one gives 17.944 h.

    Callers that need a clock time should pass corrected=True, which evaluates

      H = acos( (cos z − sin φ sin δ) / (cos φ cos δ) )
      t = 12 − H°/15 + E/60
    """
    lat = require_finite("latitude", observer.latitude)
    decl = require_finite("declination", sun.declination)

    cos_z = math.cos(math.radians(dms_value(SUNRISE_ZENITH)))
    cos_lat = math.cos(lat)
    if abs(cos_lat) < _ZERO_TOL:
        raise DomainError("sunrise undefined at the poles (cos(latitude) = 0)")

    numerator = cos_z - math.sin(lat) * math.sin(decl)

    if corrected:
        denominator = cos_lat * math.cos(decl)
        if abs(denominator) < _ZERO_TOL:
            raise DomainError("sunrise undefined for declination ±90°")
        hour_angle = _acos_checked(numerator / denominator, "sunrise")
    else:
        hour_angle = _acos_checked((numerator / cos_lat) * math.cos(decl), "sunrise")

    eot = equation_of_time(observer.date)

    if corrected:
        t = 12.0 - math.degrees(hour_angle) / 15.0 + eot / 60.0
    else:
        t = 12.0 - hour_angle + eot

    log.debug("sunrise lat=%.6f decl=%.6f H=%.6f eot=%.4f corrected=%s -> %.6f",
              lat, decl, hour_angle, eot, corrected, t)
    return t

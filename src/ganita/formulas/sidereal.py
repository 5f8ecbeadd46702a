"""
ganita.formulas.sidereal
------------------------
Mean sidereal time and the Right Ascension of the Midheaven.

Greenwich mean sidereal time at 0h UT uses the IAU 1982 polynomial in Julian
centuries T from J2000.0; the UT clock time since 0h is then advanced at the
sidereal rate and the observer's longitude added in hours.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..core.angles import deg_to_hours, hours_to_deg, parts_to_units, require_finite, wrap_hours
from ..core.time import DateTimeLike, julian_day_0h, parse_datetime, utc_offset_seconds
from .constants import DAYS_PER_CENTURY, GMST_COEFFS, J2000, SECONDS_PER_DAY, SIDEREAL_RATE

log = logging.getLogger(__name__)


def centuries_since_j2000(jd: float) -> float:
    return (jd - J2000) / DAYS_PER_CENTURY


def greenwich_sidereal_seconds(T: float) -> float:
    """GMST at 0h UT in seconds of time, not reduced modulo one day."""
    c0, c1, c2, c3 = GMST_COEFFS
    return c0 + c1 * T + c2 * T * T + c3 * T * T * T


def local_sidereal_time(dt: Optional[DateTimeLike], longitude: float = 0.0) -> float:
    """
    Local Sidereal Time in hours, in [0, 24).

    `dt` is a timezone-aware datetime (or ISO string with an offset); its
    clock fields are read as local time and shifted to UT by the offset.
    `longitude` is in degrees, positive East.
    """
    dt = parse_datetime(dt)
    longitude = require_finite("longitude", longitude)

    T = centuries_since_j2000(julian_day_0h(dt))
    gst = greenwich_sidereal_seconds(T)
    units = parts_to_units(gst, SECONDS_PER_DAY)

    hour_s0 = units.parts / 3600.0
    hour_lng = deg_to_hours(longitude)
    hour_offset = utc_offset_seconds(dt) / 3600.0
    hour_ut = dt.hour + dt.minute / 60.0 + (dt.second + dt.microsecond / 1e6) / 3600.0 - hour_offset

    raw = hour_s0 + hour_lng + hour_ut * SIDEREAL_RATE
    lst = wrap_hours(raw)

    log.debug("LST %s lon=%.6f: T=%.12f S0=%.6fh UT=%.6fh raw=%.6fh -> %.6fh",
              dt.isoformat(), longitude, T, hour_s0, hour_ut, raw, lst)
    return lst


def ramc(dt: Optional[DateTimeLike], longitude: float = 0.0) -> float:
    """Right Ascension of the Midheaven in degrees (LST × 15)."""
    return hours_to_deg(local_sidereal_time(dt, longitude))

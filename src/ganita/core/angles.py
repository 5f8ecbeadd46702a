from __future__ import annotations

import math
from math import fmod

from .errors import DomainError, InputValidationError
from .types import Dms, PartsUnits


# ------------------------------------------------------------
# Sexagesimal <-> decimal
# ------------------------------------------------------------

def dms_to_decimal(degrees: float, minutes: float = 0.0, seconds: float = 0.0) -> float:
    """
    Convert degrees/minutes/seconds to decimal degrees.

    The sign comes from the first non-zero component, so -0°30' is written
    dms_to_decimal(0, -30). Minutes and seconds must lie in [0, 60) in magnitude.
    """
    for name, v in (("minutes", minutes), ("seconds", seconds)):
        if not 0.0 <= abs(v) < 60.0:
            raise InputValidationError(f"{name} must be in [0, 60), got {v!r}")

    sign = -1.0 if (degrees < 0 or (degrees == 0 and (minutes < 0 or (minutes == 0 and seconds < 0)))) else 1.0
    return sign * (abs(degrees) + abs(minutes) / 60.0 + abs(seconds) / 3600.0)


def dms_value(dms: Dms) -> float:
    return dms_to_decimal(dms.degrees, dms.minutes, dms.seconds)


def decimal_to_dms(value: float) -> Dms:
    """Split decimal degrees into a Dms with integral degrees and minutes."""
    sign = -1.0 if value < 0 else 1.0
    a = abs(value)
    d = math.floor(a)
    m = math.floor((a - d) * 60.0)
    s = (a - d - m / 60.0) * 3600.0
    # carry float noise at the 60" boundary
    if s >= 60.0 - 1e-9:
        s = 0.0
        m += 1
    if m >= 60:
        m = 0
        d += 1

    if d != 0:
        return Dms(sign * d, m, s)
    if m != 0:
        return Dms(0, sign * m, s)
    return Dms(0, 0, sign * s)


# ------------------------------------------------------------
# Modular decomposition
# ------------------------------------------------------------

def parts_to_units(parts: float, unit: float = 30.0) -> PartsUnits:
    """
    Split `parts` into whole `unit`s and the remaining parts.

      units = floor(parts / unit)
      parts = parts - units * unit

    For a positive unit the remainder is always in [0, unit), also for
    negative input (e.g. sidereal seconds before J2000).
    """
    if unit == 0:
        raise DomainError("parts_to_units: unit must be non-zero")
    units = math.floor(parts / unit)
    return PartsUnits(units=int(units), parts=parts - units * unit)


# ------------------------------------------------------------
# Wrapping
# ------------------------------------------------------------

def wrap_deg(x_deg: float) -> float:
    """Wrap degrees to [0,360)."""
    y = fmod(x_deg, 360.0)
    if y < 0:
        y += 360.0
    return y


def wrap_hours(x_hours: float) -> float:
    """Wrap hours to [0,24)."""
    if not math.isfinite(x_hours):
        raise DomainError(f"cannot wrap non-finite hours {x_hours!r}")
    y = fmod(x_hours, 24.0)
    if y < 0:
        y += 24.0
    # fmod of a tiny negative can round back up to 24.0
    return 0.0 if y >= 24.0 else y


def wrap180(deg: float) -> float:
    """Wraps an angle in degrees to the range [-180.0, 180.0)."""
    return (deg + 180.0) % 360.0 - 180.0


def hours_to_deg(hours: float) -> float:
    return hours * 15.0


def deg_to_hours(deg: float) -> float:
    return deg / 15.0


def require_finite(name: str, value: float) -> float:
    """Reject nan and ±inf before they reach a formula."""
    if not math.isfinite(value):
        raise InputValidationError(f"{name} must be finite, got {value!r}")
    return value

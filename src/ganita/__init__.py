"""ganita public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .core.errors import (
    GanitaError,
    InputValidationError,
    DateParseError,
    DomainError,
    EphemerisUnavailableError,
)
from .core.types import Dms, PartsUnits, ObserverData, SunData
from .core.angles import dms_to_decimal, decimal_to_dms, parts_to_units
from .core.time import julian_day
from .formulas.constants import (
    DURATION_PRECESSION,
    DURATION_YEAR_GREGORIAN,
    DURATION_YEAR_JULIAN,
    DURATION_YEAR_SIDEREAL,
    DURATION_MONTH_SIDEREAL,
    DURATION_MONTH_SYNODIC,
)
from .formulas.solar import equation_of_time, sunrise_time
from .formulas.lunar import tithi_by_harvey
from .formulas.zodiac import SIGN_NAMES, zodiac_sign, zodiac_sign_name, precession_speed
from .formulas.sidereal import local_sidereal_time, ramc

__version__ = "0.1.0"

__all__ = [
    "GanitaError",
    "InputValidationError",
    "DateParseError",
    "DomainError",
    "EphemerisUnavailableError",
    "Dms",
    "PartsUnits",
    "ObserverData",
    "SunData",
    "dms_to_decimal",
    "decimal_to_dms",
    "parts_to_units",
    "julian_day",
    "DURATION_PRECESSION",
    "DURATION_YEAR_GREGORIAN",
    "DURATION_YEAR_JULIAN",
    "DURATION_YEAR_SIDEREAL",
    "DURATION_MONTH_SIDEREAL",
    "DURATION_MONTH_SYNODIC",
    "equation_of_time",
    "sunrise_time",
    "tithi_by_harvey",
    "SIGN_NAMES",
    "zodiac_sign",
    "zodiac_sign_name",
    "precession_speed",
    "local_sidereal_time",
    "ramc",
]

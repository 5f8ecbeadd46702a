from __future__ import annotations

import logging
import math
from typing import Dict, Tuple

from ..core.angles import require_finite
from ..core.errors import DomainError
from ..core.time import validate_month_day
from .constants import DURATION_PRECESSION

log = logging.getLogger(__name__)

SIGN_NAMES: Tuple[str, ...] = (
    "Aries", "Taurus", "Gemini", "Cancer", "Leo", "Virgo",
    "Libra", "Scorpio", "Sagittarius", "Capricorn", "Aquarius", "Pisces",
)

# Sign in force on the 1st of each month, January first (1 = Aries).
_SIGNS: Tuple[int, ...] = (10, 11, 12, 1, 2, 3, 4, 5, 6, 7, 8, 9)

# Day of the month on which the Sun enters the next sign.
SIGN_START: Dict[int, int] = {
    1: 21, 2: 20, 3: 21,
    4: 21, 5: 22, 6: 22,
    7: 23, 8: 22, 9: 24,
    10: 24, 11: 23, 12: 23,
}


def zodiac_sign(day: int, month: int) -> int:
    """Western tropical sign index (1 = Aries … 12 = Pisces) for a day of the year."""
    validate_month_day(day, month)
    if day < SIGN_START[month]:
        return _SIGNS[month - 1]
    # December's second sign is January's first (Capricorn)
    return _SIGNS[month % 12]


def zodiac_sign_name(day: int, month: int) -> str:
    return SIGN_NAMES[zodiac_sign(day, month) - 1]


def precession_speed(duration: float = DURATION_PRECESSION) -> float:
    """Angular speed of the precession of the equinoxes in arcseconds per year."""
    duration = require_finite("duration", duration)
    if duration == 0:
        raise DomainError("precession duration must be non-zero")
    arcsec = 360.0 / duration * 3600.0
    if not math.isfinite(arcsec):
        raise DomainError(f"precession speed overflows for duration {duration!r}")
    log.debug("precession_speed(%s) -> %.6f arcsec/yr", duration, arcsec)
    return arcsec

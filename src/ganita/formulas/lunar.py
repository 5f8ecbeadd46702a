from __future__ import annotations

import logging
import math

from ..core.errors import InputValidationError
from ..core.time import validate_month_day

log = logging.getLogger(__name__)


def _round_half_away(x: float) -> int:
    """Round to nearest, ties away from zero (Python's round() ties to even)."""
    return int(math.floor(abs(x) + 0.5)) * (1 if x >= 0 else -1)


def tithi_by_harvey(day: int, month: int, year: int) -> int:
    """
    Tithi (lunar day, 1..30) of a Gregorian date by Harvey's closed formula.

    January and February count as months 13 and 14 of the previous year.
    With e = floor(Y/100):

      e1 = floor(e/3) + floor(e/4) + 6 − e
      n  = round(frac(Y/e) · 209) + M + e1 + D
      tithi = round(frac(n/30) · 30 + 1)

    The result is typically within ±1 of the almanac tithi. Shifted years
    below 100 make e = 0 and are rejected.
    """
    validate_month_day(day, month, year)

    if month <= 2:
        month_h = month + 12
        year_h = year - 1
    else:
        month_h = month
        year_h = year

    eq = math.floor(year_h / 100)
    if eq == 0:
        raise InputValidationError(
            f"Harvey's formula needs a century divisor; year {year} (shifted {year_h}) is out of range"
        )

    eq1 = math.floor(eq / 3) + math.floor(eq / 4) + 6 - eq
    q = year_h / eq
    n = _round_half_away((q - math.floor(q)) * 209) + month_h + eq1 + day

    # n is an integer, so frac(n/30)*30 + 1 is exactly n mod 30 + 1
    tithi = n % 30 + 1

    log.debug("tithi_by_harvey(%d, %d, %d): eq=%d eq1=%d n=%d -> %d", day, month, year, eq, eq1, n, tithi)
    return tithi

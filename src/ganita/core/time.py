from __future__ import annotations

import calendar
import numbers
from datetime import date, datetime
from typing import Optional, Union

from .errors import DateParseError, InputValidationError

DateLike = Union[date, str]
DateTimeLike = Union[datetime, str]

_DAYS_IN_MONTH = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


# ============================================================
# Parsing
# ============================================================

def _iso(s: str) -> str:
    s = s.strip()
    # fromisoformat only learned "Z" in 3.11
    if s.endswith(("Z", "z")):
        s = s[:-1] + "+00:00"
    return s


def parse_date(value: Optional[DateLike]) -> date:
    """
    Resolve a civil date from a date, a datetime (its local date is used)
    or an ISO-8601 string ("2024-03-21", "2024-03-21T06:00:00+05:30").
    """
    if value is None:
        raise InputValidationError("date is required")
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise DateParseError(f"cannot interpret {value!r} as a date")

    s = _iso(value)
    try:
        return date.fromisoformat(s)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(s).date()
    except ValueError as e:
        raise DateParseError(f"malformed date {value!r}") from e


def parse_datetime(value: Optional[DateTimeLike]) -> datetime:
    """
    Resolve a timezone-aware datetime. The UTC offset is part of the input
    for sidereal time, so naive values are rejected rather than guessed.
    """
    if value is None:
        raise InputValidationError("date/time is required")
    if isinstance(value, str):
        try:
            dt = datetime.fromisoformat(_iso(value))
        except ValueError as e:
            raise DateParseError(f"malformed date/time {value!r}") from e
    elif isinstance(value, datetime):
        dt = value
    else:
        raise InputValidationError(f"expected a datetime, got {type(value).__name__}")

    if dt.tzinfo is None or dt.utcoffset() is None:
        raise InputValidationError("date/time must be timezone-aware (carry a UTC offset)")
    return dt


# ============================================================
# Calendar fields
# ============================================================

def require_int(name: str, value) -> int:
    """Calendar fields are whole numbers; bool is rejected although it subclasses int."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InputValidationError(f"{name} must be an integer, got {value!r}")
    return int(value)


def days_in_month(month: int, year: Optional[int] = None) -> int:
    """Month length; February counts 29 days when no year is given."""
    month = require_int("month", month)
    if year is not None:
        year = require_int("year", year)
    if not 1 <= month <= 12:
        raise InputValidationError(f"month must be in [1, 12], got {month!r}")
    if month == 2 and year is not None and not calendar.isleap(year):
        return 28
    return _DAYS_IN_MONTH[month - 1]


def validate_month_day(day: int, month: int, year: Optional[int] = None) -> None:
    day = require_int("day", day)
    n = days_in_month(month, year)
    if not 1 <= day <= n:
        where = f"{month}/{year}" if year is not None else f"month {month}"
        raise InputValidationError(f"day must be in [1, {n}] for {where}, got {day!r}")


def day_of_year(d: date) -> int:
    """1-based day of the year (Jan 1 = 1)."""
    return d.timetuple().tm_yday


# ============================================================
# Julian days
# ============================================================

J2000 = 2451545.0  # JD of 2000-01-01 12:00 UT


def date_to_jdn(d: date) -> int:
    """
    Gregorian date -> JDN (proleptic Gregorian, Fliegel-Van Flandern).
    The JDN labels the day starting at the preceding noon.
    """
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def utc_offset_seconds(dt: datetime) -> float:
    off = dt.utcoffset()
    if off is None:
        raise InputValidationError("date/time must be timezone-aware (carry a UTC offset)")
    return off.total_seconds()


def julian_day(dt: DateTimeLike) -> float:
    """Continuous Julian Day (UTC) of an aware datetime."""
    dt = parse_datetime(dt)
    local_secs = dt.hour * 3600 + dt.minute * 60 + dt.second + dt.microsecond / 1e6
    ut_secs = local_secs - utc_offset_seconds(dt)
    return date_to_jdn(dt.date()) - 0.5 + ut_secs / 86400.0


def julian_day_0h(dt: DateTimeLike) -> float:
    """
    Julian Day at 0h UT of the civil date printed on `dt`.

    Sidereal time is evaluated from this epoch and the time of day is added
    at the sidereal rate, so the date part and the clock part never overlap.
    """
    dt = parse_datetime(dt)
    return date_to_jdn(dt.date()) - 0.5

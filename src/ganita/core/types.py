from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Union

@dataclass(frozen=True)
class Dms:
    """Sexagesimal angle. The sign is carried by the first non-zero field."""
    degrees: float
    minutes: float = 0.0
    seconds: float = 0.0

@dataclass(frozen=True)
class PartsUnits:
    units: int
    parts: float  # remainder in [0, unit) for a positive unit

@dataclass(frozen=True)
class ObserverData:
    latitude: float  # radians, positive North
    date: Union[date, str]  # anything parse_date accepts

@dataclass(frozen=True)
class SunData:
    declination: float  # radians

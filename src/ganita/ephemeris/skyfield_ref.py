#ephemeris/skyfield_ref.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from pathlib import Path
from typing import Optional

from . import require_ephemeris

log = logging.getLogger(__name__)

# Kernel name and download directory, read once at import.
EPHEMERIS_NAME = os.getenv("GANITA_EPHEMERIS", "de421.bsp")
KERNEL_DIR = Path(os.getenv("GANITA_KERNEL_DIR", str(Path.home() / ".skyfield")))


@dataclass
class SkyfieldReference:
    """
    Reference values from skyfield for validating the closed-form formulas.

    Requires optional deps:
      pip install "ganita[ephemeris]"
    The planetary kernel is downloaded on first use of the sunrise methods.
    """
    ts: object
    kernel_dir: Path
    kernel_name: str = EPHEMERIS_NAME
    _eph: object = None

    @classmethod
    def load(cls, kernel_dir: Optional[Path] = None, kernel_name: Optional[str] = None) -> "SkyfieldReference":
        require_ephemeris()
        from skyfield.api import Loader  # type: ignore

        kdir = Path(kernel_dir) if kernel_dir is not None else KERNEL_DIR
        kdir.mkdir(parents=True, exist_ok=True)
        loader = Loader(str(kdir))
        log.debug("skyfield loader at %s", kdir)
        return cls(ts=loader.timescale(), kernel_dir=kdir, kernel_name=kernel_name or EPHEMERIS_NAME)

    @property
    def eph(self):
        if self._eph is None:
            from skyfield.api import Loader  # type: ignore

            log.info("loading ephemeris kernel %s from %s", self.kernel_name, self.kernel_dir)
            self._eph = Loader(str(self.kernel_dir))(self.kernel_name)
        return self._eph

    def gmst_hours(self, dt: datetime) -> float:
        """Greenwich mean sidereal time (hours) at an aware datetime."""
        return float(self.ts.from_datetime(dt).gmst)

    def lst_hours(self, dt: datetime, longitude: float = 0.0) -> float:
        return (self.gmst_hours(dt) + longitude / 15.0) % 24.0

    def sunrise_utc_hours(self, d: date, lat_deg: float, lon_deg: float) -> Optional[float]:
        """
        UTC hours of the first sunrise within the UTC day `d` at the site,
        or None if the sun does not rise that day.
        """
        from skyfield import almanac  # type: ignore
        from skyfield.api import wgs84  # type: ignore

        start = datetime(d.year, d.month, d.day, tzinfo=timezone.utc)
        t0 = self.ts.from_datetime(start)
        t1 = self.ts.from_datetime(start + timedelta(days=1))
        f = almanac.sunrise_sunset(self.eph, wgs84.latlon(lat_deg, lon_deg))
        times, events = almanac.find_discrete(t0, t1, f)

        for t, is_up in zip(times, events):
            if is_up:
                rise = t.utc_datetime()
                return (rise - start).total_seconds() / 3600.0
        return None

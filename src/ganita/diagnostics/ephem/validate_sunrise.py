#!/usr/bin/env python3
from __future__ import annotations

import argparse
import math
from datetime import date, timedelta
from typing import List, Optional

from ganita.core.errors import DomainError
from ganita.core.types import ObserverData
from ganita.formulas.solar import sunrise_time
from ganita.reference.solar import sun_data_for
from ganita.ephemeris.skyfield_ref import SkyfieldReference


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "ganita[diagnostics]"') from e


def _wrap12(h: float) -> float:
    return (h + 12.0) % 24.0 - 12.0


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Compare the literal and corrected almanac sunrise with skyfield's sunrise."
    )
    p.add_argument("--year", type=int, default=2024)
    p.add_argument("--lat", type=float, default=28.6, help="Observer latitude in degrees")
    p.add_argument("--lon", type=float, default=77.2, help="Observer longitude in degrees (positive East)")
    p.add_argument("--step-days", type=int, default=5)
    args = p.parse_args(argv)

    np = _need_numpy()
    sf = SkyfieldReference.load()

    lat_rad = math.radians(args.lat)
    lmt_shift = args.lon / 15.0

    errs = {"literal": [], "corrected": []}
    undefined = {"literal": 0, "corrected": 0}
    no_rise = 0

    d = date(args.year, 1, 1)
    while d.year == args.year:
        rise = sf.sunrise_utc_hours(d, args.lat, args.lon)
        if rise is None:
            no_rise += 1
            d += timedelta(days=args.step_days)
            continue

        obs = ObserverData(latitude=lat_rad, date=d)
        sun = sun_data_for(d)
        for name, corrected in (("literal", False), ("corrected", True)):
            try:
                t_lmt = sunrise_time(obs, sun, corrected=corrected)
            except DomainError:
                undefined[name] += 1
                continue
            errs[name].append(_wrap12(t_lmt - lmt_shift - rise) * 60.0)
        d += timedelta(days=args.step_days)

    print(f"Sunrise at lat={args.lat:+.3f} lon={args.lon:+.3f}, {args.year}, every {args.step_days} days")
    if no_rise:
        print(f"  skyfield: no sunrise on {no_rise} sampled days")
    for name in ("literal", "corrected"):
        e = np.asarray(errs[name])
        if e.size == 0:
            print(f"  {name:<9}: no defined values ({undefined[name]} domain errors)")
            continue
        print(
            f"  {name:<9}: n={e.size:4d}  mean={float(np.mean(e)):+9.2f} min  "
            f"max|e|={float(np.max(np.abs(e))):8.2f} min  domain errors={undefined[name]}"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

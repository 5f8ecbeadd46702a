#!/usr/bin/env python3
from __future__ import annotations

import argparse
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from ganita.formulas.sidereal import local_sidereal_time
from ganita.ephemeris.skyfield_ref import SkyfieldReference


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "ganita[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "ganita[diagnostics]"') from e


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Validate Local Sidereal Time against skyfield GMST.")
    p.add_argument("--year-start", type=int, default=1950)
    p.add_argument("--year-end", type=int, default=2050)
    p.add_argument("--step-days", type=float, default=7.3)
    p.add_argument("--lon", type=float, default=0.0, help="Observer longitude in degrees (positive East)")
    p.add_argument("--out-png", default="")
    args = p.parse_args(argv)

    np = _need_numpy()
    sf = SkyfieldReference.load()

    t = datetime(args.year_start, 1, 1, tzinfo=timezone.utc)
    t_end = datetime(args.year_end, 1, 1, tzinfo=timezone.utc)
    step = timedelta(days=args.step_days)

    years, err_s = [], []
    while t < t_end:
        ours = local_sidereal_time(t, args.lon)
        theirs = sf.lst_hours(t, args.lon)
        # wrap the difference into [-12, 12) hours before converting
        d = (ours - theirs + 12.0) % 24.0 - 12.0
        years.append(t.year + (t.timetuple().tm_yday - 1) / 365.25)
        err_s.append(d * 3600.0)
        t += step

    e = np.asarray(err_s)
    print(f"LST vs skyfield GMST, {args.year_start}..{args.year_end}, {len(e)} samples")
    print(f"  max |error| = {float(np.max(np.abs(e))):.4f} s")
    print(f"  RMS error   = {float(np.sqrt(np.mean(e * e))):.4f} s")

    if args.out_png:
        plt = _need_matplotlib()
        fig, ax = plt.subplots(figsize=(10, 4))
        ax.scatter(years, e, s=2, alpha=0.6, color="tab:blue")
        ax.set_xlabel("Year")
        ax.set_ylabel("LST - skyfield (s)")
        ax.grid(True, alpha=0.3)
        ax.set_title("Local Sidereal Time residuals")
        plt.tight_layout()
        fig.savefig(args.out_png, dpi=200)
        print(f"Saved: {args.out_png}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

#!/usr/bin/env python3
from __future__ import annotations

import argparse
from datetime import date, timedelta
from typing import List, Optional, Tuple

from ganita.formulas.solar import equation_of_time
from ganita.reference import solar as ref


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


def sample_year(year: int) -> Tuple[List[date], List[float], List[float]]:
    """
    Almanac EoT and reference EoT (minutes, same sign convention: mean minus
    apparent) at 12h UT for every day of `year`.
    """
    d = date(year, 1, 1)
    days, approx, reference = [], [], []
    while d.year == year:
        days.append(d)
        approx.append(equation_of_time(d))
        reference.append(-ref.equation_of_time_minutes(ref.jd_at_noon(d)))
        d += timedelta(days=1)
    return days, approx, reference


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Compare the almanac equation of time with the reference solar model.")
    p.add_argument("--year", type=int, default=2000)
    p.add_argument("--out-png", default="", help="Optional plot of both curves and the residual.")
    args = p.parse_args(argv)

    np = _need_numpy()

    days, approx, reference = sample_year(args.year)
    a = np.asarray(approx)
    r = np.asarray(reference)
    err = a - r

    i_max = int(np.argmax(np.abs(err)))
    print(f"Equation of time, {args.year} ({len(days)} days)")
    print(f"  max |error| = {abs(err[i_max]):.3f} min on {days[i_max]}")
    print(f"  RMS error   = {float(np.sqrt(np.mean(err * err))):.3f} min")
    print(f"  mean error  = {float(np.mean(err)):+.3f} min")

    if args.out_png:
        plt = _need_matplotlib()
        x = np.arange(1, len(days) + 1)

        fig, axs = plt.subplots(2, 1, figsize=(10, 7), sharex=True)
        axs[0].plot(x, r, color="0.3", linewidth=1.5, label="reference")
        axs[0].plot(x, a, color="tab:orange", linewidth=1.0, label="almanac")
        axs[0].set_ylabel("EoT (min)")
        axs[0].legend(frameon=False)
        axs[0].grid(True, alpha=0.3)

        axs[1].plot(x, err, color="tab:red", linewidth=1.0)
        axs[1].set_ylabel("almanac - reference (min)")
        axs[1].set_xlabel("Day of year")
        axs[1].grid(True, alpha=0.3)

        plt.suptitle(f"Equation of time {args.year}")
        plt.tight_layout()
        fig.savefig(args.out_png, dpi=200)
        print(f"Saved: {args.out_png}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

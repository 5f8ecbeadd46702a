# design/eot_coeffs.py

from __future__ import annotations

import argparse
import math
from typing import List, Optional, Tuple

from ganita.diagnostics.eot_curve import sample_year
from ganita.formulas.constants import EOT_COEFFS, EOT_EPOCH_DAY


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "ganita[diagnostics]"') from e


def _need_scipy():
    try:
        import scipy.optimize as opt
        return opt
    except ImportError as e:
        raise RuntimeError('Need scipy. Install: pip install "ganita[diagnostics]"') from e


def fit_eot_coeffs(years: List[int], loss: str = "linear") -> Tuple[List[float], float, float]:
    """
    Least-squares fit of (a, b, c) in a cos B + b sin B - c sin 2B against the
    reference model over whole years. Returns (coeffs, rms, max_abs) in minutes.
    """
    np = _need_numpy()
    opt = _need_scipy()

    B, y = [], []
    for year in years:
        days, _, reference = sample_year(year)
        for i, r in enumerate(reference):
            B.append(2.0 * math.pi * (i + 1 - EOT_EPOCH_DAY) / 365.0)
            y.append(r)
    B = np.asarray(B)
    y = np.asarray(y)

    def residual(c):
        return c[0] * np.cos(B) + c[1] * np.sin(B) - c[2] * np.sin(2.0 * B) - y

    res = opt.least_squares(residual, np.asarray(EOT_COEFFS, dtype=float), loss=loss)
    r = residual(res.x)
    return list(res.x), float(np.sqrt(np.mean(r * r))), float(np.max(np.abs(r)))


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Refit the three-term equation of time against the reference solar model.")
    p.add_argument("--year-start", type=int, default=1990)
    p.add_argument("--year-end", type=int, default=2030)
    p.add_argument("--loss", choices=["linear", "soft_l1", "cauchy"], default="linear")
    args = p.parse_args(argv)

    years = list(range(args.year_start, args.year_end + 1))
    coeffs, rms, max_abs = fit_eot_coeffs(years, loss=args.loss)

    print(f"Fit over {years[0]}..{years[-1]} ({args.loss} loss)")
    print(f"  {'term':<8} {'current':>10} {'fitted':>12}")
    for name, cur, new in zip(("cos B", "sin B", "sin 2B"), EOT_COEFFS, coeffs):
        print(f"  {name:<8} {cur:>10.4f} {new:>12.6f}")
    print(f"  RMS residual   = {rms:.4f} min")
    print(f"  max |residual| = {max_abs:.4f} min")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import math
import sys

from ganita.core.errors import GanitaError

log = logging.getLogger("ganita")


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def fmt_hours(h: float) -> str:
    """Fractional hours as [-]HH:MM:SS.ss (no wrapping)."""
    sign = "-" if h < 0 else ""
    h = abs(h)
    h_int = int(h)
    m = (h - h_int) * 60
    m_int = int(m)
    s = (m - m_int) * 60
    return f"{sign}{h_int:02d}:{m_int:02d}:{s:05.2f}"


def cmd_eot(argv: list[str]) -> int:
    from ganita.core.time import day_of_year, parse_date
    from ganita.formulas.solar import equation_of_time

    p = argparse.ArgumentParser(prog="ganita eot", description="Equation of time (almanac approximation).")
    p.add_argument("date", help="YYYY-MM-DD")
    args = p.parse_args(argv)

    d = parse_date(args.date)
    eot = equation_of_time(d)
    print(f"Date: {d.isoformat()}  (day of year {day_of_year(d)})")
    print(f"  EOT (minutes, mean - apparent) = {eot:.4f}")
    return 0


def cmd_sunrise(argv: list[str]) -> int:
    from ganita.core.time import parse_date
    from ganita.core.types import ObserverData, SunData
    from ganita.formulas.solar import sunrise_time
    from ganita.reference.solar import sun_data_for

    p = argparse.ArgumentParser(prog="ganita sunrise", description="Approximate local sunrise time.")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--lat", type=float, required=True, help="Observer latitude in degrees (positive North)")
    p.add_argument("--decl", type=float, default=None,
                   help="Solar declination in degrees (default: reference solar model at 12h UT)")
    p.add_argument("--corrected", action="store_true",
                   help="Evaluate the textbook grouping with hour and minute units converted")
    args = p.parse_args(argv)

    d = parse_date(args.date)
    sun = SunData(declination=math.radians(args.decl)) if args.decl is not None else sun_data_for(d)
    obs = ObserverData(latitude=math.radians(args.lat), date=d)
    t = sunrise_time(obs, sun, corrected=args.corrected)

    print(f"Date: {d.isoformat()}  lat={args.lat:+.4f}  decl={math.degrees(sun.declination):+.4f}")
    print(f"  Form    : {'corrected' if args.corrected else 'literal'}")
    print(f"  Sunrise : {t:.6f} h")
    if args.corrected:
        print(f"  Local mean time: {fmt_hours(t)}")
    return 0


def cmd_tithi(argv: list[str]) -> int:
    from ganita.core.time import parse_date
    from ganita.formulas.lunar import tithi_by_harvey

    p = argparse.ArgumentParser(prog="ganita tithi", description="Tithi by Harvey's formula.")
    p.add_argument("date", help="YYYY-MM-DD")
    args = p.parse_args(argv)

    d = parse_date(args.date)
    print(f"Date: {d.isoformat()}")
    print(f"  Tithi (Harvey) = {tithi_by_harvey(d.day, d.month, d.year)}")
    return 0


def cmd_sign(argv: list[str]) -> int:
    from ganita.core.time import parse_date
    from ganita.formulas.zodiac import SIGN_NAMES, zodiac_sign

    p = argparse.ArgumentParser(prog="ganita sign", description="Western tropical zodiac sign of a date.")
    p.add_argument("date", help="YYYY-MM-DD")
    args = p.parse_args(argv)

    d = parse_date(args.date)
    n = zodiac_sign(d.day, d.month)
    print(f"Date: {d.isoformat()}")
    print(f"  Sign = {n} ({SIGN_NAMES[n - 1]})")
    return 0


def cmd_precession(argv: list[str]) -> int:
    from ganita.formulas.constants import DURATION_PRECESSION
    from ganita.formulas.zodiac import precession_speed

    p = argparse.ArgumentParser(prog="ganita precession", description="Angular speed of the precession of the equinoxes.")
    p.add_argument("--years", type=float, default=DURATION_PRECESSION, help="Precession period in years")
    args = p.parse_args(argv)

    print(f"Period: {args.years:g} years")
    print(f"  Speed = {precession_speed(args.years):.6f} arcsec/yr")
    return 0


def _sidereal_args(prog: str, description: str, argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog=prog, description=description)
    p.add_argument("datetime", help="ISO date/time with UTC offset, e.g. 2000-01-01T12:00:00+00:00")
    p.add_argument("--lon", type=float, default=0.0, help="Observer longitude in degrees (positive East)")
    return p.parse_args(argv)


def cmd_lst(argv: list[str]) -> int:
    from ganita.core.time import julian_day, parse_datetime
    from ganita.formulas.sidereal import local_sidereal_time

    args = _sidereal_args("ganita lst", "Local Sidereal Time.", argv)
    dt = parse_datetime(args.datetime)
    lst = local_sidereal_time(dt, args.lon)

    print(f"Time Input:")
    print(f"  {dt.isoformat()}  (JD_UTC = {julian_day(dt):.6f})")
    print(f"  lon = {args.lon:+.4f}")
    print(f"  LST = {lst:.6f} h  ({fmt_hours(lst)})")
    return 0


def cmd_ramc(argv: list[str]) -> int:
    from ganita.core.angles import decimal_to_dms
    from ganita.core.time import parse_datetime
    from ganita.formulas.sidereal import ramc

    args = _sidereal_args("ganita ramc", "Right Ascension of the Midheaven.", argv)
    dt = parse_datetime(args.datetime)
    value = ramc(dt, args.lon)
    dms = decimal_to_dms(value)

    print(f"Time Input:")
    print(f"  {dt.isoformat()}  lon = {args.lon:+.4f}")
    print(f"  RAMC = {value:.6f} deg  ({dms.degrees:.0f}° {dms.minutes:.0f}' {dms.seconds:.2f}\")")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="ganita", description="Closed-form astronomical formulas for almanac work.")
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = p.add_subparsers(dest="cmd", required=True)

    # formulas
    sub.add_parser("eot", help="Equation of time for a date")
    sub.add_parser("sunrise", help="Approximate sunrise for a date and latitude")
    sub.add_parser("tithi", help="Tithi by Harvey's formula")
    sub.add_parser("sign", help="Western tropical zodiac sign")
    sub.add_parser("precession", help="Precession speed in arcsec/yr")
    sub.add_parser("lst", help="Local Sidereal Time")
    sub.add_parser("ramc", help="Right Ascension of the Midheaven")

    # diagnostics (non-ephem)
    p_diag = sub.add_parser("diag", help="Diagnostics tools (no ephemeris required)")
    p_diag.add_argument("tool", choices=["eot-curve"], help="Which diagnostic to run")

    # ephem diagnostics
    p_ephem = sub.add_parser("ephem", help="Ephemeris-based diagnostics")
    p_ephem.add_argument("tool", choices=["validate-lst", "validate-sunrise"], help="Which ephemeris diagnostic to run")

    # design tools
    sub.add_parser("eot-coeffs", help="Refit the equation of time coefficients.")

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    commands = {
        "eot": cmd_eot,
        "sunrise": cmd_sunrise,
        "tithi": cmd_tithi,
        "sign": cmd_sign,
        "precession": cmd_precession,
        "lst": cmd_lst,
        "ramc": cmd_ramc,
    }

    try:
        if args.cmd in commands:
            return commands[args.cmd](rest)

        if args.cmd == "diag":
            tool_map = {
                "eot-curve": "ganita.diagnostics.eot_curve",
            }
            return _run_module_main(tool_map[args.tool], rest)

        if args.cmd == "ephem":
            tool_map = {
                "validate-lst": "ganita.diagnostics.ephem.validate_lst",
                "validate-sunrise": "ganita.diagnostics.ephem.validate_sunrise",
            }
            return _run_module_main(tool_map[args.tool], rest)

        if args.cmd == "eot-coeffs":
            return _run_module_main("ganita.design.eot_coeffs", rest)
    except GanitaError as e:
        log.debug("command %s failed", args.cmd, exc_info=True)
        print(f"ganita {args.cmd}: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())

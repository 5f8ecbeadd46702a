from __future__ import annotations

from ..core.types import Dms

# Approximate period of the precession of the equinoxes (years).
DURATION_PRECESSION = 25880

# Year lengths (days).
DURATION_YEAR_GREGORIAN = 365.2425
DURATION_YEAR_JULIAN = 365.25
DURATION_YEAR_SIDEREAL = 365.2564

# Month lengths (days).
DURATION_MONTH_SIDEREAL = 27.3216610
DURATION_MONTH_SYNODIC = 29.5305882

J2000 = 2451545.0
DAYS_PER_CENTURY = 36525.0
SECONDS_PER_DAY = 86400.0

# Mean sidereal day per mean solar day.
SIDEREAL_RATE = 1.002737909350795

# GMST at 0h UT, seconds of time (IAU 1982): c0 + c1 T + c2 T^2 + c3 T^3
GMST_COEFFS = (24110.54841, 8640184.812866, 0.093104, -0.0000062)

# Zenith distance of the Sun's centre at apparent rise (refraction plus semi-diameter),
# as used by the almanac sunrise formula.
SUNRISE_ZENITH = Dms(90, 51)

# Day-of-year of the fixed equinox phase used by the EoT approximation.
EOT_EPOCH_DAY = 81
EOT_COEFFS = (7.53, 1.5, 9.87)  # cos B, sin B, sin 2B (minutes)

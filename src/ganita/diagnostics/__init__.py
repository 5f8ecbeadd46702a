"""Diagnostics package.

- diagnostics: light-weight checks against the reference solar model (no ephemeris)
- diagnostics.ephem: optional (requires ephemeris extras, downloads a kernel)
"""

__all__ = ["eot_curve"]

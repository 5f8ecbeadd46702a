class GanitaError(Exception):
    """Base error."""

class InputValidationError(GanitaError, ValueError):
    """Raised when a calendar field or argument is outside its valid range."""

class DateParseError(InputValidationError):
    """Raised when a date/time string cannot be parsed."""

class DomainError(GanitaError, ArithmeticError):
    """Raised when a formula leaves its numeric domain (acos argument, zero divisor)."""

class EphemerisUnavailableError(GanitaError):
    """Raised when the optional ephemeris backend is not installed."""

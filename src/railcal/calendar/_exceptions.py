class CalendarError(Exception):
    """Base exception for all railway calendar errors."""


class InvalidInputError(CalendarError, TypeError):
    """Raised when a date, year, week or period argument has the wrong type."""


class CalendarInvariantError(CalendarError, AssertionError):
    """Raised when the date arithmetic produces an impossible result."""

class CalendarError(Exception):
    """Base error."""

class InvalidMonthIndexError(CalendarError, ValueError):
    """Raised when a month number falls outside 1..12."""

class InvalidWeekdayIndexError(CalendarError, ValueError):
    """Raised when a weekday index falls outside 0..6 (0 = Sunday)."""

class SpecError(CalendarError, ValueError):
    """Raised when an engine spec (table, epoch, config file) is malformed."""

"""calhijri public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    hijri_to_gregorian,
    gregorian_to_hijri,
    to_gregorian,
    to_hijri,
    convert,
    today,
    is_valid_hijri_date,
    is_valid_gregorian_date,
    month_length,
    days_in_gregorian_month,
    is_gregorian_leap_year,
    year_length,
    generate_calendar_month,
    new_year_day,
    age,
    hijri_month_name,
    gregorian_month_name,
    weekday_name,
    list_engines,
    engine_info,
    make_engine,
    register_engine,
)
from .core.errors import CalendarError, InvalidMonthIndexError, InvalidWeekdayIndexError, SpecError
from .core.types import Age, CalendarDay, CalendarMonth, GregorianDate, HijriCalendarSpec, HijriDate

__all__ = [
    "hijri_to_gregorian",
    "gregorian_to_hijri",
    "to_gregorian",
    "to_hijri",
    "convert",
    "today",
    "is_valid_hijri_date",
    "is_valid_gregorian_date",
    "month_length",
    "days_in_gregorian_month",
    "is_gregorian_leap_year",
    "year_length",
    "generate_calendar_month",
    "new_year_day",
    "age",
    "hijri_month_name",
    "gregorian_month_name",
    "weekday_name",
    "list_engines",
    "engine_info",
    "make_engine",
    "register_engine",
    "CalendarError",
    "InvalidMonthIndexError",
    "InvalidWeekdayIndexError",
    "SpecError",
    "Age",
    "CalendarDay",
    "CalendarMonth",
    "GregorianDate",
    "HijriCalendarSpec",
    "HijriDate",
]

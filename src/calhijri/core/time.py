from __future__ import annotations
from datetime import date
from typing import Tuple

from .errors import InvalidMonthIndexError

GREGORIAN_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def ymd_to_jdn(year: int, month: int, day: int) -> int:
    """
    Proleptic Gregorian (year, month, day) -> Julian Day Number.

    The formula is linear in `day` and wraps `month` through March-based years,
    so day 32 or month 13 simply continue into the following month/year.
    """
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def jdn_to_ymd(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of ymd_to_jdn."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    return ymd_to_jdn(d.year, d.month, d.day)


def from_jdn(jdn: int) -> date:
    return date(*jdn_to_ymd(jdn))


def weekday_from_jdn(jdn: int) -> int:
    # JDN 0 is a Monday; shift so that 0 = Sunday.
    return (jdn + 1) % 7


def is_gregorian_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_gregorian_month(month: int, year: int) -> int:
    if not 1 <= month <= 12:
        raise InvalidMonthIndexError(f"Gregorian month must be in 1..12, got {month}")
    if month == 2 and is_gregorian_leap_year(year):
        return 29
    return GREGORIAN_MONTH_LENGTHS[month - 1]


def is_valid_gregorian_date(day: int, month: int, year: int) -> bool:
    if year <= 0 or not 1 <= month <= 12:
        return False
    return 1 <= day <= days_in_gregorian_month(month, year)

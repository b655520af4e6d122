"""
calhijri.engines.tabular
------------------------
Table-driven Hijri engine. Every Hijri year has the same month layout, given by
the spec's month-length table, and all conversions are plain day counts from a
single (Hijri, Gregorian) epoch pair.

Coordinates:
    Hijri ordinal    days elapsed since 1 Muharram of year 1 under the table.
    Gregorian JDN    Julian Day Number, see calhijri.core.time.
Both are integer day counters, so the epoch pair fixes the affine map between them.
"""

from __future__ import annotations

import logging
from datetime import date
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from calhijri.core.errors import CalendarError, InvalidMonthIndexError, SpecError
from calhijri.core.time import (
    days_in_gregorian_month,
    jdn_to_ymd,
    to_jdn,
    weekday_from_jdn,
    ymd_to_jdn,
)
from calhijri.core.types import (
    Age,
    CalendarDay,
    CalendarMonth,
    GregorianDate,
    HijriCalendarSpec,
    HijriDate,
)
from calhijri.engines import names

logger = logging.getLogger(__name__)


class TabularHijriEngine:
    """
    Converts between table Hijri dates and proleptic Gregorian dates.
    Holds nothing but the immutable spec and values derived from it.
    """
    def __init__(self, spec: HijriCalendarSpec):
        if spec.locale not in names.LOCALES:
            raise SpecError(f"Unknown locale '{spec.locale}'. Available: {sorted(names.LOCALES)}")

        self.spec = spec
        self.id = spec.id
        self.month_lengths: Mapping[int, int] = MappingProxyType(
            {m: n for m, n in enumerate(spec.month_lengths, start=1)}
        )
        self.year_length = spec.year_length

        # Days of the year elapsed before month m (index m - 1)
        starts: List[int] = []
        acc = 0
        for n in spec.month_lengths:
            starts.append(acc)
            acc += n
        self._month_starts: Tuple[int, ...] = tuple(starts)

        e = spec.epoch_hijri
        self.epoch_ordinal = self._hijri_ordinal(e.day, e.month, e.year)
        self.epoch_jdn = to_jdn(spec.epoch_gregorian)
        self.epoch_weekday = weekday_from_jdn(self.epoch_jdn)

        logger.debug(
            "Built engine %s: year_length=%d, epoch %d-%02d-%02d AH = %s",
            spec.id.name, self.year_length, e.year, e.month, e.day, spec.epoch_gregorian.isoformat(),
        )

    # ---------------------------------------------------------
    # Hijri ordinal arithmetic
    # ---------------------------------------------------------

    def _hijri_ordinal(self, day: int, month: int, year: int) -> int:
        # Month outside 1..12 carries whole years; day is a raw offset.
        carry, m0 = divmod(month - 1, 12)
        return (year + carry - 1) * self.year_length + self._month_starts[m0] + (day - 1)

    def _hijri_from_ordinal(self, ordinal: int) -> HijriDate:
        elapsed_years, rem = divmod(ordinal, self.year_length)
        year = elapsed_years + 1
        for month, n in self.month_lengths.items():
            if rem < n:
                return HijriDate(day=rem + 1, month=month, year=year)
            rem -= n
        raise AssertionError("remainder exceeds year length")

    # ---------------------------------------------------------
    # Conversions
    # ---------------------------------------------------------

    def hijri_to_gregorian(self, day: int, month: int, year: int) -> GregorianDate:
        """
        Best-effort: an out-of-range day bleeds into the following months, it is
        not rejected. Use is_valid_hijri_date first when the input is untrusted.
        """
        elapsed = self._hijri_ordinal(day, month, year) - self.epoch_ordinal
        gy, gm, gd = jdn_to_ymd(self.epoch_jdn + elapsed)
        return GregorianDate(day=gd, month=gm, year=gy, weekday=(self.epoch_weekday + elapsed) % 7)

    def gregorian_to_hijri(self, day: int, month: int, year: int) -> HijriDate:
        elapsed = ymd_to_jdn(year, month, day) - self.epoch_jdn
        return self._hijri_from_ordinal(self.epoch_ordinal + elapsed)

    def gregorian_date(self, day: int, month: int, year: int) -> GregorianDate:
        jdn = ymd_to_jdn(year, month, day)
        gy, gm, gd = jdn_to_ymd(jdn)
        return GregorianDate(day=gd, month=gm, year=gy, weekday=weekday_from_jdn(jdn))

    def new_year_day(self, year: int) -> GregorianDate:
        return self.hijri_to_gregorian(1, 1, year)

    # ---------------------------------------------------------
    # Validation and table access
    # ---------------------------------------------------------

    def month_length(self, month: int) -> int:
        if month not in self.month_lengths:
            raise InvalidMonthIndexError(f"Hijri month must be in 1..12, got {month}")
        return self.month_lengths[month]

    def is_valid_hijri_date(self, day: int, month: int, year: int) -> bool:
        n = self.month_lengths.get(month)
        if n is None:
            return False
        return year > 0 and 1 <= day <= n

    # ---------------------------------------------------------
    # Labelled records
    # ---------------------------------------------------------

    def _locale(self, locale: Optional[str]) -> str:
        return self.spec.locale if locale is None else locale

    def _day_record(self, h: HijriDate, g: GregorianDate, locale: str) -> CalendarDay:
        return CalendarDay(
            hijri=h,
            gregorian=g,
            hijri_month_name=names.hijri_month_name(h.month, locale),
            gregorian_month_name=names.gregorian_month_name(g.month, locale),
            weekday_name=names.weekday_name(g.weekday, locale),
        )

    def convert(
        self,
        day: int,
        month: int,
        year: int,
        *,
        from_hijri: bool = False,
        locale: Optional[str] = None,
    ) -> CalendarDay:
        loc = self._locale(locale)
        if from_hijri:
            # Out-of-range day/month is normalised the same way the Gregorian side is
            h = self._hijri_from_ordinal(self._hijri_ordinal(day, month, year))
            g = self.hijri_to_gregorian(day, month, year)
        else:
            g = self.gregorian_date(day, month, year)
            h = self.gregorian_to_hijri(day, month, year)
        return self._day_record(h, g, loc)

    def today(self, clock: Optional[date] = None, *, locale: Optional[str] = None) -> CalendarDay:
        d = date.today() if clock is None else clock
        return self.convert(d.day, d.month, d.year, locale=locale)

    def generate_calendar_month(
        self,
        year: int,
        month: int,
        is_hijri: bool,
        *,
        locale: Optional[str] = None,
    ) -> CalendarMonth:
        loc = self._locale(locale)
        n_days = self.month_length(month) if is_hijri else days_in_gregorian_month(month, year)

        dates: List[CalendarDay] = []
        span: List[Tuple[int, int]] = []
        for d in range(1, n_days + 1):
            if is_hijri:
                h = HijriDate(day=d, month=month, year=year)
                g = self.hijri_to_gregorian(d, month, year)
                other = (g.year, g.month)
            else:
                g = self.gregorian_date(d, month, year)
                h = self.gregorian_to_hijri(d, month, year)
                other = (h.year, h.month)
            if not span or span[-1] != other:
                span.append(other)
            dates.append(self._day_record(h, g, loc))

        first = dates[0]
        if is_hijri:
            hy, hm = year, month
            gy, gm = first.gregorian.year, first.gregorian.month
        else:
            hy, hm = first.hijri.year, first.hijri.month
            gy, gm = year, month

        return CalendarMonth(
            is_hijri=is_hijri,
            hijri_year=hy,
            hijri_month=hm,
            gregorian_year=gy,
            gregorian_month=gm,
            hijri_month_name=names.hijri_month_name(hm, loc),
            gregorian_month_name=names.gregorian_month_name(gm, loc),
            dates=tuple(dates),
            span=tuple(span),
        )

    def age(self, birth: date, on: date) -> Age:
        if birth > on:
            raise CalendarError(f"birth date {birth} is after {on}")

        g_years = on.year - birth.year
        g_months = on.month - birth.month
        g_days = on.day - birth.day
        # Borrow whole months backwards from `on` until the day count is non-negative
        prev_m, prev_y = on.month, on.year
        while g_days < 0:
            g_months -= 1
            prev_m, prev_y = (prev_m - 1, prev_y) if prev_m > 1 else (12, prev_y - 1)
            g_days += days_in_gregorian_month(prev_m, prev_y)
        while g_months < 0:
            g_years -= 1
            g_months += 12

        hb = self.gregorian_to_hijri(birth.day, birth.month, birth.year)
        hn = self.gregorian_to_hijri(on.day, on.month, on.year)
        h_years = hn.year - hb.year
        h_months = hn.month - hb.month
        h_days = hn.day - hb.day
        if h_days < 0:
            h_months -= 1
            h_days += self.month_length(hn.month - 1 if hn.month > 1 else 12)
        if h_months < 0:
            h_years -= 1
            h_months += 12

        return Age(
            gregorian_years=g_years,
            gregorian_months=g_months,
            gregorian_days=g_days,
            hijri_years=h_years,
            hijri_months=h_months,
            hijri_days=h_days,
        )

    # ---------------------------------------------------------
    # High-Level API Methods (Required by CLI / api.py)
    # ---------------------------------------------------------

    def info(self) -> Dict[str, Any]:
        return {
            "id": self.id.__dict__,
            "month_lengths": list(self.spec.month_lengths),
            "year_length": self.year_length,
            "epoch_hijri": self.spec.epoch_hijri.as_dict(),
            "epoch_gregorian": self.spec.epoch_gregorian.isoformat(),
            "locale": self.spec.locale,
            "meta": dict(self.spec.meta),
        }

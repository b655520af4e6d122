from __future__ import annotations
from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Dict, Literal, Tuple

from .errors import SpecError

@dataclass(frozen=True)
class EngineId:
    family: Literal["table", "custom"]
    name: str
    version: str

@dataclass(frozen=True)
class HijriDate:
    day: int
    month: int
    year: int

    def as_dict(self) -> Dict[str, int]:
        return {"day": self.day, "month": self.month, "year": self.year}

@dataclass(frozen=True)
class GregorianDate:
    day: int
    month: int
    year: int
    weekday: int  # 0=Sun..6=Sat

    def as_dict(self) -> Dict[str, int]:
        return {"day": self.day, "month": self.month, "year": self.year, "weekDay": self.weekday}

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

@dataclass(frozen=True)
class CalendarDay:
    """One civil day in both calendars, with localized labels."""
    hijri: HijriDate
    gregorian: GregorianDate
    hijri_month_name: str
    gregorian_month_name: str
    weekday_name: str

    @property
    def weekday(self) -> int:
        return self.gregorian.weekday

    def as_dict(self) -> Dict[str, Any]:
        return {
            "hijriDay": self.hijri.day,
            "hijriMonth": self.hijri.month,
            "hijriYear": self.hijri.year,
            "gregorianDay": self.gregorian.day,
            "gregorianMonth": self.gregorian.month,
            "gregorianYear": self.gregorian.year,
            "hijriMonthName": self.hijri_month_name,
            "gregorianMonthName": self.gregorian_month_name,
            "weekDay": self.weekday,
            "weekDayName": self.weekday_name,
        }

@dataclass(frozen=True)
class CalendarMonth:
    """
    A generated month. The opposite-calendar summary fields are taken from the
    first day; `span` lists every opposite-calendar (year, month) the days touch.
    """
    is_hijri: bool
    hijri_year: int
    hijri_month: int
    gregorian_year: int
    gregorian_month: int
    hijri_month_name: str
    gregorian_month_name: str
    dates: Tuple[CalendarDay, ...]
    span: Tuple[Tuple[int, int], ...]

    def __len__(self) -> int:
        return len(self.dates)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "hijriYear": self.hijri_year,
            "hijriMonth": self.hijri_month,
            "gregorianYear": self.gregorian_year,
            "gregorianMonth": self.gregorian_month,
            "dates": [d.as_dict() for d in self.dates],
            "hijriMonthName": self.hijri_month_name,
            "gregorianMonthName": self.gregorian_month_name,
            "span": [list(p) for p in self.span],
        }

@dataclass(frozen=True)
class Age:
    gregorian_years: int
    gregorian_months: int
    gregorian_days: int
    hijri_years: int
    hijri_months: int
    hijri_days: int

    def as_dict(self) -> Dict[str, int]:
        return {
            "gregorianYears": self.gregorian_years,
            "gregorianMonths": self.gregorian_months,
            "gregorianDays": self.gregorian_days,
            "hijriYears": self.hijri_years,
            "hijriMonths": self.hijri_months,
            "hijriDays": self.hijri_days,
        }

@dataclass(frozen=True)
class HijriCalendarSpec:
    """Pure data payload for constructing a table-driven Hijri engine."""
    id: EngineId
    month_lengths: Tuple[int, ...]
    epoch_hijri: HijriDate
    epoch_gregorian: date
    locale: str = "ar"
    meta: Tuple[Tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        lengths = tuple(self.month_lengths)
        if len(lengths) != 12:
            raise SpecError(f"month_lengths must have 12 entries, got {len(lengths)}")
        if any(n not in (29, 30) for n in lengths):
            raise SpecError(f"month_lengths entries must be 29 or 30, got {lengths}")
        object.__setattr__(self, "month_lengths", lengths)

        e = self.epoch_hijri
        if e.year <= 0 or not (1 <= e.month <= 12) or not (1 <= e.day <= lengths[e.month - 1]):
            raise SpecError(f"epoch_hijri {e} is not a valid date under the month table")

    @property
    def year_length(self) -> int:
        return sum(self.month_lengths)

    def tweak(self, **kwargs) -> "HijriCalendarSpec":
        return replace(self, **kwargs)

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

from .core.engine import CalendarEngine, EngineRegistry
from .core.errors import CalendarError
from .core.types import Age, CalendarDay, CalendarMonth, GregorianDate, HijriCalendarSpec, HijriDate
from .core import time as _time
from .engines import names as _names
from .engines.factory import make_engine as _make_engine
from .engines.specs import DEFAULT_ENGINE

_registry: Optional[EngineRegistry] = None

def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> EngineRegistry:
    if _registry is None:
        raise RuntimeError("Engine registry not initialized")
    return _registry

def list_engines() -> List[str]:
    return _reg().list()

def engine_info(engine: str = DEFAULT_ENGINE) -> Dict[str, Any]:
    return _reg().get(engine).info()

def make_engine(spec: HijriCalendarSpec) -> CalendarEngine:
    return _make_engine(spec)

def register_engine(name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)

# ============================================================
# Conversions
# ============================================================

def hijri_to_gregorian(day: int, month: int, year: int, *, engine: str = DEFAULT_ENGINE) -> GregorianDate:
    return _reg().get(engine).hijri_to_gregorian(day, month, year)

def gregorian_to_hijri(day: int, month: int, year: int, *, engine: str = DEFAULT_ENGINE) -> HijriDate:
    return _reg().get(engine).gregorian_to_hijri(day, month, year)

def to_gregorian(h: HijriDate, *, engine: str = DEFAULT_ENGINE) -> date:
    return hijri_to_gregorian(h.day, h.month, h.year, engine=engine).to_date()

def to_hijri(d: date, *, engine: str = DEFAULT_ENGINE) -> HijriDate:
    return gregorian_to_hijri(d.day, d.month, d.year, engine=engine)

def convert(
    day: int,
    month: int,
    year: int,
    *,
    from_calendar: str = "gregorian",
    engine: str = DEFAULT_ENGINE,
    locale: Optional[str] = None,
) -> CalendarDay:
    if from_calendar not in ("hijri", "gregorian"):
        raise CalendarError(f"from_calendar must be 'hijri' or 'gregorian', got '{from_calendar}'")
    return _reg().get(engine).convert(day, month, year, from_hijri=(from_calendar == "hijri"), locale=locale)

def today(clock: Optional[date] = None, *, engine: str = DEFAULT_ENGINE, locale: Optional[str] = None) -> CalendarDay:
    return _reg().get(engine).today(clock, locale=locale)

# ============================================================
# Validation
# ============================================================

def is_valid_hijri_date(day: int, month: int, year: int, *, engine: str = DEFAULT_ENGINE) -> bool:
    return _reg().get(engine).is_valid_hijri_date(day, month, year)

def is_valid_gregorian_date(day: int, month: int, year: int) -> bool:
    return _time.is_valid_gregorian_date(day, month, year)

def month_length(month: int, *, engine: str = DEFAULT_ENGINE) -> int:
    return _reg().get(engine).month_length(month)

def days_in_gregorian_month(month: int, year: int) -> int:
    return _time.days_in_gregorian_month(month, year)

def is_gregorian_leap_year(year: int) -> bool:
    return _time.is_gregorian_leap_year(year)

def year_length(*, engine: str = DEFAULT_ENGINE) -> int:
    return _reg().get(engine).year_length

# ============================================================
# Month-level API
# ============================================================

def generate_calendar_month(
    year: int,
    month: int,
    is_hijri: bool,
    *,
    engine: str = DEFAULT_ENGINE,
    locale: Optional[str] = None,
) -> CalendarMonth:
    return _reg().get(engine).generate_calendar_month(year, month, is_hijri, locale=locale)

def new_year_day(year: int, *, engine: str = DEFAULT_ENGINE) -> GregorianDate:
    """Gregorian date of 1 Muharram of the given Hijri year."""
    return _reg().get(engine).new_year_day(year)

def age(birth: date, on: Optional[date] = None, *, engine: str = DEFAULT_ENGINE) -> Age:
    return _reg().get(engine).age(birth, date.today() if on is None else on)

# ============================================================
# Names
# ============================================================

def hijri_month_name(month: int, locale: str = "ar") -> str:
    return _names.hijri_month_name(month, locale)

def gregorian_month_name(month: int, locale: str = "ar") -> str:
    return _names.gregorian_month_name(month, locale)

def weekday_name(weekday: int, locale: str = "ar") -> str:
    return _names.weekday_name(weekday, locale)

from __future__ import annotations
from dataclasses import dataclass
from datetime import date
import logging
from typing import Any, Dict, List, Optional, Protocol

from .types import Age, CalendarDay, CalendarMonth, GregorianDate, HijriDate

logger = logging.getLogger(__name__)

class CalendarEngine(Protocol):
    def info(self) -> Dict[str, Any]: ...
    def hijri_to_gregorian(self, day: int, month: int, year: int) -> GregorianDate: ...
    def gregorian_to_hijri(self, day: int, month: int, year: int) -> HijriDate: ...
    def is_valid_hijri_date(self, day: int, month: int, year: int) -> bool: ...
    def month_length(self, month: int) -> int: ...
    def generate_calendar_month(
        self, year: int, month: int, is_hijri: bool, *, locale: Optional[str] = None
    ) -> CalendarMonth: ...
    def convert(
        self, day: int, month: int, year: int, *, from_hijri: bool = False, locale: Optional[str] = None
    ) -> CalendarDay: ...
    def today(self, clock: Optional[date] = None, *, locale: Optional[str] = None) -> CalendarDay: ...
    def age(self, birth: date, on: date) -> Age: ...

@dataclass
class EngineRegistry:
    _engines: Dict[str, CalendarEngine]

    def get(self, name: str) -> CalendarEngine:
        if name not in self._engines:
            raise KeyError(f"Unknown engine '{name}'. Available: {sorted(self._engines)}")
        return self._engines[name]

    def list(self) -> List[str]:
        return sorted(self._engines.keys())

    def register(self, name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._engines):
            raise KeyError(f"Engine '{name}' already exists. Use overwrite=True to replace.")
        self._engines[name] = engine
        logger.debug("Registered engine %s (overwrite=%s)", name, overwrite)

"""
calhijri.engines.names
----------------------
Localized month and weekday names. Months are 1-based, weekdays 0-based with
Sunday = 0. Lookups never default: a bad index raises.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from calhijri.core.errors import CalendarError, InvalidMonthIndexError, InvalidWeekdayIndexError


@dataclass(frozen=True)
class NameTable:
    hijri_months: Tuple[str, ...]
    gregorian_months: Tuple[str, ...]
    weekdays: Tuple[str, ...]

    def __post_init__(self) -> None:
        if len(self.hijri_months) != 12 or len(self.gregorian_months) != 12 or len(self.weekdays) != 7:
            raise ValueError("NameTable needs 12 Hijri months, 12 Gregorian months and 7 weekdays")


ARABIC = NameTable(
    hijri_months=(
        "محرم", "صفر", "ربيع الأول", "ربيع الآخر", "جمادى الأولى", "جمادى الآخرة",
        "رجب", "شعبان", "رمضان", "شوال", "ذو القعدة", "ذو الحجة",
    ),
    gregorian_months=(
        "يناير", "فبراير", "مارس", "أبريل", "مايو", "يونيو",
        "يوليو", "أغسطس", "سبتمبر", "أكتوبر", "نوفمبر", "ديسمبر",
    ),
    weekdays=("الأحد", "الاثنين", "الثلاثاء", "الأربعاء", "الخميس", "الجمعة", "السبت"),
)

ENGLISH = NameTable(
    hijri_months=(
        "Muharram", "Safar", "Rabi al-Awwal", "Rabi al-Thani", "Jumada al-Ula", "Jumada al-Akhirah",
        "Rajab", "Sha'ban", "Ramadan", "Shawwal", "Dhu al-Qa'dah", "Dhu al-Hijjah",
    ),
    gregorian_months=(
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    weekdays=("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"),
)

LOCALES: Mapping[str, NameTable] = MappingProxyType({"ar": ARABIC, "en": ENGLISH})


def _table(locale: str) -> NameTable:
    if locale not in LOCALES:
        raise CalendarError(f"Unknown locale '{locale}'. Available: {sorted(LOCALES)}")
    return LOCALES[locale]


def _month(names: Tuple[str, ...], month: int, kind: str) -> str:
    if not 1 <= month <= 12:
        raise InvalidMonthIndexError(f"{kind} month must be in 1..12, got {month}")
    return names[month - 1]


def hijri_month_name(month: int, locale: str = "ar") -> str:
    return _month(_table(locale).hijri_months, month, "Hijri")


def gregorian_month_name(month: int, locale: str = "ar") -> str:
    return _month(_table(locale).gregorian_months, month, "Gregorian")


def weekday_name(weekday: int, locale: str = "ar") -> str:
    if not 0 <= weekday <= 6:
        raise InvalidWeekdayIndexError(f"weekday must be in 0..6 (0=Sunday), got {weekday}")
    return _table(locale).weekdays[weekday]

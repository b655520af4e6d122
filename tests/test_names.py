# tests/test_names.py

import pytest

import calhijri
from calhijri import CalendarError, InvalidMonthIndexError, InvalidWeekdayIndexError


def test_arabic_names():
    assert calhijri.hijri_month_name(1) == "محرم"
    assert calhijri.hijri_month_name(9) == "رمضان"
    assert calhijri.gregorian_month_name(7) == "يوليو"
    assert calhijri.weekday_name(0) == "الأحد"
    assert calhijri.weekday_name(5) == "الجمعة"


def test_english_names():
    assert calhijri.hijri_month_name(12, "en") == "Dhu al-Hijjah"
    assert calhijri.gregorian_month_name(2, "en") == "February"
    assert calhijri.weekday_name(6, "en") == "Saturday"


@pytest.mark.parametrize("locale", ["ar", "en"])
def test_lookups_are_idempotent(locale):
    for m in range(1, 13):
        assert calhijri.hijri_month_name(m, locale) == calhijri.hijri_month_name(m, locale)
        assert calhijri.gregorian_month_name(m, locale) == calhijri.gregorian_month_name(m, locale)
    for w in range(7):
        assert calhijri.weekday_name(w, locale) == calhijri.weekday_name(w, locale)
    assert len({calhijri.hijri_month_name(m, locale) for m in range(1, 13)}) == 12


@pytest.mark.parametrize("month", [0, 13, -1])
def test_month_out_of_range_always_fails(month):
    for _ in range(3):
        with pytest.raises(InvalidMonthIndexError):
            calhijri.hijri_month_name(month)
        with pytest.raises(InvalidMonthIndexError):
            calhijri.gregorian_month_name(month)


@pytest.mark.parametrize("weekday", [-1, 7])
def test_weekday_out_of_range_always_fails(weekday):
    for _ in range(3):
        with pytest.raises(InvalidWeekdayIndexError):
            calhijri.weekday_name(weekday)


def test_unknown_locale():
    with pytest.raises(CalendarError):
        calhijri.weekday_name(0, "fr")

# tests/test_api.py

from datetime import date, timedelta

import pytest

import calhijri
from calhijri import CalendarError, HijriDate, SpecError
from calhijri.core.types import EngineId
from calhijri.engines.specs import UMM_ALQURA


def test_list_and_info():
    engines = calhijri.list_engines()
    assert "umm_alqura" in engines
    assert "umm_alqura_en" in engines

    info = calhijri.engine_info("umm_alqura")
    assert info["year_length"] == 354
    assert info["epoch_hijri"] == {"day": 1, "month": 1, "year": 1446}
    assert info["epoch_gregorian"] == "2024-07-07"
    assert info["locale"] == "ar"


def test_unknown_engine():
    with pytest.raises(KeyError):
        calhijri.hijri_to_gregorian(1, 1, 1446, engine="nope")


def test_register_engine():
    spec = UMM_ALQURA.tweak(id=EngineId(family="custom", name="test_register", version="1"), locale="en")
    calhijri.register_engine("test_register", calhijri.make_engine(spec), overwrite=True)
    assert "test_register" in calhijri.list_engines()
    assert calhijri.today(date(2024, 7, 7), engine="test_register").hijri_month_name == "Muharram"

    with pytest.raises(KeyError):
        calhijri.register_engine("test_register", calhijri.make_engine(spec))


@pytest.mark.parametrize(
    "kwargs",
    [
        {"month_lengths": (30, 29) * 5},
        {"month_lengths": (30, 29) * 5 + (30, 31)},
        {"epoch_hijri": HijriDate(30, 2, 1446)},
        {"epoch_hijri": HijriDate(1, 1, 0)},
    ],
)
def test_bad_spec_rejected(kwargs):
    with pytest.raises(SpecError):
        UMM_ALQURA.tweak(**kwargs)


def test_bad_locale_rejected():
    with pytest.raises(SpecError):
        calhijri.make_engine(UMM_ALQURA.tweak(locale="xx"))


def test_today_with_injected_clock():
    rec = calhijri.today(date(2024, 7, 7))
    assert rec.hijri == HijriDate(1, 1, 1446)
    assert rec.gregorian.weekday == 0
    assert rec.hijri_month_name == "محرم"


def test_today_uses_process_clock():
    before = date.today()
    rec = calhijri.today()
    after = date.today()
    # Tolerate the clock crossing midnight between the reads
    assert before <= rec.gregorian.to_date() <= after
    assert rec.hijri == calhijri.to_hijri(rec.gregorian.to_date())


def test_convert_both_directions():
    from_g = calhijri.convert(7, 7, 2024, locale="en")
    from_h = calhijri.convert(1, 1, 1446, from_calendar="hijri", locale="en")
    assert from_g == from_h
    assert from_g.as_dict() == {
        "hijriDay": 1,
        "hijriMonth": 1,
        "hijriYear": 1446,
        "gregorianDay": 7,
        "gregorianMonth": 7,
        "gregorianYear": 2024,
        "hijriMonthName": "Muharram",
        "gregorianMonthName": "July",
        "weekDay": 0,
        "weekDayName": "Sunday",
    }


def test_convert_rejects_unknown_calendar():
    with pytest.raises(CalendarError):
        calhijri.convert(1, 1, 1446, from_calendar="julian")


def test_age_one_hijri_year():
    a = calhijri.age(date(2024, 7, 7), date(2025, 6, 26))
    assert (a.hijri_years, a.hijri_months, a.hijri_days) == (1, 0, 0)
    assert (a.gregorian_years, a.gregorian_months, a.gregorian_days) == (0, 11, 19)


def test_age_with_borrows():
    a = calhijri.age(date(2000, 1, 15), date(2024, 7, 7))
    # June 2024 has 30 days
    assert (a.gregorian_years, a.gregorian_months, a.gregorian_days) == (24, 5, 22)
    # 2000-01-15 is 29 Ramadan 1420 under the table; Dhu al-Hijjah has 29 days
    assert calhijri.to_hijri(date(2000, 1, 15)) == HijriDate(29, 9, 1420)
    assert (a.hijri_years, a.hijri_months, a.hijri_days) == (25, 3, 1)


def test_age_same_day_and_future_birth():
    d = date(2024, 7, 7)
    a = calhijri.age(d, d)
    assert a.as_dict() == {
        "gregorianYears": 0,
        "gregorianMonths": 0,
        "gregorianDays": 0,
        "hijriYears": 0,
        "hijriMonths": 0,
        "hijriDays": 0,
    }
    with pytest.raises(CalendarError):
        calhijri.age(date(2025, 1, 1), d)


def test_age_borrows_across_short_february():
    # February 2023 has 28 days, fewer than the 30 needed to cover 31 -> 1
    a = calhijri.age(date(2023, 1, 31), date(2023, 3, 1))
    assert (a.gregorian_years, a.gregorian_months, a.gregorian_days) == (0, 0, 29)
    assert a.gregorian_days >= 0 and a.hijri_days >= 0


def test_age_days_never_negative():
    start = date(2023, 1, 1)
    for offset in range(0, 800, 3):
        on = start + timedelta(days=offset)
        for birth_day in (28, 29, 30, 31):
            birth = date(2022, 12, birth_day)
            a = calhijri.age(birth, on)
            assert 0 <= a.gregorian_days <= 30
            assert 0 <= a.gregorian_months <= 11
            assert 0 <= a.hijri_days <= 29
            assert 0 <= a.hijri_months <= 11


def test_convert_from_hijri_normalises_overflow():
    rec = calhijri.convert(40, 1, 1446, from_calendar="hijri", locale="en")
    # Muharram has 30 days, so day 40 is 10 Safar
    assert rec.hijri == HijriDate(10, 2, 1446)
    assert (rec.gregorian.year, rec.gregorian.month, rec.gregorian.day) == (2024, 8, 15)
    assert rec.hijri == calhijri.to_hijri(rec.gregorian.to_date())
    assert rec.hijri_month_name == "Safar"

    assert calhijri.convert(1, 13, 1445, from_calendar="hijri").hijri == HijriDate(1, 1, 1446)

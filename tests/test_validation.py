# tests/test_validation.py

import pytest

import calhijri


@pytest.mark.parametrize("month", range(1, 13))
def test_validity_gate_per_month(month):
    n = calhijri.month_length(month)
    assert calhijri.is_valid_hijri_date(1, month, 1446)
    assert calhijri.is_valid_hijri_date(n, month, 1446)
    assert not calhijri.is_valid_hijri_date(0, month, 1446)
    assert not calhijri.is_valid_hijri_date(n + 1, month, 1446)


@pytest.mark.parametrize("month", [0, 13, -3, 100])
def test_bad_month_is_invalid_not_an_error(month):
    assert calhijri.is_valid_hijri_date(1, month, 1446) is False


def test_year_must_be_positive():
    assert calhijri.is_valid_hijri_date(1, 1, 1)
    assert not calhijri.is_valid_hijri_date(1, 1, 0)
    assert not calhijri.is_valid_hijri_date(1, 1, -5)


def test_month_length_table():
    assert [calhijri.month_length(m) for m in range(1, 13)] == [30, 29] * 6
    with pytest.raises(calhijri.InvalidMonthIndexError):
        calhijri.month_length(13)
    with pytest.raises(calhijri.InvalidMonthIndexError):
        calhijri.month_length(0)


def test_table_is_read_only():
    from calhijri.engines.specs import UMM_ALQURA
    eng = calhijri.make_engine(UMM_ALQURA)
    with pytest.raises(TypeError):
        eng.month_lengths[1] = 29
    with pytest.raises(AttributeError):
        UMM_ALQURA.month_lengths = (29,) * 12


def test_gregorian_predicate():
    assert calhijri.is_valid_gregorian_date(29, 2, 2000)
    assert not calhijri.is_valid_gregorian_date(29, 2, 1900)
    assert not calhijri.is_valid_gregorian_date(31, 4, 2024)

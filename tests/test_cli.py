# tests/test_cli.py

import json

import pytest

from calhijri import cli
from calhijri.config.loader import CONFIG_ENV_VAR


@pytest.fixture(autouse=True)
def no_env_config(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


def test_convert_text(capsys):
    assert cli.main(["convert", "2024-07-07", "--locale", "en"]) == 0
    out = capsys.readouterr().out
    assert "Sunday 1 Muharram 1446 AH = 7 July 2024" in out


def test_bare_date_shorthand(capsys):
    assert cli.main(["2024-07-07", "--engine", "umm_alqura_en"]) == 0
    assert "1 Muharram 1446 AH" in capsys.readouterr().out


def test_convert_from_hijri_json(capsys):
    assert cli.main(["convert", "1447-01-01", "--from", "hijri", "--json"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert (out["gregorianYear"], out["gregorianMonth"], out["gregorianDay"]) == (2025, 6, 26)
    assert out["weekDay"] == 4
    assert out["weekDayName"] == "الخميس"


def test_month_json(capsys):
    assert cli.main(["month", "2024", "2", "--calendar", "gregorian", "--json"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert len(out["dates"]) == 29
    assert out["gregorianMonth"] == 2


def test_month_text(capsys):
    assert cli.main(["month", "1446", "2", "--locale", "en"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "Safar 1446 AH (29 days)"
    assert len(out.splitlines()) == 30


def test_bad_month_is_reported(capsys):
    assert cli.main(["month", "1446", "13"]) == 2
    assert "error:" in capsys.readouterr().err


def test_unknown_engine_is_reported(capsys):
    assert cli.main(["today", "--engine", "nope"]) == 2
    assert "Unknown engine" in capsys.readouterr().err


def test_valid(capsys):
    assert cli.main(["valid", "1446-01-30"]) == 0
    assert capsys.readouterr().out.strip() == "valid"
    assert cli.main(["valid", "1446-02-30"]) == 1
    assert capsys.readouterr().out.strip() == "invalid"
    assert cli.main(["valid", "2023-02-29", "--calendar", "gregorian", "--json"]) == 1
    assert json.loads(capsys.readouterr().out) == {"valid": False}


def test_age(capsys):
    assert cli.main(["age", "2024-07-07", "--on", "2025-06-26", "--json"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["hijriYears"] == 1
    assert out["gregorianMonths"] == 11


def test_age_rejects_bad_date(capsys):
    assert cli.main(["age", "2023-02-29"]) == 2
    assert "not a valid Gregorian date" in capsys.readouterr().err


def test_today(capsys):
    assert cli.main(["today", "--json"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert 0 <= out["weekDay"] <= 6


def test_config_option(tmp_path, capsys):
    p = tmp_path / "cal.toml"
    p.write_text('name = "cli_cfg"\nlocale = "en"\n[epoch]\nhijri = [2, 1, 1446]\ngregorian = "2024-07-07"\n')
    assert cli.main(["--config", str(p), "convert", "2024-07-07"]) == 0
    assert "2 Muharram 1446 AH" in capsys.readouterr().out


def test_bad_config_is_reported(tmp_path, capsys):
    p = tmp_path / "cal.toml"
    p.write_text("month_lengths = [1]\n")
    assert cli.main(["--config", str(p), "today"]) == 2
    assert "error:" in capsys.readouterr().err


def test_diagnostics_dispatch(capsys):
    assert cli.main(["new-years", "--from-year", "1445", "--to-year", "1447"]) == 0
    out = capsys.readouterr().out
    assert "2023-07-19" in out and "2024-07-07" in out and "2025-06-26" in out

    assert cli.main(["pretty-month", "--hijri", "1446", "1"]) == 0
    assert "Muharram" in capsys.readouterr().out

    assert cli.main(["diag", "round-trip", "--N", "200"]) == 0
    assert "All round-trip tests passed." in capsys.readouterr().out

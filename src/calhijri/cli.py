from __future__ import annotations

import argparse
import importlib
import inspect
import json
import re
import sys
from datetime import date
from typing import Any, Optional, Tuple

import structlog

import calhijri
from calhijri.config.loader import find_config, load_spec
from calhijri.config.logging import configure_logging
from calhijri.core.errors import CalendarError
from calhijri.core.types import Age, CalendarDay, CalendarMonth
from calhijri.engines.specs import DEFAULT_ENGINE

log = structlog.get_logger(__name__)

_DATE_RE = re.compile(r"^\d{1,4}-\d{1,2}-\d{1,2}$")


def _parse_ymd(s: str) -> Tuple[int, int, int]:
    """YYYY-MM-DD -> (year, month, day) without calendar checks (Hijri dates are not datetime.date)."""
    if not _DATE_RE.match(s):
        raise CalendarError(f"expected YYYY-MM-DD, got '{s}'")
    y, m, d = map(int, s.split("-"))
    return y, m, d


def _parse_date(s: str) -> date:
    y, m, d = _parse_ymd(s)
    if not calhijri.is_valid_gregorian_date(d, m, y):
        raise CalendarError(f"'{s}' is not a valid Gregorian date")
    return date(y, m, d)


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _emit(obj: Any, as_json: bool, text: str) -> None:
    if as_json:
        print(json.dumps(obj.as_dict(), ensure_ascii=False, indent=2))
    else:
        print(text)


def _format_day(rec: CalendarDay) -> str:
    h, g = rec.hijri, rec.gregorian
    return (
        f"{rec.weekday_name} {h.day} {rec.hijri_month_name} {h.year} AH"
        f" = {g.day} {rec.gregorian_month_name} {g.year}"
    )


def _format_month(cm: CalendarMonth) -> str:
    if cm.is_hijri:
        title = f"{cm.hijri_month_name} {cm.hijri_year} AH ({len(cm)} days)"
    else:
        title = f"{cm.gregorian_month_name} {cm.gregorian_year} ({len(cm)} days)"
    return "\n".join([title] + [f"  {_format_day(rec)}" for rec in cm.dates])


def _format_age(a: Age) -> str:
    return (
        f"Gregorian: {a.gregorian_years} years, {a.gregorian_months} months, {a.gregorian_days} days\n"
        f"Hijri:     {a.hijri_years} years, {a.hijri_months} months, {a.hijri_days} days"
    )


def cmd_today(args: argparse.Namespace) -> int:
    rec = calhijri.today(engine=args.engine, locale=args.locale)
    _emit(rec, args.json, _format_day(rec))
    return 0


def cmd_convert(args: argparse.Namespace) -> int:
    y, m, d = _parse_ymd(args.date)
    rec = calhijri.convert(d, m, y, from_calendar=args.from_calendar, engine=args.engine, locale=args.locale)
    _emit(rec, args.json, _format_day(rec))
    return 0


def cmd_month(args: argparse.Namespace) -> int:
    is_hijri = args.calendar == "hijri"
    cm = calhijri.generate_calendar_month(args.year, args.month, is_hijri, engine=args.engine, locale=args.locale)
    _emit(cm, args.json, _format_month(cm))
    return 0


def cmd_age(args: argparse.Namespace) -> int:
    birth = _parse_date(args.birthdate)
    on = _parse_date(args.on) if args.on else None
    a = calhijri.age(birth, on, engine=args.engine)
    _emit(a, args.json, _format_age(a))
    return 0


def cmd_valid(args: argparse.Namespace) -> int:
    y, m, d = _parse_ymd(args.date)
    if args.calendar == "hijri":
        ok = calhijri.is_valid_hijri_date(d, m, y, engine=args.engine)
    else:
        ok = calhijri.is_valid_gregorian_date(d, m, y)
    if args.json:
        print(json.dumps({"valid": ok}))
    else:
        print("valid" if ok else "invalid")
    return 0 if ok else 1


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument("--engine", default=None, help=f"engine name (default: {DEFAULT_ENGINE})")
    p.add_argument("--locale", choices=("ar", "en"), default=None, help="name locale (default: engine's)")
    p.add_argument("--json", action="store_true", help="print the JSON projection")


def _setup(args: argparse.Namespace) -> None:
    configure_logging(verbose=args.verbose, log_json=args.log_json)

    path = find_config(args.config)
    if path is not None:
        spec = load_spec(path)
        calhijri.register_engine(spec.id.name, calhijri.make_engine(spec), overwrite=True)
        if getattr(args, "engine", None) is None:
            args.engine = spec.id.name

    if getattr(args, "engine", None) is None:
        args.engine = DEFAULT_ENGINE


def main(argv: Optional[list[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `calhijri YYYY-MM-DD ...` converts a Gregorian date
    if argv and _DATE_RE.match(argv[0]):
        argv = ["convert"] + argv

    p = argparse.ArgumentParser(prog="calhijri", description="Hijri (Umm al-Qura table) / Gregorian calendar CLI.")
    p.add_argument("--config", default=None, help="TOML engine spec (default: $CALHIJRI_CONFIG)")
    p.add_argument("--verbose", action="store_true", help="debug logging")
    p.add_argument("--log-json", action="store_true", help="JSON log lines on stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_today = sub.add_parser("today", help="Today's date in both calendars")
    _add_common(p_today)

    p_conv = sub.add_parser("convert", help="Convert a single date")
    p_conv.add_argument("date", help="YYYY-MM-DD")
    p_conv.add_argument("--from", dest="from_calendar", choices=("gregorian", "hijri"), default="gregorian")
    _add_common(p_conv)

    p_month = sub.add_parser("month", help="List every day of a month in both calendars")
    p_month.add_argument("year", type=int)
    p_month.add_argument("month", type=int)
    p_month.add_argument("--calendar", choices=("gregorian", "hijri"), default="hijri")
    _add_common(p_month)

    p_age = sub.add_parser("age", help="Age in Gregorian and Hijri years/months/days")
    p_age.add_argument("birthdate", help="Gregorian YYYY-MM-DD")
    p_age.add_argument("--on", default=None, help="reference date YYYY-MM-DD (default: today)")
    _add_common(p_age)

    p_valid = sub.add_parser("valid", help="Check a date against the calendar rules")
    p_valid.add_argument("date", help="YYYY-MM-DD")
    p_valid.add_argument("--calendar", choices=("gregorian", "hijri"), default="hijri")
    _add_common(p_valid)

    # diagnostics
    sub.add_parser("pretty-month", help="Print Hijri/Gregorian month grids (diagnostics)")
    sub.add_parser("new-years", help="Print 1 Muharram table (diagnostics)")
    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["round-trip"], help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)

    try:
        _setup(args)

        if args.cmd == "pretty-month":
            return _run_module_main("calhijri.diagnostics.pretty_month", rest)

        if args.cmd == "new-years":
            return _run_module_main("calhijri.diagnostics.new_years_table", rest)

        if args.cmd == "diag":
            tool_map = {
                "round-trip": "calhijri.diagnostics.round_trip",
            }
            return _run_module_main(tool_map[args.tool], rest)

        if rest:
            p.error(f"unrecognized arguments: {' '.join(rest)}")

        handlers = {
            "today": cmd_today,
            "convert": cmd_convert,
            "month": cmd_month,
            "age": cmd_age,
            "valid": cmd_valid,
        }
        return handlers[args.cmd](args)
    except (CalendarError, KeyError) as exc:
        msg = exc.args[0] if isinstance(exc, KeyError) and exc.args else str(exc)
        log.error("command_failed", cmd=args.cmd, error=msg)
        print(f"error: {msg}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())

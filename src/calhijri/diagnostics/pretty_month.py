from __future__ import annotations

import argparse
from typing import Optional

import calhijri
from calhijri.core.types import CalendarMonth


def dow_header(locale: str = "en") -> str:
    return " ".join(calhijri.weekday_name(w, locale)[:6].ljust(6) for w in range(7))


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]], locale: str = "en") -> None:
    header = dow_header(locale)
    print(title)
    print(header)
    print("-" * len(header))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def month_grid(cm: CalendarMonth) -> list[list[tuple[str, str]]]:
    """Lay the month out in Sunday-first weeks; top line is the anchor calendar."""
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    for _ in range(cm.dates[0].weekday):
        wk.append(cell("", ""))
    for rec in cm.dates:
        h, g = rec.hijri, rec.gregorian
        if cm.is_hijri:
            wk.append(cell(f"{h.day:2d}", f"{g.month:02d}-{g.day:02d}"))
        else:
            wk.append(cell(f"{g.day:2d}", f"{h.month:02d}-{h.day:02d}"))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def hijri_month_calendar(engine: str, Y: int, M: int, locale: str = "en") -> None:
    cm = calhijri.generate_calendar_month(Y, M, True, engine=engine, locale=locale)
    first, last = cm.dates[0].gregorian, cm.dates[-1].gregorian
    title = (
        f"{engine} Hijri month  {cm.hijri_month_name} {Y}  "
        f"({first.year}-{first.month:02d}-{first.day:02d} .. {last.year}-{last.month:02d}-{last.day:02d})"
    )
    print_grid(title, month_grid(cm), locale)


def gregorian_month_calendar(engine: str, gy: int, gm: int, locale: str = "en") -> None:
    cm = calhijri.generate_calendar_month(gy, gm, False, engine=engine, locale=locale)
    spans = ", ".join(f"{y}-{m:02d}" for y, m in cm.span)
    title = f"{engine} Gregorian month  {gy}-{gm:02d}  (Hijri {spans})"
    print_grid(title, month_grid(cm), locale)


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Hijri-month calendar and/or a Gregorian-month calendar with paired labels."
    )
    p.add_argument("--engine", default="umm_alqura")
    p.add_argument("--locale", default="en", choices=("ar", "en"))

    p.add_argument("--hijri", nargs=2, type=int, metavar=("Y", "M"),
                   help="Hijri month to print: Y M (e.g. 1446 9)")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2025 3)")

    args = p.parse_args(argv)

    if not args.hijri and not args.greg:
        hijri_month_calendar(args.engine, Y=1446, M=1, locale=args.locale)
        gregorian_month_calendar(args.engine, gy=2024, gm=7, locale=args.locale)
        return 0

    if args.hijri:
        Y, M = args.hijri
        hijri_month_calendar(args.engine, Y=Y, M=M, locale=args.locale)

    if args.greg:
        gy, gm = args.greg
        gregorian_month_calendar(args.engine, gy=gy, gm=gm, locale=args.locale)

    return 0

if __name__ == "__main__":
    raise SystemExit(main())

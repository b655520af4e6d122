from __future__ import annotations

import argparse
from typing import List, Optional

import calhijri


def parse_engines(s: str) -> List[str]:
    # "umm_alqura,local" -> ["umm_alqura", "local"]
    return [x.strip() for x in s.split(",") if x.strip()]


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the Gregorian date of 1 Muharram for a range of Hijri years."
    )
    p.add_argument("--from-year", type=int, default=1440)
    p.add_argument("--to-year", type=int, default=1460)
    p.add_argument("--engines", type=str, default="umm_alqura", help="Comma list of engine names.")
    p.add_argument("--locale", default="en", choices=("ar", "en"))
    args = p.parse_args(argv)

    engines = parse_engines(args.engines)
    if args.to_year < args.from_year:
        p.error("--to-year must not be before --from-year")

    header = "Year  " + " ".join(f"{e:<24}" for e in engines)
    print(header)
    print("-" * len(header))
    for y in range(args.from_year, args.to_year + 1):
        cols = []
        for e in engines:
            g = calhijri.new_year_day(y, engine=e)
            wd = calhijri.weekday_name(g.weekday, args.locale)
            cols.append(f"{g.year:04d}-{g.month:02d}-{g.day:02d} {wd:<13}")
        print(f"{y:<5} " + " ".join(cols))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

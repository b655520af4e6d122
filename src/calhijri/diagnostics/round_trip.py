from __future__ import annotations

import argparse
import random
from datetime import date, timedelta
from typing import List, Optional

import calhijri


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def parse_engines(s: str) -> List[str]:
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(
    engine: str,
    N: int,
    start: date,
    end: date,
    seed: int,
    *,
    max_failures: int,
) -> int:
    random.seed(seed)
    failures = 0

    for _ in range(N):
        d0 = random_date(start, end)

        h = calhijri.gregorian_to_hijri(d0.day, d0.month, d0.year, engine=engine)
        valid = calhijri.is_valid_hijri_date(h.day, h.month, h.year, engine=engine)
        back = calhijri.hijri_to_gregorian(h.day, h.month, h.year, engine=engine)

        if not valid or (back.year, back.month, back.day) != (d0.year, d0.month, d0.day):
            failures += 1
            print("\nFAIL")
            print("engine:", engine)
            print("d0:", d0)
            print("hijri:", h, "valid:", valid)
            print("back:", back)
            if failures >= max_failures:
                return failures

        if back.weekday != (d0.isoweekday() % 7):
            failures += 1
            print("\nFAIL (weekday)")
            print("engine:", engine)
            print("d0:", d0, "weekday:", back.weekday)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: gregorian -> hijri -> gregorian.")
    p.add_argument("--engines", type=str, default="umm_alqura", help="Comma-separated engine list.")
    p.add_argument("--N", type=int, default=2000, help="Trials per engine.")
    p.add_argument("--start", type=str, default="1900-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="2100-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per engine.")
    args = p.parse_args(argv)

    engines = parse_engines(args.engines)
    start = parse_date(args.start)
    end = parse_date(args.end)

    if end < start:
        raise SystemExit("--end must be >= --start")

    total_fail = 0
    for eng in engines:
        print(f"Testing {eng} ...")
        f = roundtrip_test(eng, N=args.N, start=start, end=end, seed=args.seed, max_failures=args.max_failures)
        total_fail += f

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())

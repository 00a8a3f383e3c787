from __future__ import annotations

import argparse
import random
from datetime import date

import nepcal
from nepcal.core.time import jdn_to_date
from nepcal.engines.nepali_day import first_jdn, last_jdn


def random_date(rng: random.Random, start: date, end: date) -> date:
    span = (end - start).days
    return date.fromordinal(start.toordinal() + rng.randint(0, span))


def roundtrip_test(N: int, start: date, end: date, seed: int, *, max_failures: int) -> int:
    rng = random.Random(seed)
    failures = 0

    for _ in range(N):
        d0 = random_date(rng, start, end)

        bs = nepcal.nepali_from_date(d0)
        back = nepcal.date_from_nepali(bs.year, bs.month, bs.day)
        if back != d0:
            failures += 1
            print("\nFAIL")
            print("d0:", d0)
            print("bs:", bs)
            print("back:", back)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    lo, hi = jdn_to_date(first_jdn()), jdn_to_date(last_jdn())

    p = argparse.ArgumentParser(description="Random round-trip tests: gregorian -> nepali -> gregorian.")
    p.add_argument("--N", type=int, default=2000, help="Trials.")
    p.add_argument("--start", type=date.fromisoformat, default=lo, help=f"Start date YYYY-MM-DD (default {lo}).")
    p.add_argument("--end", type=date.fromisoformat, default=hi, help=f"End date YYYY-MM-DD (default {hi}).")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    if args.end < args.start:
        raise SystemExit("--end must be >= --start")
    if args.start < lo or args.end > hi:
        raise SystemExit(f"dates must lie within {lo} .. {hi}")

    failures = roundtrip_test(args.N, args.start, args.end, args.seed, max_failures=args.max_failures)
    if failures == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {failures}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())

#!/usr/bin/env python3
from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from nepcal.engines.month_lengths import BS_FIRST_YEAR, BS_LAST_YEAR, MONTH_LENGTHS


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "nepcal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "nepcal[diagnostics]"') from e


@dataclass(frozen=True)
class YearLengthSummary:
    first_year: int
    last_year: int
    total_days: int
    min_days: int
    max_days: int
    mean_days: float
    counts: Dict[int, int]  # year length -> number of years


def year_totals(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    years = np.arange(start_year, end_year + 1, dtype=int)
    grid = np.array([MONTH_LENGTHS[int(y)] for y in years], dtype=int)
    return years, grid.sum(axis=1)


def summarize(start_year: int = BS_FIRST_YEAR, end_year: int = BS_LAST_YEAR) -> YearLengthSummary:
    if start_year < BS_FIRST_YEAR or end_year > BS_LAST_YEAR or end_year < start_year:
        raise ValueError(f"year span must lie within {BS_FIRST_YEAR}-{BS_LAST_YEAR}")
    np = _need_numpy()
    _, totals = year_totals(np, start_year, end_year)
    values, counts = np.unique(totals, return_counts=True)
    return YearLengthSummary(
        first_year=start_year,
        last_year=end_year,
        total_days=int(totals.sum()),
        min_days=int(totals.min()),
        max_days=int(totals.max()),
        mean_days=float(totals.mean()),
        counts={int(v): int(c) for v, c in zip(values, counts)},
    )


def plot(out: str, start_year: int, end_year: int, title: str) -> None:
    np = _need_numpy()
    plt = _need_matplotlib()
    years, totals = year_totals(np, start_year, end_year)

    fig, ax = plt.subplots(figsize=(10, 3.5))
    ax.bar(years, totals - 360, bottom=360, color="0.35", width=0.8)
    ax.axhline(float(totals.mean()), color="tab:red", lw=1.0, ls="--", label=f"mean {totals.mean():.3f}")
    ax.set_xlabel("BS year")
    ax.set_ylabel("days")
    ax.set_ylim(int(totals.min()) - 1, int(totals.max()) + 1)
    ax.set_title(title)
    ax.legend(loc="upper right", frameon=False)
    fig.tight_layout()
    fig.savefig(out, dpi=150)
    plt.close(fig)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Tabulate BS year lengths from the month-length table.")
    p.add_argument("--start-year", type=int, default=BS_FIRST_YEAR)
    p.add_argument("--end-year", type=int, default=BS_LAST_YEAR)
    p.add_argument("--rows", action="store_true", help="Also print every year with its month lengths.")
    p.add_argument("--out", default=None, help="Write a bar chart to this path (needs matplotlib).")
    p.add_argument("--title", default="Bikram Sambat year lengths")
    args = p.parse_args(argv)

    try:
        s = summarize(args.start_year, args.end_year)
    except ValueError as e:
        raise SystemExit(str(e))

    print(f"Years {s.first_year}-{s.last_year}: {s.total_days} days")
    print(f"  min/max/mean = {s.min_days}/{s.max_days}/{s.mean_days:.4f}")
    for length, n in sorted(s.counts.items()):
        print(f"  {length} days: {n} years")

    if args.rows:
        print()
        for y in range(s.first_year, s.last_year + 1):
            row = MONTH_LENGTHS[y]
            print(f"{y}  {' '.join(f'{d:2d}' for d in row)}  = {sum(row)}")

    if args.out:
        plot(args.out, s.first_year, s.last_year, args.title)
        print(f"\nWrote {args.out}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

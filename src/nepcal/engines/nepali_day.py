"""
nepcal.engines.nepali_day
-------------------------
Bikram Sambat dates <-> Julian Day Numbers by counting days forward from the
BS epoch (2000-01-01 BS = JDN 2430888) through the month-length table.

Inputs to nepali_to_jdn are assumed valid; validation lives in
nepcal.core.validation. Any JDN outside the table's coverage raises
DateOutOfRangeError instead of producing a partial date.
"""

from __future__ import annotations

from ..core.errors import DateOutOfRangeError
from ..core.types import CalendarDate
from .month_lengths import BS_EPOCH_JDN, BS_FIRST_YEAR, BS_LAST_YEAR, MONTH_LENGTHS


def year_length(year: int) -> int:
    """Total days in a BS year."""
    try:
        return sum(MONTH_LENGTHS[year])
    except KeyError:
        raise DateOutOfRangeError(
            f"No month lengths for BS year {year} (covered: {BS_FIRST_YEAR}-{BS_LAST_YEAR})"
        ) from None

def first_jdn() -> int:
    """JDN of the first covered day, 1/1 of BS_FIRST_YEAR."""
    return BS_EPOCH_JDN

def last_jdn() -> int:
    """JDN of the last covered day, the final day of BS_LAST_YEAR."""
    total = sum(year_length(y) for y in range(BS_FIRST_YEAR, BS_LAST_YEAR + 1))
    return BS_EPOCH_JDN + total - 1


def nepali_to_jdn(year: int, month: int, day: int) -> int:
    total = 0

    # Whole years before the target year
    for y in range(BS_FIRST_YEAR, year):
        total += year_length(y)

    # Whole months before the target month
    if month > 1:
        lengths = MONTH_LENGTHS.get(year)
        if lengths is None:
            raise DateOutOfRangeError(f"No month lengths for BS year {year}")
        total += sum(lengths[: month - 1])

    total += day - 1
    return BS_EPOCH_JDN + total

def jdn_to_nepali(jdn: int) -> CalendarDate:
    remaining = jdn - BS_EPOCH_JDN
    if remaining < 0:
        raise DateOutOfRangeError(f"JDN {jdn} is before 1/1/{BS_FIRST_YEAR} BS")

    # A remainder equal to a full year (or month) belongs to the next one.
    year = BS_FIRST_YEAR
    while year <= BS_LAST_YEAR:
        days = year_length(year)
        if remaining < days:
            break
        remaining -= days
        year += 1
    else:
        raise DateOutOfRangeError(f"JDN {jdn} is after the last day of {BS_LAST_YEAR} BS")

    for month, days in enumerate(MONTH_LENGTHS[year], start=1):
        if remaining < days:
            return CalendarDate(year, month, remaining + 1)
        remaining -= days

    raise RuntimeError("unreachable")

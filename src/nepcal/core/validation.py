"""
nepcal.core.validation
----------------------
Structural checks for dates in both calendars. Validators never raise; they
report the first failing rule in a ValidationResult.

Check order is month, then (for BS) year coverage, then day.
"""

from __future__ import annotations

from typing import Tuple

from .types import ValidationResult
from ..engines.month_lengths import BS_FIRST_YEAR, BS_LAST_YEAR, MONTH_LENGTHS

_GREGORIAN_MONTH_DAYS: Tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

MONTH_ERROR = "Month must be between 1 and 12"


def is_gregorian_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0

def days_in_gregorian_month(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise ValueError(MONTH_ERROR)
    if month == 2 and is_gregorian_leap_year(year):
        return 29
    return _GREGORIAN_MONTH_DAYS[month - 1]


def validate_gregorian(year: int, month: int, day: int) -> ValidationResult:
    if month < 1 or month > 12:
        return ValidationResult.fail("InvalidMonth", MONTH_ERROR)

    max_day = days_in_gregorian_month(year, month)
    if day < 1 or day > max_day:
        return ValidationResult.fail("InvalidDay", f"Day must be between 1 and {max_day}")

    return ValidationResult.ok()

def validate_nepali(year: int, month: int, day: int) -> ValidationResult:
    if month < 1 or month > 12:
        return ValidationResult.fail("InvalidMonth", MONTH_ERROR)

    lengths = MONTH_LENGTHS.get(year)
    if lengths is None:
        return ValidationResult.fail(
            "UnsupportedYear",
            f"Year {year} is not supported (supported range: {BS_FIRST_YEAR}-{BS_LAST_YEAR})",
        )

    max_day = lengths[month - 1]
    if day < 1 or day > max_day:
        return ValidationResult.fail("InvalidDay", f"Day must be between 1 and {max_day} for month {month}")

    return ValidationResult.ok()

"""
nepcal.api
----------
Public AD <-> BS conversions. Each call validates its input, then pivots
through a Julian Day Number: core.time on the Gregorian side,
engines.nepali_day on the BS side.
"""

from __future__ import annotations

import logging
from datetime import date

from .core.errors import InvalidGregorianDate, InvalidNepaliDate
from .core.time import gregorian_to_jdn, jdn_to_gregorian
from .core.types import CalendarDate
from .core.validation import validate_gregorian, validate_nepali
from .engines.month_lengths import BS_FIRST_YEAR, BS_LAST_YEAR, MONTH_LENGTHS
from .engines.nepali_day import jdn_to_nepali, nepali_to_jdn

logger = logging.getLogger(__name__)


def gregorian_to_nepali(year: int, month: int, day: int) -> CalendarDate:
    """
    AD -> BS.

    Raises InvalidGregorianDate for a malformed date and DateOutOfRangeError
    for a valid date outside the BS table's coverage.
    """
    result = validate_gregorian(year, month, day)
    if not result.valid:
        logger.debug("rejecting AD %d-%d-%d: %s", year, month, day, result.error)
        raise InvalidGregorianDate(result.error, result.code)

    jdn = gregorian_to_jdn(year, month, day)
    out = jdn_to_nepali(jdn)
    logger.debug("AD %04d-%02d-%02d (JDN %d) -> BS %s", year, month, day, jdn, out)
    return out

def nepali_to_gregorian(year: int, month: int, day: int) -> CalendarDate:
    """BS -> AD. Raises InvalidNepaliDate for a malformed or unsupported date."""
    result = validate_nepali(year, month, day)
    if not result.valid:
        logger.debug("rejecting BS %d-%d-%d: %s", year, month, day, result.error)
        raise InvalidNepaliDate(result.error, result.code)

    jdn = nepali_to_jdn(year, month, day)
    out = jdn_to_gregorian(jdn)
    logger.debug("BS %04d-%02d-%02d (JDN %d) -> AD %s", year, month, day, jdn, out)
    return out

# ============================================================
# datetime.date helpers
# ============================================================

def nepali_from_date(d: date) -> CalendarDate:
    return gregorian_to_nepali(d.year, d.month, d.day)

def date_from_nepali(year: int, month: int, day: int) -> date:
    g = nepali_to_gregorian(year, month, day)
    return date(g.year, g.month, g.day)

# ============================================================
# Table queries
# ============================================================

def supported_years() -> range:
    return range(BS_FIRST_YEAR, BS_LAST_YEAR + 1)

def days_in_nepali_month(year: int, month: int) -> int:
    result = validate_nepali(year, month, 1)
    if not result.valid:
        raise InvalidNepaliDate(result.error, result.code)
    return MONTH_LENGTHS[year][month - 1]


__all__ = [
    "gregorian_to_nepali",
    "nepali_to_gregorian",
    "validate_gregorian",
    "validate_nepali",
    "nepali_from_date",
    "date_from_nepali",
    "supported_years",
    "days_in_nepali_month",
]

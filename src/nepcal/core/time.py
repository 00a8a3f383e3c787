from __future__ import annotations
from datetime import date

from .types import CalendarDate


def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """
    Proleptic Gregorian date -> Julian Day Number (Fliegel-Van Flandern).

    No validation: out-of-range days still produce a consistent JDN
    (e.g. Feb 30 lands on Mar 2).
    """
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045

def jdn_to_gregorian(jdn: int) -> CalendarDate:
    """Fliegel-Van Flandern inverse of gregorian_to_jdn. Total over all ints."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return CalendarDate(year, month, day)

def date_to_jdn(d: date) -> int:
    return gregorian_to_jdn(d.year, d.month, d.day)

def jdn_to_date(jdn: int) -> date:
    g = jdn_to_gregorian(jdn)
    return date(g.year, g.month, g.day)

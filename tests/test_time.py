# tests/test_time.py

import random
from datetime import date

import pytest

from nepcal.core.time import date_to_jdn, gregorian_to_jdn, jdn_to_date, jdn_to_gregorian
from nepcal.core.types import CalendarDate


def test_known_epochs():
    # J2000.0 civil date is January 1, 2000
    assert gregorian_to_jdn(2000, 1, 1) == 2451545
    assert gregorian_to_jdn(1944, 1, 1) == 2431091
    # JDN 0 is 24 November 4714 BC in the proleptic Gregorian calendar (astronomical year -4713)
    assert gregorian_to_jdn(-4713, 11, 24) == 0
    assert jdn_to_gregorian(0) == CalendarDate(-4713, 11, 24)

def test_negative_jdns_use_floor_division():
    """
    Truncation toward zero would break the inverse below JDN 0.
    """
    assert jdn_to_gregorian(-1) == CalendarDate(-4713, 11, 23)
    assert jdn_to_gregorian(-100000) == CalendarDate(-4986, 2, 9)
    for jdn in range(-5000, 5000, 37):
        g = jdn_to_gregorian(jdn)
        assert gregorian_to_jdn(g.year, g.month, g.day) == jdn

def test_no_validation_in_forward_transform():
    # Feb 30 2023 overflows to Mar 2 2023
    assert gregorian_to_jdn(2023, 2, 30) == gregorian_to_jdn(2023, 3, 2) == 2460006

def test_jdn_roundtrip_random():
    random.seed(42)
    for _ in range(5000):
        jdn_in = random.randint(-2_000_000, 6_000_000)
        g = jdn_to_gregorian(jdn_in)
        assert gregorian_to_jdn(g.year, g.month, g.day) == jdn_in

def test_matches_stdlib_ordinals():
    """
    datetime.date ordinals are proleptic Gregorian too: JDN = ordinal + 1721425.
    """
    random.seed(7)
    for _ in range(2000):
        d = date.fromordinal(random.randint(1, date(9999, 12, 31).toordinal()))
        assert date_to_jdn(d) == d.toordinal() + 1721425
        assert jdn_to_date(date_to_jdn(d)) == d

@pytest.mark.parametrize("jdn", [2451545, 2430888, 1721426])
def test_jdn_to_date(jdn):
    assert date_to_jdn(jdn_to_date(jdn)) == jdn

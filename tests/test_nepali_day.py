# tests/test_nepali_day.py

import pytest

from nepcal.core.errors import DateOutOfRangeError
from nepcal.core.types import CalendarDate
from nepcal.engines.month_lengths import BS_EPOCH_JDN, BS_FIRST_YEAR, BS_LAST_YEAR, MONTH_LENGTHS
from nepcal.engines.nepali_day import first_jdn, jdn_to_nepali, last_jdn, nepali_to_jdn, year_length


def test_table_shape():
    assert BS_FIRST_YEAR == 2000
    assert BS_LAST_YEAR == 2100
    assert sorted(MONTH_LENGTHS) == list(range(2000, 2101))
    for year, row in MONTH_LENGTHS.items():
        assert len(row) == 12, year
        assert all(d >= 1 for d in row), year
        assert 364 <= sum(row) <= 366, year

def test_table_is_read_only():
    with pytest.raises(TypeError):
        MONTH_LENGTHS[2101] = (30,) * 12

def test_epoch():
    assert BS_EPOCH_JDN == 2430888
    assert nepali_to_jdn(2000, 1, 1) == BS_EPOCH_JDN
    assert jdn_to_nepali(BS_EPOCH_JDN) == CalendarDate(2000, 1, 1)
    assert first_jdn() == BS_EPOCH_JDN

def test_coverage_window():
    total = sum(year_length(y) for y in range(2000, 2101))
    assert total == 36852
    assert last_jdn() == BS_EPOCH_JDN + total - 1 == 2467739
    assert jdn_to_nepali(last_jdn()) == CalendarDate(2100, 12, MONTH_LENGTHS[2100][11])

def test_year_boundary_belongs_to_next_year():
    # A remainder equal to a full year's total starts the next year
    jdn = BS_EPOCH_JDN + year_length(2000)
    assert jdn_to_nepali(jdn) == CalendarDate(2001, 1, 1)
    assert jdn_to_nepali(jdn - 1) == CalendarDate(2000, 12, MONTH_LENGTHS[2000][11])

def test_month_boundary_belongs_to_next_month():
    jdn = BS_EPOCH_JDN + MONTH_LENGTHS[2000][0]
    assert jdn_to_nepali(jdn) == CalendarDate(2000, 2, 1)
    assert jdn_to_nepali(jdn - 1) == CalendarDate(2000, 1, MONTH_LENGTHS[2000][0])

def test_every_covered_day_roundtrips():
    """
    Walk every day in the table and check consecutive JDNs give consecutive BS days.
    """
    prev = None
    for jdn in range(first_jdn(), last_jdn() + 1):
        bs = jdn_to_nepali(jdn)
        assert nepali_to_jdn(bs.year, bs.month, bs.day) == jdn
        if prev is not None:
            if bs.day > 1:
                assert (bs.year, bs.month, bs.day - 1) == prev.as_tuple()
            elif bs.month > 1:
                assert (prev.year, prev.month + 1, 1) == bs.as_tuple()
                assert prev.day == MONTH_LENGTHS[prev.year][prev.month - 1]
            else:
                assert (prev.year + 1, 1, 1) == bs.as_tuple()
                assert (prev.month, prev.day) == (12, MONTH_LENGTHS[prev.year][11])
        prev = bs

def test_before_epoch_raises():
    with pytest.raises(DateOutOfRangeError):
        jdn_to_nepali(BS_EPOCH_JDN - 1)

def test_after_table_raises():
    with pytest.raises(DateOutOfRangeError):
        jdn_to_nepali(last_jdn() + 1)

def test_missing_year_in_forward_transform_raises():
    with pytest.raises(DateOutOfRangeError):
        nepali_to_jdn(2102, 1, 1)
    with pytest.raises(DateOutOfRangeError):
        year_length(1999)

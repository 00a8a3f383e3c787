# tests/test_validation.py

import pytest

from nepcal.core.types import ValidationResult
from nepcal.core.validation import (
    days_in_gregorian_month,
    is_gregorian_leap_year,
    validate_gregorian,
    validate_nepali,
)


@pytest.mark.parametrize("year,leap", [(2020, True), (2023, False), (1900, False), (2000, True), (-4, True)])
def test_leap_rule(year, leap):
    assert is_gregorian_leap_year(year) is leap

def test_days_in_gregorian_month():
    assert days_in_gregorian_month(2024, 2) == 29
    assert days_in_gregorian_month(2023, 2) == 28
    assert days_in_gregorian_month(2023, 4) == 30
    assert days_in_gregorian_month(2023, 12) == 31
    with pytest.raises(ValueError):
        days_in_gregorian_month(2023, 13)

def test_valid_gregorian_dates():
    assert validate_gregorian(2023, 10, 17) == ValidationResult(valid=True)
    assert validate_gregorian(2020, 2, 29).valid
    assert validate_gregorian(2000, 2, 29).valid
    # No year range restriction
    assert validate_gregorian(1, 1, 1).valid
    assert validate_gregorian(-500, 3, 31).valid

def test_gregorian_invalid_month():
    for month in (0, 13, -1):
        r = validate_gregorian(2023, month, 1)
        assert not r.valid
        assert r.code == "InvalidMonth"
        assert r.error == "Month must be between 1 and 12"

def test_gregorian_invalid_day():
    r = validate_gregorian(2023, 2, 30)
    assert not r.valid
    assert r.code == "InvalidDay"
    assert r.error == "Day must be between 1 and 28"
    assert not validate_gregorian(2023, 4, 31).valid
    assert not validate_gregorian(1900, 2, 29).valid
    assert not validate_gregorian(2023, 1, 0).valid

def test_gregorian_month_checked_before_day():
    assert validate_gregorian(2023, 13, 40).code == "InvalidMonth"

def test_valid_nepali_dates():
    assert validate_nepali(2000, 9, 17).valid
    assert validate_nepali(2080, 7, 1).valid
    assert validate_nepali(2080, 6, 10).valid
    assert validate_nepali(2100, 12, 30).valid

def test_nepali_invalid_month():
    for month in (0, 13):
        r = validate_nepali(2000, month, 1)
        assert r.code == "InvalidMonth"
        assert r.error == "Month must be between 1 and 12"

@pytest.mark.parametrize("year", [1999, 2101, 0])
def test_nepali_unsupported_year(year):
    r = validate_nepali(year, 1, 1)
    assert not r.valid
    assert r.code == "UnsupportedYear"
    assert r.error == f"Year {year} is not supported (supported range: 2000-2100)"

def test_nepali_invalid_day():
    r = validate_nepali(2000, 1, 32)
    assert r.code == "InvalidDay"
    assert r.error == "Day must be between 1 and 30 for month 1"
    assert validate_nepali(2080, 2, 0).code == "InvalidDay"

def test_nepali_check_order():
    """
    month -> year -> day; only the first failure is reported.
    """
    assert validate_nepali(2101, 13, 1).code == "InvalidMonth"
    assert validate_nepali(2101, 1, 99).code == "UnsupportedYear"
    assert validate_nepali(1999, 0, 0).code == "InvalidMonth"

def test_validators_are_idempotent():
    for args in [(2023, 2, 30), (2023, 13, 1), (2023, 10, 17)]:
        assert validate_gregorian(*args) == validate_gregorian(*args)
    for args in [(2080, 13, 1), (1999, 1, 1), (2080, 6, 10), (2000, 1, 32)]:
        assert validate_nepali(*args) == validate_nepali(*args)

def test_validation_result_invariants():
    assert bool(ValidationResult.ok()) is True
    assert ValidationResult.ok().error is None
    bad = ValidationResult.fail("InvalidDay", "nope")
    assert bool(bad) is False
    with pytest.raises(ValueError):
        ValidationResult(valid=False)
    with pytest.raises(ValueError):
        ValidationResult(valid=True, error="x")

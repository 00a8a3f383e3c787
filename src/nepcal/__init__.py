"""nepcal public API.

Gregorian (AD) <-> Bikram Sambat (BS) date conversion and validation.
Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    gregorian_to_nepali,
    nepali_to_gregorian,
    validate_gregorian,
    validate_nepali,
    nepali_from_date,
    date_from_nepali,
    supported_years,
    days_in_nepali_month,
)
from .core.types import CalendarDate, ValidationResult
from .core.errors import (
    NepcalError,
    InvalidDateError,
    InvalidGregorianDate,
    InvalidNepaliDate,
    DateOutOfRangeError,
)

__version__ = "0.1.0"

__all__ = [
    "gregorian_to_nepali",
    "nepali_to_gregorian",
    "validate_gregorian",
    "validate_nepali",
    "nepali_from_date",
    "date_from_nepali",
    "supported_years",
    "days_in_nepali_month",
    "CalendarDate",
    "ValidationResult",
    "NepcalError",
    "InvalidDateError",
    "InvalidGregorianDate",
    "InvalidNepaliDate",
    "DateOutOfRangeError",
]

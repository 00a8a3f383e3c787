from __future__ import annotations
from typing import Optional

from .types import ErrorCode


class NepcalError(Exception):
    """Base error."""

class InvalidDateError(NepcalError, ValueError):
    """Raised by a conversion when its input fails validation."""

    label = "date"

    def __init__(self, reason: str, code: Optional[ErrorCode] = None):
        super().__init__(f"Invalid {self.label}: {reason}")
        self.reason = reason
        self.code = code

class InvalidGregorianDate(InvalidDateError):
    label = "Gregorian date"

class InvalidNepaliDate(InvalidDateError):
    label = "Nepali date"

class DateOutOfRangeError(NepcalError, ValueError):
    """Raised when a day falls outside the years covered by the month-length table."""

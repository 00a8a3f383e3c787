from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Optional, Tuple

ErrorCode = Literal["InvalidMonth", "InvalidDay", "UnsupportedYear"]

@dataclass(frozen=True)
class CalendarDate:
    """A year/month/day triple in either calendar; the producing function says which."""
    year: int
    month: int
    day: int

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()

@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    error: Optional[str] = None
    code: Optional[ErrorCode] = None

    def __post_init__(self) -> None:
        if self.valid and (self.error is not None or self.code is not None):
            raise ValueError("a valid result carries no error")
        if not self.valid and not self.error:
            raise ValueError("an invalid result needs an error message")

    def __bool__(self) -> bool:
        return self.valid

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(valid=True)

    @classmethod
    def fail(cls, code: ErrorCode, error: str) -> "ValidationResult":
        return cls(valid=False, error=error, code=code)

from datetime import date
from typing import Optional


class RentCycleError(ValueError):
    """Base class for rent cycle errors. Subclasses ValueError so pydantic
    validators report them as regular validation failures."""


class InvalidDateError(RentCycleError):
    def __init__(self, value, message: Optional[str] = None):
        self.value = value
        super().__init__(message or f"Invalid date: {value!r}. Expected YYYY-MM-DD")


class InvalidPolicyError(RentCycleError):
    def __init__(self, value):
        self.value = value
        super().__init__(
            f"Invalid rent cycle policy: {value!r}. Expected CALENDAR or MIDMONTH")


class PeriodValidationError(RentCycleError):
    """A period does not fit its cycle policy. Blocks payment submission."""

    def __init__(self, reason: str, expected_start: Optional[date] = None,
                 expected_end: Optional[date] = None):
        self.reason = reason
        self.expected_start = expected_start
        self.expected_end = expected_end
        super().__init__(reason)

    def to_dict(self) -> dict:
        return {
            "message": self.reason,
            "expected_start": self.expected_start.isoformat() if self.expected_start else None,
            "expected_end": self.expected_end.isoformat() if self.expected_end else None,
        }


class EmptyHistoryError(RentCycleError):
    def __init__(self):
        super().__init__(
            "Cannot propose the next period: no payment history and no joining date")

from datetime import date
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from src.api.common.constants.rent_cycles import CyclePolicy
from src.api.common.utils.datetime import count_days_inclusive
from src.api.rent_cycles.exceptions import InvalidDateError
from src.api.rent_cycles.utils import CalendarDate, parse_calendar_date


class BillingPeriod(BaseModel):
    """A contiguous date range, both ends inclusive, covered by one rent payment."""
    start: CalendarDate
    end: CalendarDate

    model_config = ConfigDict(frozen=True)

    @property
    def days(self) -> int:
        return count_days_inclusive(self.start, self.end)

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    @classmethod
    def from_value(cls, value: Any) -> "BillingPeriod":
        """
        Build a period from the shapes callers hand in as payment history:
        a BillingPeriod, a (start, end) pair, a mapping with start/end or
        start_date/end_date keys, or an object with start_date/end_date
        attributes such as a persisted TenantPayment.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, (tuple, list)) and len(value) == 2:
            start, end = value
        elif isinstance(value, dict):
            start = value.get("start", value.get("start_date"))
            end = value.get("end", value.get("end_date"))
        elif hasattr(value, "start_date") and hasattr(value, "end_date"):
            start, end = value.start_date, value.end_date
        else:
            raise InvalidDateError(value, f"Unrecognised payment period: {value!r}")
        return cls(start=parse_calendar_date(start), end=parse_calendar_date(end))


class Gap(BaseModel):
    """A run of billing periods between joining and today with no payment recorded."""
    id: str
    gap_start: date = Field(alias="gapStart")
    gap_end: date = Field(alias="gapEnd")
    days_missing: int = Field(alias="daysMissing", ge=1)
    label: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class ValidationResult(BaseModel):
    is_valid: bool
    reason: Optional[str] = None
    expected: Optional[BillingPeriod] = None

    @classmethod
    def valid(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def invalid(cls, reason: str, expected: Optional[BillingPeriod] = None) -> "ValidationResult":
        return cls(is_valid=False, reason=reason, expected=expected)


class InitialPeriodRequest(BaseModel):
    anchor_date: CalendarDate
    policy: CyclePolicy


class NextPeriodRequest(BaseModel):
    previous_end: CalendarDate
    policy: CyclePolicy


class ValidatePeriodRequest(BaseModel):
    period: BillingPeriod
    policy: CyclePolicy


class DetectGapsRequest(BaseModel):
    history: List[BillingPeriod] = Field(default_factory=list)
    joining_date: CalendarDate
    as_of: Optional[CalendarDate] = Field(
        default=None, description="Reconcile up to this date. Defaults to today")
    policy: CyclePolicy


class SkipToNextRequest(BaseModel):
    history: List[BillingPeriod] = Field(default_factory=list)
    policy: CyclePolicy
    joining_date: Optional[CalendarDate] = Field(
        default=None, description="Used to propose the first period when history is empty")

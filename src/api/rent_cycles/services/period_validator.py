from typing import Any

from src.api.common.constants.rent_cycles import CyclePolicy
from src.api.common.utils.datetime import format_date
from src.api.rent_cycles.exceptions import PeriodValidationError
from src.api.rent_cycles.schemas import BillingPeriod, ValidationResult
from src.api.rent_cycles.services.period_calculator import compute_initial_period
from src.api.rent_cycles.utils import parse_cycle_policy

POLICY_MISMATCH = "period does not match cycle policy"

# Absorbs 30/31-day and February boundaries in manually entered MIDMONTH periods
MIDMONTH_TOLERANCE_DAYS = 1


def _ordinal(day: int) -> str:
    if 11 <= day % 100 <= 13:
        return f"{day}th"
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def validate_period(period: Any, policy: Any) -> ValidationResult:
    """
    Check a user supplied period against the shape required by a cycle policy.

    CALENDAR periods must span exactly one calendar month. MIDMONTH periods
    may start on any day and must end within a day of the day before the same
    day-of-month in the following month.

    The reason of an invalid result is meant to be shown to the operator as is.
    """
    period = BillingPeriod.from_value(period)
    policy = parse_cycle_policy(policy)

    if period.start >= period.end:
        return ValidationResult.invalid("End date must be after start date")

    expected = compute_initial_period(period.start, policy)

    if policy == CyclePolicy.CALENDAR:
        if period.start != expected.start or period.end != expected.end:
            return ValidationResult.invalid(
                f"{POLICY_MISMATCH}: CALENDAR periods run from the 1st to the last day "
                f"of the month ({format_date(expected.start)} to {format_date(expected.end)})",
                expected=expected,
            )
        return ValidationResult.valid()

    drift = abs((period.end - expected.end).days)
    if drift > MIDMONTH_TOLERANCE_DAYS:
        return ValidationResult.invalid(
            f"{POLICY_MISMATCH}: MIDMONTH periods run from the {_ordinal(expected.start.day)} "
            f"to the {_ordinal(expected.end.day)} of the following month "
            f"({format_date(expected.start)} to {format_date(expected.end)})",
            expected=expected,
        )
    return ValidationResult.valid()


def ensure_valid_period(period: Any, policy: Any) -> BillingPeriod:
    """
    Validate and return the period, raising instead of returning a result.

    Raises:
        PeriodValidationError: with the expected period when one can be derived
    """
    period = BillingPeriod.from_value(period)
    result = validate_period(period, policy)
    if not result.is_valid:
        expected = result.expected
        raise PeriodValidationError(
            result.reason,
            expected_start=expected.start if expected else None,
            expected_end=expected.end if expected else None,
        )
    return period

"""Rent cycle periods and payment gap reconciliation."""
from src.api.rent_cycles.exceptions import (
    EmptyHistoryError,
    InvalidDateError,
    InvalidPolicyError,
    PeriodValidationError,
    RentCycleError,
)
from src.api.rent_cycles.schemas import BillingPeriod, Gap, ValidationResult
from src.api.rent_cycles.services.gap_detector import detect_gaps
from src.api.rent_cycles.services.gap_resolution import select_gap, skip_to_next
from src.api.rent_cycles.services.period_calculator import compute_initial_period, next_period
from src.api.rent_cycles.services.period_validator import ensure_valid_period, validate_period

__all__ = [
    "BillingPeriod", "Gap", "ValidationResult",
    "compute_initial_period", "next_period",
    "validate_period", "ensure_valid_period",
    "detect_gaps", "select_gap", "skip_to_next",
    "RentCycleError", "InvalidDateError", "InvalidPolicyError",
    "PeriodValidationError", "EmptyHistoryError",
]

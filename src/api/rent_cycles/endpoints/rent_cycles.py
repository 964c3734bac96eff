from typing import List
from fastapi import APIRouter, HTTPException, status

from src.api.common.utils.datetime import get_current_date
from src.api.rent_cycles.exceptions import RentCycleError
from src.api.rent_cycles.schemas import (
    BillingPeriod,
    DetectGapsRequest,
    Gap,
    InitialPeriodRequest,
    NextPeriodRequest,
    SkipToNextRequest,
    ValidatePeriodRequest,
    ValidationResult,
)
from src.api.rent_cycles.services.gap_detector import detect_gaps
from src.api.rent_cycles.services.gap_resolution import select_gap, skip_to_next
from src.api.rent_cycles.services.period_calculator import compute_initial_period, next_period
from src.api.rent_cycles.services.period_validator import validate_period

router = APIRouter(prefix="/rent-cycles", tags=["rent-cycles"])


def _bad_request(error: RentCycleError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))


@router.post("/initial-period", response_model=BillingPeriod)
def get_initial_period(request: InitialPeriodRequest):
    """First billing period for an anchor date (usually the joining date)"""
    return compute_initial_period(request.anchor_date, request.policy)


@router.post("/next-period", response_model=BillingPeriod)
def get_next_period(request: NextPeriodRequest):
    """Billing period following one that ended on `previous_end`"""
    return next_period(request.previous_end, request.policy)


@router.post("/validate", response_model=ValidationResult)
def validate(request: ValidatePeriodRequest):
    """
    Check a manually entered period against the cycle policy.

    An invalid result is a regular 200 response; the form is expected to show
    `reason` and block submission.
    """
    return validate_period(request.period, request.policy)


@router.post("/gaps", response_model=List[Gap])
def get_gaps(request: DetectGapsRequest):
    """Missing billing periods between joining and `as_of` (today by default)"""
    as_of = request.as_of or get_current_date()
    try:
        return detect_gaps(request.history, request.joining_date, as_of, request.policy)
    except RentCycleError as e:
        raise _bad_request(e)


@router.post("/gaps/select", response_model=BillingPeriod)
def select_gap_period(gap: Gap):
    """Period to pre-fill a payment with for the selected gap"""
    return select_gap(gap)


@router.post("/skip-to-next", response_model=BillingPeriod)
def get_skip_to_next(request: SkipToNextRequest):
    """Period after the latest payment, ignoring open gaps"""
    try:
        return skip_to_next(request.history, request.policy, request.joining_date)
    except RentCycleError as e:
        raise _bad_request(e)

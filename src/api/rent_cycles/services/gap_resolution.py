from typing import Any, Iterable, Optional

from src.api.rent_cycles.exceptions import EmptyHistoryError
from src.api.rent_cycles.schemas import BillingPeriod, Gap
from src.api.rent_cycles.services.period_calculator import compute_initial_period, next_period


def select_gap(gap: Any) -> BillingPeriod:
    """Period to pre-fill the payment form with when the operator picks a gap."""
    if not isinstance(gap, Gap):
        gap = Gap.model_validate(gap)
    return BillingPeriod(start=gap.gap_start, end=gap.gap_end)


def skip_to_next(history: Iterable[Any], policy: Any, joining_date: Optional[Any] = None) -> BillingPeriod:
    """
    Period right after the latest recorded payment, ignoring open gaps.

    Used when the operator wants to resume billing from the most recent
    payment instead of back-filling. Without any history the first period
    from `joining_date` is proposed.

    Raises:
        EmptyHistoryError: if there is no history and no joining date
    """
    periods = [BillingPeriod.from_value(item) for item in history]
    if not periods:
        if joining_date is None:
            raise EmptyHistoryError()
        return compute_initial_period(joining_date, policy)

    latest_end = max(period.end for period in periods)
    return next_period(latest_end, policy)

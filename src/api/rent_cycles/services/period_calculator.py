from datetime import date
from typing import Any

from src.api.common.constants.rent_cycles import CyclePolicy
from src.api.common.utils.datetime import (
    add_months,
    day_after,
    day_before,
    get_days_in_month,
    get_month_boundaries,
    get_month_end,
)
from src.api.rent_cycles.schemas import BillingPeriod
from src.api.rent_cycles.utils import parse_calendar_date, parse_cycle_policy


def get_midmonth_end(start: date) -> date:
    """
    End of a MIDMONTH period starting on `start`: the day before the same
    day-of-month in the following month.

    If that day does not exist in the following month (Jan 30/31 into
    February, Mar 31 into April) the period runs to the last day of that month.
    """
    following = add_months(start, 1)
    if start.day > get_days_in_month(following.year, following.month):
        return following
    return day_before(following)


def compute_initial_period(anchor_date: Any, policy: Any) -> BillingPeriod:
    """
    First billing period for a tenant anchored on `anchor_date` (usually the
    joining date).

    CALENDAR covers the whole calendar month containing the anchor.
    MIDMONTH starts on the anchor itself.

    Raises:
        InvalidDateError: if the anchor is not a YYYY-MM-DD date
        InvalidPolicyError: if the policy is not CALENDAR or MIDMONTH
    """
    anchor = parse_calendar_date(anchor_date)
    policy = parse_cycle_policy(policy)

    if policy == CyclePolicy.CALENDAR:
        start, end = get_month_boundaries(anchor)
        return BillingPeriod(start=start, end=end)
    return BillingPeriod(start=anchor, end=get_midmonth_end(anchor))


def next_period(previous_end: Any, policy: Any) -> BillingPeriod:
    """
    Period immediately following one that ended on `previous_end`.

    The new period always starts the next day. CALENDAR periods run to the end
    of the month they start in, so a period that ended mid-month is followed by
    the remainder of that month and the cycle is back on month boundaries.
    """
    previous_end = parse_calendar_date(previous_end)
    policy = parse_cycle_policy(policy)

    start = day_after(previous_end)
    if policy == CyclePolicy.CALENDAR:
        return BillingPeriod(start=start, end=get_month_end(start))
    return BillingPeriod(start=start, end=get_midmonth_end(start))

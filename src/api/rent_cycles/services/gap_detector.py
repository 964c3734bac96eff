from datetime import date
from typing import Any, Iterable, List, Optional

from src.api.common.constants.rent_cycles import CyclePolicy
from src.api.common.utils.datetime import day_after, day_before, format_date
from src.api.rent_cycles.exceptions import InvalidDateError
from src.api.rent_cycles.schemas import BillingPeriod, Gap
from src.api.rent_cycles.services.period_calculator import compute_initial_period, next_period
from src.api.rent_cycles.utils import format_period_label, parse_calendar_date, parse_cycle_policy


def merge_periods(history: Iterable[Any]) -> List[BillingPeriod]:
    """
    Collapse payment periods into their sorted union.

    Overlapping, duplicated and back-to-back periods become a single range, so
    a month recorded twice counts once and two adjacent payments read as one
    covered stretch.
    """
    periods = [BillingPeriod.from_value(item) for item in history]
    for period in periods:
        if period.start > period.end:
            raise InvalidDateError(
                period, f"Payment period ends before it starts: "
                        f"{format_date(period.start)} to {format_date(period.end)}")

    merged: List[BillingPeriod] = []
    for period in sorted(periods, key=lambda p: (p.start, p.end)):
        if merged and period.start <= day_after(merged[-1].end):
            if period.end > merged[-1].end:
                merged[-1] = BillingPeriod(start=merged[-1].start, end=period.end)
            continue
        merged.append(period)
    return merged


def _find_covering(covered: List[BillingPeriod], day: date) -> Optional[BillingPeriod]:
    for interval in covered:
        if interval.contains(day):
            return interval
        if interval.start > day:
            break
    return None


def _find_following(covered: List[BillingPeriod], day: date) -> Optional[BillingPeriod]:
    for interval in covered:
        if interval.start > day:
            return interval
    return None


def build_gap(gap_start: date, gap_end: date, policy: CyclePolicy) -> Gap:
    return Gap(
        id=f"gap-{format_date(gap_start)}",
        gap_start=gap_start,
        gap_end=gap_end,
        days_missing=BillingPeriod(start=gap_start, end=gap_end).days,
        label=format_period_label(gap_start, gap_end, policy),
    )


def detect_gaps(history: Iterable[Any], joining_date: Any, as_of: Any, policy: Any) -> List[Gap]:
    """
    Find the billing periods between joining and `as_of` that no payment covers.

    The expected periods are generated from the joining date with the cycle
    policy, one after the other. A period whose first day is already paid for
    is skipped and the cycle resumes the day after the covering payment ends.
    A period that is not paid for is reported, cut short where a later
    payment begins inside it, so gaps never overlap recorded payments.
    Consecutive missing periods are merged into one gap.

    Gap ids depend only on the gap start date, so they survive a refresh as
    long as the history before the gap is unchanged.

    Args:
        history: payment periods in any order (see BillingPeriod.from_value)
        joining_date: tenant move-in date
        as_of: reconcile up to the period containing this date
        policy: CALENDAR or MIDMONTH

    Returns:
        Gaps in chronological order; empty when `as_of` is before joining
    """
    joining_date = parse_calendar_date(joining_date)
    as_of = parse_calendar_date(as_of)
    policy = parse_cycle_policy(policy)
    covered = merge_periods(history)

    if as_of < joining_date:
        return []

    gaps: List[Gap] = []
    run_start: Optional[date] = None
    run_end: Optional[date] = None

    period = compute_initial_period(joining_date, policy)
    while period.start <= as_of:
        covering = _find_covering(covered, period.start)
        if covering is not None:
            if run_start is not None:
                gaps.append(build_gap(run_start, run_end, policy))
                run_start = run_end = None
            period = next_period(covering.end, policy)
            continue

        uncovered_end = period.end
        following = _find_following(covered, period.start)
        if following is not None and following.start <= uncovered_end:
            uncovered_end = day_before(following.start)

        if run_start is None:
            run_start = period.start
        run_end = uncovered_end
        period = next_period(uncovered_end, policy)

    if run_start is not None:
        gaps.append(build_gap(run_start, run_end, policy))
    return gaps

"""
Input normalisation shared by the rent cycle engine.

Every date entering the engine goes through `parse_calendar_date`, which only
understands `YYYY-MM-DD`, optionally followed by an ISO time component that is
dropped. Anything else is rejected; there is no fallback to "today".
"""
import re
from datetime import date, datetime
from typing import Annotated, Any

from pydantic import BeforeValidator

from src.api.common.constants.rent_cycles import CyclePolicy
from src.api.rent_cycles.exceptions import InvalidDateError, InvalidPolicyError

ISO_DATE_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}"
    r"(?:[T ]\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?(?:Z|[+-]\d{2}:?\d{2})?)?$"
)


def parse_calendar_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if ISO_DATE_PATTERN.match(text):
            try:
                return date.fromisoformat(text[:10])
            except ValueError:
                # Well-formed but impossible, e.g. 2024-02-30
                pass
    raise InvalidDateError(value)


def parse_cycle_policy(value: Any) -> CyclePolicy:
    if isinstance(value, CyclePolicy):
        return value
    if isinstance(value, str):
        try:
            return CyclePolicy(value)
        except ValueError:
            pass
    raise InvalidPolicyError(value)


CalendarDate = Annotated[date, BeforeValidator(parse_calendar_date)]


def format_period_label(start: date, end: date, policy: CyclePolicy) -> str:
    """
    Human readable label for a period or gap.

    CALENDAR gaps read as months ("Feb 2024", "Feb 2024 - Mar 2024"),
    MIDMONTH gaps as day ranges ("15 Nov 2025 - 14 Dec 2025").
    """
    if parse_cycle_policy(policy) == CyclePolicy.CALENDAR:
        start_month = start.strftime("%b %Y")
        end_month = end.strftime("%b %Y")
        if start_month == end_month:
            return start_month
        return f"{start_month} - {end_month}"
    return f"{start.day} {start.strftime('%b %Y')} - {end.day} {end.strftime('%b %Y')}"

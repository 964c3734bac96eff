import calendar
from datetime import date, datetime, timezone, timedelta


def get_current_datetime() -> datetime:
    """Return current UTC datetime with timezone info."""
    dt = datetime.now(timezone.utc)
    # Ensure microseconds are stripped for consistency in tests
    return dt.replace(microsecond=0)


def get_current_date() -> date:
    """Return the current UTC calendar date."""
    return get_current_datetime().date()


def format_date(value: date) -> str:
    """Render a date in the canonical YYYY-MM-DD shape."""
    return value.strftime("%Y-%m-%d")


def get_days_in_month(year: int, month: int) -> int:
    _, last_day = calendar.monthrange(year, month)
    return last_day


def get_month_boundaries(target_month: date) -> tuple[date, date]:
    """
    Get the start and end dates for a given month.

    Args:
        target_month: Any date within the month

    Returns:
        Tuple of (month_start, month_end) dates
    """
    return get_month_start(target_month), get_month_end(target_month)


def get_month_start(target_month: date) -> date:
    """Get the first day of the given month."""
    return target_month.replace(day=1)


def get_month_end(target_month: date) -> date:
    """Get the last day of the given month."""
    return target_month.replace(
        day=get_days_in_month(target_month.year, target_month.month))


def add_months(value: date, months: int) -> date:
    """
    Move a date by a number of months, keeping the day of month.

    When the day does not exist in the destination month it is clamped to
    that month's last day (Jan 31 + 1 month is Feb 28/29, never early March).
    """
    month_index = value.year * 12 + (value.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(value.day, get_days_in_month(year, month))
    return date(year, month, day)


def count_days_inclusive(start: date, end: date) -> int:
    return (end - start).days + 1


def day_before(value: date) -> date:
    return value - timedelta(days=1)


def day_after(value: date) -> date:
    return value + timedelta(days=1)

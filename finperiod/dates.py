"""Date utilities for finperiod.

Pure functions for calendar arithmetic and formatting. Nothing here reads
the system clock; callers pass "today" in explicitly.
"""

from datetime import date, datetime, timedelta

from finperiod.domain.models import InvalidMonth, YearMonth

ISO_DATE = "%Y-%m-%d"


def month_start(day: date) -> date:
    """First day of the month containing day."""
    return day.replace(day=1)


def month_end(day: date) -> date:
    """Last day of the month containing day."""
    if day.month == 12:
        return day.replace(day=31)
    return day.replace(month=day.month + 1, day=1) - timedelta(days=1)


def week_start(day: date) -> date:
    """Monday of the ISO week containing day."""
    return shift_days(day, -day.weekday())


def week_end(day: date) -> date:
    """Sunday of the ISO week containing day."""
    return shift_days(day, 6 - day.weekday())


def shift_days(day: date, days: int) -> date:
    """Move a date by a number of calendar days.

    Raises:
        InvalidMonth: If the result falls outside the supported calendar.
    """
    try:
        return day + timedelta(days=days)
    except OverflowError as e:
        raise InvalidMonth(f"Moving {day} by {days} days leaves the supported calendar") from e


def add_months(month: YearMonth, months: int) -> YearMonth:
    """Add months to a calendar month, carrying into the year.

    Args:
        month: Starting month.
        months: Number of months to add (negative to go back).

    Returns:
        The resulting month.

    Raises:
        InvalidMonth: If the result falls outside the supported calendar.
    """
    index = month.year * 12 + (month.month - 1) + months
    return YearMonth(index // 12, index % 12 + 1)


def parse_date(value: str) -> date:
    """Parse a date in YYYY-MM-DD format.

    Raises:
        ValueError: If the string is not a valid date.
    """
    return datetime.strptime(value.strip(), ISO_DATE).date()


def format_date(day: date, fmt: str = ISO_DATE) -> str:
    """Format a date, YYYY-MM-DD by default.

    %Y always renders as four digits, including years before 1000.
    """
    return day.strftime(fmt.replace("%Y", f"{day.year:04d}"))

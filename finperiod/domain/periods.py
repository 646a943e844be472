"""Pure functions for period labels and navigation.

This module contains the functional core for the period filter control:
- No I/O operations (no clock, no console, no files)
- No side effects
- Every transition returns a new PeriodState
- Easy to test

"today" is always passed in by the caller.
"""

from dataclasses import dataclass
from datetime import date

from finperiod.dates import add_months, format_date, month_end, month_start, shift_days, week_end, week_start
from finperiod.domain.models import DateRange, InvalidRange, PeriodState, PeriodType, YearMonth

REPORT_TYPES: dict[PeriodType, str] = {
    PeriodType.DAY: "DAILY",
    PeriodType.WEEK: "WEEKLY",
    PeriodType.MONTH: "MONTHLY",
    PeriodType.YEAR: "YEARLY",
    PeriodType.CUSTOM: "CUSTOM",
}


@dataclass(frozen=True)
class LabelStyle:
    """Immutable display settings for period labels."""

    date_format: str = "%d/%m/%Y"
    separator: str = " - "
    current_month: str = "This month"

    def format_date(self, day: date) -> str:
        return format_date(day, self.date_format)

    def format_range(self, start: date, end: date) -> str:
        return f"{self.format_date(start)}{self.separator}{self.format_date(end)}"


def default_state(today: date) -> PeriodState:
    """Initial period selection: the month containing today."""
    return PeriodState(type=PeriodType.MONTH, reference_date=today)


def custom_state(start: date, end: date) -> PeriodState:
    """Create a custom period state.

    Raises:
        InvalidRange: If start is after end.
    """
    return PeriodState(type=PeriodType.CUSTOM, reference_date=start, custom_start=start, custom_end=end)


def select_period_type(period_type: PeriodType, today: date) -> PeriodState:
    """State for a freshly selected period type.

    Day, Week, Month and Year anchor on today. Custom starts out as the
    whole of the current month.

    Args:
        period_type: Newly selected period type.
        today: Current date supplied by the caller.

    Returns:
        New PeriodState.
    """
    if period_type == PeriodType.CUSTOM:
        return custom_state(month_start(today), month_end(today))
    return PeriodState(type=period_type, reference_date=today)


def period_range(state: PeriodState) -> DateRange:
    """Full date range covered by a period.

    Args:
        state: Period state.

    Returns:
        Inclusive DateRange (the day, ISO week, month, year or custom window).
    """
    ref = state.reference_date
    if state.type == PeriodType.DAY:
        return DateRange(ref, ref)
    if state.type == PeriodType.WEEK:
        return DateRange(week_start(ref), week_end(ref))
    if state.type == PeriodType.MONTH:
        return DateRange(month_start(ref), month_end(ref))
    if state.type == PeriodType.YEAR:
        return DateRange(date(ref.year, 1, 1), date(ref.year, 12, 31))
    if state.type == PeriodType.CUSTOM:
        return _custom_range(state)
    raise ValueError(f"Unknown period type: {state.type}")


def report_type(state: PeriodState) -> str:
    """Report type code the reporting backend expects for a period."""
    return REPORT_TYPES[state.type]


def label_for(state: PeriodState, today: date, style: LabelStyle | None = None) -> str:
    """Human-readable label for a period.

    Args:
        state: Period state.
        today: Current date supplied by the caller.
        style: Display settings. Defaults to dd/MM/yyyy with " - ".

    Returns:
        Label text. The month containing today is shown as the
        current-month token rather than a date range.
    """
    if style is None:
        style = LabelStyle()

    ref = state.reference_date
    if state.type == PeriodType.DAY:
        return style.format_date(ref)
    if state.type == PeriodType.YEAR:
        return f"{ref.year:04d}"
    if state.type == PeriodType.MONTH and YearMonth.of(ref) == YearMonth.of(today):
        return style.current_month

    covered = period_range(state)
    return style.format_range(covered.start, covered.end)


def next_period(state: PeriodState) -> PeriodState:
    """Period immediately after the given one.

    Raises:
        InvalidMonth: If the result falls outside the supported calendar.
    """
    return _step(state, 1)


def previous_period(state: PeriodState) -> PeriodState:
    """Period immediately before the given one.

    Raises:
        InvalidMonth: If the result falls outside the supported calendar.
    """
    return _step(state, -1)


def _step(state: PeriodState, direction: int) -> PeriodState:
    ref = state.reference_date
    if state.type == PeriodType.DAY:
        return PeriodState(type=state.type, reference_date=shift_days(ref, direction))
    if state.type == PeriodType.WEEK:
        return PeriodState(type=state.type, reference_date=shift_days(ref, 7 * direction))
    if state.type == PeriodType.MONTH:
        # Month arithmetic, re-anchored to day 1 so Jan 31 + 1 month is February
        target = add_months(YearMonth.of(ref), direction)
        return PeriodState(type=state.type, reference_date=date(target.year, target.month, 1))
    if state.type == PeriodType.YEAR:
        return PeriodState(type=state.type, reference_date=_shift_year(ref, direction))
    if state.type == PeriodType.CUSTOM:
        window = _custom_range(state)
        offset = window.days * direction
        return custom_state(shift_days(window.start, offset), shift_days(window.end, offset))
    raise ValueError(f"Unknown period type: {state.type}")


def _shift_year(day: date, years: int) -> date:
    # Validates the target year before touching the date
    year = YearMonth(day.year + years, day.month).year
    try:
        return day.replace(year=year)
    except ValueError:
        # Feb 29 in a non-leap target year
        return day.replace(year=year, day=28)


def _custom_range(state: PeriodState) -> DateRange:
    if state.custom_start is None or state.custom_end is None:
        raise InvalidRange("Custom period is missing its bounds")
    return DateRange(state.custom_start, state.custom_end)

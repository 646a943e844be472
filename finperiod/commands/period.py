"""Period commands for labels, navigation and week segments."""

import sys
import tomllib
from datetime import date

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from finperiod.config import get_config_path, load_label_style
from finperiod.dates import format_date, parse_date
from finperiod.domain.models import PeriodError, PeriodState, PeriodType, YearMonth
from finperiod.domain.partition import partition_month, segment_key
from finperiod.domain.periods import (
    LabelStyle,
    custom_state,
    label_for,
    next_period,
    period_range,
    previous_period,
    report_type,
    select_period_type,
)

console = Console()


def resolve_today(today: str | None) -> date:
    """Parse --today, defaulting to the system date.

    This is the only place that reads the clock.
    """
    if today:
        return parse_date(today)
    return date.today()


def build_state(
    period_type: str,
    reference: str | None,
    start: str | None,
    end: str | None,
    today: date,
) -> PeriodState:
    """Build a period state from command line values.

    Args:
        period_type: One of day, week, month, year, custom.
        reference: Reference date (YYYY-MM-DD), defaults to today.
        start: Custom start date (YYYY-MM-DD).
        end: Custom end date (YYYY-MM-DD).
        today: Current date.

    Returns:
        PeriodState for the requested period.

    Raises:
        ValueError: If the type or a date is invalid.
        PeriodError: If the custom range is reversed.
    """
    kind = PeriodType(period_type.lower())

    if kind == PeriodType.CUSTOM:
        if start is None and end is None:
            return select_period_type(kind, today)
        if start is None or end is None:
            raise ValueError("Custom periods need both --start and --end")
        return custom_state(parse_date(start), parse_date(end))

    anchor = parse_date(reference) if reference else today
    return PeriodState(type=kind, reference_date=anchor)


def describe_state(state: PeriodState) -> str:
    """Short machine-friendly description of a state."""
    if state.type == PeriodType.CUSTOM and state.custom_start and state.custom_end:
        return f"custom {format_date(state.custom_start)}..{format_date(state.custom_end)}"
    return f"{state.type} {format_date(state.reference_date)}"


def load_state_or_exit(
    period_type: str,
    reference: str | None,
    start: str | None,
    end: str | None,
    today: str | None,
) -> tuple[PeriodState, date]:
    """Parse command line period values, exiting on invalid input."""
    try:
        current = resolve_today(today)
        return build_state(period_type, reference, start, end, current), current
    except PeriodError as e:
        console.print(f"[red]Invalid period: {e}[/red]", style="bold")
        sys.exit(1)
    except ValueError as e:
        console.print(f"[red]Invalid input: {e}[/red]", style="bold")
        sys.exit(1)


def load_style_or_exit() -> LabelStyle:
    """Load label settings from the config file, exiting if it is malformed."""
    try:
        return load_label_style()
    except tomllib.TOMLDecodeError as e:
        console.print(f"[red]Config file is invalid: {escape(str(e))}[/red]", style="bold")
        console.print(f"[dim]Fix or remove {get_config_path()}[/dim]")
        sys.exit(1)


def label_command(
    period_type: str,
    reference: str | None = None,
    start: str | None = None,
    end: str | None = None,
    today: str | None = None,
) -> None:
    """Print the label for a period."""
    state, current = load_state_or_exit(period_type, reference, start, end, today)
    style = load_style_or_exit()

    try:
        console.print(label_for(state, current, style))
    except PeriodError as e:
        console.print(f"[red]Invalid period: {e}[/red]", style="bold")
        sys.exit(1)


def navigate_command(
    direction: str,
    period_type: str,
    reference: str | None = None,
    start: str | None = None,
    end: str | None = None,
    today: str | None = None,
) -> None:
    """Move to the next or previous period and print it."""
    state, current = load_state_or_exit(period_type, reference, start, end, today)
    style = load_style_or_exit()

    step = next_period if direction == "next" else previous_period
    try:
        moved = step(state)
        label = label_for(moved, current, style)
    except PeriodError as e:
        console.print(f"[red]Cannot move {direction}: {e}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[bold]{label}[/bold]")
    console.print(f"[dim]{describe_state(moved)}[/dim]")


def range_command(
    period_type: str,
    reference: str | None = None,
    start: str | None = None,
    end: str | None = None,
    today: str | None = None,
) -> None:
    """Print the query range and report type for a period."""
    state, _ = load_state_or_exit(period_type, reference, start, end, today)

    try:
        covered = period_range(state)
    except PeriodError as e:
        console.print(f"[red]Invalid period: {e}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[cyan]{report_type(state)}[/cyan] {format_date(covered.start)} → {format_date(covered.end)}")
    console.print(f"[dim]{covered.days} days[/dim]")


def weeks_command(month: str) -> None:
    """Print the week segments of a month."""
    try:
        segments = partition_month(YearMonth.parse(month))
    except PeriodError as e:
        console.print(f"[red]Invalid month: {e}[/red]", style="bold")
        sys.exit(1)

    table = Table(title=f"Weeks of {month}")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Start", style="cyan")
    table.add_column("End", style="cyan")
    table.add_column("Days", justify="right")
    table.add_column("Key", style="dim")

    for index, segment in enumerate(segments, start=1):
        table.add_row(
            str(index),
            f"{segment.start:%a %d}",
            f"{segment.end:%a %d}",
            str(segment.days),
            segment_key(segment),
        )

    console.print(table)

"""Chart command for bucketing daily values into a period's chart."""

import math
import re
import sys
from datetime import date
from pathlib import Path

import pandas as pd
from rich.console import Console
from rich.table import Table

from finperiod.commands.period import load_state_or_exit, load_style_or_exit
from finperiod.dates import parse_date
from finperiod.domain.chart import aggregate, calculate_histogram_bar_length, chart_buckets
from finperiod.domain.models import DailyRecord, Money, PeriodError
from finperiod.domain.periods import label_for, period_range

console = Console()

BAR_WIDTH = 30

ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def normalize_date(raw_date: str) -> date:
    """Parse a date from a CSV cell.

    ISO dates are parsed strictly; anything else goes through
    pandas.to_datetime with day-first ordering (31/01/2024).

    Args:
        raw_date: Raw date string from CSV.

    Returns:
        Parsed calendar date.

    Raises:
        ValueError: If date cannot be parsed.
    """
    try:
        if ISO_DATE_PATTERN.match(raw_date.strip()):
            return parse_date(raw_date)
        return pd.to_datetime(raw_date, dayfirst=True).date()
    except (ValueError, pd.errors.ParserError) as e:
        raise ValueError(f"Could not parse date '{raw_date}': {e}") from e


def parse_money(raw_amount: str) -> Money:
    """Parse an amount in major units to minor units.

    Raises:
        ValueError: If the amount is not a finite number.
    """
    try:
        amount = float(raw_amount) * 100
    except ValueError as e:
        raise ValueError(f"Could not parse amount '{raw_amount}'") from e
    if not math.isfinite(amount):
        raise ValueError(f"Amount '{raw_amount}' is not a finite number")
    return Money(round(amount))


def load_daily_records(csv_path: Path) -> list[DailyRecord]:
    """Load daily values from a CSV with date and value columns.

    Args:
        csv_path: Path to the CSV file.

    Returns:
        Parsed records in file order.

    Raises:
        ValueError: If a column is missing or a row cannot be parsed.
    """
    frame = pd.read_csv(csv_path, dtype=str)
    columns = {name.strip().lower(): name for name in frame.columns}
    if "date" not in columns or "value" not in columns:
        raise ValueError("CSV must have 'date' and 'value' columns")

    records: list[DailyRecord] = []
    for raw_date, raw_value in zip(frame[columns["date"]], frame[columns["value"]]):
        if pd.isna(raw_date) or pd.isna(raw_value):
            continue
        records.append(DailyRecord(day=normalize_date(raw_date), value=parse_money(raw_value)))
    return records


def chart_command(
    csv_file: str,
    period_type: str,
    reference: str | None = None,
    start: str | None = None,
    end: str | None = None,
    today: str | None = None,
    histogram: bool = True,
) -> None:
    """Bucket daily values from a CSV into the chart for a period."""
    state, current = load_state_or_exit(period_type, reference, start, end, today)

    csv_path = Path(csv_file).expanduser()
    if not csv_path.exists():
        console.print(f"[red]File not found: {csv_path}[/red]", style="bold")
        sys.exit(1)

    style = load_style_or_exit()
    try:
        records = load_daily_records(csv_path)
        buckets = chart_buckets(state)
        label = label_for(state, current, style)
    except PeriodError as e:
        console.print(f"[red]Invalid period: {e}[/red]", style="bold")
        sys.exit(1)
    except ValueError as e:
        console.print(f"[red]Could not read {csv_path.name}: {e}[/red]", style="bold")
        sys.exit(1)

    totals = aggregate(records, buckets)
    max_amount = Money(max((abs(total) for total in totals), default=0))

    table = Table(title=label)
    table.add_column("Bucket", style="cyan")
    table.add_column("Range", style="dim")
    table.add_column("Total", justify="right")
    if histogram:
        table.add_column("")

    for bucket, total in zip(buckets, totals):
        row = [
            bucket.label,
            f"{bucket.range.start:%d/%m} - {bucket.range.end:%d/%m}",
            f"{total / 100:,.2f}",
        ]
        if histogram:
            row.append("█" * calculate_histogram_bar_length(total, max_amount, BAR_WIDTH))
        table.add_row(*row)

    console.print(table)
    console.print(f"\n[bold]Total:[/bold] {sum(totals) / 100:,.2f}")
    covered = period_range(state)
    skipped = sum(1 for record in records if not covered.contains(record.day))
    if skipped:
        console.print(f"[dim]{skipped} record(s) outside this period were ignored[/dim]")

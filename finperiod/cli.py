"""CLI entry point for finperiod."""

import typer

from finperiod.commands.admin import init_command
from finperiod.commands.chart import chart_command
from finperiod.commands.period import label_command, navigate_command, range_command, weeks_command

app = typer.Typer(
    name="finperiod",
    help="Reporting period labels, navigation and weekly chart buckets",
    add_completion=False,
)

TYPE_HELP = "Period type: day, week, month, year or custom"


@app.callback()
def main() -> None:
    """Reporting period labels, navigation and weekly chart buckets."""
    pass


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Create the default configuration file."""
    init_command(force)


@app.command()
def label(
    period_type: str = typer.Option("month", "--type", "-t", help=TYPE_HELP),
    date: str = typer.Option(None, "--date", "-d", help="Reference date (YYYY-MM-DD, default: today)"),
    start: str = typer.Option(None, "--start", help="Custom period start (YYYY-MM-DD)"),
    end: str = typer.Option(None, "--end", help="Custom period end (YYYY-MM-DD)"),
    today: str = typer.Option(None, "--today", help="Override today's date (YYYY-MM-DD)"),
) -> None:
    """Show the label for a period."""
    label_command(period_type, date, start, end, today)


@app.command(name="next")
def next_(
    period_type: str = typer.Option("month", "--type", "-t", help=TYPE_HELP),
    date: str = typer.Option(None, "--date", "-d", help="Reference date (YYYY-MM-DD, default: today)"),
    start: str = typer.Option(None, "--start", help="Custom period start (YYYY-MM-DD)"),
    end: str = typer.Option(None, "--end", help="Custom period end (YYYY-MM-DD)"),
    today: str = typer.Option(None, "--today", help="Override today's date (YYYY-MM-DD)"),
) -> None:
    """Move to the next period."""
    navigate_command("next", period_type, date, start, end, today)


@app.command(name="prev")
def prev(
    period_type: str = typer.Option("month", "--type", "-t", help=TYPE_HELP),
    date: str = typer.Option(None, "--date", "-d", help="Reference date (YYYY-MM-DD, default: today)"),
    start: str = typer.Option(None, "--start", help="Custom period start (YYYY-MM-DD)"),
    end: str = typer.Option(None, "--end", help="Custom period end (YYYY-MM-DD)"),
    today: str = typer.Option(None, "--today", help="Override today's date (YYYY-MM-DD)"),
) -> None:
    """Move to the previous period."""
    navigate_command("previous", period_type, date, start, end, today)


@app.command(name="range")
def range_(
    period_type: str = typer.Option("month", "--type", "-t", help=TYPE_HELP),
    date: str = typer.Option(None, "--date", "-d", help="Reference date (YYYY-MM-DD, default: today)"),
    start: str = typer.Option(None, "--start", help="Custom period start (YYYY-MM-DD)"),
    end: str = typer.Option(None, "--end", help="Custom period end (YYYY-MM-DD)"),
    today: str = typer.Option(None, "--today", help="Override today's date (YYYY-MM-DD)"),
) -> None:
    """Show the date range and report type a period queries."""
    range_command(period_type, date, start, end, today)


@app.command()
def weeks(month: str) -> None:
    """Show the week segments of a month (YYYY-MM)."""
    weeks_command(month)


@app.command()
def chart(
    csv_file: str,
    period_type: str = typer.Option("month", "--type", "-t", help=TYPE_HELP),
    date: str = typer.Option(None, "--date", "-d", help="Reference date (YYYY-MM-DD, default: today)"),
    start: str = typer.Option(None, "--start", help="Custom period start (YYYY-MM-DD)"),
    end: str = typer.Option(None, "--end", help="Custom period end (YYYY-MM-DD)"),
    today: str = typer.Option(None, "--today", help="Override today's date (YYYY-MM-DD)"),
    histogram: bool = typer.Option(True, help="Show histogram bars"),
) -> None:
    """Bucket daily values from a CSV (date,value) into the period's chart."""
    chart_command(csv_file, period_type, date, start, end, today, histogram)


if __name__ == "__main__":
    app()

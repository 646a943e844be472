"""Pure functions for turning a period into chart buckets.

This module contains the functional core for the report chart:
- No I/O operations
- No side effects
- Buckets are recomputed on every call

All monetary amounts are in minor units (Money type).
"""

from calendar import month_abbr
from collections.abc import Iterable, Mapping
from datetime import date
from typing import Any

from finperiod.dates import format_date, month_end, shift_days
from finperiod.domain.models import ChartBucket, DailyRecord, DateRange, Money, PeriodState, PeriodType, YearMonth
from finperiod.domain.partition import partition_month, segment_key, segment_label
from finperiod.domain.periods import period_range


def day_bucket(day: date) -> ChartBucket:
    """Bucket covering a single day, keyed by its ISO date."""
    return ChartBucket(label=f"{day:%d}", range=DateRange(day, day), key=format_date(day))


def range_bucket(label: str, covered: DateRange) -> ChartBucket:
    """Bucket covering a range, keyed as "start_to_end"."""
    return ChartBucket(label=label, range=covered, key=segment_key(covered))


def chart_buckets(state: PeriodState) -> list[ChartBucket]:
    """Chart buckets for a period.

    Args:
        state: Period state.

    Returns:
        Day: the single day.
        Week: the seven days of the ISO week.
        Month: one bucket per week segment of the month.
        Year: one bucket per calendar month.
        Custom: the whole window as one bucket.
    """
    covered = period_range(state)

    if state.type == PeriodType.DAY:
        return [day_bucket(covered.start)]

    if state.type == PeriodType.WEEK:
        return [day_bucket(shift_days(covered.start, offset)) for offset in range(7)]

    if state.type == PeriodType.MONTH:
        segments = partition_month(YearMonth.of(covered.start))
        return [range_bucket(segment_label(segment), segment) for segment in segments]

    if state.type == PeriodType.YEAR:
        buckets = []
        for month in range(1, 13):
            first = date(covered.start.year, month, 1)
            buckets.append(range_bucket(month_abbr[month], DateRange(first, month_end(first))))
        return buckets

    label = f"{covered.start:%d/%m}-{covered.end:%d/%m}"
    return [range_bucket(label, covered)]


def aggregate(records: Iterable[DailyRecord], buckets: list[ChartBucket]) -> list[Money]:
    """Sum daily values into buckets.

    Args:
        records: Daily values to aggregate.
        buckets: Buckets in display order.

    Returns:
        One total per bucket, in bucket order. Records outside every
        bucket are ignored.
    """
    totals = [0] * len(buckets)
    for record in records:
        for index, bucket in enumerate(buckets):
            if bucket.range.contains(record.day):
                totals[index] += record.value
                break
    return [Money(total) for total in totals]


def pick_amount(income: Money | None, expense: Money | None) -> Money:
    """Amount to chart for a bucket: income if non-zero, else expense, else zero."""
    if income:
        return income
    if expense:
        return expense
    return Money(0)


def series_from_report(buckets: list[ChartBucket], report: Mapping[str, Mapping[str, Any]]) -> list[Money]:
    """Map a backend report payload onto chart buckets.

    Args:
        buckets: Buckets in display order.
        report: Mapping of bucket key to {"income": ..., "expense": ...}.

    Returns:
        One amount per bucket; buckets missing from the report chart as zero.
    """
    series: list[Money] = []
    for bucket in buckets:
        entry = report.get(bucket.key, {})
        series.append(pick_amount(entry.get("income"), entry.get("expense")))
    return series


def calculate_histogram_bar_length(
    amount: Money,
    max_amount: Money,
    bar_width: int,
) -> int:
    """Calculate histogram bar length.

    Args:
        amount: Amount to display.
        max_amount: Largest absolute amount in the series.
        bar_width: Maximum bar width in characters.

    Returns:
        Bar length in characters.
    """
    if max_amount <= 0:
        return 0
    return int((abs(amount) / max_amount) * bar_width)

"""Pure functions for splitting a month into weekly segments.

Segments follow ISO weeks (Monday to Sunday) clipped to the month, so the
first and last segment can be shorter than seven days. A month splits into
4, 5 or 6 segments.
"""

from datetime import date

from finperiod.dates import format_date, month_end, shift_days
from finperiod.domain.models import WeekSegment, YearMonth


def partition_month(month: YearMonth | tuple[int, int]) -> list[WeekSegment]:
    """Partition a calendar month into week segments.

    Args:
        month: Calendar month, as a YearMonth or a (year, month) pair.

    Returns:
        Contiguous, non-overlapping segments in ascending order whose union
        is exactly the month.

    Raises:
        InvalidMonth: If the year or month is out of range.
    """
    if not isinstance(month, YearMonth):
        month = YearMonth(*month)

    first = date(month.year, month.month, 1)
    last = month_end(first)

    segments: list[WeekSegment] = []
    cursor = shift_days(first, -first.weekday())
    while True:
        # End of this ISO week, capped at the month end
        end = shift_days(cursor, min(6, (last - cursor).days))
        segments.append(WeekSegment(start=max(cursor, first), end=end))
        if end == last:
            break
        cursor = shift_days(end, 1)

    return segments


def segment_label(segment: WeekSegment) -> str:
    """Chart axis label for a segment (e.g., "01-07")."""
    return f"{segment.start:%d}-{segment.end:%d}"


def segment_key(segment: WeekSegment) -> str:
    """Report key for a segment (e.g., "2024-01-01_to_2024-01-07")."""
    return f"{format_date(segment.start)}_to_{format_date(segment.end)}"

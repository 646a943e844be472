"""Domain models and types for finperiod.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations, not even reading the clock
- Easy to test
- Period logic separated from the command line
"""

from finperiod.domain.models import (
    ChartBucket,
    DailyRecord,
    DateRange,
    InvalidMonth,
    InvalidRange,
    Money,
    PeriodError,
    PeriodState,
    PeriodType,
    WeekSegment,
    YearMonth,
)

__all__ = [
    "ChartBucket",
    "DailyRecord",
    "DateRange",
    "InvalidMonth",
    "InvalidRange",
    "Money",
    "PeriodError",
    "PeriodState",
    "PeriodType",
    "WeekSegment",
    "YearMonth",
]

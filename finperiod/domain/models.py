"""Domain type definitions for finperiod.

These types describe a selected reporting period and the calendar ranges
derived from it:
- Money: Amount in minor units (pence, cents, dong)
- PeriodType: Which kind of period is selected
- YearMonth: A validated calendar month
- DateRange: Inclusive range of calendar days
- PeriodState: The complete, immutable period selection
"""

from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date
from enum import StrEnum
from typing import NewType

# Money amounts are stored as minor units to avoid floating point errors
Money = NewType("Money", int)


class PeriodError(ValueError):
    """Base class for invalid period input."""


class InvalidRange(PeriodError):
    """A date range whose start falls after its end, or is missing a bound."""


class InvalidMonth(PeriodError):
    """A year/month outside the supported calendar."""


class PeriodType(StrEnum):
    """Kinds of reporting period a user can select."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    CUSTOM = "custom"


@dataclass(frozen=True)
class YearMonth:
    """Immutable calendar month."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise InvalidMonth(f"Month must be between 1 and 12, got {self.month}")
        if not MINYEAR <= self.year <= MAXYEAR:
            raise InvalidMonth(f"Year must be between {MINYEAR} and {MAXYEAR}, got {self.year}")

    @classmethod
    def parse(cls, value: str) -> "YearMonth":
        """Parse a month in YYYY-MM format.

        Raises:
            InvalidMonth: If the string is not a valid YYYY-MM month.
        """
        parts = value.strip().split("-")
        if len(parts) != 2 or not all(part.isdigit() for part in parts):
            raise InvalidMonth(f"Expected YYYY-MM, got '{value}'")
        return cls(int(parts[0]), int(parts[1]))

    @classmethod
    def of(cls, day: date) -> "YearMonth":
        return cls(day.year, day.month)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


@dataclass(frozen=True)
class DateRange:
    """Immutable inclusive range of calendar days."""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise InvalidRange(f"Range start {self.start} is after end {self.end}")

    @property
    def days(self) -> int:
        """Number of days in the range, counting both ends."""
        return (self.end - self.start).days + 1

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


# A DateRange produced by partitioning a month into weeks
WeekSegment = DateRange


@dataclass(frozen=True)
class PeriodState:
    """Immutable description of the selected reporting period.

    reference_date drives Day/Week/Month/Year periods. custom_start and
    custom_end are only meaningful (and then required) for Custom periods.
    """

    type: PeriodType
    reference_date: date
    custom_start: date | None = None
    custom_end: date | None = None

    def __post_init__(self) -> None:
        if self.type == PeriodType.WEEK and (date.max - self.reference_date).days < 6 - self.reference_date.weekday():
            raise InvalidMonth(f"The week containing {self.reference_date} runs past the supported calendar")
        if self.type != PeriodType.CUSTOM:
            return
        if self.custom_start is None or self.custom_end is None:
            raise InvalidRange("Custom period requires both a start and an end date")
        if self.custom_start > self.custom_end:
            raise InvalidRange(f"Custom period start {self.custom_start} is after end {self.custom_end}")


@dataclass(frozen=True)
class ChartBucket:
    """Immutable chart bucket: an axis label, the days it covers and its report key."""

    label: str
    range: DateRange
    key: str


@dataclass(frozen=True)
class DailyRecord:
    """Immutable daily value supplied for aggregation."""

    day: date
    value: Money

"""DateRange value object.

Immutable closed interval [start, end] of datetimes.

Usage:
    from datetime import datetime
    from utilbox.dates import DateRange

    january = DateRange(datetime(2024, 1, 1), datetime(2024, 1, 31))
    january.days  # 30
"""

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime, time, timedelta
from typing import Self

from utilbox.dates import datetime_utils


@dataclass(frozen=True, slots=True)
class DateRange:
    """Immutable range of datetimes.

    Attributes:
        start: Start of the range.
        end: End of the range (must not precede start).

    Raises:
        ValueError: If start is later than end.
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError("Start date must be before the end date")

    def overlaps(self, other: "DateRange") -> bool:
        """Check for a strict overlap (ranges that only touch do not overlap)."""
        return self.start < other.end and other.start < self.end

    def intersection(self, other: "DateRange") -> "DateRange | None":
        """Return the overlapping part of two ranges, or None."""
        if not self.overlaps(other):
            return None
        return DateRange(max(self.start, other.start), min(self.end, other.end))

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    @property
    def days(self) -> int:
        """Number of full days in the range."""
        return self.duration.days

    @property
    def weeks(self) -> int:
        """Number of full weeks in the range."""
        return self.duration.days // 7

    @property
    def months(self) -> int:
        """Calendar month difference between start and end."""
        return (self.end.year - self.start.year) * 12 + self.end.month - self.start.month

    @property
    def years(self) -> int:
        """Calendar year difference between start and end."""
        return self.end.year - self.start.year

    @property
    def exact_days(self) -> float:
        """Duration in days including the fractional part."""
        return self.duration / timedelta(days=1)

    def iter_days(self) -> Iterator[datetime]:
        """Yield midnight of every calendar day touched by the range."""
        day = datetime_utils.start_of_day(self.start)
        last = datetime_utils.start_of_day(self.end)
        while day <= last:
            yield day
            day += timedelta(days=1)

    def iter_months(self) -> Iterator["DateRange"]:
        """Yield one sub-range per calendar month, clipped to this range.

        An end exactly at midnight is treated as covering that whole day.
        """
        effective_end = self.end
        if self.end.time() == time(0):
            effective_end = datetime_utils.end_of_day(self.end)

        month = datetime_utils.start_of_month(self.start)
        while month <= effective_end:
            month_end = datetime_utils.end_of_month(month)
            yield DateRange(max(month, self.start), min(month_end, effective_end))
            month = datetime_utils.add_months(month, 1)

    def extend(self, duration: timedelta, *, extend_end: bool = True) -> Self:
        """Return a copy widened by duration at the end (default) or the start."""
        if extend_end:
            return type(self)(self.start, self.end + duration)
        return type(self)(self.start - duration, self.end)

    def contains(self, value: datetime) -> bool:
        """Check if value lies within the range (inclusive)."""
        return self.start <= value <= self.end

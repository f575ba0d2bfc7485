"""Factories and bulk operations producing DateRange values.

The relative helpers (current_day, next_month, ...) anchor on the current
UTC time and return timezone-aware ranges.

Usage:
    from utilbox.dates import date_range_utils

    this_month = date_range_utils.current_month()
    weeks = date_range_utils.generate_weekly_ranges(datetime(2024, 1, 1), 4)
"""

from collections.abc import Iterable, Iterator
from datetime import UTC, datetime, timedelta

from utilbox.dates import datetime_utils
from utilbox.dates.date_range import DateRange


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _day_of(value: datetime) -> DateRange:
    return DateRange(datetime_utils.start_of_day(value), datetime_utils.end_of_day(value))


def _week_of(value: datetime) -> DateRange:
    return DateRange(datetime_utils.start_of_week(value), datetime_utils.end_of_week(value))


def _month_of(value: datetime) -> DateRange:
    return DateRange(datetime_utils.start_of_month(value), datetime_utils.end_of_month(value))


def _year_of(value: datetime) -> DateRange:
    return DateRange(datetime_utils.start_of_year(value), datetime_utils.end_of_year(value))


def current_day() -> DateRange:
    return _day_of(_utc_now())


def next_day() -> DateRange:
    return _day_of(_utc_now() + timedelta(days=1))


def previous_day() -> DateRange:
    return _day_of(_utc_now() - timedelta(days=1))


def current_week() -> DateRange:
    """Sunday through Saturday of the current UTC week."""
    return _week_of(_utc_now())


def current_month() -> DateRange:
    return _month_of(_utc_now())


def next_month() -> DateRange:
    return _month_of(datetime_utils.add_months(_utc_now(), 1))


def previous_month() -> DateRange:
    return _month_of(datetime_utils.add_months(_utc_now(), -1))


def current_year() -> DateRange:
    return _year_of(_utc_now())


def next_year() -> DateRange:
    return _year_of(datetime_utils.add_years(_utc_now(), 1))


def previous_year() -> DateRange:
    return _year_of(datetime_utils.add_years(_utc_now(), -1))


def month_of_year(year: int, month: int) -> DateRange:
    """Range covering a calendar month (naive datetimes).

    Raises:
        ValueError: If month is outside 1-12.
    """
    return _month_of(datetime(year, month, 1))


def year(value: int) -> DateRange:
    """Range covering a calendar year (naive datetimes)."""
    return _year_of(datetime(value, 1, 1))


def merge_ranges(ranges: Iterable[DateRange]) -> DateRange:
    """Return the single range spanning the earliest start to the latest end.

    Gaps between the inputs are covered by the result.

    Raises:
        ValueError: If ranges is empty.
    """
    ranges = list(ranges)
    if not ranges:
        raise ValueError("Cannot merge an empty collection of ranges")
    return DateRange(
        min(date_range.start for date_range in ranges),
        max(date_range.end for date_range in ranges),
    )


def split_range(date_range: DateRange, count: int) -> list[DateRange]:
    """Split a range into count equal, contiguous sub-ranges.

    Args:
        date_range: Range to split.
        count: Number of intervals.

    Returns:
        Sub-ranges in chronological order; each ends where the next starts.

    Raises:
        ValueError: If count is not positive, or the duration in
            microseconds is not divisible by count.
    """
    if count <= 0:
        raise ValueError("Interval count must be positive")

    total = date_range.duration // timedelta(microseconds=1)
    if total % count != 0:
        raise ValueError("The range duration cannot be evenly divided by the interval count")

    step = timedelta(microseconds=total // count)
    return [
        DateRange(date_range.start + step * i, date_range.start + step * (i + 1))
        for i in range(count)
    ]


def _anchor(value: datetime, utc: bool) -> datetime:
    # Naive values are interpreted as local time by astimezone
    return value.astimezone(UTC) if utc else value


def generate_daily_ranges(
    start: datetime, count: int, *, utc: bool = True
) -> Iterator[DateRange]:
    """Yield count consecutive whole-day ranges starting at start's day."""
    for i in range(count):
        yield _day_of(_anchor(start + timedelta(days=i), utc))


def generate_weekly_ranges(
    start: datetime, count: int, *, utc: bool = True
) -> Iterator[DateRange]:
    """Yield count consecutive Sunday-to-Saturday ranges."""
    for i in range(count):
        yield _week_of(_anchor(datetime_utils.add_weeks(start, i), utc))


def generate_monthly_ranges(
    start: datetime, count: int, *, utc: bool = True
) -> Iterator[DateRange]:
    """Yield count consecutive calendar-month ranges."""
    for i in range(count):
        yield _month_of(_anchor(datetime_utils.add_months(start, i), utc))

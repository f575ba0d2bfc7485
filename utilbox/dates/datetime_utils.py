"""Calendar arithmetic on datetime values.

Boundaries follow microsecond resolution: the end of a period is the last
representable instant before the next period starts (23:59:59.999999).
Weeks start on Sunday. Timezone info on the input is preserved.

Usage:
    from utilbox.dates.datetime_utils import end_of_month, next_business_day

    end_of_month(datetime(2024, 2, 10))  # 2024-02-29 23:59:59.999999
"""

import calendar
from collections.abc import Collection
from datetime import date, datetime, timedelta
from typing import TypeVar

D = TypeVar("D", bound=date)

_ONE_MICROSECOND = timedelta(microseconds=1)

SATURDAY = 5
SUNDAY = 6


def start_of_day(value: datetime) -> datetime:
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(value: datetime) -> datetime:
    return start_of_day(value) + timedelta(days=1) - _ONE_MICROSECOND


def start_of_week(value: datetime) -> datetime:
    """Return midnight of the Sunday on or before value."""
    days_since_sunday = (value.weekday() + 1) % 7
    return start_of_day(value - timedelta(days=days_since_sunday))


def end_of_week(value: datetime) -> datetime:
    """Return the last instant of the Saturday closing value's week."""
    return start_of_week(value) + timedelta(days=7) - _ONE_MICROSECOND


def start_of_month(value: datetime) -> datetime:
    return start_of_day(value.replace(day=1))


def end_of_month(value: datetime) -> datetime:
    return add_months(start_of_month(value), 1) - _ONE_MICROSECOND


def start_of_year(value: datetime) -> datetime:
    return start_of_day(value.replace(month=1, day=1))


def end_of_year(value: datetime) -> datetime:
    return add_years(start_of_year(value), 1) - _ONE_MICROSECOND


def add_weeks(value: datetime, weeks: int) -> datetime:
    return value + timedelta(weeks=weeks)


def add_months(value: D, months: int) -> D:
    """Shift by whole months, clamping the day to the target month's length.

    Example:
        >>> add_months(datetime(2024, 1, 31), 1)
        datetime.datetime(2024, 2, 29, 0, 0)
    """
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def add_years(value: D, years: int) -> D:
    """Shift by whole years; Feb 29 maps to Feb 28 in non-leap years."""
    return add_months(value, years * 12)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def is_weekend(value: date) -> bool:
    """Check if value falls on a Saturday or Sunday."""
    return value.weekday() in (SATURDAY, SUNDAY)


def is_holiday(value: datetime, holidays: Collection[date] | None) -> bool:
    """Check if value's calendar date appears in holidays.

    Holidays may be given as date or midnight datetime values.
    """
    if not holidays:
        return False
    day = value.date()
    return any(
        (holiday.date() if isinstance(holiday, datetime) else holiday) == day
        for holiday in holidays
    )


def next_business_day(value: datetime) -> datetime:
    """Return the first weekday strictly after value (time of day kept)."""
    candidate = value + timedelta(days=1)
    while is_weekend(candidate):
        candidate += timedelta(days=1)
    return candidate


def previous_business_day(value: datetime) -> datetime:
    """Return the last weekday strictly before value (time of day kept)."""
    candidate = value - timedelta(days=1)
    while is_weekend(candidate):
        candidate -= timedelta(days=1)
    return candidate


def business_days_between(start: datetime, end: datetime) -> int:
    """Count weekdays from start to end, both inclusive.

    Returns 0 when start is after end.
    """
    count = 0
    current = start
    while current <= end:
        if not is_weekend(current):
            count += 1
        current += timedelta(days=1)
    return count


def workdays_in_period(start: datetime, end: datetime) -> int:
    return business_days_between(start, end)


def nearest_workday(value: datetime) -> datetime:
    """Return value if it is a weekday, else the closest weekday.

    Searches outward one day at a time in both directions; when both sides
    reach a weekday on the same step the following day wins.
    """
    if not is_weekend(value):
        return value

    following = value + timedelta(days=1)
    preceding = value - timedelta(days=1)
    while is_weekend(following) and is_weekend(preceding):
        following += timedelta(days=1)
        preceding -= timedelta(days=1)
    return preceding if is_weekend(following) else following


def get_age(birth_date: date, reference_date: date | None = None) -> int:
    """Whole years elapsed between birth_date and reference_date (default today)."""
    birth = _as_date(birth_date)
    today = _as_date(reference_date or date.today())
    age = today.year - birth.year
    if today < add_years(birth, age):
        age -= 1
    return age


def _as_date(value: date) -> date:
    return value.date() if isinstance(value, datetime) else value


def get_exact_age(birth_date: datetime, now: datetime | None = None) -> timedelta:
    """Exact elapsed time since birth_date.

    now defaults to the current time in birth_date's timezone (naive local
    time for naive input).
    """
    reference = now or datetime.now(birth_date.tzinfo)
    return reference - birth_date

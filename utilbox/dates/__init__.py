"""Date and time helpers: DateRange plus calendar arithmetic."""

from utilbox.dates import date_range_utils, datetime_utils
from utilbox.dates.date_range import DateRange

__all__ = [
    "DateRange",
    "date_range_utils",
    "datetime_utils",
]

"""Unit tests for the DateRange value object.

Tests cover:
- Construction validation
- Overlap and intersection (strict)
- Duration properties
- Day and month iteration
- Extension and containment

Architecture:
- Pure unit tests
"""

from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta

import pytest

from utilbox.dates import DateRange


def _range(start_day: int, end_day: int) -> DateRange:
    return DateRange(datetime(2024, 1, start_day), datetime(2024, 1, end_day))


@pytest.mark.unit
class TestDateRangeCreation:
    """Test DateRange construction."""

    def test_create_valid_range(self):
        """Test a range keeps its bounds."""
        date_range = _range(1, 31)

        assert date_range.start == datetime(2024, 1, 1)
        assert date_range.end == datetime(2024, 1, 31)

    def test_start_equal_to_end_allowed(self):
        """Test a zero-length range is valid."""
        assert _range(5, 5).duration == timedelta(0)

    def test_start_after_end_raises(self):
        """Test an inverted range is rejected."""
        with pytest.raises(ValueError, match="Start date must be before the end date"):
            _range(10, 1)

    def test_range_is_immutable(self):
        """Test bounds cannot be reassigned."""
        date_range = _range(1, 2)

        with pytest.raises(FrozenInstanceError):
            date_range.start = datetime(2024, 1, 2)


@pytest.mark.unit
class TestDateRangeOverlap:
    """Test overlaps and intersection."""

    def test_overlapping_ranges(self):
        """Test partially overlapping ranges intersect."""
        first, second = _range(1, 5), _range(3, 8)

        assert first.overlaps(second)
        assert second.overlaps(first)
        assert first.intersection(second) == _range(3, 5)

    def test_touching_ranges_do_not_overlap(self):
        """Test ranges sharing only a boundary do not overlap."""
        first, second = _range(1, 5), _range(5, 10)

        assert not first.overlaps(second)
        assert first.intersection(second) is None

    def test_contained_range_intersection(self):
        """Test the intersection with a contained range is that range."""
        assert _range(1, 31).intersection(_range(10, 12)) == _range(10, 12)


@pytest.mark.unit
class TestDateRangeDurations:
    """Test duration properties."""

    def test_days_and_weeks(self):
        """Test whole days and weeks."""
        date_range = _range(1, 31)

        assert date_range.days == 30
        assert date_range.weeks == 4

    def test_months_and_years(self):
        """Test calendar month and year differences."""
        date_range = DateRange(datetime(2023, 11, 20), datetime(2025, 1, 5))

        assert date_range.months == 14
        assert date_range.years == 2

    def test_exact_days(self):
        """Test fractional days."""
        date_range = DateRange(datetime(2024, 1, 1), datetime(2024, 1, 2, 12))

        assert date_range.exact_days == 1.5


@pytest.mark.unit
class TestDateRangeIteration:
    """Test iter_days and iter_months."""

    def test_iter_days_includes_partial_days(self):
        """Test every touched calendar day is yielded at midnight."""
        date_range = DateRange(datetime(2024, 1, 1, 10), datetime(2024, 1, 3, 8))

        assert list(date_range.iter_days()) == [
            datetime(2024, 1, 1),
            datetime(2024, 1, 2),
            datetime(2024, 1, 3),
        ]

    def test_iter_months_clips_to_range(self):
        """Test months are clipped and a midnight end covers the whole day."""
        date_range = DateRange(datetime(2024, 1, 15), datetime(2024, 3, 10))

        months = list(date_range.iter_months())

        assert months == [
            DateRange(datetime(2024, 1, 15), datetime(2024, 1, 31, 23, 59, 59, 999999)),
            DateRange(datetime(2024, 2, 1), datetime(2024, 2, 29, 23, 59, 59, 999999)),
            DateRange(datetime(2024, 3, 1), datetime(2024, 3, 10, 23, 59, 59, 999999)),
        ]

    def test_iter_months_with_time_of_day_end(self):
        """Test an end with a time of day is kept as is."""
        date_range = DateRange(datetime(2024, 1, 15), datetime(2024, 1, 20, 18))

        assert list(date_range.iter_months()) == [date_range]


@pytest.mark.unit
class TestDateRangeExtendAndContains:
    """Test extend and contains."""

    def test_extend_end(self):
        """Test extending moves the end by default."""
        assert _range(1, 5).extend(timedelta(days=2)) == _range(1, 7)

    def test_extend_start(self):
        """Test extend_end=False moves the start earlier."""
        assert _range(3, 5).extend(timedelta(days=2), extend_end=False) == _range(1, 5)

    def test_contains_is_inclusive(self):
        """Test both bounds are inside the range."""
        date_range = _range(1, 5)

        assert date_range.contains(datetime(2024, 1, 1))
        assert date_range.contains(datetime(2024, 1, 5))
        assert not date_range.contains(datetime(2024, 1, 5, 0, 0, 1))

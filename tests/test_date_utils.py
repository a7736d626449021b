"""Unit tests for calendar arithmetic."""
from datetime import date

import pytest

from scheduling.date_utils import (
    fill_zero,
    format_date,
    format_month,
    format_week,
    get_days_in_month,
    get_events_for_day,
    get_week_dates,
    get_weeks_at_month,
    is_date_in_range,
    navigate,
)


class TestGetDaysInMonth:
    """Test cases for get_days_in_month."""
    
    def test_matches_gregorian_calendar(self):
        """Test every month of a common year."""
        expected = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
        assert [get_days_in_month(2023, m) for m in range(1, 13)] == expected
    
    def test_leap_year_february(self):
        """Test February has 29 days in a leap year."""
        assert get_days_in_month(2024, 2) == 29
    
    def test_common_year_february(self):
        """Test February has 28 days in a common year."""
        assert get_days_in_month(2023, 2) == 28
    
    def test_overflowing_month_rolls_into_next_year(self):
        """Test month 22 resolves to October of the following year."""
        assert get_days_in_month(2024, 22) == 31
    
    def test_month_zero_rolls_into_previous_december(self):
        """Test month 0 resolves to December of the previous year."""
        assert get_days_in_month(2024, 0) == 31
    
    def test_overflow_into_leap_february(self):
        """Test month 14 of 2023 is February 2024."""
        assert get_days_in_month(2023, 14) == 29


class TestGetWeekDates:
    """Test cases for get_week_dates."""
    
    @pytest.mark.parametrize('anchor', [
        date(2024, 9, 29), date(2024, 9, 30), date(2024, 10, 2), date(2024, 10, 5)
    ])
    def test_any_day_returns_same_week(self, anchor):
        """Test Sunday, Monday, midweek and Saturday anchors."""
        assert get_week_dates(anchor) == [
            date(2024, 9, 29), date(2024, 9, 30), date(2024, 10, 1),
            date(2024, 10, 2), date(2024, 10, 3), date(2024, 10, 4),
            date(2024, 10, 5),
        ]
    
    @pytest.mark.parametrize('anchor', [date(2024, 12, 30), date(2025, 1, 1)])
    def test_week_spanning_year_boundary(self, anchor):
        """Test the week around new year is resolved across years."""
        weeks = get_week_dates(anchor)
        assert weeks[0] == date(2024, 12, 29)
        assert weeks[-1] == date(2025, 1, 4)
    
    def test_leap_day_week(self):
        """Test the week containing February 29th."""
        weeks = get_week_dates(date(2024, 2, 29))
        assert weeks[0] == date(2024, 2, 25)
        assert weeks[4] == date(2024, 2, 29)
        assert weeks[-1] == date(2024, 3, 2)
    
    def test_starts_on_sunday_and_is_consecutive(self):
        """Test the week always starts on Sunday with consecutive days."""
        weeks = get_week_dates(date(2024, 3, 13))
        assert len(weeks) == 7
        assert weeks[0].weekday() == 6
        assert all((b - a).days == 1 for a, b in zip(weeks, weeks[1:]))


class TestGetWeeksAtMonth:
    """Test cases for get_weeks_at_month."""
    
    def test_first_row_of_july_2024(self):
        """Test July 2024 starts on a Monday."""
        weeks = get_weeks_at_month(date(2024, 7, 1))
        assert weeks[0] == [None, 1, 2, 3, 4, 5, 6]
    
    def test_full_grid_of_july_2024(self):
        """Test last row is padded with None after the 31st."""
        weeks = get_weeks_at_month(date(2024, 7, 15))
        assert len(weeks) == 5
        assert weeks[-1] == [28, 29, 30, 31, None, None, None]
    
    def test_february_starting_on_sunday(self):
        """Test February 2026 fills exactly four rows."""
        weeks = get_weeks_at_month(date(2026, 2, 10))
        assert len(weeks) == 4
        assert weeks[0] == [1, 2, 3, 4, 5, 6, 7]
        assert weeks[-1] == [22, 23, 24, 25, 26, 27, 28]


class TestGetEventsForDay:
    """Test cases for get_events_for_day."""
    
    def test_returns_events_on_day(self, make_event):
        """Test only events on the first day of a month are returned."""
        events = [
            make_event('1', date='2024-10-01'),
            make_event('2', date='2024-10-02'),
            make_event('3', date='2024-10-28'),
        ]
        assert get_events_for_day(events, 1) == [events[0]]
    
    def test_no_events_on_day(self, make_event):
        """Test an empty list when nothing falls on the day."""
        assert get_events_for_day([make_event(date='2024-10-01')], 15) == []
    
    @pytest.mark.parametrize('day', [0, 32, -1])
    def test_out_of_range_day(self, make_event, day):
        """Test day numbers outside 1-31 yield nothing."""
        assert get_events_for_day([make_event(date='2024-10-01')], day) == []
    
    def test_malformed_date_is_skipped(self, make_event):
        """Test events with broken dates are silently ignored."""
        events = [make_event('1', date='20241001'), make_event('2', date='2024-10-01')]
        assert get_events_for_day(events, 1) == [events[1]]


class TestFormatWeek:
    """Test cases for format_week."""
    
    @pytest.mark.parametrize('anchor,expected', [
        (date(2024, 11, 15), '2024년 11월 2주'),
        (date(2024, 11, 5), '2024년 11월 1주'),
        (date(2024, 10, 31), '2024년 10월 5주'),
        (date(2024, 12, 30), '2025년 1월 1주'),
        (date(2024, 2, 28), '2024년 2월 5주'),
        (date(2023, 2, 28), '2023년 3월 1주'),
        (date(2024, 7, 1), '2024년 7월 1주'),
        (date(2024, 7, 5), '2024년 7월 1주'),
    ])
    def test_week_labels(self, anchor, expected):
        """Test labels including month and year rollovers."""
        assert format_week(anchor) == expected


class TestFormatting:
    """Test cases for month labels and date formatting."""
    
    def test_format_month(self):
        """Test month label."""
        assert format_month(date(2024, 7, 10)) == '2024년 7월'
    
    @pytest.mark.parametrize('value,size,expected', [
        (5, 2, '05'),
        (10, 2, '10'),
        (3, 3, '003'),
        (100, 2, '100'),
        (0, 2, '00'),
        (1, 5, '00001'),
        (3.14, 5, '03.14'),
        (100, 1, '100'),
    ])
    def test_fill_zero(self, value, size, expected):
        """Test zero padding."""
        assert fill_zero(value, size) == expected
    
    def test_fill_zero_default_size(self):
        """Test default size of two."""
        assert fill_zero(2) == '02'
    
    def test_format_date(self):
        """Test zero-padded ISO formatting."""
        assert format_date(date(2024, 1, 1)) == '2024-01-01'
    
    def test_format_date_with_day(self):
        """Test the day argument overrides the anchor day."""
        assert format_date(date(2024, 11, 3), 10) == '2024-11-10'


class TestIsDateInRange:
    """Test cases for is_date_in_range."""
    
    @pytest.mark.parametrize('value,expected', [
        (date(2024, 7, 10), True),
        (date(2024, 7, 1), True),
        (date(2024, 7, 31), True),
        (date(2024, 6, 30), False),
        (date(2024, 8, 1), False),
    ])
    def test_inclusive_bounds(self, value, expected):
        """Test both ends are inclusive."""
        assert is_date_in_range(value, date(2024, 7, 1), date(2024, 7, 31)) is expected
    
    def test_inverted_range(self):
        """Test an inverted range contains nothing."""
        assert not is_date_in_range(
            date(2024, 8, 13), date(2024, 8, 14), date(2024, 8, 13)
        )


class TestNavigate:
    """Test cases for navigate."""
    
    def test_week_next(self):
        """Test moving forward one week across a month boundary."""
        assert navigate(date(2024, 7, 29), 'week', 'next') == date(2024, 8, 5)
    
    def test_week_prev(self):
        """Test moving back one week."""
        assert navigate(date(2024, 7, 5), 'week', 'prev') == date(2024, 6, 28)
    
    def test_month_next_across_year(self):
        """Test moving from December to January."""
        assert navigate(date(2024, 12, 31), 'month', 'next') == date(2025, 1, 1)
    
    def test_month_prev_across_year(self):
        """Test moving from January back to December."""
        assert navigate(date(2025, 1, 15), 'month', 'prev') == date(2024, 12, 1)
    
    def test_unknown_view(self):
        """Test unknown views are rejected."""
        with pytest.raises(ValueError):
            navigate(date(2024, 7, 1), 'day', 'next')

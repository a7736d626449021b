"""Calendar arithmetic: month lengths, week windows, month grids and labels."""
import calendar
from datetime import date, timedelta
from typing import List, Optional, Sequence

from scheduling.constants import VIEW_MONTH, VIEW_WEEK
from scheduling.models import AnyEvent
from scheduling.time_parsing import parse_date


def get_days_in_month(year: int, month: int) -> int:
    """
    Return the number of days in a month.

    Months outside 1-12 roll over into adjacent years, so month 22 of 2024
    is October 2025 and month 0 of 2024 is December 2023.

    Args:
        year: Calendar year
        month: 1-indexed month, may overflow

    Returns:
        Day count of the resolved month
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    return calendar.monthrange(year, month)[1]


def _week_start(anchor: date) -> date:
    # date.weekday() is Monday=0, weeks here start on Sunday
    return anchor - timedelta(days=(anchor.weekday() + 1) % 7)


def get_week_dates(anchor: date) -> List[date]:
    """Return the Sunday-to-Saturday dates of the week containing anchor."""
    start = _week_start(anchor)
    return [start + timedelta(days=offset) for offset in range(7)]


def get_weeks_at_month(anchor: date) -> List[List[Optional[int]]]:
    """
    Build the month grid for the month containing anchor.

    Each row holds 7 cells (Sunday first); cells outside the month are None.
    """
    days_in_month = get_days_in_month(anchor.year, anchor.month)
    first_weekday = (date(anchor.year, anchor.month, 1).weekday() + 1) % 7

    weeks = []
    week: List[Optional[int]] = [None] * 7
    for day in range(1, days_in_month + 1):
        index = (first_weekday + day - 1) % 7
        week[index] = day
        if index == 6 or day == days_in_month:
            weeks.append(week)
            week = [None] * 7
    return weeks


def get_events_for_day(events: Sequence[AnyEvent], day: int) -> List[AnyEvent]:
    """
    Return events whose date falls on the given day of month.

    Day numbers outside 1-31 yield an empty list. Events with malformed
    dates are skipped.
    """
    if day < 1 or day > 31:
        return []

    matched = []
    for event in events:
        event_date = parse_date(event.date)
        if event_date is not None and event_date.day == day:
            matched.append(event)
    return matched


def format_week(anchor: date) -> str:
    """
    Format the week containing anchor as "<year>년 <month>월 <N>주".

    A week belongs to the month of its Thursday, so a week straddling a
    month boundary is labelled by whichever month holds most of its days.
    """
    thursday = _week_start(anchor) + timedelta(days=4)
    week_number = (thursday.day - 1) // 7 + 1
    return f"{thursday.year}년 {thursday.month}월 {week_number}주"


def format_month(anchor: date) -> str:
    return f"{anchor.year}년 {anchor.month}월"


def is_date_in_range(value: date, range_start: date, range_end: date) -> bool:
    """Inclusive range test. Always False when range_start > range_end."""
    return range_start <= value <= range_end


def fill_zero(value, size: int = 2) -> str:
    """Left-pad the string form of value with zeros up to size characters."""
    return str(value).zfill(size)


def format_date(anchor: date, day: Optional[int] = None) -> str:
    """
    Format a date as YYYY-MM-DD.

    Args:
        anchor: Date providing year and month (and day when day is None)
        day: Optional day of month overriding anchor's day
    """
    if day is None:
        day = anchor.day
    return f"{anchor.year}-{fill_zero(anchor.month)}-{fill_zero(day)}"


def navigate(anchor: date, view: str, direction: str) -> date:
    """
    Move the reference date one view step backwards or forwards.

    Week view moves by seven days. Month view moves to the first day of the
    adjacent month.

    Args:
        anchor: Current reference date
        view: 'week' or 'month'
        direction: 'prev' or 'next'

    Returns:
        New reference date

    Raises:
        ValueError: If view or direction is unknown
    """
    if direction not in ('prev', 'next'):
        raise ValueError(f"Unknown direction: {direction}")
    step = 1 if direction == 'next' else -1

    if view == VIEW_WEEK:
        return anchor + timedelta(days=7 * step)
    if view == VIEW_MONTH:
        month_index = anchor.year * 12 + (anchor.month - 1) + step
        return date(month_index // 12, month_index % 12 + 1, 1)
    raise ValueError(f"Unknown view: {view}")

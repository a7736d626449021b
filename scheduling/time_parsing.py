"""Parsing of date and time strings into instants."""
import re
from datetime import date, datetime
from typing import Optional

from scheduling.models import AnyEvent, TimeRange

DATE_PATTERN = re.compile(r'([0-9]{4})-([0-9]{2})-([0-9]{2})')
TIME_PATTERN = re.compile(r'([0-9]{2}):([0-9]{2})')


def parse_date(date_str: str) -> Optional[date]:
    """
    Parse a canonical YYYY-MM-DD date string.

    Args:
        date_str: Date string

    Returns:
        date object or None if the string is malformed or not a real date
    """
    if not isinstance(date_str, str):
        return None
    match = DATE_PATTERN.fullmatch(date_str)
    if not match:
        return None

    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def parse_time(time_str: str) -> Optional[tuple]:
    """Parse a canonical HH:MM string into (hour, minute), or None."""
    if not isinstance(time_str, str):
        return None
    match = TIME_PATTERN.fullmatch(time_str)
    if not match:
        return None

    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        return None
    return hour, minute


def parse_date_time(date_str: str, time_str: str) -> Optional[datetime]:
    """
    Combine a date string and a time string into a single instant.

    Never raises: malformed or empty input yields None.

    Args:
        date_str: Date in YYYY-MM-DD format
        time_str: Time in HH:MM format

    Returns:
        Naive local datetime or None
    """
    day = parse_date(date_str)
    clock = parse_time(time_str)
    if day is None or clock is None:
        return None

    hour, minute = clock
    return datetime(day.year, day.month, day.day, hour, minute)


def convert_event_to_date_range(event: AnyEvent) -> TimeRange:
    """
    Derive the start/end instants of an event.

    If either instant cannot be parsed, both are None.
    """
    start = parse_date_time(event.date, event.start_time)
    end = parse_date_time(event.date, event.end_time)
    if start is None or end is None:
        return TimeRange(start=None, end=None)
    return TimeRange(start=start, end=end)

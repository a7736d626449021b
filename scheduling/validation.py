"""Validation of event form input."""
from dataclasses import dataclass
from typing import Optional

from scheduling.constants import (
    END_TIME_ERROR,
    REQUIRED_FIELDS_ERROR,
    START_TIME_ERROR,
    TIME_SETTINGS_ERROR,
)
from scheduling.time_parsing import parse_time


@dataclass(frozen=True)
class TimeErrors:
    """Error messages attached to the start and end time inputs."""
    start_time_error: Optional[str] = None
    end_time_error: Optional[str] = None

    @property
    def has_error(self) -> bool:
        return bool(self.start_time_error or self.end_time_error)


def get_time_error_message(start_time: str, end_time: str) -> TimeErrors:
    """
    Check that a start time comes strictly before an end time.

    Empty or incomplete input is not an error yet.

    Args:
        start_time: Start time in HH:MM format
        end_time: End time in HH:MM format

    Returns:
        TimeErrors with both messages set when start >= end, otherwise empty
    """
    start = parse_time(start_time)
    end = parse_time(end_time)
    if start is None or end is None:
        return TimeErrors()

    if start >= end:
        return TimeErrors(
            start_time_error=START_TIME_ERROR,
            end_time_error=END_TIME_ERROR
        )
    return TimeErrors()


def validate_event_form(
    title: str,
    date: str,
    start_time: str,
    end_time: str,
    start_time_error: Optional[str] = None,
    end_time_error: Optional[str] = None
) -> Optional[str]:
    """
    Validate the required fields of an event form.

    Returns:
        Human-readable error message, or None when the form can be saved
    """
    required = (title, date, start_time, end_time)
    if any(
        not isinstance(value, str) or not value.strip() for value in required
    ):
        return REQUIRED_FIELDS_ERROR

    if start_time_error or end_time_error:
        return TIME_SETTINGS_ERROR

    return None

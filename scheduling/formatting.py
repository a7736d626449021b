"""Labels shown next to events in the event list."""
from typing import Optional

from scheduling.constants import NOTIFICATION_OPTIONS, REPEAT_UNITS
from scheduling.models import RepeatInfo


def format_repeat(repeat: RepeatInfo) -> Optional[str]:
    """
    Describe a repeat descriptor, e.g. "반복: 2주마다 (종료: 2024-12-31)".

    Returns None for non-repeating events.
    """
    unit = REPEAT_UNITS.get(repeat.type)
    if unit is None:
        return None

    label = f"반복: {repeat.interval}{unit}마다"
    if repeat.end_date:
        label += f" (종료: {repeat.end_date})"
    return label


def format_notification_time(minutes: int) -> Optional[str]:
    for option in NOTIFICATION_OPTIONS:
        if option['value'] == minutes:
            return option['label']
    return None

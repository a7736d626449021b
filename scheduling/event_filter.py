"""Search and view filtering of event collections."""
from datetime import date
from typing import List, Sequence

from scheduling.constants import VIEW_MONTH, VIEW_WEEK
from scheduling.date_utils import get_week_dates, is_date_in_range
from scheduling.models import AnyEvent
from scheduling.time_parsing import parse_date


def _contains_term(event: AnyEvent, term: str) -> bool:
    needle = term.lower()
    return any(
        needle in (value or '').lower()
        for value in (event.title, event.description, event.location)
    )


def filter_by_search_term(events: Sequence[AnyEvent], term: str) -> List[AnyEvent]:
    """Case-insensitive substring match on title, description and location."""
    if not term:
        return list(events)
    return [event for event in events if _contains_term(event, term)]


def filter_by_view(
    events: Sequence[AnyEvent],
    reference_date: date,
    view: str
) -> List[AnyEvent]:
    """
    Keep events visible in the week or month containing reference_date.

    Args:
        events: Events to filter
        reference_date: Current reference date
        view: 'week' or 'month'

    Returns:
        Visible events in input order; events with malformed dates are dropped

    Raises:
        ValueError: If view is unknown
    """
    if view == VIEW_WEEK:
        week = get_week_dates(reference_date)
        week_start, week_end = week[0], week[-1]

        def visible(event_date: date) -> bool:
            return is_date_in_range(event_date, week_start, week_end)
    elif view == VIEW_MONTH:
        def visible(event_date: date) -> bool:
            return (
                event_date.year == reference_date.year and
                event_date.month == reference_date.month
            )
    else:
        raise ValueError(f"Unknown view: {view}")

    filtered = []
    for event in events:
        event_date = parse_date(event.date)
        if event_date is not None and visible(event_date):
            filtered.append(event)
    return filtered


def get_filtered_events(
    events: Sequence[AnyEvent],
    term: str,
    reference_date: date,
    view: str
) -> List[AnyEvent]:
    """Apply the view filter, then narrow the visible events by search term."""
    return filter_by_search_term(
        filter_by_view(events, reference_date, view),
        term
    )

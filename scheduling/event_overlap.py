"""Detection of time conflicts between events."""
import logging
from typing import List, Sequence

from scheduling.models import AnyEvent, Event, TimeRange
from scheduling.time_parsing import convert_event_to_date_range

logger = logging.getLogger(__name__)


def ranges_overlap(a: TimeRange, b: TimeRange) -> bool:
    """
    Half-open interval overlap test. Touching endpoints do not overlap and
    an invalid range overlaps nothing.
    """
    if not a.is_valid or not b.is_valid:
        return False
    return a.start < b.end and b.start < a.end


def is_overlapping(event_a: AnyEvent, event_b: AnyEvent) -> bool:
    return ranges_overlap(
        convert_event_to_date_range(event_a),
        convert_event_to_date_range(event_b)
    )


def find_overlapping_events(
    candidate: AnyEvent,
    existing_events: Sequence[Event]
) -> List[Event]:
    """
    Find existing events whose time range intersects the candidate's.

    A stored candidate (one with an id) never conflicts with itself, so an
    edit does not flag the event being edited.

    Args:
        candidate: Event being created or edited
        existing_events: Events already stored

    Returns:
        Conflicting events in their original order
    """
    candidate_id = candidate.id if isinstance(candidate, Event) else None
    candidate_range = convert_event_to_date_range(candidate)
    if not candidate_range.is_valid:
        logger.debug(f"Candidate '{candidate.title}' has no valid time range")
        return []

    overlapping = [
        event for event in existing_events
        if event.id != candidate_id and
        ranges_overlap(candidate_range, convert_event_to_date_range(event))
    ]

    if overlapping:
        logger.info(
            f"Event '{candidate.title}' overlaps {len(overlapping)} existing events"
        )
    return overlapping


def format_conflict(event: AnyEvent) -> str:
    """Describe a conflicting event as "<title> (<date> <start>-<end>)"."""
    return f"{event.title} ({event.date} {event.start_time}-{event.end_time})"

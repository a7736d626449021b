"""Computation of due event notifications."""
import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Iterable, List, Sequence, Set

from scheduling.models import AnyEvent, Event, Notification
from scheduling.time_parsing import parse_date_time

logger = logging.getLogger(__name__)


def is_due(event: AnyEvent, now: datetime) -> bool:
    """
    True when now lies in [start - notification_time minutes, start].

    Events with an unparseable start are never due. A window reaching back
    past the first representable instant starts at datetime.min.
    """
    start = parse_date_time(event.date, event.start_time)
    if start is None:
        return False
    try:
        threshold = start - timedelta(minutes=event.notification_time)
    except OverflowError:
        threshold = datetime.min
    return threshold <= now <= start


def get_upcoming_events(
    events: Sequence[Event],
    now: datetime,
    notified_event_ids: Iterable[str]
) -> List[Event]:
    """
    Return events that are due and have not been notified yet.

    Pure: calling it repeatedly with the same arguments yields the same result.

    Args:
        events: Stored events
        now: Current instant
        notified_event_ids: Ids that already fired in this session

    Returns:
        Due events in input order
    """
    notified = set(notified_event_ids)
    return [
        event for event in events
        if event.id not in notified and is_due(event, now)
    ]


def create_notification_message(event: AnyEvent) -> str:
    return f"{event.notification_time}분 후 {event.title} 일정이 시작됩니다."


@dataclass
class NotificationSession:
    """
    Notification state owned by the caller for one polling session.

    notified_ids only grows; dismissing a notification never lets the
    event fire again.
    """
    notified_ids: Set[str] = field(default_factory=set)
    notifications: List[Notification] = field(default_factory=list)

    def apply(self, events: Sequence[Event], now: datetime) -> List[Notification]:
        """
        Move due events to the notified state and record their alerts.

        Returns:
            Notifications raised by this call
        """
        upcoming = get_upcoming_events(events, now, self.notified_ids)
        created = []
        for event in upcoming:
            notification = Notification(
                id=event.id,
                message=create_notification_message(event)
            )
            self.notified_ids.add(event.id)
            self.notifications.append(notification)
            created.append(notification)

        if created:
            logger.info(f"Raised {len(created)} new notifications")
        return created

    def remove_notification(self, index: int) -> None:
        """Dismiss the notification at a position in the displayed list."""
        if 0 <= index < len(self.notifications):
            del self.notifications[index]
        else:
            logger.debug(f"Ignoring dismissal of missing notification {index}")

"""Data models for calendar events and scheduling results."""
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import List, Optional, Union


REPEAT_TYPES = ('none', 'daily', 'weekly', 'monthly', 'yearly')


@dataclass(frozen=True)
class RepeatInfo:
    """Repeat descriptor. Stored as metadata only."""
    type: str = 'none'
    interval: int = 1
    end_date: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> 'RepeatInfo':
        """
        Build a repeat descriptor from wire data.

        Raises:
            ValueError: If the type is unknown or the interval is not positive
        """
        if not data:
            return cls()

        repeat_type = data.get('type', 'none')
        if repeat_type not in REPEAT_TYPES:
            raise ValueError(f"Unknown repeat type: {repeat_type}")

        interval = int(data.get('interval', 1))
        if interval < 1:
            raise ValueError(f"Repeat interval must be positive: {interval}")

        return cls(
            type=repeat_type,
            interval=interval,
            end_date=data.get('endDate') or None
        )

    def to_dict(self) -> dict:
        data = {'type': self.type, 'interval': self.interval}
        if self.end_date:
            data['endDate'] = self.end_date
        return data


@dataclass(frozen=True)
class EventDraft:
    """Event that has not been saved yet and has no id."""
    title: str
    date: str
    start_time: str
    end_time: str
    description: str = ''
    location: str = ''
    category: str = ''
    repeat: RepeatInfo = field(default_factory=RepeatInfo)
    notification_time: int = 10

    def with_id(self, event_id: str) -> 'Event':
        """Promote the draft to a stored event."""
        return Event(
            id=event_id,
            title=self.title,
            date=self.date,
            start_time=self.start_time,
            end_time=self.end_time,
            description=self.description,
            location=self.location,
            category=self.category,
            repeat=self.repeat,
            notification_time=self.notification_time
        )

    def to_dict(self) -> dict:
        return {
            'title': self.title,
            'date': self.date,
            'startTime': self.start_time,
            'endTime': self.end_time,
            'description': self.description,
            'location': self.location,
            'category': self.category,
            'repeat': self.repeat.to_dict(),
            'notificationTime': self.notification_time
        }


@dataclass(frozen=True)
class Event:
    """Stored event. Replaced wholesale on edit."""
    id: str
    title: str
    date: str
    start_time: str
    end_time: str
    description: str = ''
    location: str = ''
    category: str = ''
    repeat: RepeatInfo = field(default_factory=RepeatInfo)
    notification_time: int = 10

    def to_draft(self) -> EventDraft:
        return EventDraft(
            title=self.title,
            date=self.date,
            start_time=self.start_time,
            end_time=self.end_time,
            description=self.description,
            location=self.location,
            category=self.category,
            repeat=self.repeat,
            notification_time=self.notification_time
        )

    def update(self, **changes) -> 'Event':
        return replace(self, **changes)

    def to_dict(self) -> dict:
        data = {'id': self.id}
        data.update(self.to_draft().to_dict())
        return data


AnyEvent = Union[Event, EventDraft]


def event_from_dict(data: dict) -> AnyEvent:
    """
    Build an Event (when an id is present) or an EventDraft from wire data.

    Args:
        data: camelCase dictionary as exchanged with the REST API

    Returns:
        Event or EventDraft

    Raises:
        KeyError: If a required field is missing
        ValueError: If a numeric field cannot be converted or the repeat
            descriptor is invalid
    """
    draft = EventDraft(
        title=data['title'],
        date=data['date'],
        start_time=data['startTime'],
        end_time=data['endTime'],
        description=data.get('description', ''),
        location=data.get('location', ''),
        category=data.get('category', ''),
        repeat=RepeatInfo.from_dict(data.get('repeat')),
        notification_time=int(data.get('notificationTime', 10))
    )
    event_id = data.get('id')
    if event_id:
        return draft.with_id(str(event_id))
    return draft


@dataclass(frozen=True)
class TimeRange:
    """Start/end instants of an event. None marks an unparseable instant."""
    start: Optional[datetime]
    end: Optional[datetime]

    @property
    def is_valid(self) -> bool:
        return self.start is not None and self.end is not None


@dataclass(frozen=True)
class Notification:
    """Alert raised for an event whose notification threshold was reached."""
    id: str
    message: str

    def to_dict(self) -> dict:
        return {'id': self.id, 'message': self.message}


@dataclass
class SaveResult:
    """Result of a save attempt."""
    event: Optional[Event]
    conflicts: List[Event] = field(default_factory=list)

    @property
    def saved(self) -> bool:
        return self.event is not None

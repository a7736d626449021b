"""Shared fixtures for the calendar test suite."""
import pytest

from scheduling.models import Event, RepeatInfo


def build_event(event_id='1', **overrides) -> Event:
    fields = {
        'title': '회의',
        'date': '2024-10-01',
        'start_time': '10:00',
        'end_time': '11:00',
        'description': 'Description 1',
        'location': 'Location 1',
        'category': 'Work',
        'repeat': RepeatInfo(type='weekly', interval=1),
        'notification_time': 30,
    }
    fields.update(overrides)
    return Event(id=event_id, **fields)


@pytest.fixture
def make_event():
    """Factory for stored events with sensible defaults."""
    return build_event


@pytest.fixture
def july_events():
    """Three events spread over July 2024."""
    return [
        build_event('1', title='이벤트', date='2024-07-02'),
        build_event('2', title='DANCETIME', date='2024-07-05'),
        build_event('3', title='이벤트3', date='2024-07-20'),
    ]

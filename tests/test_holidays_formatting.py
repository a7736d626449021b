"""Unit tests for holidays, list labels and model conversion."""
from datetime import date

import pytest

from scheduling.formatting import format_notification_time, format_repeat
from scheduling.holidays import HOLIDAY_RECORD, fetch_holidays
from scheduling.models import Event, EventDraft, RepeatInfo, event_from_dict


class TestFetchHolidays:
    """Test cases for fetch_holidays."""
    
    def test_january(self):
        """Test only January holidays are returned."""
        expected = {k: v for k, v in HOLIDAY_RECORD.items() if k[5:7] == '01'}
        assert fetch_holidays(date(2024, 1, 1)) == expected
    
    def test_month_without_holidays(self):
        """Test an empty dict for April."""
        assert fetch_holidays(date(2024, 4, 1)) == {}
    
    def test_month_with_several_holidays(self):
        """Test all three February holidays are returned."""
        assert fetch_holidays(date(2024, 2, 15)) == {
            '2024-02-09': '설날',
            '2024-02-10': '설날',
            '2024-02-11': '설날',
        }


class TestFormatting:
    """Test cases for list labels."""
    
    def test_repeat_label(self):
        """Test a repeating event label with end date."""
        repeat = RepeatInfo(type='weekly', interval=2, end_date='2024-12-31')
        assert format_repeat(repeat) == '반복: 2주마다 (종료: 2024-12-31)'
    
    def test_non_repeating(self):
        """Test no label for non-repeating events."""
        assert format_repeat(RepeatInfo()) is None
    
    def test_notification_label(self):
        """Test labels for known and unknown notification offsets."""
        assert format_notification_time(60) == '1시간 전'
        assert format_notification_time(7) is None


class TestEventModels:
    """Test cases for Event and EventDraft conversion."""
    
    def test_draft_from_dict_without_id(self):
        """Test wire data without id becomes a draft."""
        draft = event_from_dict({
            'title': '회의',
            'date': '2024-10-01',
            'startTime': '10:00',
            'endTime': '11:00',
            'repeat': {'type': 'none', 'interval': 1},
            'notificationTime': 10,
        })
        assert isinstance(draft, EventDraft)
        assert draft.repeat == RepeatInfo()
    
    def test_event_from_dict_with_id(self):
        """Test wire data with id becomes a stored event."""
        event = event_from_dict({
            'id': '7',
            'title': '회의',
            'date': '2024-10-01',
            'startTime': '10:00',
            'endTime': '11:00',
            'repeat': {'type': 'monthly', 'interval': 1, 'endDate': '2024-12-31'},
            'notificationTime': 1,
        })
        assert isinstance(event, Event)
        assert event.repeat.end_date == '2024-12-31'
        assert event.to_dict()['repeat'] == {
            'type': 'monthly', 'interval': 1, 'endDate': '2024-12-31'
        }
    
    @pytest.mark.parametrize('data', [
        {'type': 'fortnightly', 'interval': 1},
        {'type': 'weekly', 'interval': 0},
        {'type': 'weekly', 'interval': -3},
    ])
    def test_invalid_repeat_raises(self, data):
        """Test unknown repeat types and non-positive intervals are rejected."""
        with pytest.raises(ValueError):
            RepeatInfo.from_dict(data)
    
    def test_promote_draft(self, make_event):

        """Test with_id and to_draft are inverse operations."""
        event = make_event('42')
        assert event.to_draft().with_id('42') == event

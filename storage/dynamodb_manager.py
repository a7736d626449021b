"""DynamoDB manager for calendar event storage."""
import logging
import uuid
from typing import List, Optional

import boto3
from botocore.exceptions import ClientError

from scheduling.models import Event, EventDraft, RepeatInfo

logger = logging.getLogger(__name__)


class DynamoDBManager:
    """Manager for DynamoDB operations on the events table."""
    
    def __init__(self, table_name: str):
        """
        Initialize DynamoDB client and table reference.
        
        Args:
            table_name: Name of the DynamoDB table
        """
        self.table_name = table_name
        self.dynamodb = boto3.resource('dynamodb')
        self.table = self.dynamodb.Table(table_name)
        logger.info(f"Initialized DynamoDBManager for table: {table_name}")
    
    def get_all_events(self) -> List[Event]:
        """
        Retrieve all events using a paginated Scan.
        
        Returns:
            Events ordered by date, start time and id
        """
        logger.info("Scanning DynamoDB table for all events")
        
        try:
            response = self.table.scan()
            items = response.get('Items', [])
            
            while 'LastEvaluatedKey' in response:
                response = self.table.scan(
                    ExclusiveStartKey=response['LastEvaluatedKey']
                )
                items.extend(response.get('Items', []))
        except ClientError as e:
            logger.error(f"Error scanning DynamoDB table: {e}")
            raise
        
        events = []
        for item in items:
            event = self._item_to_event(item)
            if event:
                events.append(event)
        
        events.sort(key=lambda event: (event.date, event.start_time, event.id))
        logger.info(f"Retrieved {len(events)} events from DynamoDB")
        return events
    
    def get_event(self, event_id: str) -> Optional[Event]:
        """
        Fetch a single event by id.
        
        Returns:
            Event or None if it does not exist
        """
        try:
            response = self.table.get_item(Key={'id': event_id})
        except ClientError as e:
            logger.error(f"Error reading event {event_id}: {e}")
            raise
        
        item = response.get('Item')
        if not item:
            return None
        return self._item_to_event(item)
    
    def create_event(self, draft: EventDraft) -> Event:
        """
        Store a new event under a freshly generated id.
        
        Args:
            draft: Event without id
            
        Returns:
            The stored Event
        """
        event = draft.with_id(uuid.uuid4().hex)
        self.put_event(event)
        logger.info(f"Created event {event.id} ('{event.title}')")
        return event
    
    def put_event(self, event: Event) -> Event:
        """Write an event, replacing any stored version with the same id."""
        try:
            self.table.put_item(Item=self._event_to_item(event))
        except ClientError as e:
            logger.error(f"Error writing event {event.id}: {e}")
            raise
        return event
    
    def delete_event(self, event_id: str) -> bool:
        """
        Delete an event by id.
        
        Returns:
            True if an event was deleted, False if it did not exist
        """
        try:
            response = self.table.delete_item(
                Key={'id': event_id},
                ReturnValues='ALL_OLD'
            )
        except ClientError as e:
            logger.error(f"Error deleting event {event_id}: {e}")
            raise
        
        deleted = 'Attributes' in response
        if deleted:
            logger.info(f"Deleted event {event_id}")
        return deleted
    
    def _item_to_event(self, item: dict) -> Optional[Event]:
        """
        Convert a DynamoDB item to an Event.
        
        Returns:
            Event or None if the item is malformed
        """
        try:
            repeat = item.get('repeat') or {}
            return Event(
                id=item['id'],
                title=item['title'],
                date=item['date'],
                start_time=item['start_time'],
                end_time=item['end_time'],
                description=item.get('description', ''),
                location=item.get('location', ''),
                category=item.get('category', ''),
                repeat=RepeatInfo(
                    type=repeat.get('type', 'none'),
                    interval=int(repeat.get('interval', 1)),
                    end_date=repeat.get('end_date')
                ),
                notification_time=int(item.get('notification_time', 10))
            )
        except (KeyError, ValueError, TypeError) as e:
            logger.warning(f"Failed to convert item to Event: {e}")
            return None
    
    def _event_to_item(self, event: Event) -> dict:
        """Convert an Event to a DynamoDB item."""
        repeat = {
            'type': event.repeat.type,
            'interval': event.repeat.interval
        }
        if event.repeat.end_date:
            repeat['end_date'] = event.repeat.end_date
        
        item = {
            'id': event.id,
            'title': event.title,
            'date': event.date,
            'start_time': event.start_time,
            'end_time': event.end_time,
            'repeat': repeat,
            'notification_time': event.notification_time
        }

        # Add optional fields if present
        if event.description:
            item['description'] = event.description
        if event.location:
            item['location'] = event.location
        if event.category:
            item['category'] = event.category

        return item

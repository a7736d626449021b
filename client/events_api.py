"""REST client for the calendar events API."""
import logging
import time
from typing import List, Union

import requests

from scheduling.models import Event, EventDraft, SaveResult, event_from_dict

logger = logging.getLogger(__name__)


class EventsApiClient:
    """Client for the /api/events REST endpoints."""
    
    MAX_RETRIES = 3
    BASE_DELAY = 1  # seconds
    
    def __init__(self, base_url: str, timeout: int = 30):
        """
        Initialize the API client.
        
        Args:
            base_url: Server root, e.g. http://localhost:3000
            timeout: HTTP request timeout in seconds (default: 30)
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = requests.Session()
    
    def fetch_events(self) -> List[Event]:
        """
        Fetch all stored events with retry logic.
        
        Returns:
            List of Event objects; malformed entries are skipped
            
        Raises:
            requests.RequestException: If all retry attempts fail
        """
        url = f"{self.base_url}/api/events"
        
        for attempt in range(self.MAX_RETRIES):
            try:
                logger.debug(
                    f"Fetching events (attempt {attempt + 1}/{self.MAX_RETRIES})"
                )
                response = self.session.get(url, timeout=self.timeout)
                response.raise_for_status()
                return self._parse_events(response.json().get('events', []))
                
            except requests.RequestException as e:
                if attempt < self.MAX_RETRIES - 1:
                    delay = self.BASE_DELAY * (2 ** attempt)
                    logger.warning(
                        f"Request failed (attempt {attempt + 1}/{self.MAX_RETRIES}): {e}. "
                        f"Retrying in {delay} seconds..."
                    )
                    time.sleep(delay)
                else:
                    logger.error(
                        f"All {self.MAX_RETRIES} retry attempts failed. Last error: {e}"
                    )
                    raise
    
    def save_event(
        self,
        event: Union[Event, EventDraft],
        confirm_overlap: bool = False
    ) -> SaveResult:
        """
        Create a draft or update a stored event.
        
        Args:
            event: EventDraft to create or Event to update
            confirm_overlap: Save even when the server reports conflicts
            
        Returns:
            SaveResult with the stored event, or the conflicts that blocked it
        """
        if isinstance(event, Event):
            return self.update_event(event, confirm_overlap=confirm_overlap)
        return self.create_event(event, confirm_overlap=confirm_overlap)
    
    def create_event(
        self,
        draft: EventDraft,
        confirm_overlap: bool = False
    ) -> SaveResult:
        """
        POST a new event.
        
        Raises:
            requests.HTTPError: On any error status other than 409
        """
        response = self.session.post(
            f"{self.base_url}/api/events",
            json=draft.to_dict(),
            params=self._confirm_params(confirm_overlap),
            timeout=self.timeout
        )
        return self._save_result(response)
    
    def update_event(
        self,
        event: Event,
        confirm_overlap: bool = False
    ) -> SaveResult:
        """
        PUT a stored event, replacing it wholesale.
        
        Raises:
            requests.HTTPError: On any error status other than 409
        """
        response = self.session.put(
            f"{self.base_url}/api/events/{event.id}",
            json=event.to_dict(),
            params=self._confirm_params(confirm_overlap),
            timeout=self.timeout
        )
        return self._save_result(response)
    
    def delete_event(self, event_id: str) -> None:
        """
        DELETE a stored event.
        
        Raises:
            requests.HTTPError: If the event does not exist or the call fails
        """
        response = self.session.delete(
            f"{self.base_url}/api/events/{event_id}",
            timeout=self.timeout
        )
        if not response.ok:
            logger.error(
                f"Failed to delete event {event_id}: HTTP {response.status_code}"
            )
        response.raise_for_status()
        logger.info(f"Deleted event {event_id}")
    
    def _confirm_params(self, confirm_overlap: bool) -> dict:
        return {'confirm': 'true'} if confirm_overlap else {}
    
    def _save_result(self, response: requests.Response) -> SaveResult:
        if response.status_code == 409:
            conflicts = self._parse_events(response.json().get('conflicts', []))
            logger.info(f"Save blocked by {len(conflicts)} conflicting events")
            return SaveResult(event=None, conflicts=conflicts)
        
        if not response.ok:
            logger.error(f"Failed to save event: HTTP {response.status_code}")
        response.raise_for_status()
        
        saved = event_from_dict(response.json())
        if not isinstance(saved, Event):
            raise ValueError("Server response is missing the event id")
        return SaveResult(event=saved)
    
    def _parse_events(self, items: list) -> List[Event]:
        events = []
        for item in items:
            try:
                event = event_from_dict(item)
            except (KeyError, ValueError, TypeError) as e:
                logger.warning(f"Skipping malformed event from API: {e}")
                continue
            if isinstance(event, Event):
                events.append(event)
        return events

"""AWS Lambda handler serving the calendar events REST API."""
import json
import logging
import os
import re
import time
from datetime import datetime
from typing import Any, Dict, Optional

from scheduling.constants import VIEW_MONTH, VIEWS
from scheduling.event_filter import get_filtered_events
from scheduling.event_overlap import find_overlapping_events, format_conflict
from scheduling.holidays import fetch_holidays
from scheduling.models import Event, EventDraft, event_from_dict
from scheduling.notifications import create_notification_message, get_upcoming_events
from scheduling.time_parsing import parse_date
from scheduling.validation import get_time_error_message, validate_event_form
from storage.dynamodb_manager import DynamoDBManager

EVENT_PATH = re.compile(r'^/api/events/([^/]+)$')


# Configure JSON logging
class JsonFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""
    
    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            'timestamp': self.formatTime(record),
            'level': record.levelname,
            'message': record.getMessage(),
            'logger': record.name
        }
        
        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)
        
        return json.dumps(log_data, ensure_ascii=False)


def setup_logging(log_level: str = 'INFO') -> None:
    """
    Configure logging with JSON formatter.
    
    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    root_logger = logging.getLogger()
    
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    root_logger.addHandler(handler)
    
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))


class BadRequest(Exception):
    """Request that cannot be served as sent."""


def _response(status_code: int, body: Optional[Any] = None) -> Dict[str, Any]:
    response = {
        'statusCode': status_code,
        'headers': {'Content-Type': 'application/json'}
    }
    response['body'] = json.dumps(body, ensure_ascii=False) if body is not None else ''
    return response


def _query(event: Dict[str, Any]) -> Dict[str, str]:
    return event.get('queryStringParameters') or {}


def _parse_body(event: Dict[str, Any]) -> Dict[str, Any]:
    try:
        body = json.loads(event.get('body') or '')
    except json.JSONDecodeError as e:
        raise BadRequest(f"Malformed JSON body: {e}") from e
    if not isinstance(body, dict):
        raise BadRequest("Request body must be a JSON object")
    return body


def _parse_event_body(event: Dict[str, Any]) -> EventDraft:
    try:
        parsed = event_from_dict(_parse_body(event))
    except KeyError as e:
        raise BadRequest(f"Missing event field: {e.args[0]}") from e
    except (TypeError, ValueError) as e:
        raise BadRequest(f"Invalid event field: {e}") from e
    if isinstance(parsed, Event):
        return parsed.to_draft()
    return parsed


def _reference_date(value: Optional[str]):
    if not value:
        return datetime.now().date()
    reference = parse_date(value)
    if reference is None:
        raise BadRequest(f"Invalid date: {value}")
    return reference


def _validation_error(draft: EventDraft) -> Optional[str]:
    errors = get_time_error_message(draft.start_time, draft.end_time)
    return validate_event_form(
        draft.title,
        draft.date,
        draft.start_time,
        draft.end_time,
        errors.start_time_error,
        errors.end_time_error
    )


def _conflict_response(conflicts) -> Dict[str, Any]:
    return _response(409, {
        'message': '다음 일정과 겹칩니다:',
        'conflicts': [event.to_dict() for event in conflicts],
        'conflictDescriptions': [format_conflict(event) for event in conflicts]
    })


def list_events(manager: DynamoDBManager, event: Dict[str, Any]) -> Dict[str, Any]:
    """GET /api/events, optionally filtered by view, date and search term."""
    query = _query(event)
    events = manager.get_all_events()
    
    if 'view' in query or 'q' in query:
        view = query.get('view', VIEW_MONTH)
        if view not in VIEWS:
            raise BadRequest(f"Unknown view: {view}")
        events = get_filtered_events(
            events,
            query.get('q', ''),
            _reference_date(query.get('date')),
            view
        )
    
    return _response(200, {'events': [item.to_dict() for item in events]})


def create_event(manager: DynamoDBManager, event: Dict[str, Any]) -> Dict[str, Any]:
    """POST /api/events. Conflicts block the save unless confirm=true."""
    draft = _parse_event_body(event)
    error = _validation_error(draft)
    if error:
        return _response(400, {'message': error})
    
    if _query(event).get('confirm') != 'true':
        conflicts = find_overlapping_events(draft, manager.get_all_events())
        if conflicts:
            return _conflict_response(conflicts)
    
    stored = manager.create_event(draft)
    return _response(201, stored.to_dict())


def update_event(
    manager: DynamoDBManager,
    event: Dict[str, Any],
    event_id: str
) -> Dict[str, Any]:
    """PUT /api/events/{id}. The edited event never conflicts with itself."""
    if manager.get_event(event_id) is None:
        return _response(404, {'error': 'not found event'})
    
    updated = _parse_event_body(event).with_id(event_id)
    error = _validation_error(updated.to_draft())
    if error:
        return _response(400, {'message': error})
    
    if _query(event).get('confirm') != 'true':
        conflicts = find_overlapping_events(updated, manager.get_all_events())
        if conflicts:
            return _conflict_response(conflicts)
    
    manager.put_event(updated)
    return _response(200, updated.to_dict())


def delete_event(manager: DynamoDBManager, event_id: str) -> Dict[str, Any]:
    """DELETE /api/events/{id}."""
    if not manager.delete_event(event_id):
        return _response(404, {'error': 'not found event'})
    return _response(204)


def list_notifications(manager: DynamoDBManager, event: Dict[str, Any]) -> Dict[str, Any]:
    """
    GET /api/notifications?now=...&notified=1,2

    The caller owns the notified id list and sends it back on every poll.
    """
    query = _query(event)
    now_value = query.get('now')
    try:
        now = datetime.fromisoformat(now_value) if now_value else datetime.now()
    except ValueError:
        raise BadRequest(f"Invalid instant: {now_value}")
    
    notified = [value for value in query.get('notified', '').split(',') if value]
    upcoming = get_upcoming_events(manager.get_all_events(), now, notified)
    
    return _response(200, {
        'notifications': [
            {'id': item.id, 'message': create_notification_message(item)}
            for item in upcoming
        ],
        'notifiedEvents': notified + [item.id for item in upcoming]
    })


def list_holidays(event: Dict[str, Any]) -> Dict[str, Any]:
    """GET /api/holidays?date=YYYY-MM-DD"""
    reference = _reference_date(_query(event).get('date'))
    return _response(200, {'holidays': fetch_holidays(reference)})


def route_request(manager: DynamoDBManager, event: Dict[str, Any]) -> Dict[str, Any]:
    """Dispatch an API Gateway proxy request to its handler."""
    method = event.get('httpMethod', 'GET').upper()
    path = (event.get('path') or '/').rstrip('/') or '/'
    
    if path == '/api/events':
        if method == 'GET':
            return list_events(manager, event)
        if method == 'POST':
            return create_event(manager, event)
    
    match = EVENT_PATH.match(path)
    if match:
        event_id = match.group(1)
        if method == 'PUT':
            return update_event(manager, event, event_id)
        if method == 'DELETE':
            return delete_event(manager, event_id)
    
    if path == '/api/notifications' and method == 'GET':
        return list_notifications(manager, event)
    
    if path == '/api/holidays' and method == 'GET':
        return list_holidays(event)
    
    return _response(404, {'error': f"No route for {method} {path}"})


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Main Lambda handler for the calendar events API.
    
    Args:
        event: API Gateway proxy event
        context: Lambda context object
        
    Returns:
        API Gateway proxy response
    """
    table_name = os.environ.get('TABLE_NAME', 'calendar-events')
    log_level = os.environ.get('LOG_LEVEL', 'INFO')
    
    setup_logging(log_level)
    logger = logging.getLogger(__name__)
    
    start_time = time.time()
    method = event.get('httpMethod', 'GET')
    path = event.get('path', '/')
    logger.info(
        f"Handling {method} {path}",
        extra={'table_name': table_name}
    )
    
    try:
        manager = DynamoDBManager(table_name=table_name)
        response = route_request(manager, event)
    except BadRequest as e:
        logger.warning(f"Rejected {method} {path}: {e}")
        response = _response(400, {'message': str(e)})
    except Exception as e:
        duration = time.time() - start_time
        logger.error(
            f"Request {method} {path} failed: {str(e)}",
            extra={
                'duration_seconds': round(duration, 2),
                'error_type': type(e).__name__
            },
            exc_info=True
        )
        return _response(500, {
            'message': 'Request failed',
            'error': str(e),
            'error_type': type(e).__name__
        })
    
    duration = time.time() - start_time
    logger.info(
        f"Completed {method} {path} with status {response['statusCode']}",
        extra={'duration_seconds': round(duration, 2)}
    )
    return response

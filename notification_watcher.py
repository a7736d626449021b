"""Long-running watcher that polls the events API and logs due alerts."""
import logging
import os
from typing import Optional

from client.events_api import EventsApiClient
from lambda_function import setup_logging
from scheduling.notifications import NotificationSession
from scheduling.poller import NotificationPoller

logger = logging.getLogger(__name__)


class LoggingSession(NotificationSession):
    """Notification session that logs every alert as it is raised."""

    def apply(self, events, now):
        created = super().apply(events, now)
        for notification in created:
            logger.info(
                notification.message,
                extra={'event_id': notification.id}
            )
        return created


def build_poller(
    base_url: str,
    timeout: int = 30,
    interval: float = 1.0
) -> NotificationPoller:
    client = EventsApiClient(base_url=base_url, timeout=timeout)
    return NotificationPoller(
        fetch_events=client.fetch_events,
        session=LoggingSession(),
        interval=interval
    )


def main(max_ticks: Optional[int] = None) -> None:
    """
    Read configuration from the environment and poll until interrupted.
    
    Args:
        max_ticks: Stop after this many ticks (runs forever when None)
    """
    base_url = os.environ.get('API_BASE_URL', 'http://localhost:3000')
    log_level = os.environ.get('LOG_LEVEL', 'INFO')
    timeout_seconds = int(os.environ.get('TIMEOUT_SECONDS', '30'))
    interval = float(os.environ.get('POLL_INTERVAL_SECONDS', '1'))
    
    setup_logging(log_level)
    logger.info(
        "Notification watcher started",
        extra={'api_base_url': base_url, 'interval_seconds': interval}
    )
    
    poller = build_poller(base_url, timeout=timeout_seconds, interval=interval)
    try:
        poller.run(max_ticks=max_ticks)
    except KeyboardInterrupt:
        logger.info("Notification watcher interrupted")


if __name__ == '__main__':
    main()

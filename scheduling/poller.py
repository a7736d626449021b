"""Fixed-interval poll loop driving the notification scheduler."""
import logging
import time
from datetime import datetime
from typing import Callable, List, Optional, Sequence

from scheduling.models import Event, Notification
from scheduling.notifications import NotificationSession

logger = logging.getLogger(__name__)


class NotificationPoller:
    """Poll an event source and raise notifications for due events."""

    def __init__(
        self,
        fetch_events: Callable[[], Sequence[Event]],
        session: Optional[NotificationSession] = None,
        clock: Callable[[], datetime] = datetime.now,
        interval: float = 1.0,
        sleep: Callable[[float], None] = time.sleep
    ):
        """
        Initialize the poller.

        Args:
            fetch_events: Callable returning the current event collection
            session: Notification state; a fresh one is created when omitted
            clock: Current-time source
            interval: Seconds between ticks
            sleep: Sleep function used between ticks
        """
        self.fetch_events = fetch_events
        self.session = session if session is not None else NotificationSession()
        self.clock = clock
        self.interval = interval
        self.sleep = sleep

    def tick(self) -> List[Notification]:
        """
        Run a single evaluation.

        A failing event source skips the tick instead of stopping the loop.

        Returns:
            Notifications raised during this tick
        """
        try:
            events = self.fetch_events()
        except Exception as e:
            logger.warning(f"Skipping notification tick, event fetch failed: {e}")
            return []

        return self.session.apply(events, self.clock())

    def run(self, max_ticks: Optional[int] = None) -> None:
        """
        Tick every interval seconds until max_ticks is reached (or forever).
        """
        logger.info(f"Starting notification polling every {self.interval}s")
        ticks = 0
        while max_ticks is None or ticks < max_ticks:
            self.tick()
            ticks += 1
            if max_ticks is None or ticks < max_ticks:
                self.sleep(self.interval)
        logger.info(f"Notification polling stopped after {ticks} ticks")

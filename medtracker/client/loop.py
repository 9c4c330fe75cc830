"""
Fixed-period reminder alert loop.

Every tick polls the reminder collection, lets the tracker decide which
tiers fire, presents the alerts and tells the store the reminder was
notified. The acknowledgement is fire-and-forget: the tick never waits for
it and a failure is only logged, since the tracker already stops the tier
from firing again.
"""
import asyncio
import logging
from datetime import datetime, timedelta
from typing import Callable, Dict, List, Optional, Set

from ..config import settings
from ..core.clock import utc_now
from .alerts import AlertEvent, ReminderAlertTracker, ReminderSnapshot
from .api import RecordStoreClient, RecordStoreError
from .notifier import AlertNotifier

logger = logging.getLogger(__name__)


class ReminderAlertLoop:
    """
    Drives a ReminderAlertTracker from a periodic timer.

    Ticks never overlap: a tick that starts while the previous one is still
    running is skipped, not queued.

    Args:
        store: Record store client used to poll and acknowledge reminders
        notifier: Presents the alerts
        tracker: Tier state for this session, a fresh tracker by default
        period_seconds: Time between two ticks
        clock: Returns the current naive UTC time
    """

    def __init__(
        self,
        store: RecordStoreClient,
        notifier: AlertNotifier,
        tracker: Optional[ReminderAlertTracker] = None,
        period_seconds: float = 60.0,
        clock: Callable[[], datetime] = utc_now
    ):
        if period_seconds <= 0:
            raise ValueError("period_seconds must be positive")
        self.store = store
        self.notifier = notifier
        self.tracker = tracker or ReminderAlertTracker()
        self.period_seconds = period_seconds
        self._clock = clock
        self._reminders: List[ReminderSnapshot] = []
        # Deleted reminder ID -> number of polls started before the delete
        self._deleted: Dict[int, int] = {}
        self._polls_started = 0
        self._tick_running = False
        self._tasks: Set[asyncio.Task] = set()
        self._stopped = asyncio.Event()

    @classmethod
    def from_settings(cls, store: RecordStoreClient, notifier: AlertNotifier) -> "ReminderAlertLoop":
        """Build a loop whose period and alert windows come from configuration"""
        tracker = ReminderAlertTracker(
            warning_window=timedelta(seconds=settings.alert_warning_window_seconds),
            due_window=timedelta(seconds=settings.alert_due_window_seconds)
        )
        return cls(store, notifier, tracker=tracker, period_seconds=settings.alert_tick_seconds)

    @property
    def reminders(self) -> List[ReminderSnapshot]:
        """Reminders known from the last successful poll"""
        return list(self._reminders)

    async def refresh(self) -> List[ReminderSnapshot]:
        """
        Poll the store for reminders.

        A failed poll keeps the last known list so alerts still fire while
        the store is unreachable. Reminders deleted while the poll was in
        flight are dropped from its result.
        """
        self._polls_started += 1
        poll = self._polls_started
        try:
            reminders = await self.store.list_reminders()
        except RecordStoreError as e:
            logger.warning(f"Failed to load reminders, using {len(self._reminders)} cached: {e.message}")
            return self._reminders

        # A poll started after a delete already reflects it
        self._deleted = {
            reminder_id: polls_before
            for reminder_id, polls_before in self._deleted.items()
            if polls_before >= poll
        }
        self._reminders = [r for r in reminders if r.id not in self._deleted]
        return self._reminders

    async def tick(self) -> List[AlertEvent]:
        """
        Run one evaluation of every known reminder.

        Returns:
            List[AlertEvent]: The tiers fired by this tick, empty when skipped
        """
        if self._tick_running:
            logger.warning("Previous reminder check still running, skipping tick")
            return []

        self._tick_running = True
        try:
            await self.refresh()
            events = self.tracker.evaluate(self._reminders, self._clock())
            for event in events:
                logger.info(f"Reminder {event.reminder.id} fired tier {event.tier.value}")
                self._present(event)
                self._spawn(self._acknowledge(event.reminder.id))
            return events
        finally:
            self._tick_running = False

    async def delete_reminder(self, reminder_id: int) -> None:
        """
        Delete a reminder on the store and drop its local tier state.

        Raises:
            RecordStoreError: If the store refuses the delete
        """
        await self.store.delete_record("reminders", reminder_id)
        self._deleted[reminder_id] = self._polls_started
        self.tracker.forget(reminder_id)
        self._reminders = [r for r in self._reminders if r.id != reminder_id]
        logger.info(f"Reminder {reminder_id} deleted")

    async def run(self) -> None:
        """Tick immediately and then once per period until ``stop`` is called"""
        logger.info(f"Reminder alert loop started, checking every {self.period_seconds:g}s")
        self._stopped.clear()
        while not self._stopped.is_set():
            self._spawn(self.tick())
            try:
                await asyncio.wait_for(self._stopped.wait(), timeout=self.period_seconds)
            except asyncio.TimeoutError:
                pass
        await self.drain()
        logger.info("Reminder alert loop stopped")

    def stop(self) -> None:
        """Ask ``run`` to return after the current period"""
        self._stopped.set()

    async def drain(self) -> None:
        """Wait for in-flight ticks and acknowledgements"""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def _acknowledge(self, reminder_id: int) -> None:
        try:
            await self.store.mark_reminder_notified(reminder_id)
        except RecordStoreError as e:
            logger.error(f"Failed to mark reminder {reminder_id} as notified: {e.message}")

    def _present(self, event: AlertEvent) -> None:
        try:
            self.notifier.alert(event)
        except Exception as e:
            logger.error(f"Error presenting alert for reminder {event.reminder.id}: {str(e)}")

    def _spawn(self, coro) -> asyncio.Task:
        task = asyncio.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._task_done)
        return task

    def _task_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.error(f"Reminder alert task failed: {task.exception()!r}")

"""
Reminder alert tiers and the per-session tracker that decides when they fire.

Each reminder moves through ``unseen -> warned -> fired`` during a client
session, or straight from ``unseen`` to ``fired`` when it is first
evaluated inside the due window. Tier state lives only in memory, so a
restarted client starts again from ``unseen``; the narrow due window keeps
reminders that are long past from firing again.
"""
import enum
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Dict, FrozenSet, Iterable, List, Optional, Set

from pydantic import BaseModel, validator

from ..core.clock import to_naive_utc

logger = logging.getLogger(__name__)

class AlertTier(str, enum.Enum):
    """Alert thresholds tracked independently per reminder"""
    WARNING = "five_minute_warned"
    DUE = "due_fired"

class ReminderAlertState(str, enum.Enum):
    """Where a reminder stands in the current session"""
    UNSEEN = "unseen"
    WARNED = "warned"
    FIRED = "fired"

class ReminderSnapshot(BaseModel):
    """
    Client-side copy of a reminder as returned by the record store

    Fields:
    - id: Reminder ID
    - title: Text shown in the alert
    - date_time: Due time, naive UTC
    - notified: Server-side notified flag at the time of the poll
    - notes: Optional free text
    """
    id: int
    title: str
    date_time: datetime
    notified: bool = False
    notes: Optional[str] = None

    @validator("date_time")
    def normalize_date_time(cls, v):
        """Compare due times as naive UTC"""
        return to_naive_utc(v)

@dataclass
class AlertEvent:
    """A tier that fired for a reminder on a tick"""
    reminder: ReminderSnapshot
    tier: AlertTier
    delta: timedelta

    @property
    def message(self) -> str:
        if self.tier == AlertTier.WARNING:
            minutes = max(1, -(-int(self.delta.total_seconds()) // 60))
            return f"Reminder in {minutes} minutes: {self.reminder.title}"
        return f"It's time: {self.reminder.title}!"

class ReminderAlertTracker:
    """
    Per-session record of which alert tiers already fired for each reminder.

    The tracker is constructed empty at session start and owned by the alert
    loop. ``evaluate`` is pure apart from that record, so it can be driven
    with any clock.

    Args:
        warning_window: How long before the due time the warning tier opens
        due_window: How long after the due time the due tier stays open
    """

    def __init__(
        self,
        warning_window: timedelta = timedelta(minutes=5),
        due_window: timedelta = timedelta(minutes=1)
    ):
        if warning_window <= timedelta(0) or due_window <= timedelta(0):
            raise ValueError("Alert windows must be positive")
        self.warning_window = warning_window
        self.due_window = due_window
        self._fired: Dict[int, Set[AlertTier]] = {}

    def evaluate(self, reminders: Iterable[ReminderSnapshot], now: datetime) -> List[AlertEvent]:
        """
        Decide which tiers fire for the given reminders at ``now``.

        The warning tier fires when ``0 < delta <= warning_window``, the
        reminder is not yet notified server-side and the tier has not fired
        this session. The due tier fires when ``-due_window < delta <= 0``
        and it has not fired this session. Firing the warning tier also sets
        the snapshot's ``notified`` flag, mirroring the acknowledgement that
        is sent to the store.

        Returns:
            List[AlertEvent]: The tiers that fired, in reminder order
        """
        events = []
        for reminder in reminders:
            fired = self._fired.get(reminder.id)
            # fired is terminal for the session
            if fired and AlertTier.DUE in fired:
                continue

            delta = reminder.date_time - now

            if timedelta(0) < delta <= self.warning_window:
                if not reminder.notified and not (fired and AlertTier.WARNING in fired):
                    self._record(reminder.id, AlertTier.WARNING)
                    reminder.notified = True
                    events.append(AlertEvent(reminder, AlertTier.WARNING, delta))
            elif -self.due_window < delta <= timedelta(0):
                self._record(reminder.id, AlertTier.DUE)
                events.append(AlertEvent(reminder, AlertTier.DUE, delta))

        return events

    def fired_tiers(self, reminder_id: int) -> FrozenSet[AlertTier]:
        """Tiers already fired for a reminder this session"""
        return frozenset(self._fired.get(reminder_id, ()))

    def state(self, reminder_id: int) -> ReminderAlertState:
        """Current session state of a reminder"""
        fired = self._fired.get(reminder_id, ())
        if AlertTier.DUE in fired:
            return ReminderAlertState.FIRED
        if AlertTier.WARNING in fired:
            return ReminderAlertState.WARNED
        return ReminderAlertState.UNSEEN

    def forget(self, reminder_id: int) -> None:
        """Drop all tier state for a deleted reminder"""
        self._fired.pop(reminder_id, None)

    def __len__(self) -> int:
        return len(self._fired)

    def _record(self, reminder_id: int, tier: AlertTier) -> None:
        self._fired.setdefault(reminder_id, set()).add(tier)
        logger.debug(f"Reminder {reminder_id} recorded tier {tier.value}")

"""
Audible and visual reminder alerts for a terminal session.
"""
import logging
import sys
from typing import TextIO

from .alerts import AlertEvent, AlertTier, ReminderSnapshot

logger = logging.getLogger(__name__)

# Terminal bell patterns; the urgent alert must sound different from the warning
WARNING_CHIME = "\a"
URGENT_BEEP = "\a\a"

class AlertNotifier:
    """
    Base class for anything that can present a reminder alert.

    Subclasses implement ``warn`` for the early warning tier and ``urgent``
    for the due tier.
    """

    def alert(self, event: AlertEvent) -> None:
        """Present an alert event with the signal matching its tier"""
        if event.tier == AlertTier.WARNING:
            self.warn(event.reminder, event.message)
        else:
            self.urgent(event.reminder, event.message)

    def warn(self, reminder: ReminderSnapshot, message: str) -> None:
        raise NotImplementedError

    def urgent(self, reminder: ReminderSnapshot, message: str) -> None:
        raise NotImplementedError

class ConsoleAlertNotifier(AlertNotifier):
    """
    Rings the terminal bell and prints the notification text.

    Args:
        stream: Where bells and messages are written, stdout by default
    """

    def __init__(self, stream: TextIO = None):
        self.stream = stream or sys.stdout

    def warn(self, reminder: ReminderSnapshot, message: str) -> None:
        self._emit(WARNING_CHIME, f"⏰ {message}")
        logger.info(f"Warning alert for reminder {reminder.id}: {reminder.title}")

    def urgent(self, reminder: ReminderSnapshot, message: str) -> None:
        self._emit(URGENT_BEEP, f"🔔 {message}")
        logger.info(f"Due alert for reminder {reminder.id}: {reminder.title}")

    def _emit(self, bell: str, text: str) -> None:
        self.stream.write(f"{bell}{text}\n")
        self.stream.flush()

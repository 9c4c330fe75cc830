"""
Reminder alert client for the medical tracking API.

This package provides:
- An async HTTP client for the record store
- The per-session alert tier tracker
- Terminal alert notifications
- The fixed-period alert loop
"""
from .alerts import AlertEvent, AlertTier, ReminderAlertState, ReminderAlertTracker, ReminderSnapshot
from .api import RecordStoreClient, RecordStoreError
from .loop import ReminderAlertLoop
from .notifier import AlertNotifier, ConsoleAlertNotifier

__all__ = [
    "AlertEvent",
    "AlertTier",
    "ReminderAlertState",
    "ReminderAlertTracker",
    "ReminderSnapshot",
    "RecordStoreClient",
    "RecordStoreError",
    "ReminderAlertLoop",
    "AlertNotifier",
    "ConsoleAlertNotifier",
]

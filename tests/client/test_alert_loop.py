"""
Tests for the fixed-period reminder alert loop.
"""
import asyncio
import io
import logging
from datetime import datetime, timedelta

from medtracker.client.alerts import AlertTier, ReminderAlertState, ReminderSnapshot
from medtracker.client.api import RecordStoreError
from medtracker.client.loop import ReminderAlertLoop
from medtracker.client.notifier import AlertNotifier, ConsoleAlertNotifier, URGENT_BEEP, WARNING_CHIME

NOW = datetime(2026, 10, 19, 9, 0, 0)


class FakeStore:
    """In-memory stand-in for RecordStoreClient."""

    def __init__(self, reminders=None):
        self.reminders = reminders or []
        self.notified = []
        self.deleted = []
        self.fail_list = False
        self.fail_notify = False
        self.list_gate = None
        self.notify_gate = None

    async def list_reminders(self):
        if self.list_gate is not None:
            await self.list_gate.wait()
        if self.fail_list:
            raise RecordStoreError("connection refused")
        return [r.model_copy() for r in self.reminders]

    async def mark_reminder_notified(self, reminder_id):
        if self.notify_gate is not None:
            await self.notify_gate.wait()
        if self.fail_notify:
            raise RecordStoreError("Reminder not found", status_code=404)
        self.notified.append(reminder_id)

    async def delete_record(self, collection, record_id):
        self.deleted.append((collection, record_id))
        self.reminders = [r for r in self.reminders if r.id != record_id]


class RecordingNotifier(AlertNotifier):
    def __init__(self):
        self.calls = []

    def warn(self, reminder, message):
        self.calls.append(("warn", reminder.id, message))

    def urgent(self, reminder, message):
        self.calls.append(("urgent", reminder.id, message))


def snapshot(offset, reminder_id=1, notified=False):
    return ReminderSnapshot(id=reminder_id, title="Blood pressure", date_time=NOW + offset, notified=notified)


def make_loop(store, clock=lambda: NOW, **kwargs):
    return ReminderAlertLoop(store, RecordingNotifier(), clock=clock, **kwargs)


def test_tick_alerts_and_acknowledges():
    async def scenario():
        store = FakeStore([snapshot(timedelta(minutes=4), 1), snapshot(timedelta(seconds=-20), 2)])
        loop = make_loop(store)
        events = await loop.tick()
        await loop.drain()
        return loop, store, events

    loop, store, events = asyncio.run(scenario())
    assert [(e.reminder.id, e.tier) for e in events] == [(1, AlertTier.WARNING), (2, AlertTier.DUE)]
    assert [call[0] for call in loop.notifier.calls] == ["warn", "urgent"]
    assert sorted(store.notified) == [1, 2]


def test_tick_does_not_wait_for_acknowledgement():
    async def scenario():
        store = FakeStore([snapshot(timedelta(seconds=-5))])
        store.notify_gate = asyncio.Event()
        loop = make_loop(store)

        events = await asyncio.wait_for(loop.tick(), timeout=1)
        pending_before_release = list(store.notified)

        store.notify_gate.set()
        await loop.drain()
        return events, pending_before_release, store.notified

    events, before, after = asyncio.run(scenario())
    assert len(events) == 1
    assert before == []
    assert after == [1]


def test_failed_acknowledgement_is_logged_and_not_retried(caplog):
    async def scenario():
        store = FakeStore([snapshot(timedelta(seconds=-5))])
        store.fail_notify = True
        loop = make_loop(store)
        first = await loop.tick()
        await loop.drain()
        second = await loop.tick()
        await loop.drain()
        return loop, first, second

    with caplog.at_level(logging.ERROR, logger="medtracker.client.loop"):
        loop, first, second = asyncio.run(scenario())

    assert len(first) == 1
    assert second == []
    assert loop.tracker.state(1) == ReminderAlertState.FIRED
    assert "Failed to mark reminder 1 as notified" in caplog.text


def test_overlapping_tick_is_skipped():
    async def scenario():
        store = FakeStore([snapshot(timedelta(seconds=-5))])
        store.list_gate = asyncio.Event()
        loop = make_loop(store)

        first = asyncio.create_task(loop.tick())
        await asyncio.sleep(0)
        skipped = await loop.tick()

        store.list_gate.set()
        first_events = await first
        await loop.drain()
        return skipped, first_events, loop.notifier.calls

    skipped, first_events, calls = asyncio.run(scenario())
    assert skipped == []
    assert len(first_events) == 1
    assert len(calls) == 1


def test_failed_poll_uses_last_known_reminders():
    clock_now = [NOW]

    async def scenario():
        store = FakeStore([snapshot(timedelta(minutes=1, seconds=30))])
        loop = make_loop(store, clock=lambda: clock_now[0])

        first = await loop.tick()
        store.fail_list = True
        clock_now[0] = NOW + timedelta(minutes=2)
        second = await loop.tick()
        await loop.drain()
        return first, second, loop.reminders

    first, second, known = asyncio.run(scenario())
    assert [e.tier for e in first] == [AlertTier.WARNING]
    assert [e.tier for e in second] == [AlertTier.DUE]
    assert [r.id for r in known] == [1]


def test_delete_reminder_forgets_tier_state():
    async def scenario():
        store = FakeStore([snapshot(timedelta(seconds=-5), 4)])
        loop = make_loop(store)
        await loop.tick()
        await loop.drain()
        state_before = loop.tracker.state(4)
        await loop.delete_reminder(4)
        return loop, store, state_before

    loop, store, state_before = asyncio.run(scenario())
    assert state_before == ReminderAlertState.FIRED
    assert loop.tracker.state(4) == ReminderAlertState.UNSEEN
    assert store.deleted == [("reminders", 4)]
    assert loop.reminders == []


class InFlightStore(FakeStore):
    """Answers a poll with the reminders as they were when the poll started."""

    async def list_reminders(self):
        response = [r.model_copy() for r in self.reminders]
        if self.list_gate is not None:
            await self.list_gate.wait()
        return response


def test_reminder_deleted_during_poll_is_not_alerted():
    async def scenario():
        store = InFlightStore([snapshot(timedelta(seconds=-20), 1), snapshot(timedelta(seconds=-20), 2)])
        store.list_gate = asyncio.Event()
        loop = make_loop(store)

        tick = asyncio.create_task(loop.tick())
        await asyncio.sleep(0)
        await loop.delete_reminder(1)
        store.list_gate.set()
        events = await tick
        await loop.drain()
        return loop, store, events

    loop, store, events = asyncio.run(scenario())
    assert [e.reminder.id for e in events] == [2]
    assert loop.tracker.state(1) == ReminderAlertState.UNSEEN
    assert [r.id for r in loop.reminders] == [2]
    assert store.notified == [2]


def test_reused_id_is_alerted_after_a_fresh_poll():
    async def scenario():
        store = InFlightStore([snapshot(timedelta(seconds=-20), 1)])
        store.list_gate = asyncio.Event()
        loop = make_loop(store)

        tick = asyncio.create_task(loop.tick())
        await asyncio.sleep(0)
        await loop.delete_reminder(1)
        store.list_gate.set()
        stale = await tick

        # SQLite may hand the freed ID to the next reminder
        store.reminders = [snapshot(timedelta(minutes=4), 1)]
        fresh = await loop.tick()
        await loop.drain()
        return stale, fresh

    stale, fresh = asyncio.run(scenario())
    assert stale == []
    assert [(e.reminder.id, e.tier) for e in fresh] == [(1, AlertTier.WARNING)]


def test_run_ticks_periodically_until_stopped():
    async def scenario():
        store = FakeStore([snapshot(timedelta(seconds=-5))])
        loop = make_loop(store, period_seconds=0.01)
        runner = asyncio.create_task(loop.run())
        await asyncio.sleep(0.1)
        loop.stop()
        await asyncio.wait_for(runner, timeout=1)
        return loop, store

    loop, store = asyncio.run(scenario())
    # Fired once despite many ticks
    assert loop.notifier.calls == [("urgent", 1, "It's time: Blood pressure!")]
    assert store.notified == [1]


def test_notifier_failure_does_not_break_tick():
    class BrokenNotifier(AlertNotifier):
        def warn(self, reminder, message):
            raise RuntimeError("no audio device")

        def urgent(self, reminder, message):
            raise RuntimeError("no audio device")

    async def scenario():
        store = FakeStore([snapshot(timedelta(seconds=-5))])
        loop = ReminderAlertLoop(store, BrokenNotifier(), clock=lambda: NOW)
        events = await loop.tick()
        await loop.drain()
        return events, store.notified

    events, notified = asyncio.run(scenario())
    assert len(events) == 1
    assert notified == [1]


def test_console_notifier_uses_distinct_signals():
    stream = io.StringIO()
    notifier = ConsoleAlertNotifier(stream=stream)
    reminder = snapshot(timedelta(minutes=3))

    notifier.warn(reminder, "Reminder in 3 minutes: Blood pressure")
    notifier.urgent(reminder, "It's time: Blood pressure!")

    warning_line, urgent_line = stream.getvalue().splitlines()
    assert warning_line.startswith(WARNING_CHIME) and not warning_line.startswith(URGENT_BEEP)
    assert urgent_line.startswith(URGENT_BEEP)
    assert "Reminder in 3 minutes" in warning_line
    assert "It's time" in urgent_line


def test_loop_from_settings_uses_configured_windows(monkeypatch):
    from medtracker.client import loop as loop_module

    monkeypatch.setattr(loop_module.settings, "alert_tick_seconds", 30.0)
    monkeypatch.setattr(loop_module.settings, "alert_warning_window_seconds", 600.0)
    monkeypatch.setattr(loop_module.settings, "alert_due_window_seconds", 120.0)

    async def build():
        return ReminderAlertLoop.from_settings(FakeStore(), RecordingNotifier())

    loop = asyncio.run(build())
    assert loop.period_seconds == 30.0
    assert loop.tracker.warning_window == timedelta(minutes=10)
    assert loop.tracker.due_window == timedelta(minutes=2)

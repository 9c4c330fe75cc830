"""
Reminder Service - Persistence logic for reminders.

"Now" and "today" are always taken from the store's clock at query time.
"""
from datetime import datetime, timedelta
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import func, case
import logging

from ..core.clock import utc_now, day_bounds
from ..exceptions import RecordNotFoundException, StorageFailureException
from .models import Reminder
from .schemas import ReminderCreate, ReminderUpdate, ReminderStats

# Set up logging
logger = logging.getLogger(__name__)

UPCOMING_WINDOW = timedelta(days=7)

def get_reminders(db: Session) -> List[Reminder]:
    """
    Get all reminders, soonest first.

    Args:
        db: Database session

    Returns:
        List[Reminder]: Reminders ordered by due time
    """
    return db.query(Reminder).order_by(Reminder.date_time.asc(), Reminder.id.asc()).all()

def get_reminder(db: Session, reminder_id: int) -> Reminder:
    """
    Get a reminder by ID.

    Raises:
        RecordNotFoundException: If reminder not found
    """
    reminder = db.query(Reminder).filter(Reminder.id == reminder_id).first()
    if not reminder:
        raise RecordNotFoundException("Reminder not found")
    return reminder

def get_todays_reminders(db: Session, now: Optional[datetime] = None) -> List[Reminder]:
    """
    Get the reminders due on the current calendar day.

    Args:
        db: Database session
        now: Reference instant, defaults to the store's clock

    Returns:
        List[Reminder]: Today's reminders ordered by due time
    """
    start, end = day_bounds(now or utc_now())
    return (
        db.query(Reminder)
        .filter(Reminder.date_time >= start, Reminder.date_time < end)
        .order_by(Reminder.date_time.asc(), Reminder.id.asc())
        .all()
    )

def get_upcoming_week_reminders(db: Session, now: Optional[datetime] = None) -> List[Reminder]:
    """
    Get the reminders due between now and seven days from now, inclusive.

    Args:
        db: Database session
        now: Reference instant, defaults to the store's clock
    """
    now = now or utc_now()
    return (
        db.query(Reminder)
        .filter(Reminder.date_time >= now, Reminder.date_time <= now + UPCOMING_WINDOW)
        .order_by(Reminder.date_time.asc(), Reminder.id.asc())
        .all()
    )

def create_reminder(db: Session, reminder_data: ReminderCreate) -> Reminder:
    """
    Add a new reminder. It starts out not notified.

    Raises:
        StorageFailureException: If the insert fails
    """
    reminder = Reminder(**reminder_data.model_dump(), notified=False)
    db.add(reminder)

    try:
        db.commit()
        db.refresh(reminder)
        logger.info(f"Reminder {reminder.id} added for {reminder.date_time}")
        return reminder
    except Exception as e:
        db.rollback()
        logger.error(f"Error adding reminder: {str(e)}")
        raise StorageFailureException("Failed to add reminder")

def update_reminder(db: Session, reminder_id: int, reminder_data: ReminderUpdate) -> Reminder:
    """
    Replace the title, due time and notes of a reminder.

    The notified flag is left untouched.

    Raises:
        RecordNotFoundException: If reminder not found
        StorageFailureException: If the update fails
    """
    reminder = get_reminder(db, reminder_id)

    for field, value in reminder_data.model_dump().items():
        setattr(reminder, field, value)

    try:
        db.commit()
        db.refresh(reminder)
        logger.info(f"Reminder {reminder_id} updated")
        return reminder
    except Exception as e:
        db.rollback()
        logger.error(f"Error updating reminder {reminder_id}: {str(e)}")
        raise StorageFailureException("Failed to update reminder")

def mark_reminder_notified(db: Session, reminder_id: int) -> Reminder:
    """
    Set only the notified flag of a reminder. Repeated calls are harmless.

    Raises:
        RecordNotFoundException: If reminder not found
        StorageFailureException: If the update fails
    """
    reminder = get_reminder(db, reminder_id)
    reminder.mark_notified()

    try:
        db.commit()
        db.refresh(reminder)
        logger.info(f"Reminder {reminder_id} marked as notified")
        return reminder
    except Exception as e:
        db.rollback()
        logger.error(f"Error marking reminder {reminder_id} as notified: {str(e)}")
        raise StorageFailureException("Failed to update reminder")

def delete_reminder(db: Session, reminder_id: int) -> None:
    """
    Delete a reminder.

    Raises:
        RecordNotFoundException: If reminder not found
        StorageFailureException: If the delete fails
    """
    reminder = get_reminder(db, reminder_id)

    try:
        db.delete(reminder)
        db.commit()
        logger.info(f"Reminder {reminder_id} deleted")
    except Exception as e:
        db.rollback()
        logger.error(f"Error deleting reminder {reminder_id}: {str(e)}")
        raise StorageFailureException("Failed to delete reminder")

def get_reminder_stats(db: Session, now: Optional[datetime] = None) -> ReminderStats:
    """
    Count reminders due today, upcoming and past.

    Args:
        db: Database session
        now: Reference instant, defaults to the store's clock

    Returns:
        ReminderStats: total, today, upcoming and past counts
    """
    now = now or utc_now()
    start, end = day_bounds(now)

    total, today, upcoming, past = db.query(
        func.count(Reminder.id),
        func.coalesce(func.sum(case(((Reminder.date_time >= start) & (Reminder.date_time < end), 1), else_=0)), 0),
        func.coalesce(func.sum(case((Reminder.date_time >= now, 1), else_=0)), 0),
        func.coalesce(func.sum(case((Reminder.date_time < now, 1), else_=0)), 0)
    ).one()

    return ReminderStats(total=total, today=today, upcoming=upcoming, past=past)

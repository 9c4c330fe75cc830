"""
Reminder Router - API endpoints for reminder management.

The alert client polls the list endpoint and acknowledges fired alerts
through ``PUT /{reminder_id}/notify``.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..core.schemas import CreatedResponse, MessageResponse
from .schemas import ReminderCreate, ReminderUpdate, ReminderResponse, ReminderStats
from .service import (
    get_reminders,
    get_reminder,
    get_todays_reminders,
    get_upcoming_week_reminders,
    create_reminder,
    update_reminder,
    mark_reminder_notified,
    delete_reminder,
    get_reminder_stats
)

router = APIRouter(prefix="/api/reminders", tags=["Reminders"])

@router.get("", response_model=List[ReminderResponse])
async def list_reminders(db: Session = Depends(get_db)):
    """Get all reminders ordered by due time"""
    return get_reminders(db)

@router.get("/today/list", response_model=List[ReminderResponse])
async def list_todays_reminders(db: Session = Depends(get_db)):
    """Get the reminders due today"""
    return get_todays_reminders(db)

@router.get("/upcoming/week", response_model=List[ReminderResponse])
async def list_upcoming_week_reminders(db: Session = Depends(get_db)):
    """Get the reminders due within the next seven days"""
    return get_upcoming_week_reminders(db)

@router.get("/stats/count", response_model=ReminderStats)
async def reminder_stats(db: Session = Depends(get_db)):
    """
    Get reminder statistics

    Returns total, today, upcoming and past counts evaluated at request time.
    """
    return get_reminder_stats(db)

@router.get("/{reminder_id}", response_model=ReminderResponse)
async def read_reminder(reminder_id: int, db: Session = Depends(get_db)):
    """Get a single reminder by ID"""
    return get_reminder(db, reminder_id)

@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def add_reminder(reminder_data: ReminderCreate, db: Session = Depends(get_db)):
    """
    Add a new reminder

    Title and date_time are required; notes are optional.
    """
    reminder = create_reminder(db, reminder_data)
    return CreatedResponse(message="Reminder added successfully", id=reminder.id)

@router.put("/{reminder_id}/notify", response_model=MessageResponse)
async def notify_reminder(reminder_id: int, db: Session = Depends(get_db)):
    """Mark a reminder as notified"""
    mark_reminder_notified(db, reminder_id)
    return MessageResponse(message="Reminder marked as notified")

@router.put("/{reminder_id}", response_model=MessageResponse)
async def edit_reminder(
    reminder_id: int,
    reminder_data: ReminderUpdate,
    db: Session = Depends(get_db)
):
    """Replace the details of a reminder"""
    update_reminder(db, reminder_id, reminder_data)
    return MessageResponse(message="Reminder updated successfully")

@router.delete("/{reminder_id}", response_model=MessageResponse)
async def remove_reminder(reminder_id: int, db: Session = Depends(get_db)):
    """Delete a reminder"""
    delete_reminder(db, reminder_id)
    return MessageResponse(message="Reminder deleted successfully")

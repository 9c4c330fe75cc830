"""
Reminder Schemas - Pydantic models for reminder validation and serialization.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, validator

from ..core.clock import to_naive_utc

class ReminderBase(BaseModel):
    """
    Fields shared by reminder create and update payloads

    Fields:
    - title: Short description shown in the alert
    - date_time: When the reminder is due; aware values are converted to UTC
    - notes: Optional free text
    """
    title: str = Field(..., min_length=1, max_length=255, description="Reminder title")
    date_time: datetime = Field(..., description="When the reminder is due")
    notes: Optional[str] = Field(None, description="Additional notes")

    @validator("date_time")
    def normalize_date_time(cls, v):
        """Store due times as naive UTC"""
        return to_naive_utc(v)

class ReminderCreate(ReminderBase):
    """Reminder Create Schema - Used when adding a reminder"""

    class Config:
        """Configuration for Pydantic model"""
        json_schema_extra = {
            "example": {
                "title": "Take blood pressure reading",
                "date_time": "2026-10-20T08:30:00",
                "notes": "Before breakfast"
            }
        }

class ReminderUpdate(ReminderBase):
    """Reminder Update Schema - Replaces title, date_time and notes"""

class ReminderResponse(ReminderBase):
    """Reminder Response Schema - Used when returning reminder data"""
    id: int
    notified: bool = False
    created_at: Optional[datetime] = None

    class Config:
        """Configuration for Pydantic model to enable ORM mode"""
        from_attributes = True

class ReminderStats(BaseModel):
    """
    Reminder Statistics Schema

    Fields:
    - total: Number of reminders
    - today: Reminders due on the current calendar day
    - upcoming: Reminders due now or later
    - past: Reminders whose due time has passed
    """
    total: int
    today: int
    upcoming: int
    past: int

"""
Appointment Schemas - Pydantic models for appointment validation and serialization.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, validator

from ..core.clock import to_naive_utc

class AppointmentBase(BaseModel):
    """
    Fields shared by appointment create and update payloads

    Fields:
    - doctor: Name of the doctor
    - type: Kind of appointment
    - date_time: Date and time of the appointment; aware values are converted to UTC
    - location: Where the appointment takes place (optional)
    """
    doctor: str = Field(..., min_length=1, max_length=255, description="Doctor's name")
    type: str = Field(..., min_length=1, max_length=100, description="Appointment type")
    date_time: datetime = Field(..., description="Date and time of the appointment")
    location: Optional[str] = Field(None, max_length=255, description="Appointment location")

    @validator("date_time")
    def normalize_date_time(cls, v):
        """Store appointment times as naive UTC"""
        return to_naive_utc(v)

class AppointmentCreate(AppointmentBase):
    """Appointment Create Schema - Used when scheduling an appointment"""

    class Config:
        """Configuration for Pydantic model"""
        json_schema_extra = {
            "example": {
                "doctor": "Dr. Lee",
                "type": "Checkup",
                "date_time": "2026-10-21T14:00:00",
                "location": "City Clinic, Room 4"
            }
        }

class AppointmentUpdate(AppointmentBase):
    """Appointment Update Schema - Replaces every field of an appointment"""

class AppointmentResponse(AppointmentBase):
    """Appointment Response Schema - Used when returning appointment data"""
    id: int
    created_at: Optional[datetime] = None

    class Config:
        """Configuration for Pydantic model to enable ORM mode"""
        from_attributes = True

class AppointmentStats(BaseModel):
    """
    Appointment Statistics Schema

    Fields:
    - total: Number of appointments
    - upcoming: Appointments at or after the current time
    - past: Appointments before the current time
    - types: Number of distinct appointment types
    - doctors: Number of distinct doctors
    """
    total: int
    upcoming: int
    past: int
    types: int
    doctors: int
